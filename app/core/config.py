"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app;
the auth layer receives its own ``AuthConfig`` built from it instead of
reading the environment itself.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    PORT: int = 5000
    ENVIRONMENT: str = "production"
    API_PREFIX: str = "/api"
    BASE_PATH: str = ""

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017/portfolio"
    MONGODB_DATABASE: str = "portfolio"

    # Admin account
    ADMIN_USERNAME: str
    ADMIN_PASSWORD: str

    # JWT
    JWT_SECRET: str
    JWT_EXPIRES_HOURS: int = 24

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


settings = Settings()  # type: ignore[call-arg]
