"""Shared FastAPI dependencies.

``require_admin`` gates every write endpoint: it extracts the bearer token
and verifies it against the ``AuthConfig`` built once from settings.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings
from app.core.errors import UnauthorizedError
from app.services.auth import NOT_AUTHORIZED, AuthConfig, verify_token

_bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_auth_config() -> AuthConfig:
    return AuthConfig.from_settings(settings)


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    config: AuthConfig = Depends(get_auth_config),
) -> dict[str, Any]:
    """Return the token claims, or fail with 401 for any missing/invalid token."""
    if credentials is None:
        raise UnauthorizedError(NOT_AUTHORIZED)
    return verify_token(config, credentials.credentials)
