"""Request / response models for the auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.models.common import RequestModel


class LoginRequest(RequestModel):
    # Credentials are compared byte-for-byte
    model_config = ConfigDict(str_strip_whitespace=False)

    username: str
    password: str


class TokenResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    expires_at: datetime


class TokenStatus(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_admin: bool
    expires_at: datetime
