"""Admin login and token check endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from app.models.auth import LoginRequest, TokenResponse, TokenStatus
from app.models.common import Envelope
from app.routers.deps import get_auth_config, require_admin
from app.services.auth import AuthConfig, issue_token

router = APIRouter()


@router.post("/login", response_model=Envelope[TokenResponse])
def login(
    payload: LoginRequest,
    config: AuthConfig = Depends(get_auth_config),
) -> Envelope[TokenResponse]:
    """Exchange the admin username/password for a bearer token."""
    issued = issue_token(config, payload.username, payload.password)
    return Envelope(data=TokenResponse(token=issued.token, expires_at=issued.expires_at))


@router.get("/verify", response_model=Envelope[TokenStatus])
def verify(claims: dict[str, Any] = Depends(require_admin)) -> Envelope[TokenStatus]:
    """Confirm that the presented token is still valid."""
    expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    return Envelope(data=TokenStatus(is_admin=True, expires_at=expires_at))
