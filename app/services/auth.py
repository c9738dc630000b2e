"""Admin credential check and bearer-token verification.

There is one admin account whose username and password come from the
configuration.  A successful login yields an HS256 JWT carrying a single
``isAdmin`` claim and a fixed lifetime (24 hours by default).  Tokens are
verified statelessly on every request; there is no session store.

Both functions receive an explicit ``AuthConfig`` instead of reading the
environment.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.core.config import Settings
from app.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
NOT_AUTHORIZED = "Not authorized as admin"
ADMIN_CLAIM = "isAdmin"


@dataclass(frozen=True)
class AuthConfig:
    username: str
    password: str
    secret: str
    token_ttl: timedelta = timedelta(hours=24)
    algorithm: str = "HS256"

    @classmethod
    def from_settings(cls, settings: Settings) -> AuthConfig:
        return cls(
            username=settings.ADMIN_USERNAME,
            password=settings.ADMIN_PASSWORD,
            secret=settings.JWT_SECRET,
            token_ttl=timedelta(hours=settings.JWT_EXPIRES_HOURS),
        )


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


def _matches(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def issue_token(
    config: AuthConfig,
    username: str,
    password: str,
    now: datetime | None = None,
) -> IssuedToken:
    """Check the admin credentials and sign a token.

    Both comparisons always run, and any mismatch produces the same
    ``UnauthorizedError`` whichever field was wrong.
    """
    username_ok = _matches(username, config.username)
    password_ok = _matches(password, config.password)
    if not (username_ok and password_ok):
        logger.warning("admin_login_rejected")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + config.token_ttl
    token = jwt.encode(
        {ADMIN_CLAIM: True, "iat": issued_at, "exp": expires_at},
        config.secret,
        algorithm=config.algorithm,
    )
    logger.info("admin_login_succeeded", extra={"expires_at": expires_at.isoformat()})
    return IssuedToken(token=token, expires_at=expires_at)


def verify_token(config: AuthConfig, token: str) -> dict[str, Any]:
    """Return the claims of a valid admin token.

    Raises ``UnauthorizedError`` for a malformed token, a bad signature, an
    expired token or a token without the admin claim, with the same message
    in every case.
    """
    try:
        claims = jwt.decode(
            token,
            config.secret,
            algorithms=[config.algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.InvalidTokenError as exc:
        logger.info("admin_token_rejected", extra={"reason": type(exc).__name__})
        raise UnauthorizedError(NOT_AUTHORIZED) from exc

    if claims.get(ADMIN_CLAIM) is not True:
        logger.info("admin_token_rejected", extra={"reason": "missing_admin_claim"})
        raise UnauthorizedError(NOT_AUTHORIZED)
    return claims
