"""Application error taxonomy and FastAPI exception handlers.

Services raise the typed errors below; the handlers registered by
``register_error_handlers`` turn every failure, typed or not, into the
uniform error envelope::

    {"status": "error", "data": null, "message": "..."}

In development mode the formatted traceback is added under ``stack``.
"""

from __future__ import annotations

import logging
import re
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Client-fixable problem with a submitted field."""
    status_code = 400


class UnauthorizedError(AppError):
    """Missing, invalid or expired token, or bad credentials."""
    status_code = 401


class NotFoundError(AppError):
    """No record with the given id, or no such route."""
    status_code = 404


class ConflictError(AppError):
    """Referential-integrity violation (e.g. deleting a category in use)."""
    status_code = 400


class InternalError(AppError):
    """Unexpected failure such as the database being unavailable."""
    status_code = 500


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _error_response(
    status_code: int,
    message: str,
    exc: BaseException | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {"status": "error", "data": None, "message": message}
    if settings.is_development and exc is not None:
        body["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return JSONResponse(status_code=status_code, content=body)


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_TYPE_MESSAGES: dict[str, str] = {
    "missing": "{label} is required",
    "extra_forbidden": "Unknown field: {path}",
    "list_type": "{label} must be an array",
    "string_type": "{label} must be a string",
    "int_type": "{label} must be an integer",
    "int_parsing": "{label} must be an integer",
    "int_from_float": "{label} must be an integer",
    "bool_type": "{label} must be a boolean",
    "bool_parsing": "{label} must be a boolean",
    "model_type": "{label} must be an object",
    "model_attributes_type": "{label} must be an object",
    "json_invalid": "Request body is not valid JSON",
}


def field_label(loc: tuple[Any, ...]) -> str:
    """Turn ``("body", "displayName")`` into ``"Display name"``."""
    names = [str(part) for part in loc if isinstance(part, str) and part != "body"]
    if not names:
        return "Request body"
    words = _CAMEL_BOUNDARY.sub(" ", names[-1]).lower()
    return words[:1].upper() + words[1:]


def first_validation_message(errors: list[dict[str, Any]]) -> str:
    """Return the message of the first failing rule on the first failing field."""
    if not errors:
        return "Invalid request"
    error = errors[0]
    loc = tuple(error.get("loc", ()))
    template = _TYPE_MESSAGES.get(error.get("type", ""))
    if template is not None:
        path = ".".join(str(p) for p in loc if p != "body")
        return template.format(label=field_label(loc), path=path)
    message = str(error.get("msg", "Invalid request"))
    return message.removeprefix("Value error, ")


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "request_failed",
            extra={"path": request.url.path, "error_message": exc.message},
            exc_info=exc,
        )
    return _error_response(exc.status_code, exc.message, exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = first_validation_message(list(exc.errors()))
    logger.info(
        "request_validation_failed",
        extra={"path": request.url.path, "error_message": message},
    )
    return _error_response(400, message, exc)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        message = f"Can't find {request.url.path} on this server!"
    else:
        message = str(exc.detail)
    return _error_response(exc.status_code, message, exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error",
        extra={"path": request.url.path, "method": request.method},
    )
    message = str(exc) if settings.is_development else "Something went wrong"
    return _error_response(500, message, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Install the uniform error responders on *app*."""
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
