"""Shared building blocks for request and response models.

Request models reject unknown fields and speak camelCase on the wire while
the Python attributes (and the stored documents) use snake_case.  The
``*_rule`` helpers return ``AfterValidator``s carrying the exact message a
client sees when that rule fails.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from bson import ObjectId
from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    HttpUrl,
    TypeAdapter,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.core.errors import field_label

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

_http_url = TypeAdapter(HttpUrl)


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------

def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError("field_rule", message)


def text_rule(message: str) -> AfterValidator:
    """Non-empty after trimming."""

    def check(value: str) -> str:
        value = value.strip()
        if not value:
            raise _fail(message)
        return value

    return AfterValidator(check)


def max_length_rule(max_length: int, message: str) -> AfterValidator:
    def check(value: str | None) -> str | None:
        if value is not None and len(value) > max_length:
            raise _fail(message)
        return value

    return AfterValidator(check)


def int_range_rule(
    message: str, minimum: int | None = None, maximum: int | None = None
) -> AfterValidator:
    def check(value: int) -> int:
        if minimum is not None and value < minimum:
            raise _fail(message)
        if maximum is not None and value > maximum:
            raise _fail(message)
        return value

    return AfterValidator(check)


def pattern_rule(pattern: re.Pattern[str], message: str) -> AfterValidator:
    def check(value: str) -> str:
        if not pattern.match(value):
            raise _fail(message)
        return value

    return AfterValidator(check)


def object_id_rule(message: str) -> AfterValidator:
    return pattern_rule(OBJECT_ID_PATTERN, message)


def url_rule(message: str) -> AfterValidator:
    """Accept absolute http(s) URLs, keeping the string exactly as sent."""

    def check(value: str | None) -> str | None:
        if value is None:
            return None
        try:
            _http_url.validate_python(value)
        except PydanticValidationError:
            raise _fail(message) from None
        return value

    return AfterValidator(check)


def email_rule(message: str) -> AfterValidator:
    def check(value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise _fail(message) from None
        return value.lower()

    return AfterValidator(check)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Optional values where "" means "not provided"
BlankAsNone = BeforeValidator(_blank_to_none)


# ---------------------------------------------------------------------------
# Base models
# ---------------------------------------------------------------------------

class RequestModel(BaseModel):
    """Base for request bodies: camelCase aliases, unknown fields rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    def to_document(self) -> dict[str, Any]:
        """Fields to persist, keyed by their snake_case names."""
        return self.model_dump(exclude_unset=True)


class UpdateModel(RequestModel):
    """Base for partial updates.

    Every field is optional, but a field that is sent must satisfy the same
    rules as on creation.  Explicit ``null`` is only accepted for the names
    listed in ``nullable``.
    """

    nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self) -> UpdateModel:
        for name in sorted(self.model_fields_set):
            if name in self.nullable or getattr(self, name) is not None:
                continue
            label = field_label((to_camel(name),))
            raise _fail(f"{label} cannot be empty")
        return self


class RecordModel(BaseModel):
    """Base for records returned to clients."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any], **extra: Any):
        """Build the record from a raw MongoDB document."""
        values = {
            key: str(value) if isinstance(value, ObjectId) else value
            for key, value in document.items()
            if key != "_id"
        }
        values["id"] = str(document["_id"])
        values.update(extra)
        return cls.model_validate(values)


DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Uniform success envelope: ``{"status": "success", "data": ...}``."""
    status: str = "success"
    data: DataT | None = None
    message: str | None = None
