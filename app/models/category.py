"""Pydantic models for the ``categories`` collection.

A category key is a lowercase slug (``dev-tools``) fixed at creation time.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel

from app.models.common import (
    RecordModel,
    RequestModel,
    UpdateModel,
    int_range_rule,
    pattern_rule,
    text_rule,
)

CATEGORY_KEY_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _lowercase(value: object) -> object:
    return value.lower() if isinstance(value, str) else value


CategoryKey = Annotated[
    str,
    BeforeValidator(_lowercase),
    text_rule("Key is required"),
    pattern_rule(CATEGORY_KEY_PATTERN, "Key must be alphanumeric with hyphens only"),
]
SortOrder = Annotated[
    StrictInt, int_range_rule("Order must be a positive integer", minimum=0)
]


class CategoryCreate(RequestModel):
    key: CategoryKey
    display_name: Annotated[str, text_rule("Display name is required")]
    order: SortOrder = 0

    def to_document(self) -> dict:
        return self.model_dump()


class CategoryUpdate(UpdateModel):
    """Partial category update.

    ``key`` is accepted so that clients sending the whole form do not fail,
    but it is never written.
    """
    nullable = frozenset({"key"})

    key: str | None = None
    display_name: Annotated[str, text_rule("Display name cannot be empty")] | None = None
    order: SortOrder | None = None

    def to_document(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"key"})


class Category(RecordModel):
    key: str
    display_name: str
    order: int = 0


class CategoryInfo(BaseModel):
    """Category summary embedded in skill responses."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    key: str
    display_name: str
    order: int = 0
