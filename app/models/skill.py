"""Pydantic models for the ``skills`` collection."""

from __future__ import annotations

from typing import Annotated

from pydantic import StrictInt

from app.models.category import CategoryInfo
from app.models.common import (
    RecordModel,
    RequestModel,
    UpdateModel,
    int_range_rule,
    object_id_rule,
    text_rule,
)

CategoryRef = Annotated[str, object_id_rule("Invalid category ID format")]
Proficiency = Annotated[
    StrictInt, int_range_rule("Proficiency must be between 1 and 5", minimum=1, maximum=5)
]


class SkillCreate(RequestModel):
    name: Annotated[str, text_rule("Name is required")]
    category: CategoryRef
    proficiency: Proficiency | None = None


class SkillUpdate(UpdateModel):
    nullable = frozenset({"proficiency"})

    name: Annotated[str, text_rule("Name cannot be empty")] | None = None
    category: CategoryRef | None = None
    proficiency: Proficiency | None = None


class Skill(RecordModel):
    """Skill record with its category resolved for display."""
    name: str
    category: str
    proficiency: int | None = None
    category_info: CategoryInfo | None = None
