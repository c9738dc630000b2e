"""Pydantic models for the ``experiences`` collection."""

from __future__ import annotations

from typing import Annotated

from app.models.category import SortOrder
from app.models.common import RecordModel, RequestModel, UpdateModel, text_rule


class ExperienceCreate(RequestModel):
    title: Annotated[str, text_rule("Title is required")]
    company: Annotated[str, text_rule("Company is required")]
    timeframe: Annotated[str, text_rule("Timeframe is required")]
    description: Annotated[str, text_rule("Description is required")]
    order: SortOrder = 0

    def to_document(self) -> dict:
        return self.model_dump()


class ExperienceUpdate(UpdateModel):
    title: Annotated[str, text_rule("Title cannot be empty")] | None = None
    company: Annotated[str, text_rule("Company cannot be empty")] | None = None
    timeframe: Annotated[str, text_rule("Timeframe cannot be empty")] | None = None
    description: Annotated[str, text_rule("Description cannot be empty")] | None = None
    order: SortOrder | None = None


class Experience(RecordModel):
    title: str
    company: str
    timeframe: str
    description: str
    order: int = 0
