"""Pydantic models for the ``projects`` collection."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, StrictBool, model_validator
from pydantic_core import PydanticCustomError

from app.models.common import (
    BlankAsNone,
    RecordModel,
    RequestModel,
    UpdateModel,
    max_length_rule,
    text_rule,
    url_rule,
)

DEFAULT_LINK_NAMES: dict[str, str] = {"link1": "Live Demo", "link2": "GitHub"}

IMAGE_REQUIRED_MESSAGE = "Either imageUrl or imageData must be provided"

Technology = Annotated[str, text_rule("Technologies must be non-empty strings")]
ThumbnailText = Annotated[
    str | None, max_length_rule(150, "Thumbnail description max 150 chars")
]


class ProjectLink(RequestModel):
    """External link shown on a project card."""
    name: str | None = None
    url: Annotated[str | None, BlankAsNone, url_rule("Invalid link URL format")] = None


class ProjectLinkOut(BaseModel):
    name: str | None = None
    url: str | None = None


def _fill_link_names(values: dict[str, ProjectLink | None]) -> None:
    for field, default_name in DEFAULT_LINK_NAMES.items():
        link = values.get(field)
        if link is not None and link.url and not link.name:
            link.name = default_name


def _technologies_required(value: list[str]) -> list[str]:
    if not value:
        raise PydanticCustomError("field_rule", "At least one technology is required")
    return value


class ProjectCreate(RequestModel):
    """Payload for creating a project."""
    title: Annotated[str, text_rule("Title is required")]
    thumbnail_description: ThumbnailText = None
    description: Annotated[str, text_rule("Description is required")]
    technologies: Annotated[list[Technology], AfterValidator(_technologies_required)]
    image_url: Annotated[str | None, BlankAsNone] = None
    image_data: Annotated[str | None, BlankAsNone] = None
    link1: ProjectLink | None = None
    link2: ProjectLink | None = None
    date: Annotated[str, text_rule("Date is required")]
    featured: StrictBool = False

    @model_validator(mode="after")
    def _check_rules(self) -> ProjectCreate:
        if not self.image_url and not self.image_data:
            raise PydanticCustomError("field_rule", IMAGE_REQUIRED_MESSAGE)
        _fill_link_names({"link1": self.link1, "link2": self.link2})
        return self

    def to_document(self) -> dict:
        # Defaults are persisted too so every stored project has the same shape
        return self.model_dump()


class ProjectUpdate(UpdateModel):
    """Partial project update; image fields and links may be cleared."""
    nullable = frozenset(
        {"thumbnail_description", "image_url", "image_data", "link1", "link2"}
    )

    title: Annotated[str, text_rule("Title cannot be empty")] | None = None
    thumbnail_description: ThumbnailText = None
    description: Annotated[str, text_rule("Description cannot be empty")] | None = None
    technologies: Annotated[
        list[Technology], AfterValidator(_technologies_required)
    ] | None = None
    image_url: Annotated[str | None, BlankAsNone] = None
    image_data: Annotated[str | None, BlankAsNone] = None
    link1: ProjectLink | None = None
    link2: ProjectLink | None = None
    date: Annotated[str, text_rule("Date cannot be empty")] | None = None
    featured: StrictBool | None = None

    @model_validator(mode="after")
    def _check_links(self) -> ProjectUpdate:
        _fill_link_names({"link1": self.link1, "link2": self.link2})
        return self


class Project(RecordModel):
    """Full project record returned from the database."""
    title: str
    thumbnail_description: str | None = None
    description: str
    technologies: list[str] = []
    image_url: str | None = None
    image_data: str | None = None
    link1: ProjectLinkOut | None = None
    link2: ProjectLinkOut | None = None
    date: str
    featured: bool = False


def image_fields_missing(document: dict) -> bool:
    """True when a stored or merged project has no image source left."""
    return not document.get("image_url") and not document.get("image_data")
