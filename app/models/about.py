"""Pydantic models for the AboutMe singleton.

There is exactly one AboutMe document; it lives under a fixed ``_id`` so
that an upsert can never create a second one.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from app.models.common import (
    BlankAsNone,
    RecordModel,
    RequestModel,
    email_rule,
    text_rule,
    url_rule,
)

ABOUT_ME_ID = "about-me"


class SocialLinks(RequestModel):
    github: Annotated[str | None, BlankAsNone, url_rule("Invalid GitHub URL")] = None
    linkedin: Annotated[str | None, BlankAsNone, url_rule("Invalid LinkedIn URL")] = None
    twitter: Annotated[str | None, BlankAsNone, url_rule("Invalid Twitter URL")] = None


class AboutMeUpdate(RequestModel):
    """Body of ``PUT /about``.

    Required fields must always be present; optional ones that are omitted
    keep their stored value.
    """
    name: Annotated[str, text_rule("Name is required")]
    title: Annotated[str, text_rule("Title is required")]
    bio: Annotated[str, text_rule("Bio is required")]
    location: Annotated[str, text_rule("Location is required")]
    phone: Annotated[str | None, BlankAsNone] = None
    email: Annotated[str, text_rule("Email is required"), email_rule("Invalid email format")]
    image_url: Annotated[str | None, BlankAsNone] = None
    image_data: Annotated[str | None, BlankAsNone] = None
    social_links: SocialLinks = Field(default_factory=SocialLinks)


class SocialLinksOut(BaseModel):
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None


class AboutMe(RecordModel):
    name: str
    title: str
    bio: str
    location: str
    phone: str | None = None
    email: str
    image_url: str | None = None
    image_data: str | None = None
    social_links: SocialLinksOut = SocialLinksOut()
