"""Project service: CRUD plus the image-source invariant."""

from __future__ import annotations

import logging

from app.core.errors import ValidationError
from app.models.project import (
    IMAGE_REQUIRED_MESSAGE,
    Project,
    ProjectCreate,
    ProjectUpdate,
    image_fields_missing,
)
from app.services.store import projects as store

logger = logging.getLogger(__name__)


def list_projects(featured: bool | None = None) -> list[Project]:
    """Return projects newest first, optionally only (non-)featured ones."""
    filters = {} if featured is None else {"featured": featured}
    return [Project.from_document(doc) for doc in store.list(filters)]


def get_project(project_id: str) -> Project:
    return Project.from_document(store.get(project_id))


def create_project(payload: ProjectCreate) -> Project:
    document = store.create(payload.to_document())
    return Project.from_document(document)


def update_project(project_id: str, payload: ProjectUpdate) -> Project:
    """Apply a partial update.

    Rejects updates that would leave the project with neither ``imageUrl``
    nor ``imageData``.
    """
    changes = payload.to_document()
    if "image_url" in changes or "image_data" in changes:
        current = store.get(project_id)
        if image_fields_missing({**current, **changes}):
            raise ValidationError(IMAGE_REQUIRED_MESSAGE)
    document = store.update(project_id, changes)
    return Project.from_document(document)


def delete_project(project_id: str) -> None:
    store.delete(project_id)
