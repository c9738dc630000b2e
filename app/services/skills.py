"""Skill service.

Skills reference a category by id.  Writes check that the category exists
before and after the write; if the category disappeared concurrently the
write is undone so the reference never dangles.
"""

from __future__ import annotations

import logging
from typing import Any

from bson import ObjectId

from app.core.errors import ValidationError
from app.models.category import CategoryInfo
from app.models.skill import Skill, SkillCreate, SkillUpdate
from app.services.store import categories as category_store
from app.services.store import skills as store

logger = logging.getLogger(__name__)

INVALID_CATEGORY_MESSAGE = "Invalid category reference provided."


def _category_info(category: dict[str, Any] | None) -> CategoryInfo | None:
    if category is None:
        return None
    return CategoryInfo(
        id=str(category["_id"]),
        key=category["key"],
        display_name=category["display_name"],
        order=category.get("order", 0),
    )


def _to_skill(document: dict[str, Any], category: dict[str, Any] | None) -> Skill:
    return Skill.from_document(document, category_info=_category_info(category))


def _require_category(category_id: str) -> None:
    if not category_store.exists(category_id):
        raise ValidationError(INVALID_CATEGORY_MESSAGE)


def list_skills() -> list[Skill]:
    """Return all skills in insertion order with their categories resolved."""
    documents = store.list()
    category_ids = {doc["category"] for doc in documents}
    categories = {
        cat["_id"]: cat
        for cat in category_store.list({"_id": {"$in": list(category_ids)}}, sort=[])
    }
    return [_to_skill(doc, categories.get(doc["category"])) for doc in documents]


def get_skill(skill_id: str) -> Skill:
    document = store.get(skill_id)
    return _to_skill(document, category_store.find_one({"_id": document["category"]}))


def create_skill(payload: SkillCreate) -> Skill:
    _require_category(payload.category)

    fields = payload.to_document()
    fields["category"] = ObjectId(payload.category)
    document = store.create(fields)

    category = category_store.find_one({"_id": fields["category"]})
    if category is None:
        store.delete(str(document["_id"]))
        logger.warning(
            "skill_create_rolled_back",
            extra={"skill_id": str(document["_id"]), "category_id": payload.category},
        )
        raise ValidationError(INVALID_CATEGORY_MESSAGE)
    return _to_skill(document, category)


def update_skill(skill_id: str, payload: SkillUpdate) -> Skill:
    fields = payload.to_document()
    if payload.category is None:
        document = store.update(skill_id, fields)
        return _to_skill(document, category_store.find_one({"_id": document["category"]}))

    _require_category(payload.category)
    previous = store.get(skill_id)
    fields["category"] = ObjectId(payload.category)
    document = store.update(skill_id, fields)

    category = category_store.find_one({"_id": fields["category"]})
    if category is None:
        # Undo the whole write, not just the category change
        store.update(skill_id, {name: previous.get(name) for name in fields})
        logger.warning(
            "skill_update_rolled_back",
            extra={"skill_id": skill_id, "category_id": payload.category},
        )
        raise ValidationError(INVALID_CATEGORY_MESSAGE)
    return _to_skill(document, category)


def delete_skill(skill_id: str) -> None:
    store.delete(skill_id)
