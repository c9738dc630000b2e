"""Category service.

Owns the two category rules:

* the ``key`` is written once at creation; update attempts are dropped and
  logged;
* a category cannot be deleted while skills reference it.  The guard counts
  referencing skills, deletes, then re-counts and restores the category if a
  skill was attached in between, so no skill is ever left pointing at a
  deleted category.
"""

from __future__ import annotations

import logging

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.core.errors import ConflictError, ValidationError
from app.models.category import Category, CategoryCreate, CategoryUpdate
from app.services.store import categories as store
from app.services.store import parse_object_id
from app.services.store import skills as skill_store

logger = logging.getLogger(__name__)


def _in_use_error(skill_count: int) -> ConflictError:
    return ConflictError(
        f"Cannot delete category: {skill_count} skill(s) are using it. "
        "Please reassign skills first."
    )


def _skills_using(category_oid: ObjectId) -> int:
    return skill_store.count({"category": category_oid})


def list_categories() -> list[Category]:
    """Return categories ordered by ``order`` then ``displayName``."""
    return [Category.from_document(doc) for doc in store.list()]


def get_category(category_id: str) -> Category:
    return Category.from_document(store.get(category_id))


def create_category(payload: CategoryCreate) -> Category:
    if store.find_one({"key": payload.key}) is not None:
        raise ValidationError(f"Category with key '{payload.key}' already exists")
    document = store.create(payload.to_document())
    return Category.from_document(document)


def update_category(category_id: str, payload: CategoryUpdate) -> Category:
    if "key" in payload.model_fields_set:
        logger.warning(
            "category_key_update_ignored",
            extra={"category_id": category_id, "attempted_key": payload.key},
        )
    document = store.update(category_id, payload.to_document())
    return Category.from_document(document)


def delete_category(category_id: str) -> None:
    """Delete a category that no skill references.

    Raises ``ConflictError`` (and deletes nothing) when skills still use it,
    ``NotFoundError`` when it does not exist.
    """
    oid = parse_object_id(category_id)
    if oid is not None:
        in_use = _skills_using(oid)
        if in_use > 0:
            raise _in_use_error(in_use)

    deleted = store.delete(category_id)

    # A skill may have been pointed at this category between count and delete
    in_use = _skills_using(deleted["_id"])
    if in_use > 0:
        try:
            store.restore(deleted)
        except DuplicateKeyError:
            # Another category took the key while this one was gone
            logger.error(
                "category_restore_failed",
                extra={"category_id": category_id, "key": deleted.get("key")},
            )
            raise _in_use_error(in_use) from None
        logger.warning(
            "category_delete_rolled_back",
            extra={"category_id": category_id, "skill_count": in_use},
        )
        raise _in_use_error(in_use)

    logger.info("category_deleted", extra={"category_id": category_id})
