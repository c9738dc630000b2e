"""Generic CRUD over a single MongoDB collection.

``EntityStore`` is instantiated once per entity type.  It knows nothing
about entity rules; the per-entity services layer those on top (image
invariant for projects, key immutability and delete guard for categories,
category existence for skills).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from app.core.errors import NotFoundError, ValidationError
from app.db import mongo

logger = logging.getLogger(__name__)

SortSpec = list[tuple[str, int]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_object_id(record_id: str) -> ObjectId | None:
    """Return the ``ObjectId`` for *record_id*, or None if it is malformed."""
    if isinstance(record_id, ObjectId):
        return record_id
    if not ObjectId.is_valid(record_id):
        return None
    return ObjectId(record_id)


class EntityStore:
    """Persistence for one record type.

    Records are plain documents; ids are ``ObjectId``s and every write
    stamps ``created_at`` / ``updated_at``.
    """

    def __init__(
        self,
        collection_name: str,
        label: str,
        default_sort: SortSpec | None = None,
    ) -> None:
        self.collection_name = collection_name
        self.label = label
        self.default_sort = default_sort or []

    @property
    def collection(self) -> Collection:
        return mongo.get_database()[self.collection_name]

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    def _duplicate(self, exc: DuplicateKeyError) -> ValidationError:
        # keyValue is only reported by MongoDB 4.2+
        key_value = (exc.details or {}).get("keyValue") or {}
        if key_value:
            field, value = next(iter(key_value.items()))
            return ValidationError(f"{self.label} with {field} '{value}' already exists")
        return ValidationError(f"{self.label} already exists")

    def _object_id(self, record_id: str) -> ObjectId:
        oid = parse_object_id(record_id)
        if oid is None:
            raise self._not_found()
        return oid

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(
        self,
        filters: dict[str, Any] | None = None,
        sort: SortSpec | None = None,
    ) -> list[dict[str, Any]]:
        cursor = self.collection.find(filters or {})
        order = sort if sort is not None else self.default_sort
        if order:
            cursor = cursor.sort(order)
        return list(cursor)

    def get(self, record_id: str) -> dict[str, Any]:
        document = self.collection.find_one({"_id": self._object_id(record_id)})
        if document is None:
            raise self._not_found()
        return document

    def find_one(self, filters: dict[str, Any]) -> dict[str, Any] | None:
        return self.collection.find_one(filters)

    def exists(self, record_id: str) -> bool:
        oid = parse_object_id(record_id)
        if oid is None:
            return False
        return self.collection.find_one({"_id": oid}, {"_id": 1}) is not None

    def count(self, filters: dict[str, Any]) -> int:
        return self.collection.count_documents(filters)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        now = utc_now()
        document = {**fields, "created_at": now, "updated_at": now}
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as exc:
            raise self._duplicate(exc) from exc
        logger.info(
            "record_created",
            extra={"collection": self.collection_name, "record_id": str(result.inserted_id)},
        )
        return self.get(str(result.inserted_id))

    def update(self, record_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        changes = {**fields, "updated_at": utc_now()}
        try:
            document = self.collection.find_one_and_update(
                {"_id": self._object_id(record_id)},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as exc:
            raise self._duplicate(exc) from exc
        if document is None:
            raise self._not_found()
        logger.info(
            "record_updated",
            extra={"collection": self.collection_name, "record_id": record_id},
        )
        return document

    def delete(self, record_id: str) -> dict[str, Any]:
        document = self.collection.find_one_and_delete({"_id": self._object_id(record_id)})
        if document is None:
            raise self._not_found()
        logger.info(
            "record_deleted",
            extra={"collection": self.collection_name, "record_id": record_id},
        )
        return document

    def restore(self, document: dict[str, Any]) -> None:
        """Re-insert a previously deleted document with its original id."""
        self.collection.insert_one(document)
        logger.warning(
            "record_restored",
            extra={"collection": self.collection_name, "record_id": str(document["_id"])},
        )


projects = EntityStore("projects", "Project", default_sort=[("date", -1)])
skills = EntityStore("skills", "Skill")
categories = EntityStore(
    "categories", "Category", default_sort=[("order", 1), ("display_name", 1)]
)
experiences = EntityStore(
    "experiences", "Experience", default_sort=[("order", 1), ("created_at", -1)]
)
