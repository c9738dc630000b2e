"""AboutMe singleton service.

The profile is stored under the fixed id ``ABOUT_ME_ID``; ``upsert_about``
creates it on first write and updates the same document afterwards.
"""

from __future__ import annotations

import logging

from pymongo import ReturnDocument
from pymongo.collection import Collection

from app.core.errors import NotFoundError
from app.db import mongo
from app.models.about import ABOUT_ME_ID, AboutMe, AboutMeUpdate
from app.services.store import utc_now

logger = logging.getLogger(__name__)

COLLECTION = "about_me"


def _collection() -> Collection:
    return mongo.get_database()[COLLECTION]


def get_about() -> AboutMe:
    document = _collection().find_one({"_id": ABOUT_ME_ID})
    if document is None:
        raise NotFoundError("AboutMe information not found")
    return AboutMe.from_document(document)


def upsert_about(payload: AboutMeUpdate, replace: bool = False) -> AboutMe:
    """Create or update the singleton profile.

    Fields omitted from *payload* keep their stored value unless *replace*
    is set, in which case they are reset to their defaults.  ``socialLinks``
    is replaced as a whole when sent.
    """
    now = utc_now()
    fields = payload.model_dump() if replace else payload.to_document()
    document = _collection().find_one_and_update(
        {"_id": ABOUT_ME_ID},
        {
            "$set": {**fields, "updated_at": now},
            "$setOnInsert": {"created_at": now},
        },
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    logger.info("about_me_saved", extra={"replace": replace})
    return AboutMe.from_document(document)
