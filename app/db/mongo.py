"""MongoDB client singleton.

Provides ``get_database()`` which returns the application database from a
lazily-initialized, process-wide ``MongoClient``.  The client owns the
connection pool shared by every request.
"""

import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from app.core.config import settings

logger = logging.getLogger(__name__)

_client: MongoClient | None = None


def get_client() -> MongoClient:
    """Return the singleton MongoDB client, creating it on first call."""
    global _client
    if _client is None:
        _client = MongoClient(
            settings.MONGODB_URI,
            tz_aware=True,
            serverSelectionTimeoutMS=5000,
        )
    return _client


def get_database() -> Database:
    return get_client()[settings.MONGODB_DATABASE]


def ping() -> None:
    """Round-trip to the server; raises ``PyMongoError`` when unreachable."""
    get_client().admin.command("ping")


def ensure_indexes() -> None:
    """Create the indexes the services rely on (idempotent)."""
    db = get_database()
    db["categories"].create_index([("key", ASCENDING)], unique=True)
    db["skills"].create_index([("category", ASCENDING)])
    logger.info("database_indexes_ensured")


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
