"""Health check endpoint.

Returns service status including database connectivity.
"""

import logging
from typing import Any

from fastapi import APIRouter
from pymongo.errors import PyMongoError
from starlette.responses import JSONResponse

from app.db import mongo

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check() -> Any:
    """Return 200 when MongoDB answers a ping, 503 otherwise."""
    db_status = "disconnected"

    try:
        mongo.ping()
        db_status = "connected"
    except PyMongoError:
        logger.warning("Health check: MongoDB connection failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
