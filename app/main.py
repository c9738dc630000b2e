"""FastAPI application entry point.

Configures CORS, structured logging, the uniform error responders,
lifespan events (MongoDB connectivity check and indexes) and router
registration.

Run with ``python -m app.main`` or ``uvicorn app.main:app``; uvicorn stops
accepting connections on SIGTERM / SIGINT and lets in-flight requests
finish before the lifespan shutdown closes the MongoDB client.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import setup_logging
from app.db import mongo
from app.routers import about, auth, categories, experiences, health, projects, skills

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    An unreachable database aborts startup; there is no retry.
    """
    setup_logging()
    logger.info("Application starting up")
    try:
        mongo.ping()
    except PyMongoError:
        logger.critical("database_unreachable", exc_info=True)
        raise
    mongo.ensure_indexes()
    yield
    mongo.close_client()
    logger.info("Application shutting down")


app = FastAPI(
    title="Portfolio Content API",
    description="Backend for the portfolio site: projects, skills, experiences and profile",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
_api = f"{settings.BASE_PATH.rstrip('/')}{settings.API_PREFIX}"

app.include_router(health.router, prefix=settings.BASE_PATH.rstrip("/"), tags=["Health"])
app.include_router(auth.router, prefix=f"{_api}/auth", tags=["Auth"])
app.include_router(projects.router, prefix=f"{_api}/projects", tags=["Projects"])
app.include_router(skills.router, prefix=f"{_api}/skills", tags=["Skills"])
app.include_router(categories.router, prefix=f"{_api}/categories", tags=["Categories"])
app.include_router(experiences.router, prefix=f"{_api}/experiences", tags=["Experiences"])
app.include_router(about.router, prefix=f"{_api}/about", tags=["About"])


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
