"""Shared test fixtures.

Provides an in-memory MongoDB (``mongomock``) wired into ``app.db.mongo``,
a FastAPI ``TestClient`` and admin auth headers for use across all test
modules.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import patch

# Settings are read at import time, so the environment is fixed before any
# ``app`` module is imported.
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "correct horse battery staple"
os.environ["JWT_SECRET"] = "test-signing-secret-0123456789abcdef0123456789"
os.environ["ENVIRONMENT"] = "test"
os.environ["MONGODB_DATABASE"] = "portfolio_test"

import mongomock  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from pymongo.database import Database  # noqa: E402

ADMIN_USERNAME = os.environ["ADMIN_USERNAME"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


@pytest.fixture()
def mongo_db() -> Generator[Database, None, None]:
    """Install a fresh ``mongomock`` client as the process-wide client."""
    import app.db.mongo as mongo_mod
    from app.core.config import settings

    client = mongomock.MongoClient()
    mongo_mod._client = client
    with patch("app.db.mongo.ping", return_value=None):
        yield client[settings.MONGODB_DATABASE]
    mongo_mod._client = None


@pytest.fixture()
def test_client(mongo_db: Database) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by the in-memory database."""
    from app.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture()
def admin_token() -> str:
    from app.routers.deps import get_auth_config
    from app.services.auth import issue_token

    return issue_token(get_auth_config(), ADMIN_USERNAME, ADMIN_PASSWORD).token


@pytest.fixture()
def auth_headers(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture()
def make_category(
    test_client: TestClient, auth_headers: dict[str, str]
):
    """Factory that creates a category through the API and returns its data."""

    def _make(key: str = "dev-tools", display_name: str = "Dev Tools", **extra: Any) -> dict[str, Any]:
        response = test_client.post(
            "/api/categories",
            json={"key": key, "displayName": display_name, **extra},
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
