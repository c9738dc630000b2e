"""Tests for skill endpoints and the category reference checks."""

from __future__ import annotations

from unittest.mock import patch

from bson import ObjectId
from fastapi.testclient import TestClient


class TestCreateSkill:
    def test_requires_token(self, test_client: TestClient, make_category) -> None:
        category = make_category()
        response = test_client.post(
            "/api/skills", json={"name": "Go", "category": category["id"]}
        )
        assert response.status_code == 401

    def test_malformed_category_id(
        self, test_client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = test_client.post(
            "/api/skills", json={"name": "Go", "category": "backend"}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid category ID format"

    def test_unknown_category_rejected(
        self, test_client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = test_client.post(
            "/api/skills",
            json={"name": "Go", "category": str(ObjectId())},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid category reference provided."

    def test_create_then_get_round_trips(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        category = make_category("backend", "Backend")
        payload = {"name": "Go", "category": category["id"], "proficiency": 4}

        response = test_client.post("/api/skills", json=payload, headers=auth_headers)
        assert response.status_code == 201
        created = response.json()["data"]

        fetched = test_client.get(f"/api/skills/{created['id']}").json()["data"]
        assert {key: fetched[key] for key in payload} == payload
        assert fetched["categoryInfo"] == {
            "id": category["id"],
            "key": "backend",
            "displayName": "Backend",
            "order": 0,
        }

    def test_proficiency_range(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        category = make_category()
        response = test_client.post(
            "/api/skills",
            json={"name": "Go", "category": category["id"], "proficiency": 6},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Proficiency must be between 1 and 5"

    def test_proficiency_must_be_a_real_integer(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        category = make_category()
        for value in (True, "3"):
            response = test_client.post(
                "/api/skills",
                json={"name": "Go", "category": category["id"], "proficiency": value},
                headers=auth_headers,
            )
            assert response.status_code == 400
            assert response.json()["message"] == "Proficiency must be an integer"

    def test_create_rolled_back_when_category_vanishes(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category, mongo_db
    ) -> None:
        from app.services.store import categories as category_store

        category = make_category()
        with patch.object(category_store, "find_one", return_value=None):
            response = test_client.post(
                "/api/skills",
                json={"name": "Go", "category": category["id"]},
                headers=auth_headers,
            )
        assert response.status_code == 400
        assert mongo_db["skills"].count_documents({}) == 0


class TestListSkills:
    def test_insertion_order_with_categories(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        backend = make_category("backend", "Backend")
        tools = make_category("tools", "Tools")
        for name, category in (("Rust", backend), ("Git", tools), ("Elixir", backend)):
            test_client.post(
                "/api/skills",
                json={"name": name, "category": category["id"]},
                headers=auth_headers,
            )

        data = test_client.get("/api/skills").json()["data"]
        assert [s["name"] for s in data] == ["Rust", "Git", "Elixir"]
        assert [s["categoryInfo"]["key"] for s in data] == ["backend", "tools", "backend"]


class TestUpdateSkill:
    def test_move_to_other_category(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        backend = make_category("backend", "Backend")
        tools = make_category("tools", "Tools")
        created = test_client.post(
            "/api/skills",
            json={"name": "Docker", "category": backend["id"]},
            headers=auth_headers,
        ).json()["data"]

        response = test_client.patch(
            f"/api/skills/{created['id']}",
            json={"category": tools["id"]},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["category"] == tools["id"]
        assert data["categoryInfo"]["key"] == "tools"
        assert data["name"] == "Docker"

    def test_move_to_unknown_category_rejected(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        backend = make_category("backend", "Backend")
        created = test_client.post(
            "/api/skills",
            json={"name": "Docker", "category": backend["id"]},
            headers=auth_headers,
        ).json()["data"]

        response = test_client.patch(
            f"/api/skills/{created['id']}",
            json={"category": str(ObjectId())},
            headers=auth_headers,
        )
        assert response.status_code == 400
        stored = test_client.get(f"/api/skills/{created['id']}").json()["data"]
        assert stored["category"] == backend["id"]

    def test_rolled_back_update_keeps_every_field(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        from app.services.store import categories as category_store

        backend = make_category("backend", "Backend")
        tools = make_category("tools", "Tools")
        created = test_client.post(
            "/api/skills",
            json={"name": "Docker", "category": backend["id"], "proficiency": 2},
            headers=auth_headers,
        ).json()["data"]

        with patch.object(category_store, "find_one", return_value=None):
            response = test_client.patch(
                f"/api/skills/{created['id']}",
                json={"name": "Rust", "category": tools["id"], "proficiency": 5},
                headers=auth_headers,
            )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid category reference provided."

        stored = test_client.get(f"/api/skills/{created['id']}").json()["data"]
        assert stored["name"] == "Docker"
        assert stored["proficiency"] == 2
        assert stored["category"] == backend["id"]

    def test_rename_only(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        backend = make_category("backend", "Backend")
        created = test_client.post(
            "/api/skills",
            json={"name": "Postgres", "category": backend["id"]},
            headers=auth_headers,
        ).json()["data"]

        response = test_client.patch(
            f"/api/skills/{created['id']}",
            json={"name": "PostgreSQL", "proficiency": 5},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "PostgreSQL"
        assert response.json()["data"]["proficiency"] == 5


class TestDeleteSkill:
    def test_delete_then_gone(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        backend = make_category("backend", "Backend")
        created = test_client.post(
            "/api/skills",
            json={"name": "Go", "category": backend["id"]},
            headers=auth_headers,
        ).json()["data"]

        response = test_client.delete(f"/api/skills/{created['id']}", headers=auth_headers)
        assert response.status_code == 204
        assert test_client.get(f"/api/skills/{created['id']}").status_code == 404

    def test_category_deletable_once_skills_removed(
        self, test_client: TestClient, auth_headers: dict[str, str], make_category
    ) -> None:
        backend = make_category("backend", "Backend")
        created = test_client.post(
            "/api/skills",
            json={"name": "Go", "category": backend["id"]},
            headers=auth_headers,
        ).json()["data"]

        blocked = test_client.delete(f"/api/categories/{backend['id']}", headers=auth_headers)
        assert blocked.status_code == 400

        test_client.delete(f"/api/skills/{created['id']}", headers=auth_headers)
        allowed = test_client.delete(f"/api/categories/{backend['id']}", headers=auth_headers)
        assert allowed.status_code == 204
