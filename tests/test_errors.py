"""Tests for the uniform error envelope and validation message mapping."""

from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.errors import first_validation_message


class TestFirstValidationMessage:
    def test_missing_field_uses_readable_label(self) -> None:
        errors = [{"type": "missing", "loc": ("body", "displayName"), "msg": "Field required"}]
        assert first_validation_message(errors) == "Display name is required"

    def test_unknown_field_uses_wire_path(self) -> None:
        errors = [
            {"type": "extra_forbidden", "loc": ("body", "link1", "label"), "msg": "Extra inputs"}
        ]
        assert first_validation_message(errors) == "Unknown field: link1.label"

    def test_custom_rule_message_passes_through(self) -> None:
        errors = [{"type": "field_rule", "loc": ("body", "key"), "msg": "Key is required"}]
        assert first_validation_message(errors) == "Key is required"

    def test_value_error_prefix_stripped(self) -> None:
        errors = [{"type": "value_error", "loc": ("body",), "msg": "Value error, bad thing"}]
        assert first_validation_message(errors) == "bad thing"

    def test_only_first_error_reported(self) -> None:
        errors = [
            {"type": "missing", "loc": ("body", "title"), "msg": "Field required"},
            {"type": "missing", "loc": ("body", "date"), "msg": "Field required"},
        ]
        assert first_validation_message(errors) == "Title is required"

    def test_no_errors(self) -> None:
        assert first_validation_message([]) == "Invalid request"


class TestErrorEnvelope:
    def test_unknown_route(self, test_client: TestClient) -> None:
        response = test_client.get("/api/nowhere")
        assert response.status_code == 404
        assert response.json() == {
            "status": "error",
            "data": None,
            "message": "Can't find /api/nowhere on this server!",
        }

    def test_invalid_json_body(self, test_client: TestClient) -> None:
        response = test_client.post(
            "/api/auth/login",
            content=b'{"username": "admin",',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Request body is not valid JSON"

    def test_no_stack_outside_development(
        self, test_client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = test_client.post("/api/categories", json={}, headers=auth_headers)
        assert response.status_code == 400
        assert "stack" not in response.json()

    def test_stack_included_in_development(
        self, test_client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        with patch.object(settings, "ENVIRONMENT", "development"):
            response = test_client.get("/api/projects/not-an-id")
        body = response.json()
        assert response.status_code == 404
        assert body["message"] == "Project not found"
        assert "NotFoundError" in body["stack"]
