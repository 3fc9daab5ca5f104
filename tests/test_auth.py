"""Tests for login and the auth guard on protected routes."""

import base64
import json

import pytest

from event_registry_api.app.core.security import create_access_token

from .conftest import TEST_SECRET

PROTECTED_ROUTES = [
    ("POST", "/api/events"),
    ("GET", "/api/events"),
    ("GET", "/api/events/all"),
    ("GET", "/api/events/filter"),
    ("PUT", "/api/events/1"),
    ("DELETE", "/api/events/1"),
    ("POST", "/api/attendees"),
    ("GET", "/api/all-attendees"),
    ("GET", "/api/attendees"),
    ("GET", "/api/dashboard"),
]


def _call(client, method, path, headers=None):
    if method in {"POST", "PUT"}:
        return client.request(method, path, json={}, headers=headers)
    return client.request(method, path, headers=headers)


class TestLogin:

    def test_admin_credentials_issue_token(self, client):
        response = client.post("/api/login", json={"username": "admin", "password": "admin123"})
        assert response.status_code == 200
        assert response.json()["token"].count(".") == 2

    @pytest.mark.parametrize(
        "credentials",
        [
            {"username": "admin", "password": "wrong"},
            {"username": "Admin", "password": "admin123"},
            {"username": "root", "password": "admin123"},
            {"username": "admin"},
            {},
            None,
            {"username": 123, "password": "x"},
            {"username": "admin", "password": None},
            {"username": ["admin"], "password": "admin123"},
            ["admin", "admin123"],
            "admin",
        ],
    )
    def test_other_credentials_are_rejected(self, client, credentials):
        response = client.post("/api/login", json=credentials)
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_token_carries_username_claim(self, client, token):
        payload_b64 = token.split(".")[1]
        payload = json.loads(base64.urlsafe_b64decode(payload_b64 + "=" * (-len(payload_b64) % 4)))
        assert payload["username"] == "admin"
        assert "exp" in payload


class TestAuthGuard:

    @pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
    def test_missing_header_is_unauthorized(self, client, method, path):
        response = _call(client, method, path)
        assert response.status_code == 401
        assert response.json() == {"error": "Access denied"}

    @pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
    def test_foreign_token_is_invalid(self, client, method, path):
        foreign = create_access_token({"username": "admin"}, secret_key="someone-else")
        response = _call(client, method, path, headers={"Authorization": foreign})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid token"}

    def test_tampered_payload_is_invalid(self, client, token):
        header, _, signature = token.split(".")
        forged = base64.urlsafe_b64encode(
            json.dumps({"username": "mallory", "exp": 4102444800}).encode()
        ).rstrip(b"=").decode()
        response = client.get("/api/dashboard", headers={"Authorization": f"{header}.{forged}.{signature}"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid token"}

    @pytest.mark.parametrize("garbage", ["not-a-token", "a.b.c", "...", "x" * 64])
    def test_malformed_token_is_invalid(self, client, garbage):
        response = client.get("/api/dashboard", headers={"Authorization": garbage})
        assert response.status_code == 400

    def test_expired_token_is_invalid(self, client):
        expired = create_access_token({"username": "admin"}, expires_delta=-60, secret_key=TEST_SECRET)
        response = client.get("/api/dashboard", headers={"Authorization": expired})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid token"}

    def test_raw_and_bearer_tokens_are_accepted(self, client, token):
        assert client.get("/api/dashboard", headers={"Authorization": token}).status_code == 200
        assert client.get("/api/dashboard", headers={"Authorization": f"Bearer {token}"}).status_code == 200
