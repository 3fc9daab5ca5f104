"""Pytest configuration and shared fixtures."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from event_registry_api.app.core.config import Settings
from event_registry_api.app.core.db import Database
from event_registry_api.app.main import create_app

TEST_SECRET = "test-secret"


def run(coro):
    """Run a service coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    return Settings(
        database_url=str(tmp_path / "test.db"),
        secret_key=TEST_SECRET,
        access_token_expire_minutes=60,
        admin_username="admin",
        admin_password="admin123",
    )


@pytest.fixture
def client(app_settings):
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def token(client) -> str:
    response = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token) -> dict:
    return {"Authorization": token}


@pytest.fixture
def make_event(client, auth_headers):
    def _make_event(name="Intro", date="2024-01-01", type="Meetup", **extra):
        payload = {"name": name, "date": date, "type": type, **extra}
        response = client.post("/api/events", json=payload, headers=auth_headers)
        assert response.status_code == 200, response.text
        return response.json()

    return _make_event


@pytest.fixture
def db(tmp_path):
    database = Database(str(tmp_path / "services.db"))
    database.open()
    database.init_db()
    yield database
    database.close()
