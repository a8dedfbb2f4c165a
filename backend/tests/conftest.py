"""
Shared fixtures: an app over the in-memory backend with APP_ENV=test.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from selva.core import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from selva.core.config import Settings  # noqa: E402
from selva.db.database import create_memory_database  # noqa: E402
from selva.main import create_app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-secret"


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        APP_ENV="test",
        STORAGE_BACKEND="memory",
        JWT_SECRET_KEY="test-secret",
        ADMIN_EMAIL=ADMIN_EMAIL,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
    )


@pytest.fixture
def db():
    return create_memory_database()


@pytest.fixture
def app(settings, db):
    return create_app(settings, db)


@pytest.fixture
def client(app):
    # entering the context runs the lifespan: indexes + seeds
    with TestClient(app) as client:
        yield client


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return _bearer(response.json()["token"])


@pytest.fixture
def customer_headers(client):
    response = client.post(
        "/api/auth/register",
        json={
            "name": "Layla Ahmed",
            "email": "layla@example.com",
            "password": "secret123",
            "phone": "+20 100 000 0000",
        },
    )
    assert response.status_code == 201
    return _bearer(response.json()["token"])
