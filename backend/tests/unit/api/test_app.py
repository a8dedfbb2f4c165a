"""
Error envelope, health endpoints and app wiring.
"""

import pytest
from fastapi.testclient import TestClient

from selva.core.config import Settings
from selva.core.exceptions import ServerError
from selva.main import create_app

pytestmark = pytest.mark.unit


def test_root(client):
    assert client.get("/").json() == {"message": "Welcome to Selva Nail Salon API"}


@pytest.mark.parametrize("path", ["/health", "/healthz"])
def test_health(client, path):
    response = client.get(path)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["uptime"] >= 0
    assert body["timestamp"]


def test_initialize(client):
    assert client.get("/api/initialize").json()["status"] == "success"


def test_unknown_route_has_route_not_found_shape(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Route not found",
        "message": "The requested route /api/nope does not exist",
    }


def test_missing_entity_has_message_shape(client):
    response = client.get("/api/products/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_malformed_json_is_400(client):
    response = client.post(
        "/api/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_unhandled_error_is_500_without_details(app):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong!", "message": "Internal server error"}


def test_seeding_is_idempotent(app, db):
    with TestClient(app):
        pass
    with TestClient(app) as client:
        assert len(client.get("/api/products").json()["items"]) == 6
        assert len(client.get("/api/services").json()["items"]) == 6


def test_cors_allows_configured_origin(client):
    response = client.get("/api/products", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_app_error_uses_its_own_status(app):
    @app.get("/broken-store")
    async def broken_store():
        raise ServerError()

    with TestClient(app) as client:
        response = client.get("/broken-store")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_unhandled_error_detail_shown_in_development(db):
    settings = Settings(APP_ENV="development", JWT_SECRET_KEY="dev-secret", SEED_ON_STARTUP=False)
    app = create_app(settings, db)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong!", "message": "secret internals"}
