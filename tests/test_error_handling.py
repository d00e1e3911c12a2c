"""Tests for error normalization: every failure is one JSON body with an "error" key."""

import json

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from deps import get_db
from main import create_app
from Bootstrap_module.bootstrap import StoreLifecycleManager
from Bootstrap_module.default_data import DEFAULT_CART
from Cart_module.Cart_model import CartItem
from Gateway_module.error_handlers import normalize_error
from Gateway_module.errors import GatewayError, OriginRejectedError
from tests.conftest import ALLOWED_ORIGIN, TestSession, engine, override_get_db


@pytest.fixture
def failing_app():
    """An app with extra routes that fail on purpose."""
    app = create_app(
        lifecycle=StoreLifecycleManager(engine, TestSession),
        allowed_origins=[ALLOWED_ORIGIN],
    )
    app.dependency_overrides[get_db] = override_get_db

    @app.get("/api/boom")
    def boom():
        raise RuntimeError("boom")

    @app.get("/api/silent-boom")
    def silent_boom():
        raise RuntimeError()

    @app.get("/api/gone")
    def gone():
        raise HTTPException(status_code=404, detail="Gone")

    return app


# ─── normalize_error ──────────────────────────────────────────

def test_origin_rejection_maps_to_403():
    response = normalize_error(OriginRejectedError("http://evil.example"))

    assert response.status_code == 403
    assert json.loads(response.body) == {"error": "Not allowed by CORS"}


def test_status_follows_error_kind_not_message():
    # Same wording as the CORS rejection, but not an origin error
    response = normalize_error(RuntimeError("Not allowed by CORS"))

    assert response.status_code == 500


def test_other_errors_map_to_500_with_message():
    response = normalize_error(ValueError("bad value"))

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "bad value"}


@pytest.mark.parametrize("exc", [RuntimeError(), GatewayError(""), KeyError()])
def test_empty_message_falls_back(exc):
    response = normalize_error(exc)

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Something went wrong!"}


# ─── Through the HTTP pipeline ────────────────────────────────

def test_handler_error_becomes_single_500(failing_app):
    client = TestClient(failing_app)

    response = client.get("/api/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "boom"}


def test_handler_error_without_message(failing_app):
    response = TestClient(failing_app).get("/api/silent-boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong!"}


def test_handler_error_keeps_cors_headers_for_allowed_origin(failing_app):
    response = TestClient(failing_app).get("/api/boom", headers={"Origin": ALLOWED_ORIGIN})

    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


def test_http_exception_keeps_status(failing_app):
    response = TestClient(failing_app).get("/api/gone")

    assert response.status_code == 404
    assert response.json() == {"error": "Gone"}


def test_unknown_route_is_json_404(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_malformed_json_body_is_normalized_500(client, seeded):
    response = client.post(
        "/api/cart-items",
        content=b"{not json",
        headers={"Content-Type": "application/json", "Origin": ALLOWED_ORIGIN},
    )

    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"error"}
    assert body["error"].startswith("Malformed JSON body")
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


def test_malformed_json_body_adds_nothing_to_cart(client, db_session, seeded):
    client.post(
        "/api/cart-items",
        content=b'{"productId": ',
        headers={"Content-Type": "application/json"},
    )

    assert db_session.query(CartItem).count() == len(DEFAULT_CART)


def test_missing_field_is_400_with_single_error_key(client, seeded):
    response = client.post("/api/cart-items", json={"quantity": 1})

    assert response.status_code == 400
    assert response.json() == {"error": "productId: Field required"}


def test_store_failure_is_500(app):
    def unreachable_db():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = unreachable_db

    response = TestClient(app).get("/api/products")

    assert response.status_code == 500
    assert "error" in response.json()
    assert "Traceback" not in response.text


# ─── Health ───────────────────────────────────────────────────

def test_health_does_not_need_the_store(app):
    def unreachable_db():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = unreachable_db

    response = TestClient(app).get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_missing_image_is_404(client):
    response = client.get("/images/products/missing.jpg")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
