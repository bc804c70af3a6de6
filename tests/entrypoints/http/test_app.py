"""Tests for the assembled FastAPI application."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from autorent.domain.errors import DomainError
from autorent.entrypoints.http.app import build_app


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    monkeypatch.delenv("AUTORENT_INVENTORY_BACKEND", raising=False)
    monkeypatch.delenv("AUTORENT_STORAGE_BACKEND", raising=False)
    return build_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def test_routes_are_registered(app: FastAPI) -> None:
    paths = {route.path for route in app.routes}

    assert {
        "/health",
        "/v1/cars",
        "/v1/cars/facets",
        "/v1/cars/{car_id}",
        "/v1/cart",
        "/v1/cart/items/{car_id}",
        "/v1/cart/checkout",
        "/v1/catalog/preferences",
    } <= paths


def test_exception_handlers_are_registered(app: FastAPI) -> None:
    assert DomainError in app.exception_handlers
    assert Exception in app.exception_handlers


def test_openapi_metadata(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    assert schema["info"]["title"] == "AutoRent API"
    assert "/v1/cars/facets" in schema["paths"]


def test_facets_route_is_not_shadowed_by_car_id(client: TestClient) -> None:
    response = client.get("/v1/cars/facets")

    assert response.status_code == 200
    assert "brands" in response.json()


def test_browse_and_book_with_bundled_fleet(client: TestClient) -> None:
    profile = {"X-Profile-Id": "test-app-profile"}

    cars = client.get("/v1/cars", params={"q": "BMW"}).json()["cars"]
    booked = client.put(
        f"/v1/cart/items/{cars[0]['id']}",
        json={"days": 2, "start_date": "2025-06-01"},
        headers=profile,
    )
    cart = client.get("/v1/cart", headers=profile).json()

    assert booked.status_code == 200
    assert cart["total_items"] == 1
    assert cart["total_price"] == "6400"
