"""
Test suite for AdminApiClient.

Requests go through httpx.MockTransport; each test records what the client
sent and scripts what the admin API answers.
"""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from autorent.adapters.admin_api_client import (
    TOKEN_STORAGE_KEY,
    AdminApiClient,
    AdminApiError,
    Page,
)
from autorent.adapters.in_memory_key_value_storage import InMemoryKeyValueStorage

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def sent() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(
    storage: InMemoryKeyValueStorage, sent: list[httpx.Request]
) -> Callable[[Handler], AdminApiClient]:
    def _make(handler: Handler) -> AdminApiClient:
        def record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        http_client = httpx.Client(
            transport=httpx.MockTransport(record), base_url="https://admin.test"
        )
        return AdminApiClient(storage, http_client=http_client)

    return _make


# ==============================================================================
# Requests
# ==============================================================================


def test_list_cars_sends_only_given_params(
    make_client: Callable[[Handler], AdminApiClient], sent: list[httpx.Request]
) -> None:
    client = make_client(
        lambda request: httpx.Response(
            200,
            json={"data": [{"id": "1"}], "total": 11, "page": 2, "totalPages": 3},
        )
    )

    page = client.list_cars(page=2, limit=5, brand="BMW")

    assert isinstance(page, Page)
    assert page.total_pages == 3
    assert page.data == [{"id": "1"}]
    assert sent[0].method == "GET"
    assert sent[0].url.path == "/admin/cars"
    assert dict(sent[0].url.params) == {"page": "2", "limit": "5", "brand": "BMW"}


def test_recent_bookings_sorted_by_creation(
    make_client: Callable[[Handler], AdminApiClient], sent: list[httpx.Request]
) -> None:
    client = make_client(lambda request: httpx.Response(200, json=[]))

    assert client.get_recent_bookings() == []
    assert dict(sent[0].url.params) == {"limit": "5", "sort": "-createdAt"}


def test_update_car_uses_patch_with_json_body(
    make_client: Callable[[Handler], AdminApiClient], sent: list[httpx.Request]
) -> None:
    client = make_client(lambda request: httpx.Response(200, json={"id": "2", "available": False}))

    result = client.update_car("2", {"available": False})

    assert result == {"id": "2", "available": False}
    assert sent[0].method == "PATCH"
    assert sent[0].url.path == "/admin/cars/2"
    assert json.loads(sent[0].content) == {"available": False}


def test_delete_with_empty_body_returns_none(
    make_client: Callable[[Handler], AdminApiClient], sent: list[httpx.Request]
) -> None:
    client = make_client(lambda request: httpx.Response(204))

    assert client.delete_booking("b-1") is None
    assert sent[0].method == "DELETE"
    assert sent[0].url.path == "/admin/bookings/b-1"


# ==============================================================================
# Auth token
# ==============================================================================


def test_no_authorization_header_without_token(
    make_client: Callable[[Handler], AdminApiClient], sent: list[httpx.Request]
) -> None:
    client = make_client(lambda request: httpx.Response(200, json={}))

    client.get_dashboard_stats()

    assert "authorization" not in sent[0].headers


def test_login_stores_token_and_later_requests_send_it(
    make_client: Callable[[Handler], AdminApiClient],
    sent: list[httpx.Request],
    storage: InMemoryKeyValueStorage,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/admin/auth/login":
            return httpx.Response(200, json={"token": "t0k3n", "user": {"email": "a@b.c"}})
        return httpx.Response(200, json={"email": "a@b.c"})

    client = make_client(handler)

    client.login("a@b.c", "secret")
    client.get_current_user()

    assert storage.get(TOKEN_STORAGE_KEY) == "t0k3n"
    assert json.loads(sent[0].content) == {"email": "a@b.c", "password": "secret"}
    assert sent[1].headers["authorization"] == "Bearer t0k3n"


def test_logout_forgets_token(
    make_client: Callable[[Handler], AdminApiClient],
    sent: list[httpx.Request],
    storage: InMemoryKeyValueStorage,
) -> None:
    storage.set(TOKEN_STORAGE_KEY, "t0k3n")
    client = make_client(lambda request: httpx.Response(200, json=[]))

    client.logout()
    client.get_popular_cars()

    assert storage.get(TOKEN_STORAGE_KEY) is None
    assert "authorization" not in sent[0].headers


# ==============================================================================
# Errors
# ==============================================================================


def test_error_uses_server_message(make_client: Callable[[Handler], AdminApiClient]) -> None:
    client = make_client(lambda request: httpx.Response(401, json={"message": "Token expired"}))

    with pytest.raises(AdminApiError) as exc_info:
        client.get_current_user()

    assert exc_info.value.message == "Token expired"
    assert exc_info.value.context["status_code"] == 401


def test_error_without_message_falls_back_to_status(
    make_client: Callable[[Handler], AdminApiClient],
) -> None:
    client = make_client(lambda request: httpx.Response(500, text="<html>oops</html>"))

    with pytest.raises(AdminApiError) as exc_info:
        client.get_car("1")

    assert exc_info.value.message == "API error: 500 Internal Server Error"


def test_transport_failure_is_wrapped(make_client: Callable[[Handler], AdminApiClient]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(AdminApiError) as exc_info:
        client.list_bookings()

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.error_code == "ADMIN_API_ERROR"


def test_client_closes_as_context_manager(
    make_client: Callable[[Handler], AdminApiClient],
) -> None:
    client = make_client(lambda request: httpx.Response(200, json={}))

    with client:
        client.get_dashboard_stats()

    assert client._client.is_closed
