"""Client for the external admin REST API.

Thin wrapper: one request per call, no retries. Every non-2xx response and
every transport failure surfaces as a single AdminApiError carrying either
the server-provided message or "API error: <status> <reason>".
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from autorent.domain.errors import DomainError
from autorent.infra.config import admin_api_url
from autorent.ports.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

TOKEN_STORAGE_KEY = "admin_token"


class AdminApiError(DomainError):
    """The admin API answered with an error or could not be reached."""

    error_code: str = "ADMIN_API_ERROR"


class Page(BaseModel):
    """Paginated list envelope: {data, total, page, totalPages}."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    data: list[dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    total_pages: int = 0


class AdminApiClient:
    def __init__(
        self,
        storage: KeyValueStorage,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._storage = storage
        self._client = http_client or httpx.Client(
            base_url=base_url or admin_api_url(), timeout=timeout
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> AdminApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ==========================================================================
    # Dashboard
    # ==========================================================================

    def get_dashboard_stats(self) -> dict[str, Any]:
        return self._request("GET", "/admin/dashboard/stats")

    def get_recent_bookings(self, limit: int = 5) -> list[dict[str, Any]]:
        return self._request(
            "GET", "/admin/bookings", params={"limit": limit, "sort": "-createdAt"}
        )

    def get_popular_cars(self, limit: int = 4) -> list[dict[str, Any]]:
        return self._request("GET", "/admin/cars/popular", params={"limit": limit})

    # ==========================================================================
    # Cars
    # ==========================================================================

    def list_cars(
        self,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
        brand: str | None = None,
        status: str | None = None,
    ) -> Page:
        params = {"page": page, "limit": limit, "sort": sort, "brand": brand, "status": status}
        return Page.model_validate(self._request("GET", "/admin/cars", params=params))

    def get_car(self, car_id: str) -> dict[str, Any]:
        return self._request("GET", f"/admin/cars/{car_id}")

    def create_car(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/admin/cars", json=data)

    def update_car(self, car_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("PATCH", f"/admin/cars/{car_id}", json=data)

    def delete_car(self, car_id: str) -> None:
        self._request("DELETE", f"/admin/cars/{car_id}")

    # ==========================================================================
    # Bookings
    # ==========================================================================

    def list_bookings(
        self,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
        status: str | None = None,
    ) -> Page:
        params = {"page": page, "limit": limit, "sort": sort, "status": status}
        return Page.model_validate(self._request("GET", "/admin/bookings", params=params))

    def get_booking(self, booking_id: str) -> dict[str, Any]:
        return self._request("GET", f"/admin/bookings/{booking_id}")

    def create_booking(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/admin/bookings", json=data)

    def update_booking(self, booking_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("PATCH", f"/admin/bookings/{booking_id}", json=data)

    def delete_booking(self, booking_id: str) -> None:
        self._request("DELETE", f"/admin/bookings/{booking_id}")

    # ==========================================================================
    # Auth
    # ==========================================================================

    def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and keep the returned bearer token for later requests."""
        result = self._request(
            "POST", "/admin/auth/login", json={"email": email, "password": password}
        )
        token = result.get("token") if isinstance(result, dict) else None
        if token:
            self._storage.set(TOKEN_STORAGE_KEY, token)
        return result

    def logout(self) -> None:
        self._storage.remove(TOKEN_STORAGE_KEY)

    def get_current_user(self) -> dict[str, Any]:
        return self._request("GET", "/admin/auth/me")

    # ==========================================================================
    # Transport
    # ==========================================================================

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._storage.get(TOKEN_STORAGE_KEY)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        query = {key: value for key, value in (params or {}).items() if value is not None}

        try:
            response = self._client.request(
                method, endpoint, params=query or None, json=json, headers=self._headers()
            )
        except httpx.HTTPError as exc:
            logger.error(
                "API request failed",
                exc_info=exc,
                extra={"method": method, "endpoint": endpoint},
            )
            raise AdminApiError(f"API request failed: {exc}", endpoint=endpoint) from exc

        if not response.is_success:
            error = AdminApiError(
                self._error_message(response),
                endpoint=endpoint,
                status_code=response.status_code,
            )
            logger.error(
                "API request failed",
                extra={
                    "method": method,
                    "endpoint": endpoint,
                    "status_code": response.status_code,
                    "error_message": error.message,
                },
            )
            raise error

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None

        message = payload.get("message") if isinstance(payload, dict) else None
        return message or f"API error: {response.status_code} {response.reason_phrase}"
