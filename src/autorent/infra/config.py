"""Application settings read from the environment."""

from __future__ import annotations

import os

MEMORY_BACKEND = "memory"
SQL_BACKEND = "sql"
BACKENDS = (MEMORY_BACKEND, SQL_BACKEND)

DEFAULT_ADMIN_API_URL = "https://api.autorent.example.com"


def _backend(variable: str) -> str:
    value = os.getenv(variable, MEMORY_BACKEND).strip().lower()

    if value not in BACKENDS:
        raise RuntimeError(f"{variable} must be one of {BACKENDS}, got {value!r}")

    return value


def inventory_backend() -> str:
    """Where the catalog reads vehicles from: bundled list or the vehicles table."""
    return _backend("AUTORENT_INVENTORY_BACKEND")


def storage_backend() -> str:
    """Where carts are persisted: process memory or the storage_entries table."""
    return _backend("AUTORENT_STORAGE_BACKEND")


def admin_api_url() -> str:
    return os.getenv("AUTORENT_ADMIN_API_URL") or DEFAULT_ADMIN_API_URL


def _positive_int(variable: str, default: int) -> int:
    raw = os.getenv(variable)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{variable} must be a positive integer, got {raw!r}") from None

    if value < 1:
        raise RuntimeError(f"{variable} must be a positive integer, got {raw!r}")

    return value


def session_ttl_seconds() -> int:
    """Idle time after which a browsing session's catalog preferences are dropped."""
    return _positive_int("AUTORENT_SESSION_TTL_SECONDS", 30 * 60)


def session_max_entries() -> int:
    """Most browsing sessions kept in memory at once."""
    return _positive_int("AUTORENT_SESSION_MAX_ENTRIES", 10_000)


def memory_storage_max_entries() -> int:
    """Most carts kept by the in-memory storage backend."""
    return _positive_int("AUTORENT_MEMORY_STORAGE_MAX_ENTRIES", 10_000)
