"""
Dependency injection for FastAPI routes.

SQL backends open a database session per request, never cached. Process-wide
objects are limited to the bundled inventory (immutable) and the in-memory
storages, which are bounded and lock around each cart or preferences update.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Generator

from fastapi import Depends, Header

from autorent.adapters.in_memory_key_value_storage import InMemoryKeyValueStorage
from autorent.adapters.in_memory_vehicle_inventory_repository import (
    InMemoryVehicleInventoryRepository,
)
from autorent.adapters.key_value_cart_repository import KeyValueCartRepository
from autorent.adapters.key_value_catalog_preferences_repository import (
    KeyValueCatalogPreferencesRepository,
)
from autorent.adapters.sql_key_value_storage import SqlKeyValueStorage
from autorent.adapters.sql_vehicle_inventory_repository import SqlVehicleInventoryRepository
from autorent.infra.catalog_seed import DEFAULT_VEHICLES
from autorent.infra.config import (
    SQL_BACKEND,
    inventory_backend,
    memory_storage_max_entries,
    session_max_entries,
    session_ttl_seconds,
    storage_backend,
)
from autorent.infra.db.session import get_session
from autorent.ports.key_value_storage import KeyValueStorage
from autorent.ports.vehicle_inventory_repository import VehicleInventoryRepository
from autorent.use_cases.add_vehicle_to_cart import AddVehicleToCart
from autorent.use_cases.cart_ledger import CartLedger
from autorent.use_cases.catalog_preferences import CatalogPreferencesStore
from autorent.use_cases.get_vehicle_by_id import GetVehicleById
from autorent.use_cases.list_catalog_facets import ListCatalogFacets
from autorent.use_cases.query_catalog import QueryCatalog

ANONYMOUS_PROFILE = "anonymous"


@lru_cache
def get_default_inventory() -> InMemoryVehicleInventoryRepository:
    return InMemoryVehicleInventoryRepository(DEFAULT_VEHICLES)


@lru_cache
def get_memory_storage() -> InMemoryKeyValueStorage:
    """Durable storage when no database is configured; survives requests, not restarts."""
    return InMemoryKeyValueStorage(max_entries=memory_storage_max_entries())


def get_inventory_repository() -> Generator[VehicleInventoryRepository, None, None]:
    if inventory_backend() == SQL_BACKEND:
        with get_session() as session:
            yield SqlVehicleInventoryRepository(session=session)
    else:
        yield get_default_inventory()


def get_durable_storage() -> Generator[KeyValueStorage, None, None]:
    if storage_backend() == SQL_BACKEND:
        with get_session() as session:
            yield SqlKeyValueStorage(session=session)
    else:
        yield get_memory_storage()


@lru_cache
def get_session_storage() -> KeyValueStorage:
    """
    Session-scoped storage, never written to the database.

    A session ends once it has been idle for AUTORENT_SESSION_TTL_SECONDS;
    its entries are dropped then.
    """
    return InMemoryKeyValueStorage(
        ttl_seconds=session_ttl_seconds(), max_entries=session_max_entries()
    )


def get_profile_id(
    x_profile_id: Annotated[str | None, Header(max_length=128)] = None,
) -> str:
    """Browser profile that owns the cart."""
    return x_profile_id or ANONYMOUS_PROFILE


def get_session_id(
    x_session_id: Annotated[str | None, Header(max_length=128)] = None,
) -> str:
    """Browsing session that owns the catalog preferences."""
    return x_session_id or ANONYMOUS_PROFILE


def get_query_catalog_use_case(
    repository: VehicleInventoryRepository = Depends(get_inventory_repository),
) -> QueryCatalog:
    return QueryCatalog(inventory_repository=repository)


def get_get_vehicle_by_id_use_case(
    repository: VehicleInventoryRepository = Depends(get_inventory_repository),
) -> GetVehicleById:
    return GetVehicleById(inventory_repository=repository)


def get_list_catalog_facets_use_case(
    repository: VehicleInventoryRepository = Depends(get_inventory_repository),
) -> ListCatalogFacets:
    return ListCatalogFacets(inventory_repository=repository)


def get_cart_ledger(
    storage: KeyValueStorage = Depends(get_durable_storage),
    profile_id: str = Depends(get_profile_id),
) -> CartLedger:
    """One ledger per profile, hydrated from storage for each request."""
    return CartLedger.hydrate(KeyValueCartRepository(storage), storage_key=f"{profile_id}:cart")


def get_add_vehicle_to_cart_use_case(
    get_vehicle_by_id: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
    ledger: CartLedger = Depends(get_cart_ledger),
) -> AddVehicleToCart:
    return AddVehicleToCart(get_vehicle_by_id=get_vehicle_by_id, ledger=ledger)


def get_preferences_store(
    storage: KeyValueStorage = Depends(get_session_storage),
    session_id: str = Depends(get_session_id),
) -> CatalogPreferencesStore:
    return CatalogPreferencesStore(
        KeyValueCatalogPreferencesRepository(storage),
        storage_key=f"{session_id}:catalog_preferences",
    )
