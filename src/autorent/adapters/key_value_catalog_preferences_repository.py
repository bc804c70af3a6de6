"""CatalogPreferencesRepository over a KeyValueStorage."""

from __future__ import annotations

from contextlib import AbstractContextManager

from autorent.adapters import preferences_snapshot
from autorent.adapters.preferences_snapshot import StoredFilters, StoredPreferences
from autorent.domain.catalog import CatalogPreferences
from autorent.ports.catalog_preferences_repository import CatalogPreferencesRepository
from autorent.ports.key_value_storage import KeyValueStorage


class KeyValueCatalogPreferencesRepository(CatalogPreferencesRepository):
    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    def load(self, preferences_key: str) -> CatalogPreferences | None:
        raw = self._storage.get(preferences_key)
        if raw is None:
            return None

        stored = preferences_snapshot.decode(raw)
        return CatalogPreferences(
            search_query=stored.search_query,
            filters=stored.filters.to_domain(),
            sort=stored.sort_by,
            view_mode=stored.view_mode,
            page=stored.current_page,
        )

    def save(self, preferences_key: str, preferences: CatalogPreferences) -> None:
        stored = StoredPreferences(
            search_query=preferences.search_query,
            filters=StoredFilters.from_domain(preferences.filters),
            sort_by=preferences.sort,
            view_mode=preferences.view_mode,
            current_page=preferences.page,
        )
        self._storage.set(preferences_key, preferences_snapshot.encode(stored))

    def remove(self, preferences_key: str) -> None:
        self._storage.remove(preferences_key)

    def locked(self, preferences_key: str) -> AbstractContextManager[None]:
        return self._storage.locked(preferences_key)
