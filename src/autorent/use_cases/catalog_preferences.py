from __future__ import annotations

import logging
from dataclasses import replace

from autorent.domain.catalog import CatalogPreferences, PreferencesSnapshotError
from autorent.ports.catalog_preferences_repository import CatalogPreferencesRepository

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "catalog_preferences"


class CatalogPreferencesStore:
    """
    Catalog page state kept for the browsing session only.

    Back it with session-scoped storage: unlike the cart, these values are
    meant to disappear when the session ends.
    """

    def __init__(
        self,
        repository: CatalogPreferencesRepository,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._repository = repository
        self._storage_key = storage_key

    def load(self) -> CatalogPreferences:
        try:
            preferences = self._repository.load(self._storage_key)
        except PreferencesSnapshotError as exc:
            logger.warning(
                "Discarding unreadable catalog preferences",
                extra={"storage_key": self._storage_key, "error_code": exc.error_code},
            )
            self._repository.remove(self._storage_key)
            return CatalogPreferences()

        return preferences or CatalogPreferences()

    def save(self, preferences: CatalogPreferences) -> CatalogPreferences:
        """
        Store preferences; a new search, filter set or sort starts again at page 1.

        Returns:
            The preferences as stored
        """
        with self._repository.locked(self._storage_key):
            if not preferences.same_query(self.load()):
                preferences = replace(preferences, page=1)
            preferences = replace(preferences, page=max(preferences.page, 1))
            self._repository.save(self._storage_key, preferences)
        return preferences

    def clear(self) -> None:
        self._repository.remove(self._storage_key)
