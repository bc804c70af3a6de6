from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from autorent.domain.catalog import CatalogPreferences


class CatalogPreferencesRepository(ABC):
    """Port for catalog page state, one entry per browsing session."""

    @abstractmethod
    def load(self, preferences_key: str) -> CatalogPreferences | None:
        """
        Returns:
            The stored preferences, or None if nothing is stored under the key

        Raises:
            PreferencesSnapshotError: If the stored value cannot be decoded
        """
        ...

    @abstractmethod
    def save(self, preferences_key: str, preferences: CatalogPreferences) -> None: ...

    @abstractmethod
    def remove(self, preferences_key: str) -> None: ...

    @abstractmethod
    def locked(self, preferences_key: str) -> AbstractContextManager[None]:
        """Exclusive access to one entry while it is read and written back."""
        ...
