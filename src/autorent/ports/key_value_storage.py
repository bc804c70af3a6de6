from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class KeyValueStorage(ABC):
    """
    Port for durable (or session-scoped) string key-value storage.

    Mirrors the browser storage contract: string keys, string values,
    missing keys read as None.
    """

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove(self, key: str) -> None: ...

    @abstractmethod
    def locked(self, key: str) -> AbstractContextManager[None]:
        """
        Hold the key against concurrent read-modify-write sequences.

        get/set/remove calls made by the holder go through as usual.
        """
        ...
