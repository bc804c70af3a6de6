from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from contextlib import contextmanager
from typing import Callable, Iterator

from autorent.ports.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)


class InMemoryKeyValueStorage(KeyValueStorage):
    """
    Process-local storage; used for session-scoped data and in tests.

    Optional limits:
        ttl_seconds: an entry expires once it has gone this long without
            being read or written (the session is over)
        max_entries: the least recently used entry is evicted when a write
            would exceed the limit

    All access is serialized by one re-entrant lock, which locked() holds
    for the caller's whole read-modify-write.
    """

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        ttl_seconds: float | None = None,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be >= 1")

        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._lock = threading.RLock()
        # key -> (value, last access); oldest access first
        self._entries: OrderedDict[str, tuple[str, float]] = OrderedDict()

        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> str | None:
        with self._lock:
            self._expire()
            entry = self._entries.get(key)
            if entry is None:
                return None
            self._touch(key, entry[0])
            return entry[0]

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._expire()
            self._touch(key, value)
            if self._max_entries is not None:
                while len(self._entries) > self._max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug("Evicted storage entry", extra={"storage_key": evicted})

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    @contextmanager
    def locked(self, key: str) -> Iterator[None]:
        with self._lock:
            yield

    def __len__(self) -> int:
        with self._lock:
            self._expire()
            return len(self._entries)

    def _touch(self, key: str, value: str) -> None:
        self._entries[key] = (value, self._clock())
        self._entries.move_to_end(key)

    def _expire(self) -> None:
        if self._ttl_seconds is None:
            return
        deadline = self._clock() - self._ttl_seconds
        while self._entries:
            key, (_, last_access) = next(iter(self._entries.items()))
            if last_access > deadline:
                break
            del self._entries[key]
            logger.debug("Expired storage entry", extra={"storage_key": key})
