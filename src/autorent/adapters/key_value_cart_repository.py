"""CartRepository over a KeyValueStorage, in the stored JSON cart format."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Sequence

from autorent.adapters import cart_snapshot
from autorent.domain.cart import CartLineItem
from autorent.ports.cart_repository import CartRepository
from autorent.ports.key_value_storage import KeyValueStorage


class KeyValueCartRepository(CartRepository):
    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    def load(self, cart_key: str) -> list[CartLineItem] | None:
        raw = self._storage.get(cart_key)
        if raw is None:
            return None
        return cart_snapshot.decode(raw)

    def save(self, cart_key: str, items: Sequence[CartLineItem]) -> None:
        self._storage.set(cart_key, cart_snapshot.encode(items))

    def locked(self, cart_key: str) -> AbstractContextManager[None]:
        return self._storage.locked(cart_key)
