from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Sequence

from autorent.domain.cart import CartLineItem


class CartRepository(ABC):
    """
    Port for persisted carts, one per cart key.

    Contract:
        - load() returns line items in cart order
        - A caller that reads, changes and writes back a cart holds locked()
          for the whole sequence; concurrent holders of the same key wait
    """

    @abstractmethod
    def load(self, cart_key: str) -> list[CartLineItem] | None:
        """
        Returns:
            The stored line items, or None if no cart is stored under the key

        Raises:
            CartSnapshotError: If the stored value cannot be decoded
        """
        ...

    @abstractmethod
    def save(self, cart_key: str, items: Sequence[CartLineItem]) -> None:
        """Replace the stored cart with the given line items."""
        ...

    @abstractmethod
    def locked(self, cart_key: str) -> AbstractContextManager[None]:
        """Exclusive access to one cart while it is read and written back."""
        ...
