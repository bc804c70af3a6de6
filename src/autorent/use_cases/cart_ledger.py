from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from typing import Iterator

from autorent.domain.cart import (
    Cart,
    CartLineItem,
    CartSnapshotError,
    CartTotals,
    CartValidationError,
    PaymentMethod,
)
from autorent.domain.vehicle import Vehicle
from autorent.ports.cart_repository import CartRepository

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "cart"


@dataclass(frozen=True, slots=True)
class CheckoutReceipt:
    items: tuple[CartLineItem, ...]
    totals: CartTotals
    payment_method: PaymentMethod = PaymentMethod.CARD


class CartLedger:
    """
    A cart mirrored to a CartRepository.

    Each mutation holds the repository lock for the cart key, re-reads the
    stored cart, applies the change and writes the full cart back before
    returning. Ledgers built for the same key from different requests
    therefore never overwrite each other's line items, and the stored value
    never lags the in-memory state.
    """

    def __init__(
        self,
        repository: CartRepository,
        storage_key: str = DEFAULT_STORAGE_KEY,
        cart: Cart | None = None,
    ) -> None:
        self._repository = repository
        self._storage_key = storage_key
        self._cart = cart or Cart()

    @classmethod
    def hydrate(
        cls, repository: CartRepository, storage_key: str = DEFAULT_STORAGE_KEY
    ) -> CartLedger:
        """
        Load the stored cart.

        Unreadable content is logged and treated as an absent cart.
        """
        ledger = cls(repository, storage_key)
        ledger._cart = ledger._read()
        return ledger

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return self._cart.items

    def find(self, vehicle_id: str) -> CartLineItem | None:
        return self._cart.find(vehicle_id)

    def totals(self) -> CartTotals:
        return self._cart.totals()

    def add_or_update(self, vehicle: Vehicle, days: int, start_date: date) -> CartLineItem:
        """
        Upsert a rental by vehicle id.

        Raises:
            CartValidationError: If days is not a positive integer
        """
        with self._transaction() as cart:
            return cart.add_or_update(vehicle, days, start_date)

    def update(self, vehicle_id: str, days: int, start_date: date) -> CartLineItem | None:
        """
        Change days/start date of an existing rental; returns None if absent.

        Raises:
            CartValidationError: If days is not a positive integer
        """
        with self._transaction() as cart:
            return cart.update(vehicle_id, days, start_date)

    def remove(self, vehicle_id: str) -> None:
        with self._transaction() as cart:
            cart.remove(vehicle_id)

    def clear(self) -> None:
        with self._transaction() as cart:
            cart.clear()

    def checkout(self, payment_method: PaymentMethod = PaymentMethod.CARD) -> CheckoutReceipt:
        """
        Complete the booking: snapshot the cart, then clear it.

        Raises:
            CartValidationError: If the cart is empty
        """
        with self._transaction() as cart:
            if not len(cart):
                raise CartValidationError("Cannot check out an empty cart")
            receipt = CheckoutReceipt(
                items=cart.items, totals=cart.totals(), payment_method=payment_method
            )
            cart.clear()

        logger.info(
            "Cart checked out",
            extra={
                "storage_key": self._storage_key,
                "total_items": receipt.totals.total_items,
                "total_price": str(receipt.totals.total_price),
                "payment_method": receipt.payment_method.value,
            },
        )
        return receipt

    @contextmanager
    def _transaction(self) -> Iterator[Cart]:
        # Nothing is written when the change raises
        with self._repository.locked(self._storage_key):
            self._cart = self._read()
            yield self._cart
            self._repository.save(self._storage_key, self._cart.items)

    def _read(self) -> Cart:
        try:
            items = self._repository.load(self._storage_key)
        except CartSnapshotError as exc:
            logger.warning(
                "Discarding unreadable stored cart",
                extra={"storage_key": self._storage_key, "error_code": exc.error_code},
            )
            return Cart()

        return Cart(items)
