from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum

from autorent.domain.errors import DomainError, ValidationError
from autorent.domain.vehicle import Vehicle


class CartValidationError(ValidationError):
    """Raised when a cart operation receives invalid rental terms."""

    pass


class CartSnapshotError(DomainError):
    """Raised when a stored cart cannot be decoded."""

    error_code: str = "CART_SNAPSHOT_INVALID"


class PaymentMethod(str, Enum):
    CARD = "card"
    CASH = "cash"  # paid when the car is picked up


@dataclass(frozen=True, slots=True)
class CartLineItem:
    """
    One rental in the cart.

    The vehicle is embedded by value: the price is locked when the item is
    added and later inventory price changes do not reach it.
    """

    vehicle: Vehicle
    days: int
    start_date: date

    @property
    def vehicle_id(self) -> str:
        return self.vehicle.id

    @property
    def total_price(self) -> Decimal:
        return self.vehicle.price_per_day * self.days


@dataclass(frozen=True, slots=True)
class CartTotals:
    total_items: int
    total_price: Decimal


def validate_rental_days(days: int) -> None:
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise CartValidationError(
            errors=[
                {
                    "field": "days",
                    "message": "Must be a positive integer",
                    "code": "INVALID_DAYS",
                }
            ]
        )


class Cart:
    """Ordered line items with at most one entry per vehicle id."""

    def __init__(self, items: list[CartLineItem] | None = None) -> None:
        self._items: list[CartLineItem] = []
        for item in items or []:
            self._upsert(item)

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def find(self, vehicle_id: str) -> CartLineItem | None:
        index = self._index_of(vehicle_id)
        return self._items[index] if index is not None else None

    def add_or_update(self, vehicle: Vehicle, days: int, start_date: date) -> CartLineItem:
        validate_rental_days(days)
        item = CartLineItem(vehicle=vehicle, days=days, start_date=start_date)
        return self._upsert(item)

    def update(self, vehicle_id: str, days: int, start_date: date) -> CartLineItem | None:
        """Change the terms of an existing item; the locked vehicle copy is kept."""
        validate_rental_days(days)
        index = self._index_of(vehicle_id)
        if index is None:
            return None
        item = replace(self._items[index], days=days, start_date=start_date)
        self._items[index] = item
        return item

    def remove(self, vehicle_id: str) -> bool:
        index = self._index_of(vehicle_id)
        if index is None:
            return False
        del self._items[index]
        return True

    def clear(self) -> None:
        self._items = []

    def totals(self) -> CartTotals:
        return CartTotals(
            total_items=len(self._items),
            total_price=sum((item.total_price for item in self._items), Decimal("0")),
        )

    def _upsert(self, item: CartLineItem) -> CartLineItem:
        index = self._index_of(item.vehicle_id)
        if index is None:
            self._items.append(item)
        else:
            self._items[index] = item
        return item

    def _index_of(self, vehicle_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.vehicle_id == vehicle_id:
                return index
        return None
