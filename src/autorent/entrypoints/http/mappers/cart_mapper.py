from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from autorent.domain.cart import CartLineItem, CartTotals
from autorent.domain.catalog import RENTAL_DAYS_RANGE, clamp
from autorent.entrypoints.http.dtos.cart import (
    CartItemRequestDTO,
    CartItemResponseDTO,
    CartResponseDTO,
    CheckoutResponseDTO,
)
from autorent.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from autorent.use_cases.cart_ledger import CheckoutReceipt


class CartMapper:
    """Maps between REST DTOs and cart domain models."""

    @staticmethod
    def to_rental_days(dto: CartItemRequestDTO) -> int:
        """Clamp the day counter to 1..30 the way the cart page control does."""
        return clamp(dto.days, RENTAL_DAYS_RANGE)

    @staticmethod
    def to_item_response(item: CartLineItem) -> CartItemResponseDTO:
        return CartItemResponseDTO(
            car=CatalogMapper.to_vehicle_response(item.vehicle),
            days=item.days,
            start_date=item.start_date,
            total_price=_money(item.total_price),
        )

    @staticmethod
    def to_response(items: Sequence[CartLineItem], totals: CartTotals) -> CartResponseDTO:
        return CartResponseDTO(
            items=[CartMapper.to_item_response(item) for item in items],
            total_items=totals.total_items,
            total_price=_money(totals.total_price),
        )

    @staticmethod
    def to_checkout_response(receipt: CheckoutReceipt) -> CheckoutResponseDTO:
        return CheckoutResponseDTO(
            payment_method=receipt.payment_method,
            items=[CartMapper.to_item_response(item) for item in receipt.items],
            total_items=receipt.totals.total_items,
            total_price=_money(receipt.totals.total_price),
        )


def _money(amount: Decimal) -> str:
    return str(amount)
