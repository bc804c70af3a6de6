from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from autorent.domain.cart import PaymentMethod
from autorent.entrypoints.http.dtos.catalog import VehicleResponseDTO


class CartItemRequestDTO(BaseModel):
    """Rental terms for one car in the cart."""

    days: int = Field(
        description="Rental length in days; values outside 1..30 are clamped",
        examples=[3],
    )
    start_date: date = Field(description="First rental day (ISO 8601)", examples=["2025-06-01"])

    model_config = ConfigDict(
        json_schema_extra={"example": {"days": 3, "start_date": "2025-06-01"}}
    )


class CartItemResponseDTO(BaseModel):
    car: VehicleResponseDTO
    days: int
    start_date: date
    total_price: str


class CartResponseDTO(BaseModel):
    items: list[CartItemResponseDTO]
    total_items: int
    total_price: str


class CheckoutRequestDTO(BaseModel):
    """Checkout options; the body may be omitted."""

    payment_method: PaymentMethod = Field(
        default=PaymentMethod.CARD,
        description="`card`, or `cash` paid when the car is picked up",
    )


class CheckoutResponseDTO(BaseModel):
    status: str = "confirmed"
    payment_method: PaymentMethod
    items: list[CartItemResponseDTO]
    total_items: int
    total_price: str
