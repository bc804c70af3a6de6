"""JSON snapshot format of a persisted cart.

The stored layout matches what the storefront keeps under its "cart" key:
a JSON array of ``{"car": {...}, "days", "startDate", "totalPrice"}`` objects.
``totalPrice`` is written for readers of the raw value but ignored on load;
line item totals are always derived from the embedded vehicle.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from autorent.domain.cart import CartLineItem, CartSnapshotError
from autorent.domain.vehicle import FuelType, Transmission, Vehicle


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredVehicle(_CamelModel):
    id: str
    brand: str
    model: str
    year: int
    seats: int
    transmission: Transmission
    fuel_type: FuelType
    price_per_day: Decimal = Field(gt=0)
    available: bool = True
    image_url: str = ""
    additional_images: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    rating: float = 0.0
    description: str = ""


class StoredLineItem(_CamelModel):
    car: StoredVehicle
    days: int = Field(ge=1)
    start_date: date
    total_price: Decimal | None = None


_SNAPSHOT = TypeAdapter(list[StoredLineItem])


def encode(items: Sequence[CartLineItem]) -> str:
    stored = [
        StoredLineItem(
            car=_from_vehicle(item.vehicle),
            days=item.days,
            start_date=item.start_date,
            total_price=item.total_price,
        )
        for item in items
    ]
    return _SNAPSHOT.dump_json(stored, by_alias=True).decode()


def decode(raw: str) -> list[CartLineItem]:
    """
    Parse a stored cart.

    Raises:
        CartSnapshotError: If the value is not valid JSON or not a cart
    """
    try:
        stored = _SNAPSHOT.validate_json(raw)
    except PydanticValidationError as exc:
        raise CartSnapshotError(
            "Stored cart could not be decoded", error_count=exc.error_count()
        ) from exc

    return [
        CartLineItem(vehicle=_to_vehicle(item.car), days=item.days, start_date=item.start_date)
        for item in stored
    ]


def _from_vehicle(vehicle: Vehicle) -> StoredVehicle:
    return StoredVehicle(
        id=vehicle.id,
        brand=vehicle.brand,
        model=vehicle.model,
        year=vehicle.year,
        seats=vehicle.seats,
        transmission=vehicle.transmission,
        fuel_type=vehicle.fuel_type,
        price_per_day=vehicle.price_per_day,
        available=vehicle.available,
        image_url=vehicle.image_url,
        additional_images=list(vehicle.additional_images),
        features=sorted(vehicle.features),
        rating=vehicle.rating,
        description=vehicle.description,
    )


def _to_vehicle(stored: StoredVehicle) -> Vehicle:
    return Vehicle(
        id=stored.id,
        brand=stored.brand,
        model=stored.model,
        year=stored.year,
        seats=stored.seats,
        transmission=stored.transmission,
        fuel_type=stored.fuel_type,
        price_per_day=stored.price_per_day,
        available=stored.available,
        image_url=stored.image_url,
        additional_images=tuple(stored.additional_images),
        features=frozenset(stored.features),
        rating=stored.rating,
        description=stored.description,
    )
