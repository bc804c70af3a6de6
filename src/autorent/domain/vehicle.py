from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from autorent.domain.errors import ValidationError


class VehicleValidationError(ValidationError):
    """Raised when a vehicle record breaks an inventory invariant."""

    pass


class Transmission(str, Enum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"
    ROBOTIZED = "Robotized"
    CVT = "CVT"


class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"


MIN_RATING = 0.0
MAX_RATING = 5.0


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    brand: str
    model: str
    year: int
    seats: int
    transmission: Transmission
    fuel_type: FuelType
    price_per_day: Decimal
    available: bool = True
    image_url: str = ""
    additional_images: tuple[str, ...] = ()
    features: frozenset[str] = field(default_factory=frozenset)
    rating: float = 0.0
    description: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model}"

    def validate(self) -> None:
        """
        Validate inventory invariants.

        Raises:
            VehicleValidationError: If price or rating are out of range
        """
        if not isinstance(self.price_per_day, Decimal):
            raise VehicleValidationError(
                "price_per_day must be Decimal (no floats past the boundary)",
                vehicle_id=self.id,
            )
        if self.price_per_day.is_nan() or self.price_per_day <= 0:
            raise VehicleValidationError("price_per_day must be > 0", vehicle_id=self.id)
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise VehicleValidationError(
                f"rating must be within [{MIN_RATING}, {MAX_RATING}]", vehicle_id=self.id
            )
