from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from autorent.domain.vehicle import FuelType, Transmission, Vehicle
from autorent.infra.catalog_seed import DEFAULT_VEHICLES


@pytest.fixture
def make_vehicle() -> Callable[..., Vehicle]:
    """Vehicle factory with plausible defaults; override any field by keyword."""

    def _make(id: str = "1", **overrides: Any) -> Vehicle:
        values: dict[str, Any] = {
            "brand": "Toyota",
            "model": "Camry",
            "year": 2022,
            "seats": 5,
            "transmission": Transmission.AUTOMATIC,
            "fuel_type": FuelType.PETROL,
            "price_per_day": Decimal("1500"),
        }
        values.update(overrides)
        return Vehicle(id=id, **values)

    return _make


@pytest.fixture
def fleet() -> list[Vehicle]:
    """The bundled five-car inventory, in catalog order."""
    return list(DEFAULT_VEHICLES)
