"""Bundled rental inventory used by the in-memory catalog and the seed script."""

from __future__ import annotations

from decimal import Decimal

from autorent.domain.vehicle import FuelType, Transmission, Vehicle

_UNSPLASH = "https://images.unsplash.com/photo-{}?q=80&w=2940&auto=format&fit=crop"


def _images(*photo_ids: str) -> tuple[str, ...]:
    return tuple(_UNSPLASH.format(photo_id) for photo_id in photo_ids)


DEFAULT_VEHICLES: tuple[Vehicle, ...] = (
    Vehicle(
        id="1",
        brand="Toyota",
        model="Camry",
        year=2023,
        seats=5,
        transmission=Transmission.AUTOMATIC,
        fuel_type=FuelType.PETROL,
        price_per_day=Decimal("1500"),
        available=True,
        image_url=_UNSPLASH.format("1621007947382-bb3c3994e3fb"),
        additional_images=_images(
            "1614200179396-2bdb77ebf81b",
            "1618843479313-40f8afb4b4d8",
            "1542282088-72c9c27ed0cd",
        ),
        features=frozenset({"Climate control", "Leather interior", "Navigation", "Parking sensors"}),
        rating=4.8,
        description=(
            "Reliable and comfortable sedan for business and leisure. "
            "Economical fuel consumption and a spacious cabin."
        ),
    ),
    Vehicle(
        id="2",
        brand="BMW",
        model="X5",
        year=2022,
        seats=5,
        transmission=Transmission.AUTOMATIC,
        fuel_type=FuelType.DIESEL,
        price_per_day=Decimal("3200"),
        available=True,
        image_url=_UNSPLASH.format("1556189250-72ba954cfc2b"),
        additional_images=_images(
            "1556189258-0d8b1e0a2c97",
            "1635241610248-ef944c0e9fe3",
            "1580273916550-e323be2ae537",
        ),
        features=frozenset(
            {"Panoramic roof", "Heated seats", "Adaptive cruise control", "Premium audio"}
        ),
        rating=4.9,
        description="Sporty, prestigious crossover with a powerful engine and an elegant interior.",
    ),
    Vehicle(
        id="3",
        brand="Volkswagen",
        model="Golf",
        year=2021,
        seats=5,
        transmission=Transmission.MANUAL,
        fuel_type=FuelType.PETROL,
        price_per_day=Decimal("1200"),
        available=True,
        image_url=_UNSPLASH.format("1541899481282-d53bffe3c35d"),
        additional_images=_images(
            "1596563950733-e7ecb5dfce4a",
            "1556155092-490a1ba16284",
            "1635409921234-a0e70e39f2bb",
        ),
        features=frozenset({"Air conditioning", "Bluetooth", "LED headlights", "Rear parking sensors"}),
        rating=4.5,
        description="Compact, agile hatchback with great handling and low fuel consumption.",
    ),
    Vehicle(
        id="4",
        brand="Tesla",
        model="Model 3",
        year=2023,
        seats=5,
        transmission=Transmission.AUTOMATIC,
        fuel_type=FuelType.ELECTRIC,
        price_per_day=Decimal("2800"),
        available=True,
        image_url=_UNSPLASH.format("1560958089-b8a1929cea89"),
        additional_images=_images(
            "1554744512-d6c603f27c54",
            "1594502184342-2e111aafd46f",
            "1532974297617-c0f05fe48bff",
        ),
        features=frozenset({"Autopilot", "Panoramic roof", "Touchscreen display", "Fast charging"}),
        rating=4.9,
        description="Innovative electric car with cutting-edge technology and an impressive range.",
    ),
    Vehicle(
        id="5",
        brand="Mercedes-Benz",
        model="E-Class",
        year=2022,
        seats=5,
        transmission=Transmission.AUTOMATIC,
        fuel_type=FuelType.HYBRID,
        price_per_day=Decimal("3000"),
        available=False,
        image_url=_UNSPLASH.format("1549399542-7e3f8b79c341"),
        additional_images=_images(
            "1618843479313-40f8afb4b4d8",
            "1542362567-b07e54358753",
            "1603584173870-7f23fdae1b7a",
        ),
        features=frozenset(
            {"Massage seats", "Premium audio", "Adaptive suspension", "Head-up display"}
        ),
        rating=4.7,
        description="Executive sedan with a luxurious interior and advanced safety systems.",
    ),
)
