#!/usr/bin/env python3
"""
Seed the vehicles table with the bundled rental fleet.

- Idempotent: safe to run multiple times (clears before seeding)
- Keeps the bundled order, which drives the catalog "default" sort

Usage:
    pip install -e .
    DATABASE_URL=... python scripts/seed_vehicles.py
"""

from __future__ import annotations

import sys

from sqlalchemy import delete

from autorent.adapters.sql_vehicle_inventory_repository import SqlVehicleInventoryRepository
from autorent.infra.catalog_seed import DEFAULT_VEHICLES
from autorent.infra.db.models.vehicle import VehicleRow
from autorent.infra.db.session import get_session


def seed_vehicles() -> None:
    print(f"Seeding database with {len(DEFAULT_VEHICLES)} vehicles...")

    with get_session() as session:
        deleted_count = session.execute(delete(VehicleRow)).rowcount
        print(f"   Deleted {deleted_count} existing vehicles")

        repository = SqlVehicleInventoryRepository(session=session)
        for vehicle in DEFAULT_VEHICLES:
            repository.add(vehicle)
            print(
                f"   {vehicle.id}. {vehicle.display_name} {vehicle.year} - "
                f"{vehicle.price_per_day}/day ({vehicle.transmission.value}, {vehicle.fuel_type.value})"
            )

    print(f"Seeded {len(DEFAULT_VEHICLES)} vehicles")


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
