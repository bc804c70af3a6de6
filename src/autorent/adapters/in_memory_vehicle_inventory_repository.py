from __future__ import annotations

from typing import Iterable

from autorent.domain.vehicle import Vehicle
from autorent.ports.vehicle_inventory_repository import VehicleInventoryRepository


class InMemoryVehicleInventoryRepository(VehicleInventoryRepository):
    """
    Static inventory held in process memory.

    - Stores vehicles in insertion order
    - Validates every record on construction
    - Returns copies of its list so callers cannot reorder the source
    """

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles = list(vehicles)
        for vehicle in self._vehicles:
            vehicle.validate()

    def list_all(self) -> list[Vehicle]:
        return list(self._vehicles)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None
