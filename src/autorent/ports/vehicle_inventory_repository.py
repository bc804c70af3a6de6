from __future__ import annotations

from abc import ABC, abstractmethod

from autorent.domain.vehicle import Vehicle


class VehicleInventoryRepository(ABC):
    """
    Port for the rental inventory source.

    Implementations return vehicles in the insertion order of the source.
    The catalog "default" sort relies on that order being stable between calls.
    """

    @abstractmethod
    def list_all(self) -> list[Vehicle]:
        """Return every vehicle in insertion order."""
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """Return the vehicle with the given id, or None if it does not exist."""
        ...
