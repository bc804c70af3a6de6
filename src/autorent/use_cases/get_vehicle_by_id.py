"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from autorent.domain.errors import NotFoundError
from autorent.domain.vehicle import Vehicle
from autorent.ports.vehicle_inventory_repository import VehicleInventoryRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    """Response containing the requested vehicle."""

    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for the car detail page.

    Ids are opaque strings, so any value is accepted; an unknown id raises
    NotFoundError, which the HTTP layer renders as an explicit not-found state.
    """

    def __init__(self, inventory_repository: VehicleInventoryRepository) -> None:
        self._repository = inventory_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the get vehicle by ID use case.

        Raises:
            NotFoundError: If no vehicle has the given id
        """
        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Car", identifier=request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
