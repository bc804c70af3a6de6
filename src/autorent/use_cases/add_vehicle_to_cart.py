from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from autorent.domain.cart import CartLineItem, CartValidationError
from autorent.use_cases.cart_ledger import CartLedger
from autorent.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest


@dataclass(frozen=True, slots=True)
class AddVehicleToCartRequest:
    vehicle_id: str
    days: int
    start_date: date


class AddVehicleToCart:
    """
    "Book" button on the detail and list pages.

    Looks the vehicle up in the inventory and upserts it into the cart. The
    cart keeps this copy of the vehicle, locking today's price.
    """

    def __init__(self, get_vehicle_by_id: GetVehicleById, ledger: CartLedger) -> None:
        self._get_vehicle_by_id = get_vehicle_by_id
        self._ledger = ledger

    def execute(self, request: AddVehicleToCartRequest) -> CartLineItem:
        """
        Raises:
            NotFoundError: If the vehicle is not in the inventory
            CartValidationError: If the vehicle is not available or days < 1
        """
        vehicle = self._get_vehicle_by_id.execute(
            GetVehicleByIdRequest(vehicle_id=request.vehicle_id)
        ).vehicle

        if not vehicle.available:
            raise CartValidationError(
                errors=[
                    {
                        "field": "car_id",
                        "message": "Car is not available for rent",
                        "code": "CAR_UNAVAILABLE",
                    }
                ]
            )

        return self._ledger.add_or_update(vehicle, request.days, request.start_date)
