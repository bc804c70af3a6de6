"""SQL implementation of VehicleInventoryRepository."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from autorent.domain.vehicle import FuelType, Transmission, Vehicle
from autorent.infra.db.models.vehicle import VehicleRow
from autorent.ports.vehicle_inventory_repository import VehicleInventoryRepository


class SqlVehicleInventoryRepository(VehicleInventoryRepository):
    """
    SQLAlchemy implementation of VehicleInventoryRepository.

    - Reads the whole inventory ordered by insertion position
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    - Filtering, sorting and paging happen in the catalog query engine
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def list_all(self) -> list[Vehicle]:
        query = select(VehicleRow).order_by(VehicleRow.position, VehicleRow.id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        row = self._session.get(VehicleRow, vehicle_id)
        return self._to_domain(row) if row else None

    def add(self, vehicle: Vehicle) -> None:
        """
        Append a vehicle at the end of the inventory order.

        Raises:
            VehicleValidationError: If the vehicle breaks an inventory invariant
        """
        vehicle.validate()
        last_position = self._session.execute(select(func.max(VehicleRow.position))).scalar()
        self._session.add(self._to_row(vehicle, position=(last_position or 0) + 1))
        self._session.flush()

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Args:
            row: SQLAlchemy VehicleRow model

        Returns:
            Vehicle domain entity
        """
        return Vehicle(
            id=row.id,
            brand=row.brand,
            model=row.model,
            year=row.year,
            seats=row.seats,
            transmission=Transmission(row.transmission),
            fuel_type=FuelType(row.fuel_type),
            price_per_day=Decimal(row.price_per_day),
            available=row.available,
            image_url=row.image_url,
            additional_images=tuple(row.additional_images or ()),
            features=frozenset(row.features or ()),
            rating=row.rating,
            description=row.description,
        )

    def _to_row(self, vehicle: Vehicle, position: int) -> VehicleRow:
        return VehicleRow(
            id=vehicle.id,
            position=position,
            brand=vehicle.brand,
            model=vehicle.model,
            year=vehicle.year,
            seats=vehicle.seats,
            transmission=vehicle.transmission.value,
            fuel_type=vehicle.fuel_type.value,
            price_per_day=vehicle.price_per_day,
            available=vehicle.available,
            image_url=vehicle.image_url,
            additional_images=list(vehicle.additional_images),
            features=sorted(vehicle.features),
            rating=vehicle.rating,
            description=vehicle.description,
        )
