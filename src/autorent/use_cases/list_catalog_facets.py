from __future__ import annotations

from autorent.domain.catalog import FacetOptions
from autorent.domain.catalog_query import facet_options
from autorent.ports.vehicle_inventory_repository import VehicleInventoryRepository


class ListCatalogFacets:
    """Options for the filter panel: brands, gearboxes, fuels, features, ranges."""

    def __init__(self, inventory_repository: VehicleInventoryRepository) -> None:
        self._repository = inventory_repository

    def execute(self) -> FacetOptions:
        return facet_options(self._repository.list_all())
