from __future__ import annotations

import logging
from dataclasses import dataclass, field

from autorent.domain.catalog import FilterCriteria, PageWindowItem, Paging, SortKey
from autorent.domain.catalog_query import (
    apply_filters,
    build_pagination_window,
    count_pages,
    paginate,
    search,
    sort_vehicles,
)
from autorent.domain.vehicle import Vehicle
from autorent.ports.vehicle_inventory_repository import VehicleInventoryRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_VISIBLE_PAGES = 5


@dataclass(frozen=True, slots=True)
class QueryCatalogRequest:
    query: str | None = None
    filters: FilterCriteria = field(default_factory=FilterCriteria)
    sort: SortKey = SortKey.DEFAULT
    paging: Paging = field(default_factory=Paging)
    max_visible_pages: int = DEFAULT_MAX_VISIBLE_PAGES


@dataclass(frozen=True, slots=True)
class QueryCatalogResponse:
    vehicles: list[Vehicle]
    total_count: int  # Matching vehicles before paging
    page: int
    page_size: int
    total_pages: int
    pagination: list[PageWindowItem]


class QueryCatalog:
    """
    Catalog listing: search → filters → stable sort → page.

    Empty or contradictory filters are not errors; they produce an empty page.
    Only paging parameters are validated.
    """

    def __init__(self, inventory_repository: VehicleInventoryRepository) -> None:
        self._repository = inventory_repository

    def execute(self, request: QueryCatalogRequest) -> QueryCatalogResponse:
        """
        Execute catalog query.

        Args:
            request: Search text, filters, sort key and paging

        Returns:
            Response with the requested page and pagination metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        request.paging.validate()

        matches = search(self._repository.list_all(), request.query)
        matches = apply_filters(matches, request.filters)
        matches = sort_vehicles(matches, request.sort)

        total_pages = count_pages(len(matches), request.paging.page_size)
        vehicles = paginate(matches, request.paging.page, request.paging.page_size)

        logger.debug(
            "Catalog query",
            extra={
                "query": request.query,
                "filters": request.filters.active(),
                "sort": request.sort.value,
                "total_count": len(matches),
            },
        )

        return QueryCatalogResponse(
            vehicles=vehicles,
            total_count=len(matches),
            page=request.paging.page,
            page_size=request.paging.page_size,
            total_pages=total_pages,
            pagination=build_pagination_window(
                request.paging.page, total_pages, request.max_visible_pages
            ),
        )
