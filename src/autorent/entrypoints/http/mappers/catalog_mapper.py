from __future__ import annotations

from decimal import Decimal, InvalidOperation

from autorent.domain.catalog import (
    PRICE_RANGE,
    YEAR_RANGE,
    FacetOptions,
    FilterCriteria,
    Paging,
    clamp,
    is_unset,
)
from autorent.domain.vehicle import Vehicle
from autorent.entrypoints.http.dtos.catalog import (
    CatalogQueryDTO,
    CatalogResponseDTO,
    FacetsResponseDTO,
    VehicleResponseDTO,
)
from autorent.use_cases.query_catalog import QueryCatalogRequest, QueryCatalogResponse


def parse_price(raw: str | None, fallback: Decimal) -> Decimal | None:
    """
    Parse a price control value, clamped to PRICE_RANGE.

    Blank input means no constraint; malformed input falls back to the given
    bound of the range.
    """
    if raw is None or is_unset(raw.strip()):
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return fallback
    if not value.is_finite():
        return fallback
    return clamp(value, PRICE_RANGE)


def parse_year(raw: str | None, fallback: int) -> int | None:
    """Parse a year control value, clamped to YEAR_RANGE."""
    if raw is None or is_unset(raw.strip()):
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return fallback
    return clamp(value, YEAR_RANGE)


class CatalogMapper:
    """Maps between REST DTOs and domain models for the catalog."""

    @staticmethod
    def to_domain_filters(dto: CatalogQueryDTO) -> FilterCriteria:
        """
        Converts query params to domain filters.

        Range controls are clamped rather than rejected: a malformed minimum
        becomes the lower bound, a malformed maximum the upper bound.
        """
        return FilterCriteria(
            brand=dto.brand or None,
            transmission=dto.transmission,
            fuel_type=dto.fuel_type,
            transmission_types=frozenset(dto.transmission_types) or None,
            fuel_types=frozenset(dto.fuel_types) or None,
            features=frozenset(f for f in dto.features if f) or None,
            min_price=parse_price(dto.min_price, PRICE_RANGE.lower),
            max_price=parse_price(dto.max_price, PRICE_RANGE.upper),
            min_year=parse_year(dto.min_year, YEAR_RANGE.lower),
            max_year=parse_year(dto.max_year, YEAR_RANGE.upper),
        )

    @staticmethod
    def to_domain_paging(dto: CatalogQueryDTO) -> Paging:
        page_size = dto.page_size or dto.view_mode.page_size
        return Paging(page=dto.page, page_size=page_size)

    @staticmethod
    def to_domain_request(dto: CatalogQueryDTO) -> QueryCatalogRequest:
        return QueryCatalogRequest(
            query=dto.q,
            filters=CatalogMapper.to_domain_filters(dto),
            sort=dto.sort,
            paging=CatalogMapper.to_domain_paging(dto),
            max_visible_pages=dto.max_visible_pages,
        )

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """Decimal → str at the boundary; features in a stable order."""
        return VehicleResponseDTO(
            id=vehicle.id,
            brand=vehicle.brand,
            model=vehicle.model,
            year=vehicle.year,
            seats=vehicle.seats,
            transmission=vehicle.transmission,
            fuel_type=vehicle.fuel_type,
            price_per_day=str(vehicle.price_per_day),
            available=vehicle.available,
            image_url=vehicle.image_url,
            additional_images=list(vehicle.additional_images),
            features=sorted(vehicle.features),
            rating=vehicle.rating,
            description=vehicle.description,
        )

    @staticmethod
    def to_response(result: QueryCatalogResponse) -> CatalogResponseDTO:
        return CatalogResponseDTO(
            cars=[CatalogMapper.to_vehicle_response(v) for v in result.vehicles],
            total=result.total_count,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            pagination=list(result.pagination),
        )

    @staticmethod
    def to_facets_response(facets: FacetOptions) -> FacetsResponseDTO:
        return FacetsResponseDTO(
            brands=facets.brands,
            transmissions=facets.transmissions,
            fuel_types=facets.fuel_types,
            features=facets.features,
            min_price=str(facets.min_price) if facets.min_price is not None else None,
            max_price=str(facets.max_price) if facets.max_price is not None else None,
            min_year=facets.min_year,
            max_year=facets.max_year,
        )
