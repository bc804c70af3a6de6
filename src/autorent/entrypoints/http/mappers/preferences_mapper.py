from __future__ import annotations

from autorent.domain.catalog import (
    PRICE_RANGE,
    YEAR_RANGE,
    CatalogPreferences,
    FilterCriteria,
    clamp,
)
from autorent.entrypoints.http.dtos.preferences import FiltersDTO, PreferencesDTO
from autorent.entrypoints.http.mappers.catalog_mapper import parse_price


class PreferencesMapper:
    """Maps between the preferences DTO and CatalogPreferences."""

    @staticmethod
    def to_domain_filters(dto: FiltersDTO) -> FilterCriteria:
        criteria = FilterCriteria(
            min_price=parse_price(dto.min_price, PRICE_RANGE.lower),
            max_price=parse_price(dto.max_price, PRICE_RANGE.upper),
            min_year=clamp(dto.min_year, YEAR_RANGE) if dto.min_year is not None else None,
            max_year=clamp(dto.max_year, YEAR_RANGE) if dto.max_year is not None else None,
        )
        choices = dto.model_dump(
            exclude_none=True, exclude={"min_price", "max_price", "min_year", "max_year"}
        )
        for key, value in choices.items():
            criteria = criteria.with_value(key, value)
        return criteria

    @staticmethod
    def to_domain(dto: PreferencesDTO) -> CatalogPreferences:
        return CatalogPreferences(
            search_query=dto.search_query,
            filters=PreferencesMapper.to_domain_filters(dto.filters),
            sort=dto.sort,
            view_mode=dto.view_mode,
            page=dto.page,
        )

    @staticmethod
    def to_response(preferences: CatalogPreferences) -> PreferencesDTO:
        filters = {
            key: sorted(value) if isinstance(value, frozenset) else value
            for key, value in preferences.filters.active().items()
        }
        for key in ("min_price", "max_price"):
            if key in filters:
                filters[key] = str(filters[key])

        return PreferencesDTO(
            search_query=preferences.search_query,
            filters=FiltersDTO(**filters),
            sort=preferences.sort,
            view_mode=preferences.view_mode,
            page=preferences.page,
        )
