"""Catalog query engine.

Pure functions over an inventory list: search, filter, sort, paginate and the
page-selector window. Nothing here raises for empty or contradictory input;
an empty result is a valid outcome.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Callable, Sequence

from autorent.domain.catalog import (
    ELLIPSIS,
    FacetOptions,
    FilterCriteria,
    PageWindowItem,
    SortKey,
    is_unset,
)
from autorent.domain.vehicle import Vehicle


def search(inventory: Sequence[Vehicle], query: str | None) -> list[Vehicle]:
    """Case-insensitive substring match on brand or model."""
    if query is None or not query.strip():
        return list(inventory)

    needle = query.strip().casefold()
    return [
        vehicle
        for vehicle in inventory
        if needle in vehicle.brand.casefold() or needle in vehicle.model.casefold()
    ]


def apply_filters(vehicles: Sequence[Vehicle], criteria: FilterCriteria) -> list[Vehicle]:
    """AND across dimensions, match-any within multi-value dimensions."""
    return [vehicle for vehicle in vehicles if matches(vehicle, criteria)]


def matches(vehicle: Vehicle, criteria: FilterCriteria) -> bool:
    if not is_unset(criteria.brand) and vehicle.brand != criteria.brand:
        return False
    if not is_unset(criteria.transmission) and vehicle.transmission != criteria.transmission:
        return False
    if not is_unset(criteria.fuel_type) and vehicle.fuel_type != criteria.fuel_type:
        return False

    # Multi-value dimensions are independent of their single-value counterparts
    if (
        not is_unset(criteria.transmission_types)
        and vehicle.transmission not in criteria.transmission_types  # type: ignore[operator]
    ):
        return False
    if (
        not is_unset(criteria.fuel_types)
        and vehicle.fuel_type not in criteria.fuel_types  # type: ignore[operator]
    ):
        return False
    if not is_unset(criteria.features) and vehicle.features.isdisjoint(criteria.features):  # type: ignore[arg-type]
        return False

    # Open-ended ranges constrain one bound only (inclusive)
    has_price_bound = criteria.min_price is not None or criteria.max_price is not None
    if has_price_bound and _is_missing(vehicle.price_per_day):
        return False
    if criteria.min_price is not None and vehicle.price_per_day < criteria.min_price:
        return False
    if criteria.max_price is not None and vehicle.price_per_day > criteria.max_price:
        return False
    if criteria.min_year is not None and vehicle.year < criteria.min_year:
        return False
    if criteria.max_year is not None and vehicle.year > criteria.max_year:
        return False
    return True


# ==============================================================================
# Sorting
# ==============================================================================


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def _numeric_keys(vehicles: Sequence[Vehicle], attr: str) -> list[Any]:
    """
    Sort keys for a numeric field.

    Missing or NaN values take the maximum observed value of the field, so a
    record without a price never leads an ascending sort.
    """
    values = [getattr(vehicle, attr, None) for vehicle in vehicles]
    observed = [value for value in values if not _is_missing(value)]
    fallback = max(observed) if observed else 0
    return [fallback if _is_missing(value) else value for value in values]


def _name_keys(vehicles: Sequence[Vehicle]) -> list[Any]:
    return [vehicle.display_name.casefold() for vehicle in vehicles]


_SORT_SPECS: dict[SortKey, tuple[Callable[[Sequence[Vehicle]], list[Any]], bool]] = {
    SortKey.PRICE_ASC: (lambda vs: _numeric_keys(vs, "price_per_day"), False),
    SortKey.PRICE_DESC: (lambda vs: _numeric_keys(vs, "price_per_day"), True),
    SortKey.YEAR_DESC: (lambda vs: _numeric_keys(vs, "year"), True),
    SortKey.YEAR_ASC: (lambda vs: _numeric_keys(vs, "year"), False),
    SortKey.RATING_DESC: (lambda vs: _numeric_keys(vs, "rating"), True),
    SortKey.NAME_ASC: (_name_keys, False),
}


def sort_vehicles(vehicles: Sequence[Vehicle], key: SortKey | str) -> list[Vehicle]:
    """Stable sort; SortKey.DEFAULT keeps the input order."""
    sort_key = SortKey(key)
    if sort_key is SortKey.DEFAULT:
        return list(vehicles)

    key_fn, descending = _SORT_SPECS[sort_key]
    keys = key_fn(vehicles)
    # sorted() stays stable with reverse=True
    ordered = sorted(zip(keys, vehicles), key=lambda pair: pair[0], reverse=descending)
    return [vehicle for _, vehicle in ordered]


# ==============================================================================
# Pagination
# ==============================================================================


def paginate(vehicles: Sequence[Vehicle], page: int, page_size: int) -> list[Vehicle]:
    """1-based page slice; a page past the end is empty."""
    start = (page - 1) * page_size
    end = page * page_size
    return list(vehicles[start:end])


def count_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total > 0 else 0


def build_pagination_window(
    current_page: int, total_pages: int, max_visible: int = 5
) -> list[PageWindowItem]:
    """
    Page indices plus ellipsis markers for the page selector.

    Examples (10 pages, max_visible=5):
        page 2 -> [1, 2, 3, "ellipsis", 10]
        page 5 -> [1, "ellipsis", 4, 5, 6, "ellipsis", 10]
        page 9 -> [1, "ellipsis", 8, 9, 10]
    """
    if total_pages < 1:
        return []
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        window = [2, 3]
    elif current_page >= total_pages - 2:
        window = [total_pages - 2, total_pages - 1]
    else:
        window = [current_page - 1, current_page, current_page + 1]
    pages = sorted({1, *(p for p in window if 1 < p < total_pages), total_pages})

    items: list[PageWindowItem] = []
    for page in pages:
        if items and page - items[-1] > 1:  # type: ignore[operator]
            items.append(ELLIPSIS)
        items.append(page)
    return items


# ==============================================================================
# Facets
# ==============================================================================


def facet_options(inventory: Sequence[Vehicle]) -> FacetOptions:
    """Distinct filter values in first-seen order, plus observed ranges."""
    if not inventory:
        return FacetOptions(brands=[], transmissions=[], fuel_types=[], features=[])

    prices = [v.price_per_day for v in inventory if not _is_missing(v.price_per_day)]
    years = [v.year for v in inventory]
    return FacetOptions(
        brands=list(dict.fromkeys(v.brand for v in inventory)),
        transmissions=list(dict.fromkeys(v.transmission for v in inventory)),
        fuel_types=list(dict.fromkeys(v.fuel_type for v in inventory)),
        features=sorted({feature for v in inventory for feature in v.features}),
        min_price=min(prices) if prices else None,
        max_price=max(prices) if prices else None,
        min_year=min(years),
        max_year=max(years),
    )
