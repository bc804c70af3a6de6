from __future__ import annotations

import json
from decimal import Decimal

import pytest

from autorent.adapters import preferences_snapshot
from autorent.adapters.preferences_snapshot import StoredFilters, StoredPreferences
from autorent.domain.catalog import FilterCriteria, PreferencesSnapshotError, SortKey, ViewMode
from autorent.domain.vehicle import FuelType


def test_filters_from_domain_drop_unset_dimensions() -> None:
    criteria = FilterCriteria(
        brand="BMW",
        fuel_types=frozenset({FuelType.HYBRID, FuelType.DIESEL}),
        features=frozenset(),
        min_price=Decimal("1000"),
    )

    stored = StoredFilters.from_domain(criteria)

    assert stored.brand == "BMW"
    assert stored.fuel_types == [FuelType.DIESEL, FuelType.HYBRID]
    assert stored.features is None
    assert stored.to_domain() == criteria.with_value("features", None)


def test_encode_writes_camel_case_and_skips_empty_filters() -> None:
    stored = StoredPreferences(
        search_query="bmw",
        filters=StoredFilters(min_year=2020),
        sort_by=SortKey.PRICE_ASC,
        view_mode=ViewMode.LIST,
        current_page=2,
    )

    payload = json.loads(preferences_snapshot.encode(stored))

    assert payload == {
        "searchQuery": "bmw",
        "filters": {"minYear": 2020},
        "sortBy": "price-asc",
        "viewMode": "list",
        "currentPage": 2,
    }


def test_decode_fills_defaults() -> None:
    stored = preferences_snapshot.decode('{"searchQuery": "golf"}')

    assert stored.search_query == "golf"
    assert stored.sort_by is SortKey.DEFAULT
    assert stored.view_mode is ViewMode.GRID
    assert stored.current_page == 1
    assert stored.filters.to_domain() == FilterCriteria()


@pytest.mark.parametrize(
    "raw",
    ["not valid json{", '{"sortBy": "cheapest"}', '{"currentPage": 0}', "[]"],
)
def test_decode_rejects_malformed_content(raw: str) -> None:
    with pytest.raises(PreferencesSnapshotError):
        preferences_snapshot.decode(raw)
