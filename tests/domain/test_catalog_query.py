"""
Test suite for the catalog query engine.

Runs search, filters, sorting, paging and the page selector window against
the bundled five-car fleet:

    id  car                     year  gearbox    fuel      price  rating
    1   Toyota Camry            2023  Automatic  Petrol    1500   4.8
    2   BMW X5                  2022  Automatic  Diesel    3200   4.9
    3   Volkswagen Golf         2021  Manual     Petrol    1200   4.5
    4   Tesla Model 3           2023  Automatic  Electric  2800   4.9
    5   Mercedes-Benz E-Class   2022  Automatic  Hybrid    3000   4.7
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import pytest

from autorent.domain.catalog import ELLIPSIS, FilterCriteria, SortKey
from autorent.domain.catalog_query import (
    apply_filters,
    build_pagination_window,
    count_pages,
    facet_options,
    paginate,
    search,
    sort_vehicles,
)
from autorent.domain.vehicle import FuelType, Transmission, Vehicle


def ids(vehicles: list[Vehicle]) -> list[str]:
    return [vehicle.id for vehicle in vehicles]


# ==============================================================================
# Search
# ==============================================================================


@pytest.mark.parametrize(
    "query,expected",
    [
        ("bmw", ["2"]),
        ("  GOLF ", ["3"]),
        ("model", ["4"]),
        ("e", ["3", "4", "5"]),
        ("lada", []),
    ],
)
def test_search_matches_brand_or_model_case_insensitively(
    fleet: list[Vehicle], query: str, expected: list[str]
) -> None:
    assert ids(search(fleet, query)) == expected


@pytest.mark.parametrize("query", [None, "", "   "])
def test_blank_search_returns_everything_in_order(fleet: list[Vehicle], query: str | None) -> None:
    result = search(fleet, query)

    assert ids(result) == ["1", "2", "3", "4", "5"]
    assert result is not fleet


# ==============================================================================
# Filters
# ==============================================================================


def test_filter_by_brand_is_exact(fleet: list[Vehicle]) -> None:
    assert ids(apply_filters(fleet, FilterCriteria(brand="BMW"))) == ["2"]
    assert apply_filters(fleet, FilterCriteria(brand="bmw")) == []


def test_empty_criteria_keep_everything(fleet: list[Vehicle]) -> None:
    criteria = FilterCriteria(
        brand="",
        transmission_types=frozenset(),
        fuel_types=frozenset(),
        features=frozenset(),
    )

    assert ids(apply_filters(fleet, criteria)) == ["1", "2", "3", "4", "5"]


def test_multi_value_fuel_filter_matches_any(fleet: list[Vehicle]) -> None:
    criteria = FilterCriteria(fuel_types=frozenset({FuelType.DIESEL, FuelType.HYBRID}))

    assert ids(apply_filters(fleet, criteria)) == ["2", "5"]


def test_multi_value_transmission_filter(fleet: list[Vehicle]) -> None:
    criteria = FilterCriteria(transmission_types=frozenset({Transmission.MANUAL}))

    assert ids(apply_filters(fleet, criteria)) == ["3"]


@pytest.mark.parametrize(
    "features,expected",
    [
        ({"Premium audio"}, ["2", "5"]),
        ({"Panoramic roof", "Autopilot"}, ["2", "4"]),
        ({"Jet engine"}, []),
    ],
)
def test_feature_filter_matches_any_listed_feature(
    fleet: list[Vehicle], features: set[str], expected: list[str]
) -> None:
    criteria = FilterCriteria(features=frozenset(features))

    assert ids(apply_filters(fleet, criteria)) == expected


def test_price_range_is_inclusive(fleet: list[Vehicle]) -> None:
    criteria = FilterCriteria(min_price=Decimal("1500"), max_price=Decimal("3000"))

    assert ids(apply_filters(fleet, criteria)) == ["1", "4", "5"]


def test_open_ended_ranges(fleet: list[Vehicle]) -> None:
    assert ids(apply_filters(fleet, FilterCriteria(min_price=Decimal("3000")))) == ["2", "5"]
    assert ids(apply_filters(fleet, FilterCriteria(min_year=2023))) == ["1", "4"]
    assert ids(apply_filters(fleet, FilterCriteria(max_year=2021))) == ["3"]


def test_zero_is_a_real_bound(fleet: list[Vehicle]) -> None:
    assert apply_filters(fleet, FilterCriteria(max_price=Decimal("0"))) == []


def test_dimensions_combine_with_and(fleet: list[Vehicle]) -> None:
    criteria = FilterCriteria(
        fuel_types=frozenset({FuelType.PETROL}),
        transmission=Transmission.MANUAL,
    )

    assert ids(apply_filters(fleet, criteria)) == ["3"]


def test_single_and_multi_value_constraints_are_independent(fleet: list[Vehicle]) -> None:
    criteria = FilterCriteria(
        transmission=Transmission.MANUAL,
        transmission_types=frozenset({Transmission.AUTOMATIC}),
    )

    assert apply_filters(fleet, criteria) == []


def test_contradictory_range_yields_empty_result(fleet: list[Vehicle]) -> None:
    criteria = FilterCriteria(min_price=Decimal("4000"), max_price=Decimal("1000"))

    assert apply_filters(fleet, criteria) == []


def test_vehicle_without_price_fails_price_bounds_only(
    make_vehicle: Callable[..., Vehicle],
) -> None:
    unpriced = make_vehicle("x", price_per_day=Decimal("NaN"))

    assert apply_filters([unpriced], FilterCriteria(min_price=Decimal("500"))) == []
    assert apply_filters([unpriced], FilterCriteria(brand="Toyota")) == [unpriced]


# ==============================================================================
# Sorting
# ==============================================================================


def test_price_ascending_scenario(fleet: list[Vehicle]) -> None:
    result = sort_vehicles(fleet, SortKey.PRICE_ASC)

    assert [v.price_per_day for v in result] == [
        Decimal("1200"),
        Decimal("1500"),
        Decimal("2800"),
        Decimal("3000"),
        Decimal("3200"),
    ]


@pytest.mark.parametrize(
    "key,expected",
    [
        (SortKey.DEFAULT, ["1", "2", "3", "4", "5"]),
        (SortKey.PRICE_DESC, ["2", "5", "4", "1", "3"]),
        (SortKey.YEAR_DESC, ["1", "4", "2", "5", "3"]),
        (SortKey.YEAR_ASC, ["3", "2", "5", "1", "4"]),
        (SortKey.RATING_DESC, ["2", "4", "1", "5", "3"]),
        (SortKey.NAME_ASC, ["2", "5", "4", "1", "3"]),
    ],
)
def test_sort_orders_keep_ties_in_input_order(
    fleet: list[Vehicle], key: SortKey, expected: list[str]
) -> None:
    assert ids(sort_vehicles(fleet, key)) == expected


def test_sort_accepts_wire_value(fleet: list[Vehicle]) -> None:
    assert ids(sort_vehicles(fleet, "price-asc")) == ["3", "1", "4", "5", "2"]


def test_unknown_sort_key_is_rejected(fleet: list[Vehicle]) -> None:
    with pytest.raises(ValueError):
        sort_vehicles(fleet, "cheapest")


def test_sort_does_not_mutate_input(fleet: list[Vehicle]) -> None:
    before = list(fleet)

    sort_vehicles(fleet, SortKey.PRICE_DESC)

    assert fleet == before


def test_missing_price_sorts_as_highest_observed(make_vehicle: Callable[..., Vehicle]) -> None:
    vehicles = [
        make_vehicle("a", price_per_day=Decimal("1000")),
        make_vehicle("c", price_per_day=Decimal("2000")),
        make_vehicle("b", price_per_day=Decimal("NaN")),
    ]

    assert ids(sort_vehicles(vehicles, SortKey.PRICE_ASC)) == ["a", "c", "b"]
    assert ids(sort_vehicles(vehicles, SortKey.PRICE_DESC)) == ["c", "b", "a"]


def test_missing_rating_never_raises(make_vehicle: Callable[..., Vehicle]) -> None:
    vehicles = [
        make_vehicle("a", rating=float("nan")),
        make_vehicle("b", rating=4.0),
    ]

    assert ids(sort_vehicles(vehicles, SortKey.RATING_DESC)) == ["a", "b"]


# ==============================================================================
# Paging
# ==============================================================================


def test_third_page_of_thirteen_holds_the_last_item(
    make_vehicle: Callable[..., Vehicle],
) -> None:
    vehicles = [make_vehicle(str(i)) for i in range(13)]

    assert ids(paginate(vehicles, page=3, page_size=6)) == ["12"]
    assert count_pages(13, 6) == 3


def test_page_past_the_end_is_empty(fleet: list[Vehicle]) -> None:
    assert paginate(fleet, page=2, page_size=6) == []


@pytest.mark.parametrize("total,page_size,expected", [(0, 6, 0), (12, 6, 2), (5, 4, 2), (1, 6, 1)])
def test_count_pages(total: int, page_size: int, expected: int) -> None:
    assert count_pages(total, page_size) == expected


# ==============================================================================
# Page selector window
# ==============================================================================


@pytest.mark.parametrize(
    "current,total,expected",
    [
        (1, 0, []),
        (1, 1, [1]),
        (3, 5, [1, 2, 3, 4, 5]),
        (1, 10, [1, 2, 3, ELLIPSIS, 10]),
        (3, 10, [1, 2, 3, ELLIPSIS, 10]),
        (4, 10, [1, ELLIPSIS, 3, 4, 5, ELLIPSIS, 10]),
        (5, 10, [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]),
        (8, 10, [1, ELLIPSIS, 8, 9, 10]),
        (10, 10, [1, ELLIPSIS, 8, 9, 10]),
        (4, 6, [1, ELLIPSIS, 4, 5, 6]),
    ],
)
def test_pagination_window(current: int, total: int, expected: list) -> None:
    assert build_pagination_window(current, total) == expected


def test_wider_window_shows_every_page() -> None:
    assert build_pagination_window(4, 7, max_visible=7) == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize(
    "current,total,max_visible,expected",
    [
        (1, 2, 1, [1, 2]),
        (2, 2, 0, [1, 2]),
        (1, 3, 2, [1, 2, 3]),
        (3, 3, 1, [1, 2, 3]),
        (2, 4, 2, [1, 2, 3, 4]),
    ],
)
def test_narrow_window_only_lists_existing_pages(
    current: int, total: int, max_visible: int, expected: list
) -> None:
    assert build_pagination_window(current, total, max_visible=max_visible) == expected


@pytest.mark.parametrize("total", range(6, 21))
def test_pagination_window_shape(total: int) -> None:
    """First and last page always shown; ellipsis only where pages are skipped."""
    for current in range(1, total + 1):
        items = build_pagination_window(current, total)

        assert items[0] == 1
        assert items[-1] == total
        assert current in items
        for before, item, after in zip(items, items[1:], items[2:]):
            if item == ELLIPSIS:
                assert isinstance(before, int) and isinstance(after, int)
                assert after - before > 1


# ==============================================================================
# Facets
# ==============================================================================


def test_facet_options_from_fleet(fleet: list[Vehicle]) -> None:
    facets = facet_options(fleet)

    assert facets.brands == ["Toyota", "BMW", "Volkswagen", "Tesla", "Mercedes-Benz"]
    assert facets.transmissions == [Transmission.AUTOMATIC, Transmission.MANUAL]
    assert facets.fuel_types == [
        FuelType.PETROL,
        FuelType.DIESEL,
        FuelType.ELECTRIC,
        FuelType.HYBRID,
    ]
    assert "Premium audio" in facets.features
    assert facets.features == sorted(facets.features)
    assert (facets.min_price, facets.max_price) == (Decimal("1200"), Decimal("3200"))
    assert (facets.min_year, facets.max_year) == (2021, 2023)


def test_facet_options_for_empty_inventory() -> None:
    facets = facet_options([])

    assert facets.brands == []
    assert facets.min_price is None
    assert facets.max_year is None


# ==============================================================================
# Properties
# ==============================================================================


@pytest.mark.parametrize("page_size", [1, 2, 4, 6, 13, 20])
def test_pages_concatenate_to_the_whole_list(
    make_vehicle: Callable[..., Vehicle], page_size: int
) -> None:
    vehicles = [make_vehicle(str(i)) for i in range(13)]
    pages = count_pages(len(vehicles), page_size)

    rebuilt = [v for page in range(1, pages + 1) for v in paginate(vehicles, page, page_size)]

    assert rebuilt == vehicles


@pytest.mark.parametrize(
    "criteria",
    [
        FilterCriteria(transmission=Transmission.AUTOMATIC, max_price=Decimal("3000")),
        FilterCriteria(features=frozenset({"Panoramic roof"}), min_year=2023),
        FilterCriteria(fuel_types=frozenset({FuelType.PETROL, FuelType.ELECTRIC})),
    ],
)
def test_filtered_records_are_a_subset_satisfying_every_constraint(
    fleet: list[Vehicle], criteria: FilterCriteria
) -> None:
    result = apply_filters(fleet, criteria)

    for vehicle in result:
        assert vehicle in fleet
        if criteria.transmission is not None:
            assert vehicle.transmission == criteria.transmission
        if criteria.fuel_types:
            assert vehicle.fuel_type in criteria.fuel_types
        if criteria.features:
            assert vehicle.features & criteria.features
        if criteria.max_price is not None:
            assert vehicle.price_per_day <= criteria.max_price
        if criteria.min_year is not None:
            assert vehicle.year >= criteria.min_year
