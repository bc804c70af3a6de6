from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Final, Literal

from autorent.domain.errors import DomainError, ValidationError
from autorent.domain.vehicle import FuelType, Transmission


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class PreferencesSnapshotError(DomainError):
    """Raised when stored catalog preferences cannot be decoded."""

    error_code: str = "PREFERENCES_SNAPSHOT_INVALID"


# ==============================================================================
# Filter panel bounds
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Bounds:
    lower: Any
    upper: Any


PRICE_RANGE: Final = Bounds(lower=Decimal("500"), upper=Decimal("5000"))
YEAR_RANGE: Final = Bounds(lower=2000, upper=2023)
RENTAL_DAYS_RANGE: Final = Bounds(lower=1, upper=30)


def clamp(value: Any, bounds: Bounds) -> Any:
    """Clamp a control value to the nearest bound."""
    if value < bounds.lower:
        return bounds.lower
    if value > bounds.upper:
        return bounds.upper
    return value


# ==============================================================================
# Query types
# ==============================================================================


class SortKey(str, Enum):
    DEFAULT = "default"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    YEAR_DESC = "year-desc"
    YEAR_ASC = "year-asc"
    RATING_DESC = "rating-desc"
    NAME_ASC = "name-asc"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"

    @property
    def page_size(self) -> int:
        return 6 if self is ViewMode.GRID else 4


ELLIPSIS: Final = "ellipsis"

PageWindowItem = int | Literal["ellipsis"]


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Structured catalog filters.

    None, "" and empty sets all mean "no constraint on that dimension".
    """

    brand: str | None = None
    transmission: Transmission | None = None
    fuel_type: FuelType | None = None
    transmission_types: frozenset[Transmission] | None = None
    fuel_types: frozenset[FuelType] | None = None
    features: frozenset[str] | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_year: int | None = None
    max_year: int | None = None

    def with_value(self, key: str, value: Any) -> FilterCriteria:
        """Return a copy with one dimension changed; an empty value removes it."""
        if is_unset(value):
            value = None
        elif isinstance(value, (set, list, tuple)):
            value = frozenset(value)
        return replace(self, **{key: value})

    def active(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if not is_unset(getattr(self, f.name))
        }

    def active_count(self) -> int:
        return len(self.active())


def is_unset(value: Any) -> bool:
    if value is None or value == "":
        return True
    if isinstance(value, (set, frozenset, list, tuple)) and not value:
        return True
    return False


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    page_size: int = 6

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
        if self.page_size > 100:
            raise PagingValidationError("page_size must be <= 100")


@dataclass(frozen=True, slots=True)
class FacetOptions:
    """Values offered by the filter panel, derived from the inventory."""

    brands: list[str]
    transmissions: list[Transmission]
    fuel_types: list[FuelType]
    features: list[str]
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_year: int | None = None
    max_year: int | None = None


@dataclass(frozen=True, slots=True)
class CatalogPreferences:
    """Catalog page state remembered for one browsing session."""

    search_query: str = ""
    filters: FilterCriteria = field(default_factory=FilterCriteria)
    sort: SortKey = SortKey.DEFAULT
    view_mode: ViewMode = ViewMode.GRID
    page: int = 1

    @property
    def paging(self) -> Paging:
        return Paging(page=self.page, page_size=self.view_mode.page_size)

    def same_query(self, other: CatalogPreferences) -> bool:
        return (
            self.search_query == other.search_query
            and self.filters == other.filters
            and self.sort == other.sort
        )
