"""JSON snapshot format of the catalog page preferences."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from autorent.domain.catalog import FilterCriteria, PreferencesSnapshotError, SortKey, ViewMode
from autorent.domain.vehicle import FuelType, Transmission


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredFilters(_CamelModel):
    brand: str | None = None
    transmission: Transmission | None = None
    fuel_type: FuelType | None = None
    transmission_types: list[Transmission] | None = None
    fuel_types: list[FuelType] | None = None
    features: list[str] | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_year: int | None = None
    max_year: int | None = None

    @classmethod
    def from_domain(cls, criteria: FilterCriteria) -> StoredFilters:
        values = {
            key: sorted(value) if isinstance(value, frozenset) else value
            for key, value in criteria.active().items()
        }
        return cls(**values)

    def to_domain(self) -> FilterCriteria:
        criteria = FilterCriteria()
        for key, value in self.model_dump(exclude_none=True).items():
            criteria = criteria.with_value(key, value)
        return criteria


class StoredPreferences(_CamelModel):
    search_query: str = ""
    filters: StoredFilters = Field(default_factory=StoredFilters)
    sort_by: SortKey = SortKey.DEFAULT
    view_mode: ViewMode = ViewMode.GRID
    current_page: int = Field(default=1, ge=1)


def decode(raw: str) -> StoredPreferences:
    """
    Raises:
        PreferencesSnapshotError: If the value is not valid JSON or not preferences
    """
    try:
        return StoredPreferences.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise PreferencesSnapshotError(
            "Stored preferences could not be decoded", error_count=exc.error_count()
        ) from exc


def encode(preferences: StoredPreferences) -> str:
    return preferences.model_dump_json(by_alias=True, exclude_none=True)
