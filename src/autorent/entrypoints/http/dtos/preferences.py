from pydantic import BaseModel, Field

from autorent.domain.catalog import SortKey, ViewMode
from autorent.domain.vehicle import FuelType, Transmission


class FiltersDTO(BaseModel):
    brand: str | None = None
    transmission: Transmission | None = None
    fuel_type: FuelType | None = None
    transmission_types: list[Transmission] | None = None
    fuel_types: list[FuelType] | None = None
    features: list[str] | None = None
    min_price: str | None = Field(default=None, examples=["1000"])
    max_price: str | None = Field(default=None, examples=["3000"])
    min_year: int | None = None
    max_year: int | None = None


class PreferencesDTO(BaseModel):
    """Catalog page state kept for the browsing session."""

    search_query: str = ""
    filters: FiltersDTO = Field(default_factory=FiltersDTO)
    sort: SortKey = SortKey.DEFAULT
    view_mode: ViewMode = ViewMode.GRID
    page: int = Field(default=1, ge=1)
