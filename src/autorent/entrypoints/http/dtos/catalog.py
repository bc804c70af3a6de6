from pydantic import BaseModel, ConfigDict, Field

from autorent.domain.catalog import SortKey, ViewMode
from autorent.domain.vehicle import FuelType, Transmission


class VehicleResponseDTO(BaseModel):
    id: str
    brand: str
    model: str
    year: int
    seats: int
    transmission: Transmission
    fuel_type: FuelType
    price_per_day: str
    available: bool
    image_url: str
    additional_images: list[str]
    features: list[str]
    rating: float
    description: str


class CatalogQueryDTO(BaseModel):
    """Query parameters for the catalog page."""

    q: str | None = Field(
        default=None,
        description="Free-text search on brand or model (case-insensitive substring)",
        examples=["bmw"],
    )
    brand: str | None = Field(default=None, description="Exact brand", examples=["BMW"])
    transmission: Transmission | None = Field(default=None, description="Exact gearbox type")
    fuel_type: FuelType | None = Field(default=None, description="Exact fuel type")
    transmission_types: list[Transmission] = Field(
        default_factory=list, description="Match any of these gearbox types"
    )
    fuel_types: list[FuelType] = Field(
        default_factory=list, description="Match any of these fuel types"
    )
    features: list[str] = Field(
        default_factory=list, description="Match vehicles with any of these features"
    )
    min_price: str | None = Field(
        default=None,
        description="Minimum price per day; out-of-range or malformed values are clamped",
        examples=["1000"],
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum price per day; out-of-range or malformed values are clamped",
        examples=["3000"],
    )
    min_year: str | None = Field(default=None, description="Minimum year (clamped)", examples=["2020"])
    max_year: str | None = Field(default=None, description="Maximum year (clamped)", examples=["2023"])
    sort: SortKey = Field(default=SortKey.DEFAULT, description="Sort order")
    view_mode: ViewMode = Field(
        default=ViewMode.GRID, description="grid shows 6 cars per page, list shows 4"
    )
    page: int = Field(default=1, description="1-based page number", ge=1)
    page_size: int | None = Field(
        default=None, description="Overrides the view mode page size", ge=1, le=100
    )
    max_visible_pages: int = Field(
        default=5, description="Page selector width before ellipsis kicks in", ge=3, le=15
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "q": "bmw",
                "fuel_types": ["Diesel", "Hybrid"],
                "min_price": "1000",
                "max_price": "3500",
                "sort": "price-asc",
                "page": 1,
            }
        }
    )


class CatalogResponseDTO(BaseModel):
    cars: list[VehicleResponseDTO]
    total: int
    page: int
    page_size: int
    total_pages: int
    pagination: list[int | str]


class FacetsResponseDTO(BaseModel):
    brands: list[str]
    transmissions: list[Transmission]
    fuel_types: list[FuelType]
    features: list[str]
    min_price: str | None = None
    max_price: str | None = None
    min_year: int | None = None
    max_year: int | None = None
