from typing import Annotated

from fastapi import APIRouter, Depends, Query

from autorent.entrypoints.http.dependencies import (
    get_get_vehicle_by_id_use_case,
    get_list_catalog_facets_use_case,
    get_query_catalog_use_case,
)
from autorent.entrypoints.http.dtos.catalog import (
    CatalogQueryDTO,
    CatalogResponseDTO,
    FacetsResponseDTO,
    VehicleResponseDTO,
)
from autorent.entrypoints.http.error_responses import ErrorResponse
from autorent.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from autorent.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from autorent.use_cases.list_catalog_facets import ListCatalogFacets
from autorent.use_cases.query_catalog import QueryCatalog


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CatalogResponseDTO,
    summary="Browse the rental catalog",
    description="""
    Search, filter, sort and page through the rental fleet.

    ## Search
    - `q` matches brand or model, case-insensitive substring

    ## Filters
    - All filters use AND semantics
    - `transmission_types`, `fuel_types` and `features` match any listed value
    - Price and year ranges are inclusive and clamped to the filter panel bounds

    ## Pagination
    - `view_mode=grid` shows 6 cars per page, `list` shows 4
    - `pagination` lists the page selector entries, with `"ellipsis"` for gaps

    ## Example
    ```
    GET /v1/cars?q=bmw&fuel_types=Diesel&sort=price-asc
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "cars": [
                            {
                                "id": "2",
                                "brand": "BMW",
                                "model": "X5",
                                "year": 2022,
                                "seats": 5,
                                "transmission": "Automatic",
                                "fuel_type": "Diesel",
                                "price_per_day": "3200",
                                "available": True,
                                "image_url": "https://images.example.com/bmw-x5.jpg",
                                "additional_images": [],
                                "features": ["Leather seats", "Premium audio"],
                                "rating": 4.9,
                                "description": "Premium SUV",
                            }
                        ],
                        "total": 1,
                        "page": 1,
                        "page_size": 6,
                        "total_pages": 1,
                        "pagination": [1],
                    }
                }
            },
        },
        422: {"model": ErrorResponse, "description": "Invalid query parameters"},
    },
)
def get_cars(
    query: Annotated[CatalogQueryDTO, Query()],
    use_case: QueryCatalog = Depends(get_query_catalog_use_case),
) -> CatalogResponseDTO:
    """Catalog endpoint following parse → execute → map → return pattern."""
    request = CatalogMapper.to_domain_request(query)

    result = use_case.execute(request)

    return CatalogMapper.to_response(result)


@router.get(
    "/cars/facets",
    response_model=FacetsResponseDTO,
    summary="Filter panel options",
    description="Brands, gearbox types, fuel types, features and value ranges present in the fleet.",
)
def get_car_facets(
    use_case: ListCatalogFacets = Depends(get_list_catalog_facets_use_case),
) -> FacetsResponseDTO:
    return CatalogMapper.to_facets_response(use_case.execute())


@router.get(
    "/cars/{car_id}",
    response_model=VehicleResponseDTO,
    summary="Car details",
    responses={404: {"model": ErrorResponse, "description": "Car not found"}},
)
def get_car(
    car_id: str,
    use_case: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=car_id))
    return CatalogMapper.to_vehicle_response(result.vehicle)
