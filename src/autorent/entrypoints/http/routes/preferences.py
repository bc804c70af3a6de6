from fastapi import APIRouter, Depends, Response, status

from autorent.entrypoints.http.dependencies import get_preferences_store
from autorent.entrypoints.http.dtos.preferences import PreferencesDTO
from autorent.entrypoints.http.mappers.preferences_mapper import PreferencesMapper
from autorent.use_cases.catalog_preferences import CatalogPreferencesStore


router = APIRouter(tags=["Catalog preferences"])


@router.get(
    "/catalog/preferences",
    response_model=PreferencesDTO,
    summary="Restore catalog state",
    description="Search, filters, sort, view mode and page kept for the session in `X-Session-Id`.",
)
def get_preferences(
    store: CatalogPreferencesStore = Depends(get_preferences_store),
) -> PreferencesDTO:
    return PreferencesMapper.to_response(store.load())


@router.put(
    "/catalog/preferences",
    response_model=PreferencesDTO,
    summary="Save catalog state",
    description="""
    Store the catalog page state for the session.

    A changed search, filter set or sort resets the page to 1; the response
    carries the state as stored.
    """,
)
def put_preferences(
    body: PreferencesDTO,
    store: CatalogPreferencesStore = Depends(get_preferences_store),
) -> PreferencesDTO:
    preferences = PreferencesMapper.to_domain(body)

    stored = store.save(preferences)

    return PreferencesMapper.to_response(stored)


@router.delete(
    "/catalog/preferences",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset catalog state",
)
def delete_preferences(
    store: CatalogPreferencesStore = Depends(get_preferences_store),
) -> Response:
    store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
