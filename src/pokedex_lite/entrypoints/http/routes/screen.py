from fastapi import APIRouter, Depends

from pokedex_lite.domain.entry import EntryQuery
from pokedex_lite.entrypoints.http.dependencies import get_coordinator
from pokedex_lite.entrypoints.http.dtos.screen import (
    QueryUpdateDTO,
    ScreenStateDTO,
    SearchRequestDTO,
    SelectEntryRequestDTO,
)
from pokedex_lite.entrypoints.http.error_responses import ErrorResponse
from pokedex_lite.entrypoints.http.mappers.screen_mapper import ScreenStateMapper
from pokedex_lite.use_cases.catalog_coordinator import CatalogCoordinator


router = APIRouter(
    prefix="/screen",
    tags=["Screen"],
    responses={
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)


@router.get(
    "",
    response_model=ScreenStateDTO,
    summary="Get screen state",
    description="Current snapshot of the catalog screen. Issues no upstream call.",
)
def get_screen(
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    return ScreenStateMapper.to_response(coordinator.state)


@router.post(
    "/initialize",
    response_model=ScreenStateDTO,
    summary="Load the first catalog page",
    description="""
    Fetches the first page of the catalog and replaces the list with it.

    Upstream failures are not errors here: the list simply stays as it was
    and the loading flag is reset.
    """,
)
async def initialize(
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    state = await coordinator.initialize()
    return ScreenStateMapper.to_response(state)


@router.post(
    "/load-more",
    response_model=ScreenStateDTO,
    summary="Append the next catalog page",
    description="""
    Call when the visible list nears its end. Does nothing while a page is
    already loading or once `has_more` is false.
    """,
)
async def load_more(
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    state = await coordinator.load_more()
    return ScreenStateMapper.to_response(state)


@router.post(
    "/search",
    response_model=ScreenStateDTO,
    summary="Search an entry by name",
    description="""
    Looks up a single entry (case-insensitive) and then its detail.

    An unknown name returns 200 with `view_mode` LIST and a `notice`.

    ## Example
    ```
    POST /v1/screen/search
    {"query": "Pikachu"}
    ```
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def search(
    body: SearchRequestDTO,
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    """Search endpoint following parse → validate → execute → map → return pattern."""
    EntryQuery(text=body.query).validate()
    coordinator.set_query(body.query)
    state = await coordinator.search(body.query)
    return ScreenStateMapper.to_response(state)


@router.post(
    "/select",
    response_model=ScreenStateDTO,
    summary="Select a list item",
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def select_entry(
    body: SelectEntryRequestDTO,
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    state = await coordinator.select_entry(body.name)
    return ScreenStateMapper.to_response(state)


@router.put(
    "/query",
    response_model=ScreenStateDTO,
    summary="Update the search text",
)
def set_query(
    body: QueryUpdateDTO,
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    state = coordinator.set_query(body.query)
    return ScreenStateMapper.to_response(state)


@router.post(
    "/clear-filter",
    response_model=ScreenStateDTO,
    summary="Return to the full list",
)
def clear_filter(
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    state = coordinator.clear_filter()
    return ScreenStateMapper.to_response(state)


@router.delete(
    "/notice",
    response_model=ScreenStateDTO,
    summary="Dismiss the current notice",
)
def dismiss_notice(
    coordinator: CatalogCoordinator = Depends(get_coordinator),
) -> ScreenStateDTO:
    state = coordinator.dismiss_notice()
    return ScreenStateMapper.to_response(state)
