"""
Wonder endpoints for API v0.

Every route reads from the shared ``WonderStore`` and delegates the
actual work to ``WonderService``.  Listing routes (``/`` and
``/count``) treat "nothing matched" as a valid, empty answer; routes
returning a single wonder report it as a bad request instead.
Service errors propagate to the ``WonderError`` handler registered in
``main.py``.  Each route is rate limited per client; slowapi needs the
``request`` argument to find the client address.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from world_wonders_api.app.api.deps import filter_params, get_store, sort_params
from world_wonders_api.app.core.rate_limit import WONDER_ROUTE_LIMIT, limiter
from world_wonders_api.app.schemas.error import ErrorResponse
from world_wonders_api.app.schemas.query import FilterSpec, SortBy, SortSpec
from world_wonders_api.app.schemas.wonder import Category, TimePeriod, Wonder
from world_wonders_api.app.services.wonder_service import WonderService
from world_wonders_api.app.services.wonder_store import WonderStore

router = APIRouter()

RATE_LIMITED = {429: {"model": ErrorResponse, "description": "Too many requests"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Bad request"}, **RATE_LIMITED}


@router.get("/", response_model=List[Wonder], responses=BAD_REQUEST)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def list_wonders(
    request: Request,
    filters: FilterSpec = Depends(filter_params),
    sorting: SortSpec = Depends(sort_params),
    store: WonderStore = Depends(get_store),
) -> List[Wonder]:
    """Get all wonders after applying filters and sort methods defined by query parameters."""
    wonders = WonderService.filter_wonders_lenient(store.all(), filters)
    return WonderService.sort_wonders(wonders, sorting)


@router.get("/count", response_model=int, responses=BAD_REQUEST)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def count_wonders(
    request: Request,
    filters: FilterSpec = Depends(filter_params),
    store: WonderStore = Depends(get_store),
) -> int:
    """Get the number of wonders left after applying filters."""
    return len(WonderService.filter_wonders_lenient(store.all(), filters))


@router.get("/categories", response_model=List[Category], responses=BAD_REQUEST)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def list_categories(
    request: Request,
    exclude_games: Optional[bool] = Query(None, description="Leave out video game categories"),
) -> List[Category]:
    """Get all available wonder categories."""
    return WonderService.list_categories(exclude_games=bool(exclude_games))


@router.get("/time-periods", response_model=List[TimePeriod], responses=RATE_LIMITED)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def list_time_periods(request: Request) -> List[TimePeriod]:
    """Get all human history time periods used for construction dates."""
    return WonderService.list_time_periods()


@router.get("/sort-by", response_model=List[SortBy], responses=RATE_LIMITED)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def list_sort_options(request: Request) -> List[SortBy]:
    """Get all valid options for sorting wonders."""
    return WonderService.list_sort_options()


@router.get("/random", response_model=Wonder, responses=BAD_REQUEST)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def random_wonder(
    request: Request,
    filters: FilterSpec = Depends(filter_params),
    store: WonderStore = Depends(get_store),
) -> Wonder:
    """Get a random wonder, after filtering wonders based on provided query parameters."""
    wonders = WonderService.filter_wonders(store.all(), filters)
    return WonderService.pick_random(wonders)


@router.get("/oldest", response_model=Wonder, responses=BAD_REQUEST)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def oldest_wonder(
    request: Request,
    filters: FilterSpec = Depends(filter_params),
    store: WonderStore = Depends(get_store),
) -> Wonder:
    """Get the oldest (least recently built) wonder matching the filters."""
    wonders = WonderService.filter_wonders(store.all(), filters)
    return WonderService.pick_oldest(wonders)


@router.get("/youngest", response_model=Wonder, responses=BAD_REQUEST)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def youngest_wonder(
    request: Request,
    filters: FilterSpec = Depends(filter_params),
    store: WonderStore = Depends(get_store),
) -> Wonder:
    """Get the youngest (most recently built) wonder matching the filters."""
    wonders = WonderService.filter_wonders(store.all(), filters)
    return WonderService.pick_youngest(wonders)


@router.get("/name/{name}", response_model=Wonder, responses=BAD_REQUEST)
@limiter.limit(WONDER_ROUTE_LIMIT)
async def wonder_by_name(
    request: Request, name: str, store: WonderStore = Depends(get_store)
) -> Wonder:
    """Get a specific wonder by name.

    The name is matched in lowercase with spaces replaced by ``-``,
    e.g. ``/name/great-pyramid-of-giza``.
    """
    return WonderService.find_by_slug(store.all(), name)
