"""
Shared FastAPI dependencies.

Handlers never reach for a global dataset: the ``WonderStore`` built
at startup lives on ``app.state`` and is injected through
``get_store``.  Filter and sort query parameters are parsed once here
and handed to handlers as ``FilterSpec`` / ``SortSpec`` values.
"""

from typing import Optional

from fastapi import Query, Request

from ..schemas.query import FilterSpec, SortBy, SortSpec
from ..schemas.wonder import Category, TimePeriod
from ..services.wonder_store import WonderStore

# Build years are stored as signed 16-bit integers
YEAR_MIN = -32768
YEAR_MAX = 32767


def get_store(request: Request) -> WonderStore:
    """Return the wonder store attached to the running application."""
    return request.app.state.store


def filter_params(
    name: Optional[str] = Query(
        None, min_length=1, max_length=150, description="Case-insensitive part of the name"
    ),
    location: Optional[str] = Query(
        None, min_length=1, max_length=150, description="Case-insensitive part of the location"
    ),
    time_period: Optional[TimePeriod] = Query(None),
    lower_limit: Optional[int] = Query(
        None, ge=YEAR_MIN, le=YEAR_MAX, description="Earliest build year (inclusive)"
    ),
    upper_limit: Optional[int] = Query(
        None, ge=YEAR_MIN, le=YEAR_MAX, description="Latest build year (inclusive)"
    ),
    category: Optional[Category] = Query(None),
) -> FilterSpec:
    return FilterSpec(
        name=name,
        location=location,
        time_period=time_period,
        category=category,
        lower_limit=lower_limit,
        upper_limit=upper_limit,
    )


def sort_params(
    sort_by: Optional[SortBy] = Query(None),
    sort_reverse: Optional[bool] = Query(
        None, description="Reverse the ordering; only used together with sort_by"
    ),
) -> SortSpec:
    return SortSpec(sort_by=sort_by, reverse=bool(sort_reverse))
