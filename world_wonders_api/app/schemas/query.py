"""
Query inputs for the wonder engine.

``FilterSpec`` and ``SortSpec`` describe which wonders to keep and in
which order to return them.  The HTTP layer builds them from query
parameters, so by the time they reach the service every field is
either absent (``None``) or a well-typed value.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .wonder import Category, TimePeriod


class SortBy(str, Enum):
    """Available orderings for wonder listings."""

    BUILD_YEAR = "BuildYear"
    ALPHABETICAL = "Alphabetical"


class FilterSpec(BaseModel):
    """Filters applied to the wonder collection.

    All fields are optional and combined with a logical AND.  ``name``
    and ``location`` are case-insensitive substring matches;
    ``lower_limit`` and ``upper_limit`` are inclusive build year bounds.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    location: Optional[str] = None
    time_period: Optional[TimePeriod] = None
    category: Optional[Category] = None
    lower_limit: Optional[int] = None
    upper_limit: Optional[int] = None


class SortSpec(BaseModel):
    """Ordering applied to a wonder listing.

    ``reverse`` only has an effect when ``sort_by`` is set.
    """

    model_config = ConfigDict(frozen=True)

    sort_by: Optional[SortBy] = None
    reverse: bool = False
