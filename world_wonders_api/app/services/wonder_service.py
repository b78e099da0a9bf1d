"""
Query service for world wonders.

``WonderService`` holds the filtering, sorting and selection logic
behind every wonder endpoint.  Its methods are pure: they take a
sequence of wonders (usually ``WonderStore.all()``) and return new
lists or single wonders, never touching the input.  Failures are
raised as ``WonderError`` subclasses and left to the caller to
report; the service does not log.
"""

import random
from typing import List, Optional, Sequence

from ..core.errors import ConflictingLimitParams, NoMatchingName, NoWondersLeft
from ..schemas.query import FilterSpec, SortBy, SortSpec
from ..schemas.wonder import Category, TimePeriod, Wonder

# Shared by all requests.  ``Random.choice`` draws independently per
# call and needs no extra locking.
_rng = random.Random()


def slugify(name: str) -> str:
    """Return the lookup key for a wonder name.

    ``"Great Pyramid of Giza"`` becomes ``"great-pyramid-of-giza"``.
    """
    return name.lower().replace(" ", "-")


class WonderService:
    """Filtering, sorting and selection over a wonder collection."""

    @classmethod
    def filter_wonders(cls, wonders: Sequence[Wonder], spec: FilterSpec) -> List[Wonder]:
        """Return the wonders matching every field set in ``spec``.

        Raises ``ConflictingLimitParams`` if both year limits are given
        and the lower one is greater, before anything is filtered.
        Raises ``NoWondersLeft`` if nothing survives.  Survivors keep
        their relative order.
        """
        result = cls.filter_wonders_lenient(wonders, spec)
        if not result:
            raise NoWondersLeft()
        return result

    @classmethod
    def filter_wonders_lenient(cls, wonders: Sequence[Wonder], spec: FilterSpec) -> List[Wonder]:
        """Like :meth:`filter_wonders`, but an empty result is returned as is.

        Intended for listings where "nothing matched" is a valid answer.
        Conflicting year limits are still an error.
        """
        lower, upper = spec.lower_limit, spec.upper_limit
        if lower is not None and upper is not None and lower > upper:
            raise ConflictingLimitParams(lower, upper)

        name = spec.name.lower() if spec.name is not None else None
        location = spec.location.lower() if spec.location is not None else None

        def matches(w: Wonder) -> bool:
            if name is not None and name not in w.name.lower():
                return False
            if location is not None and location not in w.location.lower():
                return False
            if spec.time_period is not None and w.time_period != spec.time_period:
                return False
            if spec.category is not None and spec.category not in w.categories:
                return False
            if lower is not None and w.build_year < lower:
                return False
            if upper is not None and w.build_year > upper:
                return False
            return True

        return [w for w in wonders if matches(w)]

    @classmethod
    def sort_wonders(cls, wonders: Sequence[Wonder], spec: SortSpec) -> List[Wonder]:
        """Return ``wonders`` ordered according to ``spec``.

        Both orderings are stable.  ``reverse`` flips the sorted list
        as a last step and is ignored when ``sort_by`` is not set.
        """
        result = list(wonders)
        if spec.sort_by is None:
            return result

        if spec.sort_by is SortBy.BUILD_YEAR:
            result.sort(key=lambda w: w.build_year)
        elif spec.sort_by is SortBy.ALPHABETICAL:
            result.sort(key=lambda w: w.name)
        else:
            raise ValueError(f"Unhandled sort option: {spec.sort_by!r}")

        if spec.reverse:
            result.reverse()
        return result

    @classmethod
    def pick_oldest(cls, wonders: Sequence[Wonder]) -> Wonder:
        """Return the least recently built wonder (first one on ties)."""
        if not wonders:
            raise NoWondersLeft()
        return min(wonders, key=lambda w: w.build_year)

    @classmethod
    def pick_youngest(cls, wonders: Sequence[Wonder]) -> Wonder:
        """Return the most recently built wonder (first one on ties)."""
        if not wonders:
            raise NoWondersLeft()
        return max(wonders, key=lambda w: w.build_year)

    @classmethod
    def pick_random(
        cls, wonders: Sequence[Wonder], rng: Optional[random.Random] = None
    ) -> Wonder:
        """Return a uniformly chosen wonder."""
        if not wonders:
            raise NoWondersLeft()
        return (rng or _rng).choice(wonders)

    @classmethod
    def find_by_slug(cls, wonders: Sequence[Wonder], slug: str) -> Wonder:
        """Return the wonder whose slugified name equals ``slug``.

        Raises ``NoMatchingName`` if there is none.
        """
        for w in wonders:
            if slugify(w.name) == slug:
                return w
        raise NoMatchingName(slug)

    @classmethod
    def list_categories(cls, exclude_games: bool = False) -> List[Category]:
        """Return all categories, optionally without the video game ones."""
        games = Category.game_categories()
        return [c for c in Category if not (exclude_games and c in games)]

    @classmethod
    def list_time_periods(cls) -> List[TimePeriod]:
        """Return all time periods, oldest first."""
        return list(TimePeriod)

    @classmethod
    def list_sort_options(cls) -> List[SortBy]:
        """Return all supported orderings."""
        return list(SortBy)
