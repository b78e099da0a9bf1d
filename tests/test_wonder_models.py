"""Tests for the wonder domain model."""

import pytest
from pydantic import ValidationError

from world_wonders_api.app.schemas.wonder import (
    Category,
    Links,
    TimePeriod,
    Wonder,
    check_regular_text,
    derive_time_period,
)


@pytest.mark.parametrize(
    "year,expected",
    [
        (-32768, TimePeriod.PREHISTORIC),
        (-3000, TimePeriod.PREHISTORIC),
        (-2999, TimePeriod.ANCIENT),
        (-800, TimePeriod.ANCIENT),
        (-799, TimePeriod.CLASSICAL),
        (0, TimePeriod.CLASSICAL),
        (500, TimePeriod.CLASSICAL),
        (501, TimePeriod.POST_CLASSICAL),
        (1500, TimePeriod.POST_CLASSICAL),
        (1501, TimePeriod.EARLY_MODERN),
        (1800, TimePeriod.EARLY_MODERN),
        (1801, TimePeriod.MODERN),
        (32767, TimePeriod.MODERN),
    ],
)
def test_derive_time_period_break_points(year, expected):
    """Each break point lands in the documented period."""
    assert derive_time_period(year) is expected


def test_derive_time_period_is_monotonic_over_i16_range():
    """Periods never go backwards as the year increases, so they tile without gaps."""
    order = list(TimePeriod)
    previous = order.index(derive_time_period(-32768))
    seen = {previous}
    for year in range(-32767, 32768):
        current = order.index(derive_time_period(year))
        assert current in (previous, previous + 1), f"jump at year {year}"
        seen.add(current)
        previous = current
    assert seen == set(range(len(order)))


def test_time_period_serialises_by_name():
    """Enum values match the names exposed by the API."""
    assert [p.value for p in TimePeriod] == [
        "Prehistoric",
        "Ancient",
        "Classical",
        "PostClassical",
        "EarlyModern",
        "Modern",
    ]


def test_game_categories():
    """Only the Civilization tags count as game categories."""
    assert Category.game_categories() == (Category.CIV5, Category.CIV6)


def test_valid_record_round_trips(record_factory):
    """A valid record parses and compares structurally."""
    record = record_factory("Sample Wonder", -100)
    first = Wonder.model_validate(record)
    second = Wonder.model_validate(record)
    assert first == second
    assert first.time_period is TimePeriod.CLASSICAL
    assert first.categories == (Category.CIV5,)
    assert first.model_dump(mode="json")["categories"] == ["Civ5"]


def test_wonder_is_frozen(record_factory):
    """Loaded wonders cannot be modified."""
    wonder = Wonder.model_validate(record_factory())
    with pytest.raises(ValidationError):
        wonder.name = "Changed"


def test_mismatched_time_period_rejected(record_factory):
    """The stored time period must match the build year."""
    record = record_factory(build_year=-3000, time_period="Ancient")
    with pytest.raises(ValidationError, match="does not match year -3000"):
        Wonder.model_validate(record)


@pytest.mark.parametrize(
    "overrides",
    [
        {"categories": []},
        {"categories": ["Civ5", "Civ5"]},
        {"categories": ["NotACategory"]},
        {"name": "ab"},
        {"name": " Leading space"},
        {"name": "Double  space"},
        {"name": "Tab\tinside"},
        {"location": "No continent here"},
        {"summary": "Too short."},
        {"summary": "A summary that is long enough but does not end with punctuation"},
        {"build_year": 40000},
        {"build_year": 9999, "time_period": "Modern"},
        {"extra_field": True},
    ],
)
def test_invalid_records_rejected(record_factory, overrides):
    """Each structural rule of a record is enforced."""
    record = record_factory(**overrides)
    with pytest.raises(ValidationError):
        Wonder.model_validate(record)


@pytest.mark.parametrize(
    "links",
    [
        {"wiki": "https://example.org/wiki/Thing", "images": ["https://a/1", "https://a/2"]},
        {"wiki": "https://en.wikipedia.org/wiki/Thing#History", "images": ["https://a/1", "https://a/2"]},
        {"wiki": "https://en.wikipedia.org/wiki/Thing", "images": ["https://a/1"]},
        {"wiki": "https://en.wikipedia.org/wiki/Thing", "images": ["http://a/1", "https://a/2"]},
        {"wiki": "https://en.wikipedia.org/wiki/Thing", "images": ["https://a/1?size=2", "https://a/2"]},
        {
            "wiki": "https://en.wikipedia.org/wiki/Thing",
            "britannica": "https://www.example.com/topic/Thing",
            "images": ["https://a/1", "https://a/2"],
        },
        {
            "wiki": "https://en.wikipedia.org/wiki/Thing",
            "google_maps": "https://www.google.com/maps/place/Thing?hl=en",
            "images": ["https://a/1", "https://a/2"],
        },
        {
            "wiki": "https://en.wikipedia.org/wiki/Thing",
            "trip_advisor": "https://www.tripadvisor.com/Thing#reviews",
            "images": ["https://a/1", "https://a/2"],
        },
    ],
)
def test_invalid_links_rejected(links):
    """Every link slot enforces its prefix and forbidden characters."""
    with pytest.raises(ValidationError):
        Links.model_validate(links)


def test_all_links_skips_missing_optional_links():
    """``all_links`` lists the wiki link, present optional links, then images."""
    links = Links.model_validate(
        {
            "wiki": "https://en.wikipedia.org/wiki/Thing",
            "trip_advisor": "https://www.tripadvisor.com/Thing",
            "images": ["https://a/1", "https://a/2"],
        }
    )
    assert links.all_links() == (
        "https://en.wikipedia.org/wiki/Thing",
        "https://www.tripadvisor.com/Thing",
        "https://a/1",
        "https://a/2",
    )


def test_check_regular_text_accepts_single_spaces():
    """Plain single spaces are fine."""
    assert check_regular_text("Great Pyramid of Giza") == "Great Pyramid of Giza"
