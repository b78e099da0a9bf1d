"""
Pydantic models for world wonder records.

A ``Wonder`` is one catalog entry: its name, a short summary, where it
is, when it was completed and which lists it belongs to.  The
``time_period`` field is derived from ``build_year`` and stored
alongside it; the model refuses records where the two disagree, so a
loaded dataset can never serve an inconsistent period.

All models are frozen.  Sequences are stored as tuples so that a
wonder cannot be altered after the dataset has been loaded.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import urlparse

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)


class TimePeriod(str, Enum):
    """Human history time period of a wonder's completion."""

    PREHISTORIC = "Prehistoric"
    ANCIENT = "Ancient"
    CLASSICAL = "Classical"
    POST_CLASSICAL = "PostClassical"
    EARLY_MODERN = "EarlyModern"
    MODERN = "Modern"


class Category(str, Enum):
    """Lists and franchises a wonder can belong to."""

    # One of the "7 Wonders of the Ancient World"
    SEVEN_WONDERS = "SevenWonders"
    # Elected by the American Society of Civil Engineers in 1994
    SEVEN_MODERN_WONDERS = "SevenModernWonders"
    # Elected by online vote via the New7Wonders Foundation
    SEVEN_NEW_WONDERS = "SevenNewWonders"
    # Appears in the video game "Civilization V"
    CIV5 = "Civ5"
    # Appears in the video game "Civilization VI"
    CIV6 = "Civ6"

    @classmethod
    def game_categories(cls) -> Tuple["Category", ...]:
        """Return the categories that tag video game appearances."""
        return (cls.CIV5, cls.CIV6)


def derive_time_period(year: int) -> TimePeriod:
    """Map a signed build year (negative = BCE) to its time period.

    Break points follow https://en.wikipedia.org/wiki/Human_history.
    The function is total: every integer falls in exactly one period.
    """
    if year <= -3000:
        return TimePeriod.PREHISTORIC
    if year <= -800:
        return TimePeriod.ANCIENT
    if year <= 500:
        return TimePeriod.CLASSICAL
    if year <= 1500:
        return TimePeriod.POST_CLASSICAL
    if year <= 1800:
        return TimePeriod.EARLY_MODERN
    return TimePeriod.MODERN


def check_regular_text(value: str) -> str:
    """Reject leading/trailing, non-space or repeated whitespace."""
    if value.strip() != value:
        raise ValueError("contains leading or trailing whitespace")
    previous_space = False
    for char in value:
        if char.isspace():
            if char != " ":
                raise ValueError("contains whitespace other than plain spaces")
            if previous_space:
                raise ValueError("contains consecutive spaces")
            previous_space = True
        else:
            previous_space = False
    return value


def _check_url(value: str, prefix: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"'{value}' is not a valid URL")
    if not value.startswith(prefix):
        raise ValueError(f"'{value}' must start with '{prefix}'")
    return value


class Links(BaseModel):
    """Reference and image links attached to a wonder."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    wiki: str = Field(..., examples=["https://en.wikipedia.org/wiki/Great_Pyramid_of_Giza"])
    britannica: Optional[str] = None
    google_maps: Optional[str] = None
    trip_advisor: Optional[str] = None
    images: Tuple[str, ...] = Field(..., min_length=2)

    @field_validator("wiki")
    @classmethod
    def validate_wiki(cls, v: str) -> str:
        _check_url(v, "https://en.wikipedia.org/wiki/")
        if "#" in v:
            raise ValueError(f"wiki link selects a page element: {v}")
        return v

    @field_validator("britannica", "google_maps", "trip_advisor")
    @classmethod
    def validate_optional_links(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is None:
            return None
        prefixes = {
            "britannica": "https://www.britannica.com",
            "google_maps": "https://www.google.com/maps/place",
            "trip_advisor": "https://www.tripadvisor.com",
        }
        _check_url(v, prefixes[info.field_name])
        if "#" in v or "?" in v:
            raise ValueError(f"link carries a fragment or query parameters: {v}")
        return v

    @field_validator("images")
    @classmethod
    def validate_images(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        for image in v:
            _check_url(image, "https")
            if "?" in image:
                raise ValueError(f"image link carries query parameters: {image}")
        return v

    def all_links(self) -> Tuple[str, ...]:
        """Return every link of the bundle, skipping absent ones."""
        optional = (self.britannica, self.google_maps, self.trip_advisor)
        return (self.wiki,) + tuple(link for link in optional if link) + self.images


class Wonder(BaseModel):
    """A single world wonder."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=3, max_length=150, examples=["Great Pyramid of Giza"])
    summary: str = Field(
        ...,
        min_length=50,
        max_length=400,
        description="Short summary of a world wonder and what it is/was.",
    )
    location: str = Field(
        ...,
        min_length=3,
        max_length=150,
        description="Location / suspected location of a world wonder or its remains.",
        examples=["Giza, Egypt, Africa"],
    )
    build_year: int = Field(
        ...,
        ge=-32768,
        le=32767,
        description="Year / suspected year the wonder was completed (negative = BCE).",
    )
    time_period: TimePeriod = Field(
        ..., description="Time period matching the build year."
    )
    links: Links
    categories: Tuple[Category, ...] = Field(..., min_length=1)

    @field_validator("name", "summary", "location")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return check_regular_text(v)

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str) -> str:
        if "," not in v:
            raise ValueError(f"location must end with a continent: {v}")
        return v

    @field_validator("summary")
    @classmethod
    def validate_summary(cls, v: str) -> str:
        if not v.endswith((".", "!")):
            raise ValueError("summary must end with proper punctuation")
        return v

    @field_validator("build_year")
    @classmethod
    def validate_build_year(cls, v: int) -> int:
        if v > datetime.now().year:
            raise ValueError(f"build year exceeds current calendar year: {v}")
        return v

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: Tuple[Category, ...]) -> Tuple[Category, ...]:
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate categories: {[c.value for c in v]}")
        return v

    @model_validator(mode="after")
    def validate_time_period(self) -> "Wonder":
        expected = derive_time_period(self.build_year)
        if self.time_period != expected:
            raise ValueError(
                f"time period '{self.time_period.value}' does not match year "
                f"{self.build_year}, expected '{expected.value}'"
            )
        return self
