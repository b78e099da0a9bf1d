"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from world_wonders_api.app.core.rate_limit import limiter
from world_wonders_api.app.main import create_app
from world_wonders_api.app.schemas.wonder import Wonder, derive_time_period
from world_wonders_api.app.services.wonder_store import WonderStore


def make_record(
    name="Test Wonder",
    build_year=100,
    categories=("Civ5",),
    location="Somewhere, Testland, Europe",
    **overrides,
):
    """Build a valid raw wonder record; ``overrides`` replace top-level keys."""
    slug = name.replace(" ", "_")
    record = {
        "name": name,
        "summary": f"{name} is a wonder used by the test suite to exercise the query service.",
        "location": location,
        "build_year": build_year,
        "time_period": derive_time_period(build_year).value,
        "links": {
            "wiki": f"https://en.wikipedia.org/wiki/{slug}",
            "images": [
                f"https://upload.wikimedia.org/{slug}_1.jpg",
                f"https://upload.wikimedia.org/{slug}_2.jpg",
            ],
        },
        "categories": list(categories),
    }
    record.update(overrides)
    return record


SAMPLE_RECORDS = [
    make_record("Alpha Tower", 1900, ["SevenModernWonders"], "Paris, France, Europe"),
    make_record("beta gate", 1900, ["Civ5"], "Rome, Italy, Europe"),
    make_record("Gamma Temple", -500, ["SevenWonders", "Civ6"], "Athens, Greece, Europe"),
    make_record("Delta Pyramid", -2500, ["SevenWonders"], "Giza, Egypt, Africa"),
    make_record("Epsilon Wall", -500, ["Civ5"], "Beijing, China, Asia"),
    make_record("Zeta Bridge", 1200, ["Civ6"], "Roma Norte, Mexico, North America"),
]


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Give every test a fresh rate limit budget."""
    limiter.reset()
    yield


@pytest.fixture
def record_factory():
    """Return the ``make_record`` helper."""
    return make_record


@pytest.fixture
def sample_wonders():
    """A small synthetic collection with known ties and orderings."""
    return [Wonder.model_validate(r) for r in SAMPLE_RECORDS]


@pytest.fixture(scope="session")
def store():
    """The bundled dataset, loaded once per test session."""
    return WonderStore.load()


@pytest.fixture
def client(store):
    """Test client serving the bundled dataset."""
    return TestClient(create_app(store=store))


@pytest.fixture
def sample_client(sample_wonders):
    """Test client serving the synthetic collection."""
    return TestClient(create_app(store=WonderStore(sample_wonders)))


def names(wonders):
    return [w.name for w in wonders]
