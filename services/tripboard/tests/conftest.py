"""
Shared test fixtures for the Tripboard test suite.

Provides:
- factory functions for core records (Activity, CityStop, Day)
- a small two-city trip state
- a store with a deterministic id factory
"""

from __future__ import annotations

import itertools
from datetime import date
from typing import Any

import pytest

from services.tripboard.models.itinerary import (
    Activity,
    ActivityCategory,
    CityStop,
    Day,
    ItineraryState,
    TimeOfDay,
)
from services.tripboard.store.itinerary_store import ItineraryStore
from services.tripboard.store.reducers import build_state

_counter = itertools.count(1)


def _gen_id(prefix: str) -> str:
    return f"{prefix}-{next(_counter)}"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def make_activity(**overrides: Any) -> Activity:
    """Factory for Activity records."""
    base: dict[str, Any] = {
        "id": _gen_id("act"),
        "city_or_region": "Hoi An",
        "title": "Test Activity",
        "description": "",
        "category": ActivityCategory.CULTURE,
        "estimated_duration_hours": 2.0,
        "recommended_time_of_day": TimeOfDay.FLEXIBLE,
        "notes": None,
        "link": None,
        "is_interested": False,
    }
    base.update(overrides)
    return Activity(**base)


def make_city_stop(**overrides: Any) -> CityStop:
    """Factory for CityStop records."""
    base: dict[str, Any] = {
        "id": _gen_id("stop"),
        "name": "Hoi An",
        "start_date": date(2026, 3, 10),
        "end_date": date(2026, 3, 12),
        "region": None,
    }
    base.update(overrides)
    return CityStop(**base)


def make_day(activities: tuple[Activity, ...] = (), **overrides: Any) -> Day:
    """Factory for Day records. Hours always come from the activities."""
    base: dict[str, Any] = {
        "id": _gen_id("day"),
        "date": date(2026, 3, 10),
        "city_or_region": "Hoi An",
        "scheduled_activities": tuple(activities),
    }
    base.update(overrides)
    return Day(**base)


def sequential_ids():
    """Id factory yielding "<prefix>-new-1", "<prefix>-new-2", ..."""
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}-new-{next(counter)}"


# ---------------------------------------------------------------------------
# Trip fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def hoian_stop() -> CityStop:
    return make_city_stop(id="hoian", name="Hoi An", start_date=date(2026, 3, 10), end_date=date(2026, 3, 12))


@pytest.fixture
def hanoi_stop() -> CityStop:
    return make_city_stop(id="hanoi", name="Hanoi", start_date=date(2026, 3, 17), end_date=date(2026, 3, 18))


@pytest.fixture
def trip_activities() -> list[Activity]:
    return [
        make_activity(id="hoian-anchor", city_or_region="Hoi An", category=ActivityCategory.ANCHOR,
                      estimated_duration_hours=3.0),
        make_activity(id="hoian-food", city_or_region="Hoi An", category=ActivityCategory.FOOD,
                      estimated_duration_hours=4.0),
        make_activity(id="hoian-relax", city_or_region="Hoi An", category=ActivityCategory.RELAX,
                      estimated_duration_hours=1.5),
        make_activity(id="hanoi-anchor", city_or_region="Hanoi", category=ActivityCategory.ANCHOR,
                      estimated_duration_hours=3.0),
        make_activity(id="hanoi-night", city_or_region="Hanoi", category=ActivityCategory.NIGHT,
                      estimated_duration_hours=2.0),
    ]


@pytest.fixture
def trip_state(hoian_stop, hanoi_stop, trip_activities) -> ItineraryState:
    """Hoi An 03-10..03-12 then Hanoi 03-17..03-18, five activities, empty days."""
    return build_state([hanoi_stop, hoian_stop], trip_activities)


@pytest.fixture
def store(trip_state) -> ItineraryStore:
    return ItineraryStore(trip_state, id_factory=sequential_ids(), budget=10.0)
