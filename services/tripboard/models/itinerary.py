"""
Core itinerary domain types.

Everything here is immutable. Operations never edit a record in place; they
build a replacement (dataclasses.replace / Day.with_activities) and the store
swaps in a whole new ItineraryState.

Join keys:
  Activity.city_or_region and Day.city_or_region reference CityStop.name,
  not CityStop.id. Stop names are unique at all times.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from services.tripboard.budget.hours import recompute_hours


class ActivityCategory(str, Enum):
    FOOD = "food"
    CULTURE = "culture"
    OUTDOORS = "outdoors"
    NIGHT = "night"
    ANCHOR = "anchor"
    RELAX = "relax"
    HISTORY = "history"
    SHOPPING = "shopping"


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    FLEXIBLE = "flexible"


class Region(str, Enum):
    NORTH = "North"
    CENTRAL = "Central"
    SOUTH = "South"


@dataclass(frozen=True)
class Activity:
    """A candidate thing to do in one city."""
    id: str
    city_or_region: str
    title: str
    description: str
    category: ActivityCategory
    estimated_duration_hours: float
    recommended_time_of_day: Optional[TimeOfDay] = None
    notes: Optional[str] = None
    link: Optional[str] = None
    is_interested: bool = False


@dataclass(frozen=True)
class CityStop:
    """A city on the route with an inclusive date range."""
    id: str
    name: str
    start_date: date
    end_date: date
    region: Optional[Region] = None


@dataclass(frozen=True)
class Day:
    """
    One calendar day of the trip.

    total_scheduled_hours is not an init argument. It is computed from
    scheduled_activities in __post_init__, so a Day can never carry a stale
    total.
    """
    id: str
    date: date
    city_or_region: str
    scheduled_activities: tuple[Activity, ...] = ()
    total_scheduled_hours: float = field(init=False)

    def __post_init__(self) -> None:
        activities = tuple(self.scheduled_activities)
        object.__setattr__(self, "scheduled_activities", activities)
        object.__setattr__(self, "total_scheduled_hours", recompute_hours(activities))

    @property
    def activity_ids(self) -> list[str]:
        return [a.id for a in self.scheduled_activities]

    def has_activity(self, activity_id: str) -> bool:
        return any(a.id == activity_id for a in self.scheduled_activities)

    def with_activities(self, activities) -> "Day":
        """Return a copy of this day with a new running order (hours recomputed)."""
        return Day(
            id=self.id,
            date=self.date,
            city_or_region=self.city_or_region,
            scheduled_activities=tuple(activities),
        )


@dataclass(frozen=True)
class ItineraryState:
    """Whole-trip snapshot: stops, activity catalog, generated days."""
    city_stops: tuple[CityStop, ...] = ()
    activities: tuple[Activity, ...] = ()
    days: tuple[Day, ...] = ()

    def find_activity(self, activity_id: str) -> Optional[Activity]:
        return next((a for a in self.activities if a.id == activity_id), None)

    def find_day(self, day_id: str) -> Optional[Day]:
        return next((d for d in self.days if d.id == day_id), None)

    def find_stop(self, stop_id: str) -> Optional[CityStop]:
        return next((s for s in self.city_stops if s.id == stop_id), None)

    def stop_names(self) -> set[str]:
        return {s.name for s in self.city_stops}
