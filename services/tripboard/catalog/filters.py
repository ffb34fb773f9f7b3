"""
Catalog queries behind the activity list: city scoping and the filter bar.

Duration bands are half-open [min, max):
  short   0h  - <2h
  medium  2h  - <4h
  long    4h+

A time-of-day filter matches activities recommended for that slot and any
activity marked "flexible". Activities with no recommendation never match a
specific time of day.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from services.tripboard.models.itinerary import (
    Activity,
    ActivityCategory,
    Day,
    TimeOfDay,
)


class DurationBand(str, Enum):
    ALL = "all"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


DURATION_RANGES: dict[DurationBand, tuple[float, float]] = {
    DurationBand.SHORT: (0.0, 2.0),
    DurationBand.MEDIUM: (2.0, 4.0),
    DurationBand.LONG: (4.0, math.inf),
}


class ActivityFilter(BaseModel):
    """Filter bar state. Defaults select everything."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    category: Union[Literal["all"], ActivityCategory] = "all"
    duration: DurationBand = DurationBand.ALL
    time_of_day: Union[Literal["all"], TimeOfDay] = Field(default="all", alias="timeOfDay")
    interested_only: bool = Field(default=False, alias="interestedOnly")

    def matches(self, activity: Activity) -> bool:
        if self.category != "all" and activity.category != self.category:
            return False

        if self.duration != DurationBand.ALL:
            low, high = DURATION_RANGES[self.duration]
            if not (low <= activity.estimated_duration_hours < high):
                return False

        if self.time_of_day != "all" and activity.recommended_time_of_day not in (
            self.time_of_day,
            TimeOfDay.FLEXIBLE,
        ):
            return False

        if self.interested_only and not activity.is_interested:
            return False

        return True


def activities_for_city(activities: Iterable[Activity], city: str) -> list[Activity]:
    return [a for a in activities if a.city_or_region == city]


def days_for_city(days: Iterable[Day], city: str) -> list[Day]:
    return [d for d in days if d.city_or_region == city]


def filter_activities(
    activities: Iterable[Activity],
    city: Optional[str] = None,
    activity_filter: Optional[ActivityFilter] = None,
) -> list[Activity]:
    """City-scoped (when a city is given) and filter-bar filtered activities, catalog order kept."""
    if city is not None:
        activities = activities_for_city(activities, city)
    if activity_filter is None:
        return list(activities)
    return [a for a in activities if activity_filter.matches(a)]
