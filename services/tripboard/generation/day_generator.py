"""
Day generation from city stops.

Each stop expands to one Day per calendar date in its inclusive range.
Stops are expanded in the order given, dates ascending within a stop. The
result is a concatenation per stop, not a global sort by date: if two stops'
ranges overlap (the seed route shares transfer days between cities), both
stops get a Day for the shared date and they appear in stop order.

Day ids are derived from (stop id, date), so regenerating an unchanged stop
yields the same ids. The store relies on this to carry assignments across
regeneration.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Iterator

from services.tripboard.models.itinerary import CityStop, Day

logger = logging.getLogger(__name__)


def day_id_for(stop_id: str, day_date: date) -> str:
    return f"day-{stop_id}-{day_date.isoformat()}"


def days_for_stop(stop: CityStop) -> Iterator[Day]:
    """Yield the empty days for one stop. Inverted ranges yield nothing."""
    if stop.end_date < stop.start_date:
        logger.debug(
            "day_generator: stop=%s has end %s before start %s, no days generated",
            stop.id,
            stop.end_date,
            stop.start_date,
        )
        return

    current = stop.start_date
    while current <= stop.end_date:
        yield Day(
            id=day_id_for(stop.id, current),
            date=current,
            city_or_region=stop.name,
        )
        current += timedelta(days=1)


def generate_days(stops: Iterable[CityStop]) -> list[Day]:
    """Expand stops into a flat, ordered list of empty days."""
    days: list[Day] = []
    for stop in stops:
        days.extend(days_for_stop(stop))
    return days
