"""
Day hour aggregation.

A Day's totalScheduledHours is never stored on its own: it is derived from the
scheduled activity list every time a Day is built (see models.itinerary.Day),
so the list and the total always change together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from services.tripboard.models.itinerary import Activity


def recompute_hours(activities: Iterable["Activity"]) -> float:
    """Sum of estimated_duration_hours over the given activities."""
    return float(sum(a.estimated_duration_hours for a in activities))
