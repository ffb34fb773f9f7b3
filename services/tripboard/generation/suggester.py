"""
Greedy day suggestion.

Anchor-first, two passes:
  1. Anchor pass: the first "anchor" activity in input order is taken if it
     fits the budget. Only one anchor is ever added.
  2. Filler pass: every non-anchor activity, stable-sorted by ascending
     duration, is taken if it still fits. One pass; an activity skipped for
     not fitting is never revisited.

Callers pass activities already filtered to the day's city and not yet on
the day. The output order is the suggested running order: anchor first, then
fillers shortest first. The sum never exceeds the budget; an activity longer
than the whole budget is never selected, even as the anchor.

This is a heuristic, not a knapsack solver. It does not maximise hours or
count. For a given input order it is deterministic.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from services.tripboard.config import settings
from services.tripboard.models.itinerary import Activity, ActivityCategory

logger = logging.getLogger(__name__)


def _fits(running_total: float, activity: Activity, budget: float) -> bool:
    return running_total + activity.estimated_duration_hours <= budget


def suggest(available: Sequence[Activity], budget: Optional[float] = None) -> list[Activity]:
    """
    Pick a subset of available activities to fill one day.

    Args:
        available: Candidate activities in catalog order.
        budget:    Hours available. Defaults to the configured daily budget.

    Returns:
        Suggested activities, anchor (if any) first, then ascending duration.
    """
    if budget is None:
        budget = settings.daily_time_budget_hours

    suggested: list[Activity] = []
    total = 0.0

    # --- Pass 1: anchor ---
    anchor = next((a for a in available if a.category == ActivityCategory.ANCHOR), None)
    if anchor is not None and _fits(total, anchor, budget):
        suggested.append(anchor)
        total += anchor.estimated_duration_hours

    # --- Pass 2: fillers, shortest first ---
    # sorted() is stable, so equal durations keep catalog order.
    fillers = sorted(
        (a for a in available if a.category != ActivityCategory.ANCHOR),
        key=lambda a: a.estimated_duration_hours,
    )
    for activity in fillers:
        if _fits(total, activity, budget):
            suggested.append(activity)
            total += activity.estimated_duration_hours

    logger.debug(
        "suggester: picked %d/%d activities, %.1fh of %.1fh budget",
        len(suggested),
        len(available),
        total,
        budget,
    )
    return suggested
