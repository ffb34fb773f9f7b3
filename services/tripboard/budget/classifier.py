"""
Time budget classification for a single day.

Bands, relative to the daily budget B:
    total <  0.6B          -> underbooked
    0.6B <= total < 0.9B   -> approaching
    0.9B <= total <= B     -> full
    total >  B             -> overbooked

Exactly B is full, never overbooked. Negative totals are accepted and land
in underbooked; keeping durations positive is the caller's job.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from services.tripboard.config import settings
from services.tripboard.models.itinerary import Day

APPROACHING_RATIO = 0.6
FULL_RATIO = 0.9


class TimeBudgetStatus(str, Enum):
    UNDERBOOKED = "underbooked"
    APPROACHING = "approaching"
    FULL = "full"
    OVERBOOKED = "overbooked"


def _budget_or_default(budget: Optional[float]) -> float:
    return settings.daily_time_budget_hours if budget is None else budget


def classify(total_hours: float, budget: Optional[float] = None) -> TimeBudgetStatus:
    """Map scheduled hours to a budget status. Pure and total."""
    budget = _budget_or_default(budget)
    if total_hours < budget * APPROACHING_RATIO:
        return TimeBudgetStatus.UNDERBOOKED
    if total_hours < budget * FULL_RATIO:
        return TimeBudgetStatus.APPROACHING
    if total_hours <= budget:
        return TimeBudgetStatus.FULL
    return TimeBudgetStatus.OVERBOOKED


def classify_day(day: Day, budget: Optional[float] = None) -> TimeBudgetStatus:
    return classify(day.total_scheduled_hours, budget)


def remaining_hours(total_hours: float, budget: Optional[float] = None) -> float:
    """Hours left in the day; negative once the day is overbooked."""
    return _budget_or_default(budget) - total_hours
