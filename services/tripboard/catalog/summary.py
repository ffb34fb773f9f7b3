"""
Per-city and whole-trip summaries for the route sidebar and the day view.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from services.tripboard.budget.classifier import TimeBudgetStatus, classify_day
from services.tripboard.catalog.filters import days_for_city
from services.tripboard.models.itinerary import ItineraryState


@dataclass(frozen=True)
class CitySummary:
    stop_id: str
    name: str
    start_date: date
    end_date: date
    day_count: int
    total_scheduled_hours: float
    scheduled_activity_count: int


def summarize_cities(state: ItineraryState) -> list[CitySummary]:
    """One summary per stop, in route order."""
    summaries = []
    for stop in state.city_stops:
        city_days = days_for_city(state.days, stop.name)
        summaries.append(CitySummary(
            stop_id=stop.id,
            name=stop.name,
            start_date=stop.start_date,
            end_date=stop.end_date,
            day_count=len(city_days),
            total_scheduled_hours=sum(d.total_scheduled_hours for d in city_days),
            scheduled_activity_count=sum(len(d.scheduled_activities) for d in city_days),
        ))
    return summaries


def total_scheduled_activities(state: ItineraryState) -> int:
    return sum(len(d.scheduled_activities) for d in state.days)


def total_scheduled_hours(state: ItineraryState) -> float:
    return sum(d.total_scheduled_hours for d in state.days)


def day_statuses(state: ItineraryState, budget: Optional[float] = None) -> dict[str, TimeBudgetStatus]:
    return {d.id: classify_day(d, budget) for d in state.days}
