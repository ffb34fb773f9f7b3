"""
Tests for catalog/summary.py
"""

from __future__ import annotations

import pytest

from services.tripboard.budget.classifier import TimeBudgetStatus
from services.tripboard.catalog.summary import (
    day_statuses,
    summarize_cities,
    total_scheduled_activities,
    total_scheduled_hours,
)
from services.tripboard.store import reducers

HOIAN_D1 = "day-hoian-2026-03-10"
HANOI_D1 = "day-hanoi-2026-03-17"


@pytest.fixture
def planned(trip_state):
    state = reducers.assign(trip_state, "hoian-anchor", HOIAN_D1)
    state = reducers.assign(state, "hoian-food", HOIAN_D1)
    return reducers.assign(state, "hanoi-night", HANOI_D1)


class TestSummaries:

    def test_one_summary_per_stop_in_route_order(self, planned):
        summaries = summarize_cities(planned)
        assert [s.name for s in summaries] == ["Hoi An", "Hanoi"]

        hoian, hanoi = summaries
        assert hoian.day_count == 3
        assert hoian.total_scheduled_hours == pytest.approx(7.0)
        assert hoian.scheduled_activity_count == 2
        assert hanoi.day_count == 2
        assert hanoi.total_scheduled_hours == pytest.approx(2.0)

    def test_trip_totals(self, planned):
        assert total_scheduled_activities(planned) == 3
        assert total_scheduled_hours(planned) == pytest.approx(9.0)

    def test_empty_trip(self, trip_state):
        assert total_scheduled_activities(trip_state) == 0
        assert all(s.total_scheduled_hours == 0 for s in summarize_cities(trip_state))

    def test_day_statuses(self, planned):
        statuses = day_statuses(planned, budget=10)
        assert statuses[HOIAN_D1] == TimeBudgetStatus.APPROACHING
        assert statuses[HANOI_D1] == TimeBudgetStatus.UNDERBOOKED
        assert len(statuses) == len(planned.days)
