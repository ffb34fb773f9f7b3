"""
Tests for city-stop reducers in store/reducers.py

Covers:
- add_city_stop keeps start_date order and regenerates days
- Regeneration keeps assignments on surviving days and interest flags
- Duplicate names are refused
- update_city_stop only regenerates on name / date changes
- Rename re-keys activities so the name join never dangles
- Shortening a stop drops only the removed days' assignments
- delete_city_stop cascades by name and leaves other cities alone
"""

from __future__ import annotations

from datetime import date

import pytest

from services.tripboard.models.itinerary import Region
from services.tripboard.models.payloads import CityStopCreate, CityStopUpdate
from services.tripboard.store import reducers

HOIAN_D1 = "day-hoian-2026-03-10"
HOIAN_D3 = "day-hoian-2026-03-12"
HANOI_D1 = "day-hanoi-2026-03-17"


def _no_dangling_days(state) -> bool:
    names = state.stop_names()
    return all(d.city_or_region in names for d in state.days)


# ---------------------------------------------------------------------------
# 1. add_city_stop
# ---------------------------------------------------------------------------

class TestAddCityStop:

    def test_inserted_in_date_order(self, trip_state):
        data = CityStopCreate(name="Ninh Binh", startDate="2026-03-15", endDate="2026-03-16", region="North")
        state = reducers.add_city_stop(trip_state, data, "ninhbinh")
        assert [s.id for s in state.city_stops] == ["hoian", "ninhbinh", "hanoi"]
        assert state.find_stop("ninhbinh").region == Region.NORTH

    def test_days_regenerated_in_stop_order(self, trip_state):
        data = CityStopCreate(name="Ninh Binh", startDate="2026-03-15", endDate="2026-03-16")
        state = reducers.add_city_stop(trip_state, data, "ninhbinh")
        assert [d.city_or_region for d in state.days] == [
            "Hoi An", "Hoi An", "Hoi An", "Ninh Binh", "Ninh Binh", "Hanoi", "Hanoi",
        ]

    def test_existing_assignments_survive(self, trip_state):
        state = reducers.assign(trip_state, "hoian-food", HOIAN_D1)
        state = reducers.toggle_interest(state, "hanoi-night")
        data = CityStopCreate(name="Ninh Binh", startDate="2026-03-15", endDate="2026-03-16")
        state = reducers.add_city_stop(state, data, "ninhbinh")

        day = state.find_day(HOIAN_D1)
        assert day.activity_ids == ["hoian-food"]
        assert day.total_scheduled_hours == pytest.approx(4.0)
        assert state.find_activity("hanoi-night").is_interested is True

    def test_duplicate_name_refused(self, trip_state):
        data = CityStopCreate(name="Hanoi", startDate="2026-03-25", endDate="2026-03-26")
        assert reducers.add_city_stop(trip_state, data, "hanoi-2") is trip_state

    def test_equal_start_dates_keep_insertion_order(self, trip_state):
        data = CityStopCreate(name="Da Nang", startDate="2026-03-10", endDate="2026-03-10")
        state = reducers.add_city_stop(trip_state, data, "danang")
        assert [s.id for s in state.city_stops] == ["hoian", "danang", "hanoi"]


# ---------------------------------------------------------------------------
# 2. update_city_stop
# ---------------------------------------------------------------------------

class TestUpdateCityStop:

    def test_region_change_keeps_days(self, trip_state):
        state = reducers.assign(trip_state, "hoian-food", HOIAN_D1)
        updated = reducers.update_city_stop(state, "hoian", CityStopUpdate(region="Central"))
        assert updated.find_stop("hoian").region == Region.CENTRAL
        assert updated.days is state.days

    def test_shortening_drops_only_removed_days(self, trip_state):
        state = reducers.assign(trip_state, "hoian-food", HOIAN_D1)
        state = reducers.assign(state, "hoian-relax", HOIAN_D3)
        state = reducers.update_city_stop(state, "hoian", CityStopUpdate(endDate="2026-03-11"))

        assert state.find_day(HOIAN_D3) is None
        assert state.find_day(HOIAN_D1).activity_ids == ["hoian-food"]
        # the activity record itself survives
        assert state.find_activity("hoian-relax") is not None

    def test_moving_dates_resorts_stops(self, trip_state):
        updates = CityStopUpdate(startDate="2026-03-20", endDate="2026-03-21")
        state = reducers.update_city_stop(trip_state, "hoian", updates)
        assert [s.id for s in state.city_stops] == ["hanoi", "hoian"]
        assert [d.city_or_region for d in state.days][:2] == ["Hanoi", "Hanoi"]

    def test_rename_rekeys_activities_and_days(self, trip_state):
        state = reducers.assign(trip_state, "hoian-food", HOIAN_D1)
        state = reducers.update_city_stop(state, "hoian", CityStopUpdate(name="Hội An"))

        assert state.find_stop("hoian").name == "Hội An"
        assert state.find_activity("hoian-food").city_or_region == "Hội An"
        day = state.find_day(HOIAN_D1)
        assert day.city_or_region == "Hội An"
        assert day.activity_ids == ["hoian-food"]
        assert day.scheduled_activities[0].city_or_region == "Hội An"
        assert _no_dangling_days(state)

    def test_rename_to_existing_name_refused(self, trip_state):
        assert reducers.update_city_stop(trip_state, "hoian", CityStopUpdate(name="Hanoi")) is trip_state

    def test_partial_update_inverting_range_refused(self, trip_state):
        updates = CityStopUpdate(startDate="2026-03-20")
        assert reducers.update_city_stop(trip_state, "hoian", updates) is trip_state

    def test_unknown_stop_is_noop(self, trip_state):
        assert reducers.update_city_stop(trip_state, "nowhere", CityStopUpdate(name="X")) is trip_state

    def test_empty_update_is_noop(self, trip_state):
        assert reducers.update_city_stop(trip_state, "hoian", CityStopUpdate()) is trip_state


# ---------------------------------------------------------------------------
# 3. delete_city_stop
# ---------------------------------------------------------------------------

class TestDeleteCityStop:

    def test_cascades_by_name(self, trip_state):
        state = reducers.assign(trip_state, "hanoi-night", HANOI_D1)
        state = reducers.delete_city_stop(state, "hoian")

        assert [s.id for s in state.city_stops] == ["hanoi"]
        assert all(d.city_or_region == "Hanoi" for d in state.days)
        assert {a.id for a in state.activities} == {"hanoi-anchor", "hanoi-night"}
        # other city untouched
        assert state.find_day(HANOI_D1).activity_ids == ["hanoi-night"]
        assert _no_dangling_days(state)

    def test_strips_deleted_activities_from_other_days(self, trip_state):
        state = reducers.assign(trip_state, "hoian-food", HANOI_D1)
        state = reducers.assign(state, "hanoi-night", HANOI_D1)
        state = reducers.delete_city_stop(state, "hoian")

        day = state.find_day(HANOI_D1)
        assert day.activity_ids == ["hanoi-night"]
        assert day.total_scheduled_hours == pytest.approx(2.0)

    def test_unknown_stop_is_noop(self, trip_state):
        assert reducers.delete_city_stop(trip_state, "nowhere") is trip_state


# ---------------------------------------------------------------------------
# 4. regenerate_days
# ---------------------------------------------------------------------------

class TestRegenerateDays:

    def test_drops_assignments_to_missing_activities(self, trip_state, hoian_stop, hanoi_stop):
        state = reducers.assign(trip_state, "hoian-food", HOIAN_D1)
        remaining = [a for a in state.activities if a.id != "hoian-food"]
        days = reducers.regenerate_days([hoian_stop, hanoi_stop], remaining, state.days)
        day = next(d for d in days if d.id == HOIAN_D1)
        assert day.scheduled_activities == ()
        assert day.total_scheduled_hours == 0

    def test_build_state_sorts_stops(self, hoian_stop, hanoi_stop, trip_activities):
        state = reducers.build_state([hanoi_stop, hoian_stop], trip_activities)
        assert [s.start_date for s in state.city_stops] == [date(2026, 3, 10), date(2026, 3, 17)]
        assert len(state.days) == 5
