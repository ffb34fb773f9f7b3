"""
Itinerary reducers.

Every operation is a pure function: it takes the current ItineraryState and
returns the next one. Nothing is mutated in place, so an operation either
produces a complete new snapshot or (for missing ids and refused changes)
returns the input state object unchanged.

Rules
-----
- Missing activity / day / stop ids are no-ops, logged at DEBUG.
- Refused changes (duplicate stop names, inverted ranges after a partial
  update) are no-ops, logged at WARNING.
- Day hours are never touched directly; days are rebuilt through
  Day.with_activities, which recomputes the total.
- Stops stay sorted by start_date (stable), and the day list is regenerated
  from them whenever a stop's name or dates change. Days whose id survives
  keep their assignments.
- Renaming a stop re-keys its activities to the new name.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from services.tripboard.catalog.filters import activities_for_city
from services.tripboard.generation.day_generator import generate_days
from services.tripboard.generation.suggester import suggest
from services.tripboard.models.itinerary import Activity, CityStop, Day, ItineraryState
from services.tripboard.models.payloads import ActivityCreate, CityStopCreate, CityStopUpdate

logger = logging.getLogger(__name__)

# Stop fields whose change invalidates the generated day list.
_REGENERATING_FIELDS = ("name", "start_date", "end_date")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _sorted_stops(stops: Iterable[CityStop]) -> tuple[CityStop, ...]:
    return tuple(sorted(stops, key=lambda s: s.start_date))


def _replace_days(state: ItineraryState, *updated: Day) -> ItineraryState:
    by_id = {d.id: d for d in updated}
    return replace(state, days=tuple(by_id.get(d.id, d) for d in state.days))


def regenerate_days(
    stops: Sequence[CityStop],
    activities: Sequence[Activity],
    previous_days: Sequence[Day] = (),
) -> tuple[Day, ...]:
    """
    Rebuild the day list from stops, keeping assignments of surviving days.

    A day survives when its (stop id, date) id is present both before and
    after. Its scheduled activities are re-resolved against the catalog so
    renamed or dropped activities do not linger.
    """
    previous = {d.id: d for d in previous_days}
    catalog = {a.id: a for a in activities}

    days: list[Day] = []
    carried = 0
    for day in generate_days(stops):
        old = previous.get(day.id)
        if old is not None and old.scheduled_activities:
            kept = [catalog[a.id] for a in old.scheduled_activities if a.id in catalog]
            day = day.with_activities(kept)
            carried += 1
        days.append(day)

    logger.info(
        "reducers: regenerated %d days from %d stops (%d kept their assignments)",
        len(days),
        len(stops),
        carried,
    )
    return tuple(days)


def build_state(stops: Iterable[CityStop], activities: Iterable[Activity]) -> ItineraryState:
    """Initial state from seed data: stops sorted, days freshly generated."""
    sorted_stops = _sorted_stops(stops)
    catalog = tuple(activities)
    return ItineraryState(
        city_stops=sorted_stops,
        activities=catalog,
        days=regenerate_days(sorted_stops, catalog),
    )


# ---------------------------------------------------------------------------
# Activity catalog
# ---------------------------------------------------------------------------

def toggle_interest(state: ItineraryState, activity_id: str) -> ItineraryState:
    """Flip is_interested on one activity and on its scheduled copies."""
    activity = state.find_activity(activity_id)
    if activity is None:
        logger.debug("reducers: toggle_interest unknown activity=%s", activity_id)
        return state

    flipped = replace(activity, is_interested=not activity.is_interested)
    activities = tuple(flipped if a.id == activity_id else a for a in state.activities)
    days = tuple(
        d.with_activities(flipped if a.id == activity_id else a for a in d.scheduled_activities)
        if d.has_activity(activity_id) else d
        for d in state.days
    )
    return replace(state, activities=activities, days=days)


def create_activity(state: ItineraryState, data: ActivityCreate, activity_id: str) -> ItineraryState:
    """Append a user-authored activity. Interest always starts off."""
    if state.find_activity(activity_id) is not None:
        logger.warning("reducers: create_activity refused, id=%s already exists", activity_id)
        return state

    activity = data.to_activity(activity_id, is_interested=False)
    logger.info("reducers: created activity=%s city=%s", activity.id, activity.city_or_region)
    return replace(state, activities=state.activities + (activity,))


# ---------------------------------------------------------------------------
# Day scheduling
# ---------------------------------------------------------------------------

def assign(state: ItineraryState, activity_id: str, day_id: str) -> ItineraryState:
    """
    Append an activity to a day's running order.

    Idempotent: assigning an activity already on the day changes nothing.
    The time budget is not enforced here; an overbooked day is reported by
    the classifier, never rejected.
    """
    activity = state.find_activity(activity_id)
    day = state.find_day(day_id)
    if activity is None or day is None:
        logger.debug("reducers: assign no-op activity=%s day=%s", activity_id, day_id)
        return state
    if day.has_activity(activity_id):
        return state
    return _replace_days(state, day.with_activities(day.scheduled_activities + (activity,)))


def remove(state: ItineraryState, activity_id: str, day_id: str) -> ItineraryState:
    day = state.find_day(day_id)
    if day is None or not day.has_activity(activity_id):
        logger.debug("reducers: remove no-op activity=%s day=%s", activity_id, day_id)
        return state
    kept = [a for a in day.scheduled_activities if a.id != activity_id]
    return _replace_days(state, day.with_activities(kept))


def move(state: ItineraryState, activity_id: str, from_day_id: str, to_day_id: str) -> ItineraryState:
    """
    Move an activity between days.

    The activity leaves the source day and is appended to the destination
    unless it is already there. Moving onto the same day is a no-op, and so
    is a move where either day is unknown, or one that would change neither
    day.
    """
    if from_day_id == to_day_id:
        return state

    activity = state.find_activity(activity_id)
    source = state.find_day(from_day_id)
    target = state.find_day(to_day_id)
    if activity is None or source is None or target is None:
        logger.debug(
            "reducers: move no-op activity=%s from=%s to=%s", activity_id, from_day_id, to_day_id
        )
        return state

    if not source.has_activity(activity_id) and target.has_activity(activity_id):
        return state

    source = source.with_activities(a for a in source.scheduled_activities if a.id != activity_id)
    if not target.has_activity(activity_id):
        target = target.with_activities(target.scheduled_activities + (activity,))
    return _replace_days(state, source, target)


def reorder(state: ItineraryState, day_id: str, ordered_activity_ids: Sequence[str]) -> ItineraryState:
    """
    Replace a day's running order.

    Only activities already on the day are kept. Ids not on the day are
    dropped silently, and anything on the day but missing from the list is
    dropped too. A repeated id keeps its first position.
    """
    day = state.find_day(day_id)
    if day is None:
        logger.debug("reducers: reorder unknown day=%s", day_id)
        return state

    on_day = {a.id: a for a in day.scheduled_activities}
    reordered: list[Activity] = []
    seen: set[str] = set()
    for activity_id in ordered_activity_ids:
        if activity_id in on_day and activity_id not in seen:
            reordered.append(on_day[activity_id])
            seen.add(activity_id)
    if [a.id for a in reordered] == day.activity_ids:
        return state
    return _replace_days(state, day.with_activities(reordered))


def suggest_for_day(state: ItineraryState, day_id: str, budget: Optional[float] = None) -> ItineraryState:
    """Append greedy suggestions from the day's city to its existing plan."""
    day = state.find_day(day_id)
    if day is None:
        logger.debug("reducers: suggest unknown day=%s", day_id)
        return state

    available = [
        a for a in activities_for_city(state.activities, day.city_or_region)
        if not day.has_activity(a.id)
    ]
    suggested = suggest(available, budget)
    if not suggested:
        return state

    logger.info(
        "reducers: suggested %d activities for day=%s city=%s",
        len(suggested),
        day.id,
        day.city_or_region,
    )
    return _replace_days(state, day.with_activities(day.scheduled_activities + tuple(suggested)))


# ---------------------------------------------------------------------------
# City stops
# ---------------------------------------------------------------------------

def add_city_stop(state: ItineraryState, data: CityStopCreate, stop_id: str) -> ItineraryState:
    if data.name in state.stop_names():
        logger.warning("reducers: add_city_stop refused, name=%r already on the route", data.name)
        return state
    if state.find_stop(stop_id) is not None:
        logger.warning("reducers: add_city_stop refused, id=%s already exists", stop_id)
        return state

    stops = _sorted_stops(state.city_stops + (data.to_city_stop(stop_id),))
    logger.info(
        "reducers: added stop=%s name=%r %s..%s",
        stop_id,
        data.name,
        data.start_date,
        data.end_date,
    )
    return replace(
        state,
        city_stops=stops,
        days=regenerate_days(stops, state.activities, state.days),
    )


def update_city_stop(state: ItineraryState, stop_id: str, updates: CityStopUpdate) -> ItineraryState:
    """
    Merge updates into a stop.

    Days are regenerated only when the name or either date changed. A rename
    carries the stop's activities along to the new name.
    """
    stop = state.find_stop(stop_id)
    if stop is None:
        logger.debug("reducers: update_city_stop unknown stop=%s", stop_id)
        return state

    changes = updates.changes()
    if not changes:
        return state

    updated = replace(stop, **changes)
    if updated.end_date < updated.start_date:
        logger.warning(
            "reducers: update_city_stop refused for stop=%s, end %s before start %s",
            stop_id,
            updated.end_date,
            updated.start_date,
        )
        return state

    renamed = updated.name != stop.name
    if renamed and updated.name in state.stop_names():
        logger.warning(
            "reducers: update_city_stop refused for stop=%s, name=%r already on the route",
            stop_id,
            updated.name,
        )
        return state

    stops = _sorted_stops(updated if s.id == stop_id else s for s in state.city_stops)

    activities = state.activities
    if renamed:
        activities = tuple(
            replace(a, city_or_region=updated.name) if a.city_or_region == stop.name else a
            for a in activities
        )
        logger.info("reducers: renamed stop=%s %r -> %r", stop_id, stop.name, updated.name)

    needs_regen = any(getattr(updated, f) != getattr(stop, f) for f in _REGENERATING_FIELDS)
    days = regenerate_days(stops, activities, state.days) if needs_regen else state.days

    return replace(state, city_stops=stops, activities=activities, days=days)


def delete_city_stop(state: ItineraryState, stop_id: str) -> ItineraryState:
    """
    Remove a stop and cascade by its name.

    Its days go, its activities go (interest flags for that city are lost),
    and the deleted activities are stripped from any other day that held
    them.
    """
    stop = state.find_stop(stop_id)
    if stop is None:
        logger.debug("reducers: delete_city_stop unknown stop=%s", stop_id)
        return state

    removed_ids = {a.id for a in state.activities if a.city_or_region == stop.name}
    activities = tuple(a for a in state.activities if a.city_or_region != stop.name)

    days: list[Day] = []
    for day in state.days:
        if day.city_or_region == stop.name:
            continue
        if any(a.id in removed_ids for a in day.scheduled_activities):
            day = day.with_activities(a for a in day.scheduled_activities if a.id not in removed_ids)
        days.append(day)

    logger.info(
        "reducers: deleted stop=%s name=%r (%d days, %d activities removed)",
        stop_id,
        stop.name,
        len(state.days) - len(days),
        len(removed_ids),
    )
    return ItineraryState(
        city_stops=tuple(s for s in state.city_stops if s.id != stop_id),
        activities=activities,
        days=tuple(days),
    )
