"""
ItineraryStore — the single mutable holder of the current trip snapshot.

The store owns exactly one reference: the current ItineraryState. Each
operation runs the matching pure reducer and swaps the whole snapshot in one
assignment, so a reader holding `store.state` always sees a consistent
{stops, days, activities} triple, never a half-applied change. Subscribed
listeners are called with the new snapshot after the swap.

Ids for created entities come from `id_factory(prefix)`. The default is
uuid-based; callers that mint their own ids (or tests wanting stable ids)
pass a different factory.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from services.tripboard.budget.classifier import TimeBudgetStatus, classify_day
from services.tripboard.config import settings
from services.tripboard.models.itinerary import Activity, CityStop, ItineraryState
from services.tripboard.models.payloads import ActivityCreate, CityStopCreate, CityStopUpdate
from services.tripboard.store import reducers

IdFactory = Callable[[str], str]
Listener = Callable[[ItineraryState], None]

logger = logging.getLogger(__name__)


def uuid_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class ItineraryStore:
    """Holds the current snapshot and applies reducers to it."""

    def __init__(
        self,
        state: Optional[ItineraryState] = None,
        id_factory: IdFactory = uuid_id,
        budget: Optional[float] = None,
    ) -> None:
        self._state = state if state is not None else ItineraryState()
        self._id_factory = id_factory
        self._listeners: list[Listener] = []
        self.budget = budget if budget is not None else settings.daily_time_budget_hours

    @classmethod
    def from_seed(
        cls,
        stops: Iterable[CityStop],
        activities: Iterable[Activity],
        **kwargs: Any,
    ) -> "ItineraryStore":
        return cls(reducers.build_state(stops, activities), **kwargs)

    @property
    def state(self) -> ItineraryState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener(state)` after every operation that changed the state.

        Returns an unsubscribe callable. No-op operations do not notify.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: ItineraryState) -> ItineraryState:
        if new_state is self._state:
            return new_state
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        logger.debug("store: committed snapshot, notified %d listeners", len(self._listeners))
        return new_state

    # ── activities ────────────────────────────────────────────────────────

    def toggle_interest(self, activity_id: str) -> ItineraryState:
        return self._commit(reducers.toggle_interest(self._state, activity_id))

    def create_activity(self, data: Union[ActivityCreate, dict]) -> Optional[Activity]:
        """Add a user-authored activity; returns it, or None if refused."""
        payload = data if isinstance(data, ActivityCreate) else ActivityCreate.model_validate(data)
        activity_id = self._id_factory("activity")
        before = self._state
        if self._commit(reducers.create_activity(before, payload, activity_id)) is before:
            return None
        return self._state.find_activity(activity_id)

    # ── days ──────────────────────────────────────────────────────────────

    def assign(self, activity_id: str, day_id: str) -> ItineraryState:
        return self._commit(reducers.assign(self._state, activity_id, day_id))

    def remove(self, activity_id: str, day_id: str) -> ItineraryState:
        return self._commit(reducers.remove(self._state, activity_id, day_id))

    def move(self, activity_id: str, from_day_id: str, to_day_id: str) -> ItineraryState:
        return self._commit(reducers.move(self._state, activity_id, from_day_id, to_day_id))

    def reorder(self, day_id: str, ordered_activity_ids: Sequence[str]) -> ItineraryState:
        return self._commit(reducers.reorder(self._state, day_id, ordered_activity_ids))

    def suggest(self, day_id: str) -> ItineraryState:
        return self._commit(reducers.suggest_for_day(self._state, day_id, self.budget))

    def status(self, day_id: str) -> Optional[TimeBudgetStatus]:
        day = self._state.find_day(day_id)
        return classify_day(day, self.budget) if day is not None else None

    # ── city stops ────────────────────────────────────────────────────────

    def add_city_stop(self, data: Union[CityStopCreate, dict]) -> Optional[CityStop]:
        """Add a stop to the route; returns it, or None if refused."""
        payload = data if isinstance(data, CityStopCreate) else CityStopCreate.model_validate(data)
        stop_id = self._id_factory("stop")
        before = self._state
        if self._commit(reducers.add_city_stop(before, payload, stop_id)) is before:
            return None
        return self._state.find_stop(stop_id)

    def update_city_stop(self, stop_id: str, updates: Union[CityStopUpdate, dict]) -> ItineraryState:
        payload = updates if isinstance(updates, CityStopUpdate) else CityStopUpdate.model_validate(updates)
        return self._commit(reducers.update_city_stop(self._state, stop_id, payload))

    def delete_city_stop(self, stop_id: str) -> ItineraryState:
        return self._commit(reducers.delete_city_stop(self._state, stop_id))
