"""
Seed loading.

A seed file is JSON:

    {
      "cityStops":  [{"id", "name", "startDate", "endDate", "region"?}, ...],
      "activities": [{"id", "cityOrRegion", "title", "category",
                      "estimatedDurationHours", ...}, ...]
    }

snake_case keys (city_stops, start_date, ...) are accepted too. Every record
is validated through the seed payload models. Any failure (missing file, bad
JSON, invalid record, duplicate stop name or id) raises SeedDataError naming
the file.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from services.tripboard.config import settings
from services.tripboard.models.itinerary import ItineraryState
from services.tripboard.models.payloads import SeedActivity, SeedCityStop
from services.tripboard.seed.sample_trip import sample_activities, sample_city_stops
from services.tripboard.store.reducers import build_state

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    """A seed file could not be read or failed validation."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"invalid seed {self.path}: {reason}")


def _duplicates(values: list[str]) -> list[str]:
    return sorted(v for v, n in Counter(values).items() if n > 1)


def parse_seed(payload: dict[str, Any], path: Union[str, Path] = "<memory>") -> ItineraryState:
    """Validate an already-decoded seed document and build the initial state."""
    if not isinstance(payload, dict):
        raise SeedDataError(path, "top level must be an object")

    raw_stops = payload.get("cityStops", payload.get("city_stops")) or []
    raw_activities = payload.get("activities") or []
    if not isinstance(raw_stops, list) or not isinstance(raw_activities, list):
        raise SeedDataError(path, "cityStops and activities must be arrays")

    try:
        stops = [SeedCityStop.model_validate(s).to_city_stop() for s in raw_stops]
        activities = [SeedActivity.model_validate(a).to_activity() for a in raw_activities]
    except ValidationError as e:
        raise SeedDataError(path, str(e)) from e

    for label, values in (
        ("stop id", [s.id for s in stops]),
        ("stop name", [s.name for s in stops]),
        ("activity id", [a.id for a in activities]),
    ):
        dupes = _duplicates(values)
        if dupes:
            raise SeedDataError(path, f"duplicate {label}: {', '.join(dupes)}")

    state = build_state(stops, activities)
    logger.info(
        "seed: loaded %d stops, %d activities, %d days from %s",
        len(state.city_stops),
        len(state.activities),
        len(state.days),
        path,
    )
    return state


def load_seed(path: Union[str, Path]) -> ItineraryState:
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedDataError(path, f"cannot read file ({e.strerror or e})") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(path, f"not valid JSON (line {e.lineno}: {e.msg})") from e
    return parse_seed(payload, path)


def load_default_seed(path: Optional[Union[str, Path]] = None) -> ItineraryState:
    """Seed from `path`, else settings.seed_path, else the bundled sample trip."""
    path = path or settings.seed_path
    if path:
        return load_seed(path)
    return build_state(sample_city_stops(), sample_activities())
