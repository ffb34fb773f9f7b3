"""
Guide-notes importer.

Turns free-text travel notes (pasted from a trip document) into Activity
records and per-city insight records. Rule-based only; nothing here calls
out to a model.

Activity lines
--------------
    - Cu Chi Tunnels (4h) - Underground network outside the city
    * Ben Thanh Market
    3. Lantern-making class (1.5 hours)

Bullet or numbered lines become activities. Duration defaults to
DEFAULT_DURATION_HOURS, description defaults to the title, category is
inferred from title + description, time of day is "flexible". Ids are
"<city-slug>-<line index>" where the index counts non-blank lines, so
re-importing the same notes yields the same ids.

City insight sections
---------------------
    Overview: Saigon is loud, fast and delicious.
    Food Highlights: • Com tam • Banh mi • Oc (snails)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from services.tripboard.models.itinerary import Activity, ActivityCategory, TimeOfDay
from services.tripboard.nlp.patterns import (
    ACTIVITY_LINE,
    BULLET_SPLIT,
    CATEGORY_PATTERNS,
    DEFAULT_CATEGORY,
    DEFAULT_DURATION_HOURS,
    INSIGHT_HEADERS,
    LIST_FIELDS,
    SECTION_START,
)

logger = logging.getLogger(__name__)


@dataclass
class CityInsights:
    city_name: str
    overview: Optional[str] = None
    best_time_to_visit: Optional[str] = None
    transportation: Optional[str] = None
    accommodation: Optional[str] = None
    food_highlights: list[str] = field(default_factory=list)
    cultural_notes: list[str] = field(default_factory=list)
    offbeat_spots: list[str] = field(default_factory=list)
    classic_must_sees: list[str] = field(default_factory=list)


def city_slug(city_name: str) -> str:
    return re.sub(r"\s+", "-", city_name.strip().lower())


def infer_category(text: str) -> ActivityCategory:
    """First category whose keywords appear in the text; culture otherwise."""
    for category, pattern in CATEGORY_PATTERNS:
        if pattern.search(text):
            return category
    return DEFAULT_CATEGORY


def parse_text_to_activities(text: str, city_name: str) -> list[Activity]:
    """Extract one activity per bullet / numbered line."""
    activities: list[Activity] = []
    slug = city_slug(city_name)
    lines = [line for line in text.splitlines() if line.strip()]

    for index, line in enumerate(lines):
        match = ACTIVITY_LINE.match(line)
        if match is None:
            continue

        title = match.group("title").strip()
        hours = float(match.group("hours")) if match.group("hours") else DEFAULT_DURATION_HOURS
        if hours <= 0:
            hours = DEFAULT_DURATION_HOURS
        description = (match.group("description") or "").strip() or title

        activities.append(Activity(
            id=f"{slug}-{index}",
            city_or_region=city_name,
            title=title,
            description=description,
            category=infer_category(f"{title} {description}"),
            estimated_duration_hours=hours,
            recommended_time_of_day=TimeOfDay.FLEXIBLE,
        ))

    logger.debug(
        "content_parser: city=%s parsed %d activities from %d lines",
        city_name,
        len(activities),
        len(lines),
    )
    return activities


def _split_bullets(body: str) -> list[str]:
    return [part.strip() for part in BULLET_SPLIT.split(body) if part.strip()]


def parse_city_insights(text: str, city_name: str) -> CityInsights:
    """Read "Header: content" sections into a CityInsights record."""
    insights = CityInsights(city_name=city_name)

    for section in SECTION_START.split(text):
        header, sep, body = section.partition(":")
        if not sep:
            continue
        header = header.strip().lower()
        body = body.strip()

        target = next((name for keyword, name in INSIGHT_HEADERS if keyword in header), None)
        if target is None:
            continue
        if target in LIST_FIELDS:
            getattr(insights, target).extend(_split_bullets(body))
        else:
            setattr(insights, target, body)

    return insights
