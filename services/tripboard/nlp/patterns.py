"""
Rule-based patterns for the guide-notes importer.

CATEGORY_PATTERNS is ordered: the first category with a matching pattern
wins, so "street food market" is food, not shopping. Text matching nothing
falls back to DEFAULT_CATEGORY.

Keywords are stems: anchored at the start of a word, IGNORECASE, and any
word continuation matches, so "temples", "kayaking", "shopping" and
"relaxing" hit "temple", "kayak", "shop" and "relax".
"""

from __future__ import annotations

import re

from services.tripboard.models.itinerary import ActivityCategory

DEFAULT_CATEGORY = ActivityCategory.CULTURE

# Default duration for an imported line with no "(Nh)" marker.
DEFAULT_DURATION_HOURS = 2.0


def _kw(*words: str) -> re.Pattern[str]:
    """Compile an alternation of keywords / short phrases."""
    alternation = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b(?:{alternation})\w*", re.IGNORECASE)


CATEGORY_PATTERNS: list[tuple[ActivityCategory, re.Pattern[str]]] = [
    (ActivityCategory.FOOD, _kw("food", "eat", "restaurant", "market", "street food", "pho", "banh")),
    (ActivityCategory.HISTORY, _kw("temple", "pagoda", "museum", "history", "historical", "war", "citadel")),
    (ActivityCategory.OUTDOORS, _kw("hike", "trek", "bike", "kayak", "outdoor", "nature", "trail", "mountain")),
    (ActivityCategory.RELAX, _kw("beach", "relax", "spa", "pool", "resort")),
    (ActivityCategory.NIGHT, _kw("bar", "night", "club", "rooftop", "nightlife")),
    (ActivityCategory.CULTURE, _kw("culture", "cultural", "traditional", "village", "local")),
    (ActivityCategory.ANCHOR, _kw("must", "essential", "highlight", "main", "anchor")),
    (ActivityCategory.SHOPPING, _kw("shop", "buy", "souvenir")),
]

# "- Title (2h) - description", "* Title", "3. Title (1.5 hours)"
ACTIVITY_LINE = re.compile(
    r"^\s*(?:[-*•]|\d+[.)])\s*"
    r"(?P<title>.+?)"
    r"(?:\s*\((?P<hours>\d+(?:\.\d+)?)\s*(?:h|hrs?|hours?)?\))?"
    r"(?:\s+[-–—]\s+(?P<description>.+?))?"
    r"\s*$",
    re.IGNORECASE,
)

# Start of a "Header: content" section in city notes.
SECTION_START = re.compile(r"^(?=[A-Z][^:\n]*:)", re.MULTILINE)

# Bullets inside a section body: line-leading "-"/"*", or "•" anywhere.
BULLET_SPLIT = re.compile(r"(?:^|\n)\s*[-*]\s+|•")

# Section header keyword -> CityInsights field. First match wins.
INSIGHT_HEADERS: list[tuple[str, str]] = [
    ("overview", "overview"),
    ("best time", "best_time_to_visit"),
    ("transport", "transportation"),
    ("getting around", "transportation"),
    ("accommodation", "accommodation"),
    ("stay", "accommodation"),
    ("food", "food_highlights"),
    ("culture", "cultural_notes"),
    ("cultural", "cultural_notes"),
    ("offbeat", "offbeat_spots"),
    ("must see", "classic_must_sees"),
    ("must-see", "classic_must_sees"),
    ("classic", "classic_must_sees"),
]

LIST_FIELDS = frozenset({"food_highlights", "cultural_notes", "offbeat_spots", "classic_must_sees"})
