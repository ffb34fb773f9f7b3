"""
Bundled sample trip: a two-week Vietnam route, south to north.

Records are kept in the same shape as a JSON seed file (camelCase keys) and
go through the seed payload models, so the bundled data is validated exactly
like an external seed.

Neighbouring stops share their transfer date (HCMC ends 03-10, Hoi An starts
03-10), so the generated day list holds two days for each transfer date.
"""

from __future__ import annotations

from typing import Any

from services.tripboard.models.itinerary import Activity, CityStop
from services.tripboard.models.payloads import SeedActivity, SeedCityStop

SAMPLE_CITY_STOPS: list[dict[str, Any]] = [
    {"id": "hcmc", "name": "Ho Chi Minh City", "startDate": "2026-03-08", "endDate": "2026-03-10", "region": "South"},
    {"id": "hoian", "name": "Hoi An", "startDate": "2026-03-10", "endDate": "2026-03-13", "region": "Central"},
    {"id": "phongnha", "name": "Phong Nha", "startDate": "2026-03-13", "endDate": "2026-03-15", "region": "Central"},
    {"id": "ninhbinh", "name": "Ninh Binh", "startDate": "2026-03-15", "endDate": "2026-03-17", "region": "North"},
    {"id": "hanoi", "name": "Hanoi", "startDate": "2026-03-17", "endDate": "2026-03-21", "region": "North"},
]


def _act(
    activity_id: str,
    city: str,
    title: str,
    description: str,
    category: str,
    hours: float,
    time_of_day: str,
    notes: str | None = None,
) -> dict[str, Any]:
    return {
        "id": activity_id,
        "cityOrRegion": city,
        "title": title,
        "description": description,
        "category": category,
        "estimatedDurationHours": hours,
        "recommendedTimeOfDay": time_of_day,
        "notes": notes,
    }


SAMPLE_ACTIVITIES: list[dict[str, Any]] = [
    # ---- Ho Chi Minh City ----
    _act("hcmc-1", "Ho Chi Minh City", "War Remnants Museum & Reunification Palace",
         "Twentieth-century history in two stops: the war museum and the palace where it ended.",
         "history", 3, "morning", "Heavy going. Arrive at opening to skip the queues."),
    _act("hcmc-2", "Ho Chi Minh City", "Ben Thanh Market & Coffee Culture",
         "Market stalls for snacks and souvenirs, then iced coffee with condensed milk.",
         "food", 2, "morning"),
    _act("hcmc-4", "Ho Chi Minh City", "Cu Chi Tunnels",
         "Half-day trip to the tunnel network north-west of the city.",
         "history", 4, "morning"),
    _act("hcmc-6", "Ho Chi Minh City", "Scooter Tour by Night",
         "Back-of-the-bike loop through the districts after dark.",
         "night", 3, "evening"),
    _act("hcmc-8", "Ho Chi Minh City", "Walking Food Tour District 4",
         "Snail stalls, broken rice and grilled skewers with a local guide.",
         "food", 2.5, "evening"),
    _act("hcmc-10", "Ho Chi Minh City", "Nguyen Hue Walking Street",
         "Evening stroll along the pedestrian boulevard.",
         "relax", 1, "evening"),
    # ---- Hoi An ----
    _act("hoian-1", "Hoi An", "Ancient Houses & Japanese Bridge",
         "The old town core on a single heritage ticket.",
         "anchor", 3, "morning", "Go early, before the tour buses."),
    _act("hoian-2", "Hoi An", "Lantern Lighting & Night Market",
         "Riverside lanterns and the night market.",
         "culture", 2, "evening"),
    _act("hoian-3", "Hoi An", "Tailoring & Crafts",
         "Order made-to-measure clothes and browse craft workshops.",
         "shopping", 2, "afternoon", "Allow two fittings."),
    _act("hoian-4", "Hoi An", "Countryside Bicycle Ride",
         "Rice paddies and vegetable villages by bike.",
         "outdoors", 3, "morning"),
    _act("hoian-9", "Hoi An", "Cooking Class with Market Tour",
         "Shop the morning market, then cook four dishes.",
         "food", 4, "morning"),
    _act("hoian-10", "Hoi An", "Hidden Cafes & Rooftop Views",
         "Slow afternoon in old-town cafes.",
         "relax", 1.5, "afternoon"),
    # ---- Phong Nha ----
    _act("phongnha-1", "Phong Nha", "Paradise Cave",
         "Boardwalk through one of the longest dry caves in Asia.",
         "anchor", 4, "morning"),
    _act("phongnha-2", "Phong Nha", "Phong Nha Cave Boat Tour",
         "Boat into the river cave.",
         "outdoors", 3, "morning"),
    _act("phongnha-3", "Phong Nha", "Dark Cave Adventure",
         "Zipline, mud bath and a swim out.",
         "outdoors", 3, "afternoon"),
    _act("phongnha-5", "Phong Nha", "Hang En Cave Overnight",
         "Two-day trek with a night camping inside the cave.",
         "outdoors", 16, "morning", "Permits sell out weeks ahead."),
    _act("phongnha-7", "Phong Nha", "The Pub With Cold Beer",
         "Farmhouse pub at the end of a dirt road.",
         "relax", 2, "afternoon"),
    # ---- Ninh Binh ----
    _act("ninhbinh-1", "Ninh Binh", "Tam Coc Boat Ride",
         "Rowed boat between limestone karsts and rice fields.",
         "anchor", 2, "morning"),
    _act("ninhbinh-2", "Ninh Binh", "Trang An Scenic Complex",
         "Longer boat circuit through caves and temples.",
         "outdoors", 3, "morning"),
    _act("ninhbinh-3", "Ninh Binh", "Mua Cave Viewpoint",
         "Five hundred steps to the dragon viewpoint.",
         "outdoors", 1.5, "afternoon"),
    _act("ninhbinh-4", "Ninh Binh", "Ancient Capital Hoa Lu",
         "Temples of the tenth-century capital.",
         "history", 1.5, "afternoon"),
    _act("ninhbinh-8", "Ninh Binh", "Bai Dinh Pagoda Complex",
         "Vast modern pagoda complex on the hillside.",
         "culture", 2.5, "afternoon"),
    # ---- Hanoi ----
    _act("hanoi-1", "Hanoi", "Hanoi Old Quarter & Hoan Kiem Lake",
         "Guild streets of the Old Quarter and a lap of the lake.",
         "anchor", 3, "morning"),
    _act("hanoi-2", "Hanoi", "Temple of Literature",
         "Vietnam's first university, courtyards and stelae.",
         "culture", 1.5, "afternoon"),
    _act("hanoi-6", "Hanoi", "Street Food Tour",
         "Bun cha, egg coffee and banh cuon, vegetarian options on request.",
         "food", 3, "evening"),
    _act("hanoi-10", "Hanoi", "Water Puppet Theater",
         "Traditional puppetry on a water stage.",
         "culture", 1, "evening"),
    _act("hanoi-12", "Hanoi", "Weekend Night Market",
         "Stalls from the Old Quarter up to Dong Xuan market.",
         "shopping", 1.5, "evening"),
    _act("hanoi-13", "Hanoi", "Ha Long Bay Day Trip",
         "Long day out to the bay by bus and boat.",
         "anchor", 8, "morning"),
]


def sample_city_stops() -> list[CityStop]:
    return [SeedCityStop.model_validate(s).to_city_stop() for s in SAMPLE_CITY_STOPS]


def sample_activities() -> list[Activity]:
    return [SeedActivity.model_validate(a).to_activity() for a in SAMPLE_ACTIVITIES]
