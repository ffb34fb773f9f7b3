"""
Tripboard — itinerary board core.

Stops expand into days, activities are assigned to days, and each day is
checked against a daily time budget. All state lives in an immutable
ItineraryState snapshot held by store.itinerary_store.ItineraryStore.
"""
