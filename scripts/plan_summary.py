#!/usr/bin/env python3
"""
Print the day-by-day plan for a seeded trip with each day's budget status.

Usage:
    PYTHONPATH=. python3 scripts/plan_summary.py                    # bundled sample trip
    PYTHONPATH=. python3 scripts/plan_summary.py --seed trip.json   # external seed
    PYTHONPATH=. python3 scripts/plan_summary.py --suggest          # auto-fill every day first
    PYTHONPATH=. python3 scripts/plan_summary.py --budget 8 --suggest

Exits 1 if the seed file is invalid.
"""

import argparse
import logging
import sys

from services.tripboard.budget.classifier import TimeBudgetStatus, classify_day, remaining_hours
from services.tripboard.catalog.summary import summarize_cities, total_scheduled_activities
from services.tripboard.config import settings
from services.tripboard.seed.loader import SeedDataError, load_default_seed
from services.tripboard.store.itinerary_store import ItineraryStore

logger = logging.getLogger("plan_summary")

# ANSI colors
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

STATUS_COLORS = {
    TimeBudgetStatus.UNDERBOOKED: DIM,
    TimeBudgetStatus.APPROACHING: YELLOW,
    TimeBudgetStatus.FULL: GREEN,
    TimeBudgetStatus.OVERBOOKED: RED,
}


def print_plan(store: ItineraryStore) -> None:
    state = store.state
    for summary in summarize_cities(state):
        print(
            f"\n{BOLD}{summary.name}{RESET}  "
            f"{summary.start_date:%b %d} - {summary.end_date:%b %d}  "
            f"({summary.scheduled_activity_count} activities, {summary.total_scheduled_hours:g}h)"
        )
        for day in state.days:
            if day.city_or_region != summary.name:
                continue
            status = classify_day(day, store.budget)
            color = STATUS_COLORS[status]
            print(
                f"  {day.date:%a %b %d}  {color}{status.value:<11}{RESET} "
                f"{day.total_scheduled_hours:g}/{store.budget:g}h  "
                f"{DIM}({remaining_hours(day.total_scheduled_hours, store.budget):+g}h left){RESET}"
            )
            for activity in day.scheduled_activities:
                print(f"      - {activity.title} ({activity.estimated_duration_hours:g}h, {activity.category.value})")

    print(f"\n{total_scheduled_activities(state)} activities scheduled across {len(state.days)} days")


def main() -> int:
    parser = argparse.ArgumentParser(description="Show a seeded trip day by day")
    parser.add_argument("--seed", default=None, help="JSON seed file (default: SEED_PATH or bundled sample)")
    parser.add_argument("--suggest", action="store_true", help="Fill every day with suggestions first")
    parser.add_argument("--budget", type=float, default=settings.daily_time_budget_hours,
                        help="Daily time budget in hours")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.budget <= 0:
        logger.error("--budget must be positive, got %s", args.budget)
        return 1

    try:
        state = load_default_seed(args.seed)
    except SeedDataError as e:
        logger.error("%s", e)
        return 1

    store = ItineraryStore(state, budget=args.budget)
    if args.suggest:
        for day in state.days:
            store.suggest(day.id)

    print_plan(store)
    return 0


if __name__ == "__main__":
    sys.exit(main())
