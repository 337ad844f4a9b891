#!/usr/bin/env python3
"""
Local scheduling harness (no HTTP, in-memory rental API).

Usage:
  python3 scripts/schedule_local.py 2024-03-13 2024-03-10

Each argument is one calendar tap. After the taps the selection is confirmed
and booked for the first seeded car, printing every intermediate state.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rentx.application.use_cases.scheduling import SchedulingUseCase
from rentx.application.use_cases.scheduling_details import SchedulingDetailsUseCase
from rentx.application.utils.platform_date import day_event_from_date_string, safe_timezone
from rentx.core.config import settings
from rentx.infrastructure.api.mock_api import MockRentalApi
from rentx.infrastructure.store.memory_store import MemorySelectionStore


def main(taps: list[str]) -> int:
    tz = safe_timezone(settings.RENTX_TIMEZONE)
    api = MockRentalApi()
    car = api.list_cars()[0]
    scheduling = SchedulingUseCase(store=MemorySelectionStore())

    print(f"car: {car.brand} {car.name} (R$ {car.rent.price} {car.rent.period})")
    print("-" * 60)

    for tap in taps:
        try:
            state = scheduling.select_day("local", day_event_from_date_string(tap, tz))
        except ValueError as e:
            print(f"tap {tap}: rejected ({e})")
            continue
        period = state.rental_period
        print(f"tap {tap}: {period.start_formatted} -> {period.end_formatted} ({len(state.marked_dates)} days)")

    result = scheduling.confirm("local", car)
    if result.action != "navigate":
        print(result.message)
        return 1

    details = SchedulingDetailsUseCase(api=api, user_id=settings.RENTX_USER_ID)
    summary = details.summarize(result.rental_period)
    print("-" * 60)
    print(f"{summary.quota} = R$ {summary.total}")

    outcome = details.confirm_rental(result.rental_period)
    print(f"booking: {outcome.status} steps={list(outcome.completed_steps)}")
    return 0 if outcome.status == "completed" else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
