from __future__ import annotations

from datetime import timedelta

from rentx.application.utils.platform_date import parse_date_string
from rentx.domain.entities.day_event import DayEvent
from rentx.domain.entities.day_style import END_STYLE, PERIOD_STYLE, START_STYLE, MarkedDateMap


def expand_interval(start: DayEvent, end: DayEvent) -> list[str]:
    """Every calendar day from start to end inclusive, chronological."""
    first = parse_date_string(start.date_string)
    last = parse_date_string(end.date_string)
    if first > last:
        raise ValueError(f"Interval start {start.date_string} is after end {end.date_string}")

    days: list[str] = []
    current = first
    while current <= last:
        days.append(current.isoformat())
        current += timedelta(days=1)
    return days


def generate_interval(start: DayEvent, end: DayEvent) -> MarkedDateMap:
    days = expand_interval(start, end)
    marked: MarkedDateMap = {}
    for index, date_string in enumerate(days):
        if index == 0:
            marked[date_string] = START_STYLE
        elif index == len(days) - 1:
            marked[date_string] = END_STYLE
        else:
            marked[date_string] = PERIOD_STYLE
    return marked
