from __future__ import annotations

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

from rentx.domain.entities.day_event import DayEvent

DISPLAY_FORMAT = "%d/%m/%Y"

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date_string(date_string: str) -> date:
    """Parse a calendar day key (YYYY-MM-DD) as a plain calendar date.

    No UTC conversion happens here, so the day never shifts in timezones
    behind UTC.
    """
    if not isinstance(date_string, str) or not _ISO_DATE_RE.match(date_string):
        raise ValueError(f"Invalid date string {date_string!r}, expected YYYY-MM-DD")
    return date.fromisoformat(date_string)


def to_local_midnight(day: date, timezone: ZoneInfo) -> datetime:
    return datetime.combine(day, datetime.min.time(), tzinfo=timezone)


def to_timestamp_ms(day: date, timezone: ZoneInfo) -> int:
    return int(to_local_midnight(day, timezone).timestamp() * 1000)


def day_event_from_date_string(date_string: str, timezone: ZoneInfo) -> DayEvent:
    day = parse_date_string(date_string)
    return DayEvent(
        date_string=day.isoformat(),
        day=day.day,
        month=day.month,
        year=day.year,
        timestamp=to_timestamp_ms(day, timezone),
    )


def format_display_date(day: date) -> str:
    return day.strftime(DISPLAY_FORMAT)


def format_date_string(date_string: str) -> str:
    """YYYY-MM-DD -> dd/MM/yyyy."""
    return format_display_date(parse_date_string(date_string))


def parse_display_date(text: str) -> date:
    return datetime.strptime(text, DISPLAY_FORMAT).date()


def today(timezone: ZoneInfo, now: datetime | None = None) -> date:
    current = now.astimezone(timezone) if now is not None else datetime.now(timezone)
    return current.date()


def safe_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except Exception:
        return ZoneInfo("UTC")
