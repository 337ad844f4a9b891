from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarConfig:
    min_date: str  # YYYY-MM-DD, today in the configured timezone
    marking_type: str = "period"
    first_day: int = 1  # Monday
    locale: str = "pt-br"
