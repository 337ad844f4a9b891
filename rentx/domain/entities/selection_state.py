from __future__ import annotations

from dataclasses import dataclass, field

from rentx.domain.entities.day_event import DayEvent
from rentx.domain.entities.day_style import MarkedDateMap


@dataclass(frozen=True)
class FormattedPeriod:
    start_formatted: str  # dd/MM/yyyy
    end_formatted: str  # dd/MM/yyyy


@dataclass(frozen=True)
class SelectionState:
    last_selected_date: DayEvent | None = None  # None means a new range starts on the next tap
    marked_dates: MarkedDateMap = field(default_factory=dict)
    rental_period: FormattedPeriod | None = None
