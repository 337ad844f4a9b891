from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DayEvent:
    date_string: str  # YYYY-MM-DD
    day: int
    month: int
    year: int
    timestamp: int  # epoch milliseconds at local midnight, ordering only

    def __post_init__(self) -> None:
        expected = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if expected != self.date_string:
            raise ValueError(
                f"DayEvent fields {expected} do not match date_string {self.date_string!r}"
            )
