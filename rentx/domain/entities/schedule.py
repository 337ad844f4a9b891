from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CarSchedule:
    car_id: str
    unavailable_dates: tuple[str, ...] = ()


@dataclass(frozen=True)
class UserBooking:
    id: str | None
    user_id: int
    car: dict[str, Any]  # car payload as echoed by the rental API
    start_date: str  # dd/MM/yyyy
    end_date: str  # dd/MM/yyyy
