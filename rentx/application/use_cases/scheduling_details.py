from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from rentx.application.exceptions import RentalApiContractError, RentalApiUpstreamError
from rentx.application.ports.rental_api import RentalApiPort
from rentx.application.utils.platform_date import format_date_string
from rentx.domain.entities.rental_period import RentalPeriod
from rentx.domain.entities.schedule import CarSchedule

COMPLETE_SCREEN = "SchedulingComplete"

FETCH_UNAVAILABLE_DATES = "fetch_unavailable_dates"
MERGE_UNAVAILABLE_DATES = "merge_unavailable_dates"
CREATE_USER_BOOKING = "create_user_booking"
UPDATE_UNAVAILABLE_DATES = "update_unavailable_dates"


def rent_total(price: Decimal | int | str, dates: tuple[str, ...] | list[str]) -> Decimal:
    """Daily price times number of days, in exact decimal arithmetic."""
    unit = price if isinstance(price, Decimal) else Decimal(str(price))
    return unit * len(dates)


def merge_unavailable_dates(existing: tuple[str, ...] | list[str], new: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Union of both lists, keeping first-seen order."""
    merged: dict[str, None] = {}
    for date_string in (*existing, *new):
        merged.setdefault(date_string, None)
    return tuple(merged)


@dataclass(frozen=True)
class RentalSummary:
    start_formatted: str
    end_formatted: str
    daily_price: Decimal
    date_count: int
    total: Decimal
    quota: str  # e.g. "R$ 120 x5 diárias"


@dataclass(frozen=True)
class BookingOutcome:
    status: str  # "completed", "failed"
    next_screen: str | None = None
    failed_step: str | None = None
    completed_steps: tuple[str, ...] = field(default_factory=tuple)
    error: str | None = None


class SchedulingDetailsUseCase:
    def __init__(self, api: RentalApiPort, user_id: int = 1) -> None:
        self._api = api
        self._user_id = user_id
        self._logger = logging.getLogger(__name__)

    def summarize(self, period: RentalPeriod) -> RentalSummary:
        price = period.car.rent.price
        return RentalSummary(
            start_formatted=format_date_string(period.start_date),
            end_formatted=format_date_string(period.end_date),
            daily_price=price,
            date_count=len(period.dates),
            total=rent_total(price, period.dates),
            quota=f"R$ {price} x{len(period.dates)} diárias",
        )

    def confirm_rental(self, period: RentalPeriod, user_id: int | None = None) -> BookingOutcome:
        """
        Book the car for the period in four sequential steps.

        A failure stops the sequence. Steps already applied are not rolled
        back, so the booking record may exist while the car's unavailable
        dates were never updated.
        """
        car = period.car
        user = self._user_id if user_id is None else user_id
        completed: list[str] = []
        step = FETCH_UNAVAILABLE_DATES

        try:
            schedule = self._api.get_car_schedule(car.id)
            completed.append(step)

            step = MERGE_UNAVAILABLE_DATES
            unavailable_dates = merge_unavailable_dates(schedule.unavailable_dates, period.dates)
            completed.append(step)

            step = CREATE_USER_BOOKING
            self._api.create_user_booking(
                user_id=user,
                car=car,
                start_date=format_date_string(period.start_date),
                end_date=format_date_string(period.end_date),
            )
            completed.append(step)

            step = UPDATE_UNAVAILABLE_DATES
            self._api.update_car_schedule(CarSchedule(car_id=car.id, unavailable_dates=unavailable_dates))
            completed.append(step)
        except (RentalApiUpstreamError, RentalApiContractError) as e:
            self._logger.error(
                "Booking failed",
                extra={"car_id": car.id, "step": step, "status": "failed", "reason": str(e)},
            )
            return BookingOutcome(
                status="failed",
                failed_step=step,
                completed_steps=tuple(completed),
                error=str(e),
            )

        self._logger.info(
            "Booking completed",
            extra={"car_id": car.id, "status": "completed", "date_count": len(period.dates)},
        )
        return BookingOutcome(
            status="completed",
            next_screen=COMPLETE_SCREEN,
            completed_steps=tuple(completed),
        )
