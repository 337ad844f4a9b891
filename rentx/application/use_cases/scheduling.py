from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from rentx.application.ports.selection_store import SelectionStorePort
from rentx.application.utils.interval import generate_interval
from rentx.application.utils.platform_date import format_date_string, parse_date_string, today
from rentx.domain.entities.calendar_config import CalendarConfig
from rentx.domain.entities.car import Car
from rentx.domain.entities.day_event import DayEvent
from rentx.domain.entities.rental_period import RentalPeriod
from rentx.domain.entities.selection_state import FormattedPeriod, SelectionState

SELECT_INTERVAL_MESSAGE = "Selecione o intervalo para alugar."
DETAILS_SCREEN = "SchedulingDetails"


@dataclass(frozen=True)
class ConfirmResult:
    action: str  # "navigate", "blocked"
    message: str | None
    rental_period: RentalPeriod | None
    next_screen: str | None = None


def handle_day_selected(tapped: DayEvent, state: SelectionState) -> SelectionState:
    """
    Apply one calendar tap to the selection.

    The previous call's end is the anchor: the new range is
    [min(last end, tap), max(last end, tap)]. With no anchor the tap is a
    one-day range.
    """
    start = tapped if state.last_selected_date is None else state.last_selected_date
    end = tapped

    # calendar day decides order, the client timestamp is not trusted
    if parse_date_string(start.date_string) > parse_date_string(end.date_string):
        start, end = end, start

    marked_dates = generate_interval(start, end)
    days = list(marked_dates)

    return SelectionState(
        last_selected_date=end,
        marked_dates=marked_dates,
        rental_period=format_rental_period(days[0], days[-1]),
    )


def format_rental_period(first_date: str, last_date: str) -> FormattedPeriod:
    return FormattedPeriod(
        start_formatted=format_date_string(first_date),
        end_formatted=format_date_string(last_date),
    )


def confirm_rental(state: SelectionState, car: Car) -> ConfirmResult:
    period = state.rental_period
    if period is None or not period.start_formatted or not period.end_formatted:
        return ConfirmResult(action="blocked", message=SELECT_INTERVAL_MESSAGE, rental_period=None)

    # details relies on dates[0] being the start and dates[-1] the end
    dates = tuple(sorted(state.marked_dates))
    return ConfirmResult(
        action="navigate",
        message=None,
        rental_period=RentalPeriod(car=car, dates=dates),
        next_screen=DETAILS_SCREEN,
    )


def build_calendar_config(timezone: ZoneInfo, now: datetime | None = None) -> CalendarConfig:
    return CalendarConfig(min_date=today(timezone, now).isoformat())


class SchedulingUseCase:
    """Scheduling screen: keeps one SelectionState per session in the store."""

    def __init__(self, store: SelectionStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def get_state(self, session_id: str) -> SelectionState:
        return self._store.get_state(session_id)

    def select_day(self, session_id: str, tapped: DayEvent) -> SelectionState:
        new_state = handle_day_selected(tapped, self._store.get_state(session_id))
        self._store.set_state(session_id, new_state)
        self._logger.info(
            "Day selected",
            extra={"session_id": session_id, "date_count": len(new_state.marked_dates)},
        )
        return new_state

    def confirm(self, session_id: str, car: Car) -> ConfirmResult:
        result = confirm_rental(self._store.get_state(session_id), car)
        if result.action == "navigate":
            self._store.clear(session_id)
            self._logger.info(
                "Rental interval confirmed",
                extra={"session_id": session_id, "car_id": car.id, "date_count": len(result.rental_period.dates)},
            )
        else:
            self._logger.info("Rental confirm blocked", extra={"session_id": session_id, "reason": "no_interval"})
        return result
