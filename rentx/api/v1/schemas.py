from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rentx.application.dto.car_dto import CarDTO
from rentx.application.use_cases.scheduling_details import BookingOutcome, RentalSummary
from rentx.application.utils.platform_date import parse_date_string
from rentx.domain.entities.day_event import DayEvent
from rentx.domain.entities.rental_period import RentalPeriod
from rentx.domain.entities.selection_state import SelectionState


class DayEventSchema(BaseModel):
    dateString: str
    day: int
    month: int
    year: int
    timestamp: int

    @field_validator("dateString")
    @classmethod
    def _check_date_string(cls, value: str) -> str:
        parse_date_string(value)
        return value

    def to_entity(self) -> DayEvent:
        return DayEvent(
            date_string=self.dateString,
            day=self.day,
            month=self.month,
            year=self.year,
            timestamp=self.timestamp,
        )

    @classmethod
    def from_entity(cls, event: DayEvent) -> "DayEventSchema":
        return cls(
            dateString=event.date_string,
            day=event.day,
            month=event.month,
            year=event.year,
            timestamp=event.timestamp,
        )


class FormattedPeriodSchema(BaseModel):
    startFormatted: str
    endFormatted: str


class SelectionStateSchema(BaseModel):
    lastSelectedDate: DayEventSchema | None = None
    markedDates: dict[str, dict[str, Any]] = Field(default_factory=dict)
    rentalPeriod: FormattedPeriodSchema | None = None

    @classmethod
    def from_entity(cls, state: SelectionState) -> "SelectionStateSchema":
        period = state.rental_period
        return cls(
            lastSelectedDate=DayEventSchema.from_entity(state.last_selected_date) if state.last_selected_date else None,
            markedDates={key: style.to_marking() for key, style in state.marked_dates.items()},
            rentalPeriod=(
                FormattedPeriodSchema(startFormatted=period.start_formatted, endFormatted=period.end_formatted)
                if period else None
            ),
        )


class RentalPeriodSchema(BaseModel):
    car: CarDTO
    dates: list[str] = Field(min_length=1)

    @field_validator("dates")
    @classmethod
    def _check_dates(cls, value: list[str]) -> list[str]:
        for date_string in value:
            parse_date_string(date_string)
        return value

    def to_entity(self) -> RentalPeriod:
        return RentalPeriod(car=self.car.to_entity(), dates=tuple(self.dates))

    @classmethod
    def from_entity(cls, period: RentalPeriod) -> "RentalPeriodSchema":
        return cls(car=CarDTO.from_entity(period.car), dates=list(period.dates))


class ConfirmSelectionResponseSchema(BaseModel):
    nextScreen: str
    params: RentalPeriodSchema


class CalendarConfigSchema(BaseModel):
    markingType: str
    minDate: str
    firstDay: int
    locale: str


class CarListResponseSchema(BaseModel):
    total: int
    cars: list[CarDTO]


class RentalSummarySchema(BaseModel):
    startFormatted: str
    endFormatted: str
    dailyPrice: Decimal
    dateCount: int
    total: Decimal
    quota: str

    @classmethod
    def from_entity(cls, summary: RentalSummary) -> "RentalSummarySchema":
        return cls(
            startFormatted=summary.start_formatted,
            endFormatted=summary.end_formatted,
            dailyPrice=summary.daily_price,
            dateCount=summary.date_count,
            total=summary.total,
            quota=summary.quota,
        )


class BookingOutcomeSchema(BaseModel):
    status: str
    nextScreen: str | None = None
    completedSteps: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, outcome: BookingOutcome) -> "BookingOutcomeSchema":
        return cls(
            status=outcome.status,
            nextScreen=outcome.next_screen,
            completedSteps=list(outcome.completed_steps),
        )


class UserBookingSchema(BaseModel):
    id: str | None = None
    user_id: int
    car: dict[str, Any] = Field(default_factory=dict)
    startDate: str
    endDate: str
