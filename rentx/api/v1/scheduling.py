from __future__ import annotations

import logging
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, HTTPException

from rentx.api.v1.schemas import (
    BookingOutcomeSchema,
    CalendarConfigSchema,
    ConfirmSelectionResponseSchema,
    DayEventSchema,
    RentalPeriodSchema,
    RentalSummarySchema,
    SelectionStateSchema,
)
from rentx.application.dto.car_dto import CarDTO
from rentx.application.use_cases.scheduling import SchedulingUseCase, build_calendar_config
from rentx.application.use_cases.scheduling_details import SchedulingDetailsUseCase
from rentx.wiring.dependencies import (
    get_scheduling_details_use_case,
    get_scheduling_use_case,
    get_timezone,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/calendar/config", response_model=CalendarConfigSchema)
def calendar_config(timezone: ZoneInfo = Depends(get_timezone)):
    config = build_calendar_config(timezone)
    return CalendarConfigSchema(
        markingType=config.marking_type,
        minDate=config.min_date,
        firstDay=config.first_day,
        locale=config.locale,
    )


@router.get("/scheduling/{session_id}", response_model=SelectionStateSchema)
def get_selection(
    session_id: str,
    uc: SchedulingUseCase = Depends(get_scheduling_use_case),
):
    return SelectionStateSchema.from_entity(uc.get_state(session_id))


@router.post("/scheduling/{session_id}/days", response_model=SelectionStateSchema)
def select_day(
    session_id: str,
    req: DayEventSchema,
    uc: SchedulingUseCase = Depends(get_scheduling_use_case),
):
    try:
        state = uc.select_day(session_id, req.to_entity())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SelectionStateSchema.from_entity(state)


@router.post("/scheduling/{session_id}/confirm", response_model=ConfirmSelectionResponseSchema)
def confirm_selection(
    session_id: str,
    req: CarDTO,
    uc: SchedulingUseCase = Depends(get_scheduling_use_case),
):
    result = uc.confirm(session_id, req.to_entity())
    if result.action != "navigate" or result.rental_period is None:
        raise HTTPException(status_code=422, detail=result.message)
    return ConfirmSelectionResponseSchema(
        nextScreen=result.next_screen,
        params=RentalPeriodSchema.from_entity(result.rental_period),
    )


@router.post("/scheduling-details/summary", response_model=RentalSummarySchema)
def rental_summary(
    req: RentalPeriodSchema,
    uc: SchedulingDetailsUseCase = Depends(get_scheduling_details_use_case),
):
    return RentalSummarySchema.from_entity(uc.summarize(req.to_entity()))


@router.post("/scheduling-details/confirm", response_model=BookingOutcomeSchema)
def confirm_booking(
    req: RentalPeriodSchema,
    uc: SchedulingDetailsUseCase = Depends(get_scheduling_details_use_case),
):
    outcome = uc.confirm_rental(req.to_entity())
    if outcome.status != "completed":
        raise HTTPException(
            status_code=502,
            detail={"message": "booking failed", "failedStep": outcome.failed_step},
        )
    return BookingOutcomeSchema.from_entity(outcome)
