from fastapi import APIRouter, Depends, HTTPException

from rentx.api.v1.schemas import CarListResponseSchema, UserBookingSchema
from rentx.application.dto.car_dto import CarDTO
from rentx.application.use_cases.cars import ListCarsUseCase, ListUserBookingsUseCase
from rentx.wiring.dependencies import get_list_cars_use_case, get_list_user_bookings_use_case

router = APIRouter()


@router.get("/cars", response_model=CarListResponseSchema)
def list_cars(uc: ListCarsUseCase = Depends(get_list_cars_use_case)):
    result = uc.execute()
    if result.status != "ok":
        raise HTTPException(status_code=502, detail="could not load cars")
    return CarListResponseSchema(
        total=result.total,
        cars=[CarDTO.from_entity(car) for car in result.cars],
    )


@router.get("/users/{user_id}/bookings", response_model=list[UserBookingSchema])
def list_user_bookings(
    user_id: int,
    uc: ListUserBookingsUseCase = Depends(get_list_user_bookings_use_case),
):
    result = uc.execute(user_id)
    if result.status != "ok":
        raise HTTPException(status_code=502, detail="could not load bookings")
    return [
        UserBookingSchema(
            id=b.id,
            user_id=b.user_id,
            car=b.car,
            startDate=b.start_date,
            endDate=b.end_date,
        )
        for b in result.bookings
    ]
