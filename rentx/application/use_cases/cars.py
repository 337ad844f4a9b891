from __future__ import annotations

import logging
from dataclasses import dataclass

from rentx.application.exceptions import RentalApiContractError, RentalApiUpstreamError
from rentx.application.ports.rental_api import RentalApiPort
from rentx.domain.entities.car import Car
from rentx.domain.entities.schedule import UserBooking


@dataclass(frozen=True)
class CarListResult:
    status: str  # "ok", "failed"
    cars: list[Car]

    @property
    def total(self) -> int:
        return len(self.cars)


@dataclass(frozen=True)
class UserBookingsResult:
    status: str  # "ok", "failed"
    bookings: list[UserBooking]


class ListCarsUseCase:
    """Home screen car list."""

    def __init__(self, api: RentalApiPort) -> None:
        self._api = api
        self._logger = logging.getLogger(__name__)

    def execute(self) -> CarListResult:
        try:
            cars = self._api.list_cars()
        except (RentalApiUpstreamError, RentalApiContractError) as e:
            self._logger.error("Error listing cars", extra={"status": "failed", "reason": str(e)})
            return CarListResult(status="failed", cars=[])
        return CarListResult(status="ok", cars=cars)


class ListUserBookingsUseCase:
    def __init__(self, api: RentalApiPort) -> None:
        self._api = api
        self._logger = logging.getLogger(__name__)

    def execute(self, user_id: int) -> UserBookingsResult:
        try:
            bookings = self._api.list_user_bookings(user_id)
        except (RentalApiUpstreamError, RentalApiContractError) as e:
            self._logger.error("Error listing user bookings", extra={"status": "failed", "reason": str(e)})
            return UserBookingsResult(status="failed", bookings=[])
        return UserBookingsResult(status="ok", bookings=bookings)
