from __future__ import annotations

from abc import ABC, abstractmethod

from rentx.domain.entities.car import Car
from rentx.domain.entities.schedule import CarSchedule, UserBooking


class RentalApiPort(ABC):
    """Upstream rental API.

    Writes are not transactional. The API is assumed to serialize writes per
    car, otherwise concurrent bookings of the same car may double-book.
    """

    @abstractmethod
    def list_cars(self) -> list[Car]:
        """GET /cars."""
        raise NotImplementedError

    @abstractmethod
    def get_car_schedule(self, car_id: str) -> CarSchedule:
        """GET /schedules_bycars/:id."""
        raise NotImplementedError

    @abstractmethod
    def create_user_booking(self, user_id: int, car: Car, start_date: str, end_date: str) -> None:
        """POST /schedules_byuser. Dates are dd/MM/yyyy."""
        raise NotImplementedError

    @abstractmethod
    def update_car_schedule(self, schedule: CarSchedule) -> None:
        """PUT /schedules_bycars/:id."""
        raise NotImplementedError

    @abstractmethod
    def list_user_bookings(self, user_id: int) -> list[UserBooking]:
        """GET /schedules_byuser?user_id=."""
        raise NotImplementedError
