from __future__ import annotations

import logging
from decimal import Decimal

from rentx.application.dto.car_dto import car_to_payload
from rentx.application.ports.rental_api import RentalApiPort
from rentx.domain.entities.car import Accessory, Car, Rent
from rentx.domain.entities.schedule import CarSchedule, UserBooking

SEED_CARS: tuple[Car, ...] = (
    Car(
        id="1",
        brand="Audi",
        name="RS 5 Coupé",
        about="Este é automóvel desportivo. Surgiu do lendário touro de lide indultado na praça Real Maestranza de Sevilla.",
        rent=Rent(period="Ao dia", price=Decimal("120")),
        fuel_type="gasoline",
        thumbnail="https://example.com/audi-rs5.png",
        accessories=(
            Accessory(type="speed", name="380km/h"),
            Accessory(type="acceleration", name="3.2s"),
            Accessory(type="turning_diameter", name="800 HP"),
            Accessory(type="gasoline_motor", name="Gasolina"),
            Accessory(type="exchange", name="Auto"),
            Accessory(type="seats", name="2 pessoas"),
        ),
        photos=("https://example.com/audi-rs5.png",),
    ),
    Car(
        id="2",
        brand="Porsche",
        name="Panamera",
        about="Sedã esportivo de quatro portas.",
        rent=Rent(period="Ao dia", price=Decimal("340.50")),
        fuel_type="electric",
        thumbnail="https://example.com/panamera.png",
        accessories=(
            Accessory(type="speed", name="310km/h"),
            Accessory(type="electric_motor", name="Elétrico"),
            Accessory(type="seats", name="4 pessoas"),
        ),
        photos=("https://example.com/panamera.png",),
    ),
)


class MockRentalApi(RentalApiPort):
    def __init__(self, cars: tuple[Car, ...] | list[Car] | None = None) -> None:
        self._cars: list[Car] = list(SEED_CARS if cars is None else cars)
        self._schedules: dict[str, tuple[str, ...]] = {car.id: () for car in self._cars}
        self._bookings: list[UserBooking] = []
        self._logger = logging.getLogger(__name__)

    def list_cars(self) -> list[Car]:
        return list(self._cars)

    def get_car_schedule(self, car_id: str) -> CarSchedule:
        return CarSchedule(car_id=car_id, unavailable_dates=self._schedules.get(car_id, ()))

    def create_user_booking(self, user_id: int, car: Car, start_date: str, end_date: str) -> None:
        booking = UserBooking(
            id=str(len(self._bookings) + 1),
            user_id=user_id,
            car=car_to_payload(car),
            start_date=start_date,
            end_date=end_date,
        )
        self._bookings.append(booking)
        self._logger.info("Mock user booking created", extra={"car_id": car.id})

    def update_car_schedule(self, schedule: CarSchedule) -> None:
        self._schedules[schedule.car_id] = tuple(schedule.unavailable_dates)
        self._logger.info(
            "Mock car schedule updated",
            extra={"car_id": schedule.car_id, "date_count": len(schedule.unavailable_dates)},
        )

    def list_user_bookings(self, user_id: int) -> list[UserBooking]:
        return [b for b in self._bookings if b.user_id == user_id]
