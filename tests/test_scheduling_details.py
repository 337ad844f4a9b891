"""
Tests for the scheduling details screen: pricing and the booking sequence.
"""

from __future__ import annotations

import random
from decimal import Decimal

from rentx.application.exceptions import RentalApiUpstreamError
from rentx.application.use_cases.scheduling_details import (
    CREATE_USER_BOOKING,
    FETCH_UNAVAILABLE_DATES,
    MERGE_UNAVAILABLE_DATES,
    UPDATE_UNAVAILABLE_DATES,
    SchedulingDetailsUseCase,
    merge_unavailable_dates,
    rent_total,
)
from rentx.domain.entities.car import Car, Rent
from rentx.domain.entities.rental_period import RentalPeriod
from rentx.domain.entities.schedule import CarSchedule
from rentx.infrastructure.api.mock_api import MockRentalApi

CAR = Car(id="7", brand="Porsche", name="Panamera", rent=Rent(period="Ao dia", price=Decimal("120.00")))
PERIOD = RentalPeriod(car=CAR, dates=("2024-03-10", "2024-03-11", "2024-03-12", "2024-03-13", "2024-03-14"))


class FailingApi(MockRentalApi):
    def __init__(self, fail_on: str) -> None:
        super().__init__(cars=[CAR])
        self.fail_on = fail_on
        self.calls: list[str] = []

    def get_car_schedule(self, car_id: str) -> CarSchedule:
        self.calls.append("get")
        if self.fail_on == "get":
            raise RentalApiUpstreamError("timeout")
        return super().get_car_schedule(car_id)

    def create_user_booking(self, user_id, car, start_date, end_date) -> None:
        self.calls.append("post")
        if self.fail_on == "post":
            raise RentalApiUpstreamError("500")
        super().create_user_booking(user_id, car, start_date, end_date)

    def update_car_schedule(self, schedule: CarSchedule) -> None:
        self.calls.append("put")
        if self.fail_on == "put":
            raise RentalApiUpstreamError("500")
        super().update_car_schedule(schedule)


def test_rent_total_is_exact():
    """Five days at 120.00 cost exactly 600.00."""
    assert rent_total(Decimal("120.00"), PERIOD.dates) == Decimal("600.00")


def test_rent_total_has_no_drift():
    """Random cent prices multiply without rounding error."""
    rng = random.Random(42)
    for _ in range(1000):
        cents = rng.randint(1, 10_000_00)
        count = rng.randint(1, 60)
        price = Decimal(cents) / 100
        total = rent_total(price, ["2024-01-01"] * count)
        assert total == Decimal(cents * count) / 100


def test_rent_total_accepts_float_price_without_binary_error():
    """A float price is read through its decimal text."""
    assert rent_total(0.1, ["d"] * 3) == Decimal("0.3")


def test_merge_keeps_order_and_drops_duplicates():
    """Unavailable dates merge in first-seen order without repeats."""
    merged = merge_unavailable_dates(("2024-01-01", "2024-03-10"), ("2024-03-10", "2024-03-11"))
    assert merged == ("2024-01-01", "2024-03-10", "2024-03-11")


def test_summary_formats_period_and_quota():
    """The details summary shows period, quota and total."""
    summary = SchedulingDetailsUseCase(api=MockRentalApi()).summarize(PERIOD)

    assert summary.start_formatted == "10/03/2024"
    assert summary.end_formatted == "14/03/2024"
    assert summary.date_count == 5
    assert summary.total == Decimal("600.00")
    assert summary.quota == "R$ 120.00 x5 diárias"


def test_confirm_runs_all_steps():
    """A successful booking runs all four steps and updates the car schedule."""
    api = MockRentalApi(cars=[CAR])
    api.update_car_schedule(CarSchedule(car_id="7", unavailable_dates=("2024-01-01",)))
    uc = SchedulingDetailsUseCase(api=api, user_id=1)

    outcome = uc.confirm_rental(PERIOD)

    assert outcome.status == "completed"
    assert outcome.next_screen == "SchedulingComplete"
    assert outcome.completed_steps == (
        FETCH_UNAVAILABLE_DATES,
        MERGE_UNAVAILABLE_DATES,
        CREATE_USER_BOOKING,
        UPDATE_UNAVAILABLE_DATES,
    )
    assert api.get_car_schedule("7").unavailable_dates == ("2024-01-01", *PERIOD.dates)

    bookings = api.list_user_bookings(1)
    assert len(bookings) == 1
    assert bookings[0].start_date == "10/03/2024"
    assert bookings[0].end_date == "14/03/2024"


def test_confirm_stops_at_first_failure():
    """A failed schedule fetch stops the booking before any write."""
    api = FailingApi(fail_on="get")
    outcome = SchedulingDetailsUseCase(api=api).confirm_rental(PERIOD)

    assert outcome.status == "failed"
    assert outcome.failed_step == FETCH_UNAVAILABLE_DATES
    assert outcome.completed_steps == ()
    assert api.calls == ["get"]


def test_confirm_failure_after_booking_leaves_partial_state():
    """A failed schedule update leaves the booking record in place."""
    api = FailingApi(fail_on="put")
    outcome = SchedulingDetailsUseCase(api=api).confirm_rental(PERIOD)

    assert outcome.status == "failed"
    assert outcome.failed_step == UPDATE_UNAVAILABLE_DATES
    assert outcome.next_screen is None
    assert api.calls == ["get", "post", "put"]
    # booking record exists but the car schedule was never updated
    assert len(api.list_user_bookings(1)) == 1
    assert api.get_car_schedule("7").unavailable_dates == ()
