"""
Tests for the HTTP surface, wired against the in-memory rental API.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from rentx.application.dto.car_dto import car_to_payload
from rentx.application.use_cases.cars import ListCarsUseCase, ListUserBookingsUseCase
from rentx.application.use_cases.scheduling import SchedulingUseCase
from rentx.application.use_cases.scheduling_details import SchedulingDetailsUseCase
from rentx.application.utils.platform_date import day_event_from_date_string
from rentx.infrastructure.api.mock_api import SEED_CARS, MockRentalApi
from rentx.infrastructure.store.memory_store import MemorySelectionStore
from rentx.main import app
from rentx.wiring import dependencies

TZ = ZoneInfo("America/Sao_Paulo")


@pytest.fixture
def client():
    api = MockRentalApi()
    scheduling = SchedulingUseCase(store=MemorySelectionStore())
    app.dependency_overrides[dependencies.get_scheduling_use_case] = lambda: scheduling
    app.dependency_overrides[dependencies.get_scheduling_details_use_case] = lambda: SchedulingDetailsUseCase(api=api)
    app.dependency_overrides[dependencies.get_list_cars_use_case] = lambda: ListCarsUseCase(api=api)
    app.dependency_overrides[dependencies.get_list_user_bookings_use_case] = lambda: ListUserBookingsUseCase(api=api)
    app.dependency_overrides[dependencies.get_timezone] = lambda: TZ
    yield TestClient(app)
    app.dependency_overrides.clear()


def day_payload(date_string: str) -> dict:
    event = day_event_from_date_string(date_string, TZ)
    return {
        "dateString": event.date_string,
        "day": event.day,
        "month": event.month,
        "year": event.year,
        "timestamp": event.timestamp,
    }


def test_health(client):
    """Health endpoint answers ok."""
    assert client.get("/health").json() == {"status": "ok"}


def test_list_cars(client):
    """Cars endpoint lists the seeded cars with a total."""
    data = client.get("/api/v1/cars").json()

    assert data["total"] == len(SEED_CARS)
    assert data["cars"][0]["brand"] == "Audi"


def test_calendar_config(client):
    """Calendar config endpoint exposes the widget settings."""
    data = client.get("/api/v1/calendar/config").json()

    assert data["markingType"] == "period"
    assert data["firstDay"] == 1
    assert len(data["minDate"]) == 10


def test_full_scheduling_flow(client):
    """Taps, confirm, summary and booking work end to end."""
    car = car_to_payload(SEED_CARS[0])

    client.post("/api/v1/scheduling/s1/days", json=day_payload("2024-03-13"))
    resp = client.post("/api/v1/scheduling/s1/days", json=day_payload("2024-03-10"))
    assert resp.status_code == 200
    state = resp.json()
    assert list(state["markedDates"]) == ["2024-03-10", "2024-03-11", "2024-03-12", "2024-03-13"]
    assert state["markedDates"]["2024-03-10"]["startingDay"] is True
    assert state["markedDates"]["2024-03-13"]["endingDay"] is True
    assert state["rentalPeriod"] == {"startFormatted": "10/03/2024", "endFormatted": "13/03/2024"}

    resp = client.post("/api/v1/scheduling/s1/confirm", json=car)
    assert resp.status_code == 200
    handoff = resp.json()
    assert handoff["nextScreen"] == "SchedulingDetails"
    assert len(handoff["params"]["dates"]) == 4

    # session is cleared once navigation happened
    assert client.get("/api/v1/scheduling/s1").json()["markedDates"] == {}

    summary = client.post("/api/v1/scheduling-details/summary", json=handoff["params"]).json()
    assert summary["dateCount"] == 4
    assert summary["startFormatted"] == "10/03/2024"
    assert summary["endFormatted"] == "13/03/2024"

    resp = client.post("/api/v1/scheduling-details/confirm", json=handoff["params"])
    assert resp.status_code == 200
    assert resp.json()["nextScreen"] == "SchedulingComplete"

    bookings = client.get("/api/v1/users/1/bookings").json()
    assert len(bookings) == 1
    assert bookings[0]["startDate"] == "10/03/2024"


def test_confirm_without_interval_is_rejected(client):
    """Confirming an empty session returns the selection prompt."""
    resp = client.post("/api/v1/scheduling/empty/confirm", json=car_to_payload(SEED_CARS[0]))

    assert resp.status_code == 422
    assert resp.json()["detail"] == "Selecione o intervalo para alugar."


def test_malformed_day_is_rejected(client):
    """An impossible date string fails request validation."""
    payload = day_payload("2024-03-10")
    payload["dateString"] = "2024-13-40"

    resp = client.post("/api/v1/scheduling/s2/days", json=payload)

    assert resp.status_code == 422


def test_inconsistent_day_fields_are_rejected(client):
    """Day fields contradicting the date string return 400."""
    payload = day_payload("2024-03-10")
    payload["day"] = 11

    resp = client.post("/api/v1/scheduling/s3/days", json=payload)

    assert resp.status_code == 400


def test_day_order_ignores_client_timestamp(client):
    """Valid days with out-of-order timestamps are still accepted and ordered by date."""
    later = day_payload("2024-03-13")
    later["timestamp"] = 0
    earlier = day_payload("2024-03-10")
    earlier["timestamp"] = 1

    client.post("/api/v1/scheduling/s4/days", json=later)
    resp = client.post("/api/v1/scheduling/s4/days", json=earlier)

    assert resp.status_code == 200
    assert resp.json()["rentalPeriod"] == {"startFormatted": "10/03/2024", "endFormatted": "13/03/2024"}
