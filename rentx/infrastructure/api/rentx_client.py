from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from rentx.application.dto.car_dto import CarDTO, car_to_payload
from rentx.application.exceptions import RentalApiContractError, RentalApiUpstreamError
from rentx.application.ports.rental_api import RentalApiPort
from rentx.core.config import settings
from rentx.domain.entities.car import Car
from rentx.domain.entities.schedule import CarSchedule, UserBooking


class RentxApiClient(RentalApiPort):
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url or settings.RENTX_API_BASE_URL
        if not self._base_url and client is None:
            raise ValueError("RENTX_API_BASE_URL is required for the rental API client")
        self._client = client or httpx.Client(
            base_url=self._base_url,
            timeout=timeout or settings.RENTX_API_TIMEOUT_SECONDS,
        )
        self._logger = logging.getLogger(__name__)

    def list_cars(self) -> list[Car]:
        data = self._request("GET", "/cars")
        try:
            return [CarDTO.model_validate(item).to_entity() for item in data]
        except (ValidationError, TypeError) as e:
            raise RentalApiContractError(f"Unexpected /cars payload: {e}") from e

    def get_car_schedule(self, car_id: str) -> CarSchedule:
        data = self._request("GET", f"/schedules_bycars/{car_id}")
        try:
            unavailable = data.get("unavailable_dates") or []
            return CarSchedule(car_id=str(car_id), unavailable_dates=tuple(str(d) for d in unavailable))
        except (AttributeError, TypeError) as e:
            raise RentalApiContractError(f"Unexpected schedule payload for car {car_id}: {e}") from e

    def create_user_booking(self, user_id: int, car: Car, start_date: str, end_date: str) -> None:
        payload = {
            "user_id": user_id,
            "car": car_to_payload(car),
            "startDate": start_date,
            "endDate": end_date,
        }
        self._request("POST", "/schedules_byuser", json=payload)
        self._logger.info("User booking created", extra={"car_id": car.id})

    def update_car_schedule(self, schedule: CarSchedule) -> None:
        payload = {"id": schedule.car_id, "unavailable_dates": list(schedule.unavailable_dates)}
        self._request("PUT", f"/schedules_bycars/{schedule.car_id}", json=payload)
        self._logger.info(
            "Car schedule updated",
            extra={"car_id": schedule.car_id, "date_count": len(schedule.unavailable_dates)},
        )

    def list_user_bookings(self, user_id: int) -> list[UserBooking]:
        data = self._request("GET", "/schedules_byuser", params={"user_id": user_id})
        try:
            return [
                UserBooking(
                    id=str(item["id"]) if item.get("id") is not None else None,
                    user_id=int(item.get("user_id", user_id)),
                    car=dict(item.get("car") or {}),
                    start_date=str(item["startDate"]),
                    end_date=str(item["endDate"]),
                )
                for item in data
            ]
        except (KeyError, AttributeError, TypeError, ValueError) as e:
            raise RentalApiContractError(f"Unexpected bookings payload: {e}") from e

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Rental API error status",
                extra={"status": e.response.status_code, "reason": f"{method} {path}"},
            )
            raise RentalApiUpstreamError(f"{method} {path} returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Rental API request failed", extra={"reason": f"{method} {path}: {e}"})
            raise RentalApiUpstreamError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RentalApiContractError(f"{method} {path} returned invalid JSON") from e
