from __future__ import annotations

from dataclasses import dataclass

from rentx.domain.entities.car import Car


@dataclass(frozen=True)
class RentalPeriod:
    """Car plus the chronological dates handed from scheduling to details."""

    car: Car
    dates: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.dates:
            raise ValueError("RentalPeriod requires at least one date")

    @property
    def start_date(self) -> str:
        return self.dates[0]

    @property
    def end_date(self) -> str:
        return self.dates[-1]
