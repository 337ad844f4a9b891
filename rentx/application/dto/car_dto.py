from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_serializer

from rentx.domain.entities.car import Accessory, Car, Rent


class RentDTO(BaseModel):
    period: str = ""
    price: Decimal

    @field_serializer("price", when_used="json")
    def _serialize_price(self, value: Decimal) -> int | float:
        if value == value.to_integral_value():
            return int(value)
        return float(value)


class AccessoryDTO(BaseModel):
    type: str
    name: str


class CarDTO(BaseModel):
    id: str | int
    brand: str
    name: str
    about: str = ""
    rent: RentDTO
    fuel_type: str = ""
    thumbnail: str = ""
    accessories: list[AccessoryDTO] = Field(default_factory=list)
    photos: list[str] = Field(default_factory=list)

    def to_entity(self) -> Car:
        return Car(
            id=str(self.id),
            brand=self.brand,
            name=self.name,
            about=self.about,
            rent=Rent(period=self.rent.period, price=self.rent.price),
            fuel_type=self.fuel_type,
            thumbnail=self.thumbnail,
            accessories=tuple(Accessory(type=a.type, name=a.name) for a in self.accessories),
            photos=tuple(self.photos),
        )

    @classmethod
    def from_entity(cls, car: Car) -> "CarDTO":
        return cls(
            id=car.id,
            brand=car.brand,
            name=car.name,
            about=car.about,
            rent=RentDTO(period=car.rent.period, price=car.rent.price),
            fuel_type=car.fuel_type,
            thumbnail=car.thumbnail,
            accessories=[AccessoryDTO(type=a.type, name=a.name) for a in car.accessories],
            photos=list(car.photos),
        )


def car_to_payload(car: Car) -> dict[str, Any]:
    return CarDTO.from_entity(car).model_dump(mode="json")
