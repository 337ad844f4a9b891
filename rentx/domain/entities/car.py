from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Rent:
    period: str  # e.g. "Ao dia"
    price: Decimal


@dataclass(frozen=True)
class Accessory:
    type: str
    name: str


@dataclass(frozen=True)
class Car:
    id: str
    brand: str
    name: str
    rent: Rent
    about: str = ""
    fuel_type: str = ""
    thumbnail: str = ""
    accessories: tuple[Accessory, ...] = ()
    photos: tuple[str, ...] = ()
