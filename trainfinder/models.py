"""Core records: the train itself and the sort criteria."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import Enum

from .errors import UnsupportedCriteria


@dataclass(frozen=True)
class Train:
    train_id: int
    departure_station_id: int
    arrival_station_id: int
    price: float
    arrival_time: time = time(0, 0)
    departure_time: time = time(0, 0)


class Criterion(Enum):
    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"

    @property
    def sort_key(self) -> str:
        """Name of the ``Train`` attribute this criterion orders by."""
        return _SORT_KEYS[self]

    @classmethod
    def parse(cls, text: str) -> "Criterion":
        """Exact, case-sensitive lookup by value."""
        for member in cls:
            if member.value == text:
                return member
        raise UnsupportedCriteria()


_SORT_KEYS = {
    Criterion.PRICE: "price",
    Criterion.ARRIVAL_TIME: "arrival_time",
    Criterion.DEPARTURE_TIME: "departure_time",
}
