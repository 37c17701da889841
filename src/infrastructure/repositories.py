"""
Repository Pattern -- keeps registry bookkeeping out of the dispatch logic.

All repositories are in-memory and append-only: nothing is ever removed,
and iteration order is insertion order.  Each repository assigns its own
ids, starting at 1.
"""

from __future__ import annotations

from typing import Iterator, Optional

from src.domain.entities import Driver, Rider, Trip
from src.domain.enums import TripStatus


class RiderRepository:
    def __init__(self) -> None:
        self._riders: list[Rider] = []

    def __iter__(self) -> Iterator[Rider]:
        return iter(self._riders)

    def __len__(self) -> int:
        return len(self._riders)

    def create(self, *, name: str, phone: str) -> Rider:
        rider = Rider(id=len(self._riders) + 1, name=name, phone=phone)
        self._riders.append(rider)
        return rider

    def get_by_id(self, rider_id: int) -> Optional[Rider]:
        return next((r for r in self._riders if r.id == rider_id), None)


class DriverRepository:
    def __init__(self) -> None:
        self._drivers: list[Driver] = []

    def __iter__(self) -> Iterator[Driver]:
        return iter(self._drivers)

    def __len__(self) -> int:
        return len(self._drivers)

    def create(self, *, name: str, phone: str, vehicle: str) -> Driver:
        driver = Driver(
            id=len(self._drivers) + 1, name=name, phone=phone, vehicle=vehicle
        )
        self._drivers.append(driver)
        return driver

    def get_by_id(self, driver_id: int) -> Optional[Driver]:
        return next((d for d in self._drivers if d.id == driver_id), None)


class TripRepository:
    def __init__(self) -> None:
        self._trips: list[Trip] = []
        self._counter = 0

    def __iter__(self) -> Iterator[Trip]:
        return iter(self._trips)

    def __len__(self) -> int:
        return len(self._trips)

    def next_id(self) -> int:
        self._counter += 1
        return self._counter

    def add(self, trip: Trip) -> Trip:
        self._trips.append(trip)
        return trip

    def get_by_id(self, trip_id: int) -> Optional[Trip]:
        return next((t for t in self._trips if t.id == trip_id), None)

    def get_by_status(self, status: TripStatus) -> list[Trip]:
        return [t for t in self._trips if t.status == status]

    def all(self) -> list[Trip]:
        return list(self._trips)
