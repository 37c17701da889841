"""
Domain entities with business logic.

Patterns used
-------------
- **State Pattern** on ``Trip``: enforces valid lifecycle transitions
  (REQUESTED -> ACCEPTED -> IN_PROGRESS -> COMPLETED).
- ``Driver`` owns its availability flag and the trips it has accepted;
  ``Rider`` owns an append-only ride history.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .enums import TripStatus, TRIP_TRANSITIONS

logger = logging.getLogger(__name__)


class DispatchError(Exception):
    """Base class for ride-sharing domain errors."""


class InvalidStateTransition(DispatchError):
    """Raised when a trip status change violates the state machine."""


class FareAlreadyAssigned(DispatchError):
    """Raised when a fare is set on a trip that already has one."""


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Trip:
    id: int
    rider_id: int
    rider_name: str
    start_location: str
    destination: str
    driver_id: Optional[int] = None
    driver_name: Optional[str] = None
    status: TripStatus = TripStatus.REQUESTED
    _fare: Optional[float] = field(default=None, init=False, repr=False)

    @property
    def fare(self) -> Optional[float]:
        return self._fare

    def assign_fare(self, amount: float) -> None:
        """Set the fare.  A trip is priced exactly once."""
        if self._fare is not None:
            raise FareAlreadyAssigned(f"Trip {self.id} already has fare {self._fare}")
        self._fare = amount

    def transition_to(self, new_status: TripStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        allowed = TRIP_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition trip {self.id} from {self.status.value} "
                f"to {new_status.value}"
            )
        self.status = new_status

    def end(self) -> None:
        self.transition_to(TripStatus.COMPLETED)


@dataclass
class Rider:
    id: int
    name: str
    phone: str
    ride_history: list[Trip] = field(default_factory=list)

    def add_trip(self, trip: Trip) -> None:
        self.ride_history.append(trip)

    def view_history(self) -> list[Trip]:
        return list(self.ride_history)


@dataclass
class Driver:
    id: int
    name: str
    phone: str
    vehicle: str
    is_available: bool = True
    trip_history: list[Trip] = field(default_factory=list)

    def accept_ride(self, trip: Trip) -> None:
        # No availability check here: a driver handed a trip directly takes it.
        trip.transition_to(TripStatus.ACCEPTED)
        trip.driver_id = self.id
        trip.driver_name = self.name
        self.is_available = False
        self.trip_history.append(trip)
        logger.info("%s accepted the ride.", self.name)

    def start_trip(self, trip: Trip) -> None:
        trip.transition_to(TripStatus.IN_PROGRESS)
        logger.info("Trip %d started by %s.", trip.id, self.name)

    def complete_trip(self, trip: Trip) -> bool:
        """Finish an in-progress trip and become available again.

        Returns ``False`` and leaves everything untouched when the trip is
        not in progress.
        """
        if trip.status != TripStatus.IN_PROGRESS:
            logger.info("Cannot complete trip. Trip is not in progress.")
            return False

        trip.end()
        self.toggle_availability()
        logger.info("Trip completed by %s.", self.name)
        return True

    def toggle_availability(self) -> None:
        self.is_available = not self.is_available
