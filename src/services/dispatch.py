"""
Dispatch Service
================

Owns every registry for one simulator run and drives the trip lifecycle.

Request flow
------------
1. Scan drivers in registration order for the first available one.
2. No driver -> soft failure: nothing is created, ``None`` is returned.
3. Otherwise allocate the next trip id, quote the fare once, let the
   driver accept, then record the trip globally and in the rider's history.

Completion
----------
The driver is looked up by id.  Availability is restored only when the
driver completes an IN_PROGRESS trip; a trip that never started, or whose
driver cannot be found, is still closed as COMPLETED but the driver's
flag is left as it was.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from src.schemas import Registration
from src.config import settings
from src.domain.entities import Driver, Rider, Trip
from src.domain.enums import TripStatus, UserRole
from src.domain.fares import FareStrategy, RandomFare
from src.domain.matching import first_available_driver
from src.infrastructure.repositories import (
    DriverRepository,
    RiderRepository,
    TripRepository,
)

logger = logging.getLogger(__name__)


class DispatchService:
    def __init__(self, fare_strategy: Optional[FareStrategy] = None):
        self.riders = RiderRepository()
        self.drivers = DriverRepository()
        self.trips = TripRepository()
        self.fare_strategy = fare_strategy or RandomFare(
            settings.fare_min, settings.fare_max, seed=settings.fare_seed
        )

    # ── Registration ──────────────────────────────────────────────

    def register(self, registration: Registration) -> Union[Rider, Driver]:
        if registration.role == UserRole.DRIVER:
            user: Union[Rider, Driver] = self.drivers.create(
                name=registration.name,
                phone=registration.phone,
                vehicle=registration.vehicle,
            )
            profile = "Driver"
        else:
            user = self.riders.create(name=registration.name, phone=registration.phone)
            profile = "Rider"

        logger.info("%s registered (%s profile created, id=%d)", user.name, profile, user.id)
        return user

    # ── Trip lifecycle ────────────────────────────────────────────

    def request_ride(
        self, rider: Rider, start_location: str, destination: str
    ) -> Optional[Trip]:
        driver = first_available_driver(self.drivers)
        if driver is None:
            logger.info("No available drivers at the moment.")
            return None

        trip = Trip(
            id=self.trips.next_id(),
            rider_id=rider.id,
            rider_name=rider.name,
            start_location=start_location,
            destination=destination,
        )
        trip.assign_fare(self.fare_strategy.quote())
        driver.accept_ride(trip)
        self.trips.add(trip)
        rider.add_trip(trip)

        logger.info(
            "Ride requested successfully: trip %d, %s -> %s, driver %s, fare %.2f",
            trip.id, start_location, destination, driver.name, trip.fare,
        )
        return trip

    def accept_ride(self, driver: Driver, trip_id: int) -> Optional[Trip]:
        """Hand an unassigned trip to *driver* without checking availability."""
        trip = next((t for t in self.list_available_trips() if t.id == trip_id), None)
        if trip is None:
            logger.info("Trip not found: %d", trip_id)
            return None
        driver.accept_ride(trip)
        return trip

    def start_trip(self, trip: Trip) -> bool:
        if trip.status != TripStatus.ACCEPTED:
            logger.info("Cannot start trip. Trip is not accepted.")
            return False

        driver = self.drivers.get_by_id(trip.driver_id) if trip.driver_id else None
        if driver is not None:
            driver.start_trip(trip)
        else:
            trip.transition_to(TripStatus.IN_PROGRESS)
        return True

    def complete_trip(self, trip: Trip) -> bool:
        """Close *trip*.  Returns True if its driver became available again."""
        if trip.status == TripStatus.COMPLETED:
            logger.info("Trip %d is already completed.", trip.id)
            return False

        restored = False
        driver = self.drivers.get_by_id(trip.driver_id) if trip.driver_id else None
        if driver is None:
            logger.info(
                "Driver not found for trip %d; availability unchanged.", trip.id
            )
        else:
            restored = driver.complete_trip(trip)

        if trip.status != TripStatus.COMPLETED:
            trip.end()
        return restored

    # ── Queries ───────────────────────────────────────────────────

    def list_available_trips(self) -> list[Trip]:
        return self.trips.get_by_status(TripStatus.REQUESTED)

    def list_all_trips(self) -> list[Trip]:
        return self.trips.all()

    def find_trip(self, trip_id: int) -> Optional[Trip]:
        return self.trips.get_by_id(trip_id)
