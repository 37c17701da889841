"""
Console menu
============

Numbered text menu over a ``DispatchService``.  Reads through an
injectable ``input_fn`` and writes to an injectable stream so a session
can be scripted.  End of input behaves like choosing *Exit*.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from pydantic import ValidationError

from src.schemas import (
    DriverRegistration,
    RiderRegistration,
    is_valid_phone,
)
from src.domain.entities import DispatchError, Driver, Rider, Trip
from src.domain.enums import TripStatus
from src.services.dispatch import DispatchService

logger = logging.getLogger(__name__)

MENU = """Menu:
1. Register as Rider
2. Register as Driver
3. Request Ride
4. Complete Trip
5. View Ride History
6. Display All Trips
7. Accept Ride
8. Exit
9. Start Trip"""

EXIT_CHOICE = 8


class _EndOfInput(Exception):
    pass


def format_trip(trip: Trip) -> str:
    fare = f"{trip.fare:g}" if trip.fare is not None else "-"
    return (
        f"TripID: {trip.id}, Rider: {trip.rider_name}, "
        f"Driver: {trip.driver_name or '-'}, Start: {trip.start_location}, "
        f"Destination: {trip.destination}, Fare: {fare}, "
        f"Status: {trip.status.value}"
    )


def format_rider(rider: Rider) -> str:
    return f"User: {rider.name}, Phone: {rider.phone}"


def format_driver(driver: Driver) -> str:
    return (
        f"User: {driver.name}, Phone: {driver.phone}\n"
        f"Vehicle: {driver.vehicle}, Available: {driver.is_available}"
    )


class ConsoleMenu:
    def __init__(
        self,
        service: DispatchService,
        input_fn: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ):
        self.service = service
        self._input_fn = input_fn
        self.out = out or sys.stdout
        self._actions: dict[int, Callable[[], None]] = {
            1: self.register_rider,
            2: self.register_driver,
            3: self.request_ride,
            4: self.complete_trip,
            5: self.view_ride_history,
            6: self.display_all_trips,
            7: self.accept_ride,
            9: self.start_trip,
        }

    # ── I/O helpers ───────────────────────────────────────────────

    def say(self, message: str) -> None:
        print(message, file=self.out)

    def ask(self, prompt: str) -> str:
        try:
            return self._input_fn(prompt).strip()
        except EOFError:
            raise _EndOfInput from None

    def ask_int(self, prompt: str) -> Optional[int]:
        raw = self.ask(prompt)
        try:
            return int(raw)
        except ValueError:
            self.say("Invalid input.")
            return None

    def ask_phone(self) -> str:
        phone = self.ask("Enter Phone Number (Format: 123-456-7890): ")
        while not is_valid_phone(phone):
            phone = self.ask(
                "Invalid format. Please enter a valid Phone Number "
                "(Format: 123-456-7890): "
            )
        return phone

    # ── Loop ──────────────────────────────────────────────────────

    def run(self) -> None:
        while True:
            self.say(MENU)
            try:
                raw = self.ask("Enter your choice: ")
            except _EndOfInput:
                break

            try:
                choice = int(raw)
            except ValueError:
                self.say("Invalid input. Please enter a number.")
                continue

            if choice == EXIT_CHOICE:
                break

            action = self._actions.get(choice)
            if action is None:
                self.say("Invalid choice. Try again.")
                continue

            try:
                action()
            except _EndOfInput:
                break
            except (DispatchError, ValidationError) as exc:
                logger.debug("Action %d failed", choice, exc_info=True)
                self.say(f"Error: {exc}")

    # ── Actions ───────────────────────────────────────────────────

    def register_rider(self) -> None:
        name = self.ask("Enter Rider Name: ")
        phone = self.ask_phone()
        rider = self.service.register(RiderRegistration(name=name, phone=phone))
        self.say(f"{rider.name} Registered")
        self.say("Rider profile created.")
        self.say(format_rider(rider))

    def register_driver(self) -> None:
        name = self.ask("Enter Driver Name: ")
        phone = self.ask_phone()
        vehicle = self.ask("Enter Vehicle Details: ")
        driver = self.service.register(
            DriverRegistration(name=name, phone=phone, vehicle=vehicle)
        )
        self.say(f"{driver.name} Registered")
        self.say("Driver profile created.")
        self.say(format_driver(driver))

    def _pick_rider(self) -> Optional[Rider]:
        if not len(self.service.riders):
            self.say("No riders registered.")
            return None
        rider_id = self.ask_int("Enter Rider ID: ")
        if rider_id is None:
            return None
        rider = self.service.riders.get_by_id(rider_id)
        if rider is None:
            self.say("Rider not found.")
        return rider

    def _pick_driver(self) -> Optional[Driver]:
        if not len(self.service.drivers):
            self.say("No drivers registered.")
            return None
        driver_id = self.ask_int("Enter Driver ID: ")
        if driver_id is None:
            return None
        driver = self.service.drivers.get_by_id(driver_id)
        if driver is None:
            self.say("Driver not found.")
        return driver

    def _pick_trip(self) -> Optional[Trip]:
        if not len(self.service.trips):
            self.say("No ongoing trips.")
            return None
        trip_id = self.ask_int("Enter Trip ID: ")
        if trip_id is None:
            return None
        trip = self.service.find_trip(trip_id)
        if trip is None:
            self.say("Trip not found.")
        return trip

    def request_ride(self) -> None:
        rider = self._pick_rider()
        if rider is None:
            return
        start = self.ask("Enter Start Location: ")
        destination = self.ask("Enter Destination: ")
        trip = self.service.request_ride(rider, start, destination)
        if trip is None:
            self.say("No available drivers at the moment.")
            return
        self.say(f"{trip.driver_name} accepted the ride.")
        self.say("Ride requested successfully.")
        self.say(format_trip(trip))

    def start_trip(self) -> None:
        trip = self._pick_trip()
        if trip is None:
            return
        if self.service.start_trip(trip):
            self.say(f"Trip {trip.id} is now in progress.")
        else:
            self.say("Cannot start trip. Trip is not accepted.")

    def complete_trip(self) -> None:
        trip = self._pick_trip()
        if trip is None:
            return
        if trip.status == TripStatus.COMPLETED:
            self.say("Trip is already completed.")
            return
        was_in_progress = trip.status == TripStatus.IN_PROGRESS
        restored = self.service.complete_trip(trip)
        if restored:
            self.say(f"Trip completed by {trip.driver_name}.")
        else:
            if not was_in_progress:
                self.say("Cannot complete trip. Trip is not in progress.")
            self.say(f"Trip {trip.id} closed; driver availability unchanged.")

    def view_ride_history(self) -> None:
        rider = self._pick_rider()
        if rider is None:
            return
        self.say("Ride History:")
        for trip in rider.view_history():
            self.say(format_trip(trip))

    def display_all_trips(self) -> None:
        self.say("All Trips:")
        for trip in self.service.list_all_trips():
            self.say(format_trip(trip))

    def accept_ride(self) -> None:
        driver = self._pick_driver()
        if driver is None:
            return
        available = self.service.list_available_trips()
        if not available:
            self.say("No available trips.")
            return
        self.say("Available Trips:")
        for trip in available:
            self.say(format_trip(trip))
        trip_id = self.ask_int("Enter the Trip ID to accept: ")
        if trip_id is None:
            return
        if self.service.accept_ride(driver, trip_id) is None:
            self.say("Trip not found.")
        else:
            self.say(f"{driver.name} accepted the ride.")
