"""Unit tests for trip entity state transitions (State Pattern)."""

import pytest

from src.domain.entities import (
    Driver,
    FareAlreadyAssigned,
    InvalidStateTransition,
    Rider,
    Trip,
)
from src.domain.enums import TripStatus


def make_trip(status=TripStatus.REQUESTED) -> Trip:
    return Trip(
        id=1, rider_id=1, rider_name="R1",
        start_location="A", destination="B", status=status,
    )


class TestTripStateMachine:
    def test_initial_status_is_requested(self):
        assert make_trip().status == TripStatus.REQUESTED

    # ── Valid transitions ─────────────────────────────────────────

    def test_requested_to_accepted(self):
        trip = make_trip()
        trip.transition_to(TripStatus.ACCEPTED)
        assert trip.status == TripStatus.ACCEPTED

    def test_accepted_to_in_progress(self):
        trip = make_trip(TripStatus.ACCEPTED)
        trip.transition_to(TripStatus.IN_PROGRESS)
        assert trip.status == TripStatus.IN_PROGRESS

    def test_in_progress_to_completed(self):
        trip = make_trip(TripStatus.IN_PROGRESS)
        trip.end()
        assert trip.status == TripStatus.COMPLETED

    def test_accepted_can_be_closed(self):
        trip = make_trip(TripStatus.ACCEPTED)
        trip.end()
        assert trip.status == TripStatus.COMPLETED

    def test_requested_can_be_closed(self):
        trip = make_trip()
        trip.end()
        assert trip.status == TripStatus.COMPLETED

    # ── Invalid transitions ───────────────────────────────────────

    def test_completed_to_anything_fails(self):
        trip = make_trip(TripStatus.COMPLETED)
        for status in TripStatus:
            with pytest.raises(InvalidStateTransition):
                trip.transition_to(status)

    def test_no_backward_moves(self):
        trip = make_trip(TripStatus.IN_PROGRESS)
        with pytest.raises(InvalidStateTransition):
            trip.transition_to(TripStatus.ACCEPTED)


class TestFare:
    def test_fare_unset_until_assigned(self):
        assert make_trip().fare is None

    def test_fare_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            Trip(
                id=1, rider_id=1, rider_name="R1",
                start_location="A", destination="B", _fare=99.0,
            )

    def test_fare_assigned_once(self):
        trip = make_trip()
        trip.assign_fare(30.0)
        with pytest.raises(FareAlreadyAssigned):
            trip.assign_fare(12.0)
        assert trip.fare == 30.0


class TestDriver:
    def setup_method(self):
        self.driver = Driver(id=7, name="D1", phone="555-010-0001", vehicle="Sedan")

    def test_accept_binds_trip(self):
        trip = make_trip()
        self.driver.accept_ride(trip)
        assert trip.driver_id == 7
        assert trip.driver_name == "D1"
        assert trip.status == TripStatus.ACCEPTED
        assert not self.driver.is_available
        assert self.driver.trip_history == [trip]

    def test_accept_while_unavailable_is_allowed(self):
        first, second = make_trip(), make_trip()
        second.id = 2
        self.driver.accept_ride(first)
        self.driver.accept_ride(second)
        assert self.driver.trip_history == [first, second]

    def test_complete_requires_in_progress(self):
        trip = make_trip()
        self.driver.accept_ride(trip)
        assert self.driver.complete_trip(trip) is False
        assert trip.status == TripStatus.ACCEPTED
        assert not self.driver.is_available

    def test_complete_in_progress_restores_availability(self):
        trip = make_trip()
        self.driver.accept_ride(trip)
        self.driver.start_trip(trip)
        assert self.driver.complete_trip(trip) is True
        assert trip.status == TripStatus.COMPLETED
        assert self.driver.is_available

    def test_toggle_availability_flips(self):
        self.driver.toggle_availability()
        assert not self.driver.is_available
        self.driver.toggle_availability()
        assert self.driver.is_available


class TestRider:
    def test_history_keeps_insertion_order(self):
        rider = Rider(id=1, name="R1", phone="555-020-0002")
        trips = [make_trip(), make_trip()]
        trips[1].id = 2
        for t in trips:
            rider.add_trip(t)
        assert [t.id for t in rider.view_history()] == [1, 2]

    def test_history_is_a_copy(self):
        rider = Rider(id=1, name="R1", phone="555-020-0002")
        rider.view_history().append(make_trip())
        assert rider.view_history() == []
