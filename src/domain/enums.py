"""Domain enumerations and state-transition rules."""

import enum


class TripStatus(str, enum.Enum):
    REQUESTED = "REQUESTED"
    ACCEPTED = "ACCEPTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


# State machine: maps current status -> set of valid next statuses.
# Jumps to COMPLETED close a trip that never started.
TRIP_TRANSITIONS: dict[TripStatus, set[TripStatus]] = {
    TripStatus.REQUESTED: {TripStatus.ACCEPTED, TripStatus.COMPLETED},
    TripStatus.ACCEPTED: {TripStatus.IN_PROGRESS, TripStatus.COMPLETED},
    TripStatus.IN_PROGRESS: {TripStatus.COMPLETED},
    TripStatus.COMPLETED: set(),
}


class UserRole(str, enum.Enum):
    RIDER = "RIDER"
    DRIVER = "DRIVER"
