"""
Shared test fixtures.

Every test gets a fresh ``DispatchService`` with a fixed fare so trip
details are deterministic.
"""

import pytest

from src.schemas import DriverRegistration, RiderRegistration
from src.domain.fares import FixedFare
from src.services.dispatch import DispatchService


# ── Helpers ───────────────────────────────────────────────────────────


def add_driver(service: DispatchService, name: str, vehicle: str = "Blue Sedan"):
    return service.register(
        DriverRegistration(name=name, phone="555-010-0001", vehicle=vehicle)
    )


def add_rider(service: DispatchService, name: str):
    return service.register(RiderRegistration(name=name, phone="555-020-0002"))


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def service() -> DispatchService:
    return DispatchService(fare_strategy=FixedFare(25.0))


@pytest.fixture
def rider(service):
    return add_rider(service, "R1")


@pytest.fixture
def driver(service):
    return add_driver(service, "D1")
