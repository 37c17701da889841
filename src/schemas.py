"""Pydantic registration schemas shared by the dispatch service and the console."""

from __future__ import annotations

import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.config import settings
from src.domain.enums import UserRole


class _RegistrationBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    phone: str = Field(
        ...,
        pattern=settings.phone_pattern,
        description="Phone number in 123-456-7890 format.",
    )

    model_config = {"str_strip_whitespace": True}


class RiderRegistration(_RegistrationBase):
    role: Literal["RIDER"] = UserRole.RIDER.value


class DriverRegistration(_RegistrationBase):
    role: Literal["DRIVER"] = UserRole.DRIVER.value
    vehicle: str = Field(..., min_length=1, max_length=120)


Registration = Annotated[
    Union[RiderRegistration, DriverRegistration], Field(discriminator="role")
]


def is_valid_phone(phone: str) -> bool:
    """True if *phone* would pass registration validation."""
    return re.fullmatch(settings.phone_pattern, phone) is not None
