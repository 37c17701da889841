"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Fares
    fare_min: int = 10  # inclusive
    fare_max: int = 50  # exclusive
    fare_seed: Optional[int] = None  # set for reproducible runs

    # Registration
    phone_pattern: str = r"^\d{3}-\d{3}-\d{4}$"

    # Console prints its own messages; service logs stay quiet by default
    log_level: str = "WARNING"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
