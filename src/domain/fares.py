"""
Fare Assignment  (Strategy Pattern)
===================================

Fares are not derived from distance or demand: each trip is quoted once,
at creation, by a ``FareStrategy``.

* ``RandomFare``  -- whole-unit amount drawn uniformly from ``[low, high)``.
* ``FixedFare``   -- constant amount, useful for scripted runs and tests.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional


class FareStrategy(ABC):
    @abstractmethod
    def quote(self) -> float: ...


class RandomFare(FareStrategy):
    def __init__(self, low: int = 10, high: int = 50, seed: Optional[int] = None):
        if low >= high:
            raise ValueError(f"Empty fare range [{low}, {high})")
        self.low = low
        self.high = high
        self._rng = random.Random(seed)

    def quote(self) -> float:
        return float(self._rng.randrange(self.low, self.high))


class FixedFare(FareStrategy):
    def __init__(self, amount: float):
        self.amount = amount

    def quote(self) -> float:
        return self.amount
