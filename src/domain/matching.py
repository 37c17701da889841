"""
First-Available Driver Matching
===============================

Drivers are scanned in registration order and the first one whose
availability flag is set wins the request.  There is no ranking by
distance, rating or idle time.

Complexity: O(D) per request, D = registered drivers.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .entities import Driver


def first_available_driver(drivers: Iterable[Driver]) -> Optional[Driver]:
    """Return the earliest-registered available driver, or ``None``."""
    return next((d for d in drivers if d.is_available), None)
