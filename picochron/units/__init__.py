"""Temporal units and enumerations.

This module provides:
    - TimeUnit: Fixed-length time units (DAY down to PICOSECOND)
    - Weekday: Day of the week (MONDAY=0)
"""

from __future__ import annotations

from picochron.units.timeunit import TimeUnit
from picochron.units.weekday import Weekday

__all__: list[str] = [
    "TimeUnit",
    "Weekday",
]
