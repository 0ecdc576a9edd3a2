"""Temporal conversion utilities.

This module provides functions for converting temporal objects to and from
other representations:
    - Generic rational durations (count of a period in seconds)
    - ``datetime.timedelta``
    - Unix epoch timestamps (seconds, nanoseconds)

Examples:
    >>> from fractions import Fraction
    >>> from picochron.convert import from_duration, to_duration

    >>> dt = from_duration(1500, Fraction(1, 1000))
    >>> to_duration(dt)
    1
    >>> to_duration(dt, rep=float)
    1.5
"""

from __future__ import annotations

from picochron.convert.duration import (
    from_duration,
    from_timedelta,
    to_duration,
    to_timedelta,
)
from picochron.convert.epoch import (
    from_unix_nanos,
    from_unix_seconds,
    to_unix_nanos,
    to_unix_seconds,
)

__all__ = [
    # Durations
    "from_duration",
    "to_duration",
    "from_timedelta",
    "to_timedelta",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_nanos",
    "from_unix_nanos",
]
