"""Core temporal types.

This module provides the fundamental temporal types:
    - TimeDelta: Signed time span with picosecond resolution
    - TimeScale: Epoch plus fixed UTC offset (CALENDAR, UTC, GPS)
    - Instant: Calendar instant (base class)
    - DateTime: Instant counted from 0001-01-01
    - UTCTime: Instant counted from 1970-01-01 UTC
    - GPSTime: Instant on the GPS time scale
"""

from __future__ import annotations

from picochron.core.datetime import DateTime
from picochron.core.gpstime import GPSTime
from picochron.core.instant import Instant
from picochron.core.timedelta import TimeDelta
from picochron.core.timescale import CALENDAR, GPS, UTC, TimeScale
from picochron.core.utctime import UTCTime

__all__: list[str] = [
    "DateTime",
    "GPSTime",
    "Instant",
    "TimeDelta",
    "TimeScale",
    "UTCTime",
    "CALENDAR",
    "GPS",
    "UTC",
]
