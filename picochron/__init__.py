"""Picochron: calendar instants and durations with picosecond resolution.

Picochron stores every value as an integer count of picosecond ticks, so
arithmetic is exact and calendar fields are always derived, never stored.

Core Types:
    TimeDelta: Signed time span, 128-bit tick range
    DateTime: Calendar instant counted from 0001-01-01
    UTCTime: Calendar instant counted from the Unix epoch
    GPSTime: Instant on the GPS time scale (fixed 18 s ahead of UTC)

Units:
    TimeUnit: Fixed-length time units (DAY down to PICOSECOND)
    Weekday: Day of the week (MONDAY=0)

Calendar:
    is_valid_date: Check a (year, month, day) without raising

Format Functions:
    parse_iso8601: Parse YYYY-MM-DDThh:mm:ss[.fraction]
    format_iso8601: Format an instant as ISO 8601
    format_timedelta: Format a TimeDelta such as 1d23h4m56.789s

Exceptions:
    PicochronError: Base exception
    InvalidArgument: Rejected calendar field or malformed string
    TickOverflow: TimeDelta result outside the tick range

Example:
    >>> from picochron import GPSTime, TimeDelta
    >>> t = GPSTime(2000, 1, 2, 3, 4, 5, 6, 7)
    >>> str(t + TimeDelta.days(12))
    '2000-01-14T03:04:05.000006000007'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from picochron.core.datetime import DateTime
from picochron.core.gpstime import GPSTime
from picochron.core.instant import Instant
from picochron.core.timedelta import TimeDelta
from picochron.core.timescale import TimeScale
from picochron.core.utctime import UTCTime

# Units
from picochron.units.timeunit import TimeUnit
from picochron.units.weekday import Weekday

# Calendar
from picochron._internal.calendar import is_valid_date

# Exceptions
from picochron.errors import (
    ErrorCategory,
    InvalidArgument,
    PicochronError,
    SourceLocation,
    TickOverflow,
)

# Format functions
from picochron.format import format_iso8601, format_timedelta, parse_iso8601

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "GPSTime",
    "Instant",
    "TimeDelta",
    "TimeScale",
    "UTCTime",
    # Units
    "TimeUnit",
    "Weekday",
    # Calendar
    "is_valid_date",
    # Exceptions
    "PicochronError",
    "InvalidArgument",
    "TickOverflow",
    "ErrorCategory",
    "SourceLocation",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
    "format_timedelta",
]
