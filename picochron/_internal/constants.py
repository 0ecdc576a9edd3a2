"""Internal constants for Picochron.

These constants define the limits and magic numbers used throughout
the library. One tick is one picosecond. This module is not part of the
public API.
"""

from __future__ import annotations

# Time unit conversions
TICKS_PER_PICOSECOND: int = 1
TICKS_PER_NANOSECOND: int = 1_000
TICKS_PER_MICROSECOND: int = 1_000_000
TICKS_PER_MILLISECOND: int = 1_000_000_000
TICKS_PER_SECOND: int = 1_000_000_000_000
TICKS_PER_MINUTE: int = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR: int = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY: int = 24 * TICKS_PER_HOUR  # 86_400_000_000_000_000

# Number of decimal digits below one second
SUBSECOND_DIGITS: int = 12

# Signed 128-bit tick range
MIN_TICKS: int = -(2**127)
MAX_TICKS: int = 2**127 - 1

# Year limits (four-digit calendar years)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Scale epochs as (year, month, day)
CALENDAR_EPOCH: tuple[int, int, int] = (1, 1, 1)
UNIX_EPOCH: tuple[int, int, int] = (1970, 1, 1)
GPS_EPOCH: tuple[int, int, int] = (1980, 1, 6)

# GPS runs ahead of UTC by the leap seconds accumulated since 1980.
# Valid from 2017-01-01 until the next leap second is announced.
GPS_UTC_OFFSET_SECONDS: int = 18
GPS_UTC_OFFSET_VERSION: str = "2017-01-01"


__all__ = [
    "TICKS_PER_PICOSECOND",
    "TICKS_PER_NANOSECOND",
    "TICKS_PER_MICROSECOND",
    "TICKS_PER_MILLISECOND",
    "TICKS_PER_SECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_HOUR",
    "TICKS_PER_DAY",
    "SUBSECOND_DIGITS",
    "MIN_TICKS",
    "MAX_TICKS",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "CALENDAR_EPOCH",
    "UNIX_EPOCH",
    "GPS_EPOCH",
    "GPS_UTC_OFFSET_SECONDS",
    "GPS_UTC_OFFSET_VERSION",
]
