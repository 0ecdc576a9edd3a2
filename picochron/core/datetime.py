"""DateTime: a calendar instant counted from 0001-01-01.

This module provides the DateTime class, the general-purpose instant kind.
Its sub-second fields are milliseconds, microseconds, nanoseconds and
picoseconds, three digits each.
"""

from __future__ import annotations

from picochron._internal.calendar import MILLI_MICRO_NANO_PICO
from picochron.core.instant import Instant
from picochron.core.timescale import CALENDAR


class DateTime(Instant):
    """A date and time of day with picosecond resolution.

    The tick count is picoseconds since 0001-01-01T00:00:00. No time zone
    or leap seconds are involved: every day is exactly 86400 seconds.

    Attributes:
        year: The year component (1-9999).
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).
        microsecond: The microsecond component (0-999).
        nanosecond: The nanosecond component (0-999).
        picosecond: The picosecond component (0-999).

    Examples:
        >>> dt = DateTime(2000, 1, 2, 3, 4, 5, 678, 900)
        >>> str(dt)
        '2000-01-02T03:04:05.6789'

        >>> DateTime.min().ticks
        0

        >>> DateTime(2021, 4, 3).weekday().name
        'SATURDAY'
    """

    __slots__ = ()

    scale = CALENDAR
    layout = MILLI_MICRO_NANO_PICO

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
        picosecond: int = 0,
    ) -> None:
        """Create a DateTime from calendar fields.

        Each sub-second field is a separate three-digit group, not a
        fraction of the second: ``microsecond=7`` means 7 us past the
        millisecond.

        Raises:
            InvalidArgument: If any field is out of range.
            TypeError: If any field is not an integer.
        """
        self._init_from_fields(
            year,
            month,
            day,
            hour,
            minute,
            second,
            (millisecond, microsecond, nanosecond, picosecond),
        )

    @property
    def millisecond(self) -> int:
        """Return the millisecond component (0-999)."""
        return self.subseconds[0]

    @property
    def microsecond(self) -> int:
        """Return the microsecond component (0-999)."""
        return self.subseconds[1]

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond component (0-999)."""
        return self.subseconds[2]

    @property
    def picosecond(self) -> int:
        """Return the picosecond component (0-999)."""
        return self.subseconds[3]


__all__ = ["DateTime"]
