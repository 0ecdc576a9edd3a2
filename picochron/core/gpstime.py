"""GPSTime: an instant on the GPS time scale.

GPS time counts from 1980-01-06T00:00:00 and has not applied a leap
second since, so it runs a fixed number of seconds ahead of UTC. That
offset is the versioned constant ``GPS_UTC_OFFSET_SECONDS`` (18 s since
2017-01-01); it is used only when converting to or from the host clock.
"""

from __future__ import annotations

from picochron._internal.calendar import MICRO_PICO
from picochron.core.instant import Instant
from picochron.core.timescale import GPS


class GPSTime(Instant):
    """A GPS instant with picosecond resolution.

    Sub-second fields are two six-digit groups: microseconds and
    picoseconds within the microsecond.

    Attributes:
        microsecond: The microsecond component (0-999999).
        picosecond: The picosecond component (0-999999).

    Examples:
        >>> t = GPSTime(2000, 1, 2, 3, 4, 5, 6, 7)
        >>> str(t)
        '2000-01-02T03:04:05.000006000007'

        >>> GPSTime(1980, 1, 6).ticks
        0

        >>> GPSTime.from_iso_format("2000-01-02T03:04:05.789").microsecond
        789000
    """

    __slots__ = ()

    scale = GPS
    layout = MICRO_PICO

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        picosecond: int = 0,
    ) -> None:
        """Create a GPSTime from calendar fields.

        Raises:
            InvalidArgument: If any field is out of range.
            TypeError: If any field is not an integer.
        """
        self._init_from_fields(
            year, month, day, hour, minute, second, (microsecond, picosecond)
        )

    @property
    def microsecond(self) -> int:
        """Return the microsecond component (0-999999)."""
        return self.subseconds[0]

    @property
    def picosecond(self) -> int:
        """Return the picosecond component (0-999999)."""
        return self.subseconds[1]


__all__ = ["GPSTime"]
