"""UTCTime: a calendar instant counted from the Unix epoch."""

from __future__ import annotations

from picochron._internal.calendar import MILLI_MICRO_NANO_PICO
from picochron.core.instant import Instant
from picochron.core.timescale import UTC


class UTCTime(Instant):
    """A UTC instant with picosecond resolution.

    The tick count is picoseconds since 1970-01-01T00:00:00 UTC, ignoring
    leap seconds (POSIX time). Fields are laid out like DateTime.

    Examples:
        >>> UTCTime(1970, 1, 1).ticks
        0
        >>> UTCTime(1969, 12, 31, 23, 59, 59).ticks
        -1000000000000
    """

    __slots__ = ()

    scale = UTC
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
        return self.subseconds[0]

    @property
    def microsecond(self) -> int:
        return self.subseconds[1]

    @property
    def nanosecond(self) -> int:
        return self.subseconds[2]

    @property
    def picosecond(self) -> int:
        return self.subseconds[3]


__all__ = ["UTCTime"]
