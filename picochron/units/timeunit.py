"""TimeUnit enumeration for fixed-length time units.

This module provides the TimeUnit enum representing the units a
TimeDelta can be built from or expressed in, from picoseconds up to days.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction

from picochron._internal.constants import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_NANOSECOND,
    TICKS_PER_PICOSECOND,
    TICKS_PER_SECOND,
)


class TimeUnit(Enum):
    """Fixed-length time units.

    Every unit is an exact whole number of picosecond ticks. Calendar units
    with variable length (months, years) are deliberately absent.

    Examples:
        >>> TimeUnit.HOUR.ticks
        3600000000000000

        >>> TimeUnit.MICROSECOND.symbol
        'us'

        >>> TimeUnit("minute") is TimeUnit.MINUTE
        True
    """

    PICOSECOND = "picosecond"
    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    @property
    def ticks(self) -> int:
        """Length of one unit in picosecond ticks."""
        return _TICKS[self]

    @property
    def symbol(self) -> str:
        """Short suffix used when formatting durations."""
        return _SYMBOLS[self]

    def to_seconds(self) -> Fraction:
        """Length of one unit in seconds, exactly.

        Examples:
            >>> TimeUnit.MILLISECOND.to_seconds()
            Fraction(1, 1000)
        """
        return Fraction(self.ticks, TICKS_PER_SECOND)


_TICKS: dict[TimeUnit, int] = {
    TimeUnit.PICOSECOND: TICKS_PER_PICOSECOND,
    TimeUnit.NANOSECOND: TICKS_PER_NANOSECOND,
    TimeUnit.MICROSECOND: TICKS_PER_MICROSECOND,
    TimeUnit.MILLISECOND: TICKS_PER_MILLISECOND,
    TimeUnit.SECOND: TICKS_PER_SECOND,
    TimeUnit.MINUTE: TICKS_PER_MINUTE,
    TimeUnit.HOUR: TICKS_PER_HOUR,
    TimeUnit.DAY: TICKS_PER_DAY,
}

_SYMBOLS: dict[TimeUnit, str] = {
    TimeUnit.PICOSECOND: "ps",
    TimeUnit.NANOSECOND: "ns",
    TimeUnit.MICROSECOND: "us",
    TimeUnit.MILLISECOND: "ms",
    TimeUnit.SECOND: "s",
    TimeUnit.MINUTE: "m",
    TimeUnit.HOUR: "h",
    TimeUnit.DAY: "d",
}


__all__ = ["TimeUnit"]
