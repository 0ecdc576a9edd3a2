"""Conversion between TimeDelta and other duration representations.

A generic duration is a count of some period, where the period is an exact
number of seconds given as an ``int`` or ``Fraction``: ``Fraction(1, 1000)``
for milliseconds, ``Fraction(1, 10**15)`` for femtoseconds, ``604800`` for
weeks. Integer conversions truncate toward zero whenever the period does
not divide evenly into picoseconds.

The standard library's ``datetime.timedelta`` is also supported. Its
resolution is one microsecond, so conversion to it truncates.

Examples:
    >>> from fractions import Fraction
    >>> femtosecond = Fraction(1, 10**15)
    >>> from_duration(999, femtosecond).ticks
    0
    >>> from_duration(-1999, femtosecond).ticks
    -1
    >>> to_duration(TimeDelta.days(14), 604800)
    2
"""

from __future__ import annotations

import datetime as _datetime
from fractions import Fraction

from picochron._internal.constants import TICKS_PER_MICROSECOND, TICKS_PER_SECOND
from picochron._internal.fixedpoint import (
    Number,
    scale_to_ticks,
    ticks_to_rep,
    trunc_div,
)
from picochron.core.timedelta import TimeDelta

Period = int | Fraction


def _ticks_per_period(period: Period) -> int | Fraction:
    if isinstance(period, bool) or not isinstance(period, (int, Fraction)):
        raise TypeError(
            f"period must be an int or Fraction of seconds, got {type(period).__name__}"
        )
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    ticks = Fraction(period) * TICKS_PER_SECOND
    return ticks.numerator if ticks.denominator == 1 else ticks


def from_duration(count: Number, period: Period = 1) -> TimeDelta:
    """Convert ``count`` periods of ``period`` seconds to a TimeDelta.

    Args:
        count: Number of periods. Integers convert exactly before
            truncation; floats are scaled in floating point.
        period: Length of one period in seconds.

    Raises:
        TickOverflow: If the result is out of range.
    """
    return TimeDelta._from_ticks(scale_to_ticks(count, _ticks_per_period(period)))


def to_duration(dt: TimeDelta, period: Period = 1, rep: type = int) -> Number:
    """Express a TimeDelta as a count of ``period`` seconds.

    Args:
        dt: The span to convert.
        period: Length of one period in seconds.
        rep: ``int`` (truncated toward zero), ``float`` or ``Fraction``.
    """
    return ticks_to_rep(dt.ticks, _ticks_per_period(period), rep)


def from_timedelta(td: _datetime.timedelta) -> TimeDelta:
    """Convert a ``datetime.timedelta`` exactly.

    Examples:
        >>> from_timedelta(_datetime.timedelta(seconds=1, microseconds=5)).ticks
        1000005000000
    """
    seconds = td.days * 86_400 + td.seconds
    return TimeDelta(
        seconds * TICKS_PER_SECOND + td.microseconds * TICKS_PER_MICROSECOND
    )


def to_timedelta(dt: TimeDelta) -> _datetime.timedelta:
    """Convert to a ``datetime.timedelta``, truncating toward zero.

    Raises:
        OverflowError: If the span exceeds ``datetime.timedelta``'s range.
    """
    return _datetime.timedelta(
        microseconds=trunc_div(dt.ticks, TICKS_PER_MICROSECOND)
    )


__all__ = [
    "from_duration",
    "to_duration",
    "from_timedelta",
    "to_timedelta",
]
