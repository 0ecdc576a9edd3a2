"""Rounding a TimeDelta to a multiple of a period.

These functions are the canonical implementations behind
``TimeDelta.trunc``, ``floor``, ``ceil`` and ``round``.

All four accept a period of either sign; only its magnitude matters for
the direction of adjustment. ``TimeDelta.min()`` is a valid period
whenever the rounded result is representable. A zero period raises
ZeroDivisionError.

Examples:
    >>> from picochron import TimeDelta
    >>> minute = TimeDelta.minutes(1)
    >>> str(floor(TimeDelta.seconds(-90), minute))
    '-2m'
    >>> str(round_half_even(TimeDelta.seconds(-210), minute))
    '-4m'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from picochron.core.timedelta import TimeDelta


def trunc(dt: "TimeDelta", period: "TimeDelta") -> "TimeDelta":
    """Round toward zero to a multiple of period.

    The result is zero or has the sign of ``dt``.

    Raises:
        ZeroDivisionError: If period is zero.
    """
    return dt - dt % period


def floor(dt: "TimeDelta", period: "TimeDelta") -> "TimeDelta":
    """Round toward negative infinity to a multiple of period."""
    t = trunc(dt, period)
    if t > dt:
        return t - period if period.ticks > 0 else t + period
    return t


def ceil(dt: "TimeDelta", period: "TimeDelta") -> "TimeDelta":
    """Round toward positive infinity to a multiple of period."""
    t = trunc(dt, period)
    if t < dt:
        return t + period if period.ticks > 0 else t - period
    return t


def round_half_even(dt: "TimeDelta", period: "TimeDelta") -> "TimeDelta":
    """Round to the nearest multiple of period.

    An exact tie goes to whichever neighbor is an even multiple of period.

    Examples:
        >>> from picochron import TimeDelta
        >>> str(round_half_even(TimeDelta.days(1) - TimeDelta(1), TimeDelta.hours(1)))
        '1d'
    """
    from picochron.core.timedelta import TimeDelta

    lower = floor(dt, period)
    step = abs(period.ticks)
    below = dt.ticks - lower.ticks
    above = step - below
    if below < above:
        return lower
    if above < below or (lower.ticks // step) % 2:
        return TimeDelta(lower.ticks + step)
    return lower


__all__ = [
    "trunc",
    "floor",
    "ceil",
    "round_half_even",
]
