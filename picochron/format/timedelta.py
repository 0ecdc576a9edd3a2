"""Compact human-readable formatting for TimeDelta.

The magnitude is split greedily into days, hours and minutes, and the
remainder is written in the coarsest unit the whole magnitude reaches, with
a trimmed decimal fraction::

    123ps   1.23ns   12.345us   -999ms   12m34s   1d23h4m56.789s

Examples:
    >>> from picochron import TimeDelta
    >>> format_timedelta(TimeDelta.hours(-1) - TimeDelta(1))
    '-1h0m0.000000000001s'
    >>> format_timedelta(TimeDelta.seconds(10), show_sign=True)
    '+10s'
    >>> format_timedelta(TimeDelta.seconds(-10), show_point=True)
    '-10.0s'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from picochron.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from picochron.core.timedelta import TimeDelta

# Leading components, emitted whenever the magnitude reaches the unit
_LEADING_UNITS = (TimeUnit.DAY, TimeUnit.HOUR, TimeUnit.MINUTE)

# Final component and its number of fractional digits, coarsest first
_FINAL_UNITS = (
    (TimeUnit.SECOND, 12),
    (TimeUnit.MILLISECOND, 9),
    (TimeUnit.MICROSECOND, 6),
    (TimeUnit.NANOSECOND, 3),
)


def format_timedelta(
    dt: "TimeDelta", *, show_sign: bool = False, show_point: bool = False
) -> str:
    """Format a TimeDelta such as ``1d23h4m56.789s``.

    Args:
        dt: The span to format.
        show_sign: Prefix non-negative values with ``+``.
        show_point: Write ``.0`` after an integral final component.

    Returns:
        The formatted string.
    """
    ticks = dt.ticks
    parts: list[str] = []
    if ticks < 0:
        parts.append("-")
    elif show_sign:
        parts.append("+")

    magnitude = abs(ticks)
    rest = magnitude
    for unit in _LEADING_UNITS:
        if magnitude >= unit.ticks:
            whole, rest = divmod(rest, unit.ticks)
            parts.append(f"{whole}{unit.symbol}")

    unit, digits = TimeUnit.PICOSECOND, 0
    for candidate, candidate_digits in _FINAL_UNITS:
        if magnitude >= candidate.ticks:
            unit, digits = candidate, candidate_digits
            break

    whole, fraction = divmod(rest, unit.ticks)
    parts.append(str(whole))
    if fraction:
        parts.append("." + f"{fraction:0{digits}d}".rstrip("0"))
    elif show_point:
        parts.append(".0")
    parts.append(unit.symbol)
    return "".join(parts)


__all__ = ["format_timedelta"]
