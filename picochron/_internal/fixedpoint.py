"""Integer helpers for tick arithmetic.

Python's ``//`` and ``%`` floor toward negative infinity. Tick arithmetic
truncates toward zero, so quotient and remainder go through the helpers
here. This module is not part of the public API.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Union

Number = Union[int, float, Fraction, Decimal]


def trunc_div(a: int, b: int) -> int:
    """Divide integers, rounding the quotient toward zero.

    Raises:
        ZeroDivisionError: If b is zero.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching trunc_div; the sign follows the dividend.

    Examples:
        >>> trunc_mod(-7, 2)
        -1
        >>> trunc_mod(7, -2)
        1
    """
    return a - b * trunc_div(a, b)


def scale_to_ticks(value: Number, ticks_per_unit: int | Fraction) -> int:
    """Convert a count of some unit to whole ticks, truncating toward zero.

    Integers and exact rationals convert exactly before truncation. Floats
    are multiplied in floating point, so a float count carries the usual
    binary rounding of its input.

    Args:
        value: Number of units.
        ticks_per_unit: Length of one unit in ticks (may be fractional for
            units finer than a tick).

    Returns:
        The tick count. Range checking is left to the caller.

    Raises:
        TypeError: If value is not a real number.
        ValueError: If value is a float NaN.
        OverflowError: If value is a float infinity.
    """
    if isinstance(value, numbers.Integral):
        return int(int(value) * ticks_per_unit)
    if isinstance(value, (numbers.Rational, Decimal)):
        return int(Fraction(value) * ticks_per_unit)
    if isinstance(value, numbers.Real):
        return int(float(value) * float(ticks_per_unit))
    raise TypeError(f"expected a real number, got {type(value).__name__}")


def ticks_to_rep(ticks: int, ticks_per_unit: int | Fraction, rep: type) -> Number:
    """Express a tick count as a number of units.

    Args:
        ticks: The tick count.
        ticks_per_unit: Length of one unit in ticks.
        rep: Result type: int (truncated toward zero), float (nearest
            float to the exact quotient) or Fraction (exact).

    Raises:
        TypeError: If rep is not one of the supported types.
    """
    if rep is int and isinstance(ticks_per_unit, int):
        return trunc_div(ticks, ticks_per_unit)
    quotient = Fraction(ticks) / ticks_per_unit
    if rep is int:
        return int(quotient)
    if rep is float:
        return float(quotient)
    if rep is Fraction:
        return quotient
    raise TypeError(f"unsupported representation: {rep!r}")


__all__ = [
    "Number",
    "trunc_div",
    "trunc_mod",
    "scale_to_ticks",
    "ticks_to_rep",
]
