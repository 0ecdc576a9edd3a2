"""TimeDelta class representing a signed span of time.

This module provides the TimeDelta class for representing time spans with
picosecond resolution. A TimeDelta is a single integer tick count (one tick
is one picosecond) confined to the signed 128-bit range, which covers
roughly +/-5.4e18 years.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING

from picochron._internal.constants import MAX_TICKS, MIN_TICKS, TICKS_PER_SECOND
from picochron._internal.fixedpoint import (
    scale_to_ticks,
    ticks_to_rep,
    trunc_div,
    trunc_mod,
)
from picochron.errors import TickOverflow
from picochron.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from picochron._internal.fixedpoint import Number


def _checked(ticks: int) -> int:
    if ticks < MIN_TICKS or ticks > MAX_TICKS:
        raise TickOverflow(f"TimeDelta out of range: {ticks} ticks")
    return ticks


def _as_unit(unit: TimeUnit | str) -> TimeUnit:
    if isinstance(unit, TimeUnit):
        return unit
    return TimeUnit(unit)


class TimeDelta:
    """A signed span of time with picosecond resolution.

    All arithmetic is exact integer arithmetic on the tick count. Division
    and remainder truncate toward zero, like C integer division rather than
    Python's ``//``. Results that leave the 128-bit tick range raise
    TickOverflow.

    Attributes:
        ticks: The span in picoseconds.

    Examples:
        >>> TimeDelta.seconds(1).ticks
        1000000000000

        >>> str(TimeDelta.minutes(12) + TimeDelta.seconds(34))
        '12m34s'

        >>> (TimeDelta.picoseconds(-7) / 2).ticks
        -3
    """

    __slots__ = ("_ticks",)

    def __init__(self, ticks: int = 0) -> None:
        """Create a TimeDelta from a tick count.

        Args:
            ticks: Number of picoseconds. Must be an integer.

        Raises:
            TypeError: If ticks is not an integer.
            TickOverflow: If ticks is outside the 128-bit range.
        """
        if not isinstance(ticks, numbers.Integral):
            raise TypeError(
                f"ticks must be an integer, got {type(ticks).__name__}; "
                "use TimeDelta.from_units() for fractional values"
            )
        self._ticks = _checked(int(ticks))

    @classmethod
    def _from_ticks(cls, ticks: int) -> TimeDelta:
        """Build from a raw tick count, checking only the range."""
        result = object.__new__(cls)
        result._ticks = _checked(ticks)
        return result

    @classmethod
    def from_units(cls, unit: TimeUnit | str, value: Number) -> TimeDelta:
        """Create a TimeDelta from a count of some unit.

        Integral values convert exactly. Floats are scaled in floating point
        and truncated toward zero. Other rationals (Fraction, Decimal)
        convert exactly and are then truncated toward zero.

        Args:
            unit: A TimeUnit or its name, e.g. ``"millisecond"``.
            value: Number of units.

        Raises:
            TickOverflow: If the result is out of range.
            ValueError: If unit is unknown or value is NaN.

        Examples:
            >>> TimeDelta.from_units("nanosecond", 1.5).ticks
            1500

            >>> TimeDelta.from_units(TimeUnit.PICOSECOND, 123.456).ticks
            123
        """
        return cls._from_ticks(scale_to_ticks(value, _as_unit(unit).ticks))

    @classmethod
    def days(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` days."""
        return cls.from_units(TimeUnit.DAY, value)

    @classmethod
    def hours(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` hours."""
        return cls.from_units(TimeUnit.HOUR, value)

    @classmethod
    def minutes(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` minutes."""
        return cls.from_units(TimeUnit.MINUTE, value)

    @classmethod
    def seconds(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` seconds.

        Examples:
            >>> TimeDelta.seconds(1.5).ticks
            1500000000000
        """
        return cls.from_units(TimeUnit.SECOND, value)

    @classmethod
    def milliseconds(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` milliseconds."""
        return cls.from_units(TimeUnit.MILLISECOND, value)

    @classmethod
    def microseconds(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` microseconds."""
        return cls.from_units(TimeUnit.MICROSECOND, value)

    @classmethod
    def nanoseconds(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` nanoseconds."""
        return cls.from_units(TimeUnit.NANOSECOND, value)

    @classmethod
    def picoseconds(cls, value: Number) -> TimeDelta:
        """Create a TimeDelta spanning ``value`` picoseconds."""
        return cls.from_units(TimeUnit.PICOSECOND, value)

    @classmethod
    def zero(cls) -> TimeDelta:
        """Return the zero-length TimeDelta."""
        return cls._from_ticks(0)

    @classmethod
    def min(cls) -> TimeDelta:
        """Return the most negative representable TimeDelta."""
        return cls._from_ticks(MIN_TICKS)

    @classmethod
    def max(cls) -> TimeDelta:
        """Return the most positive representable TimeDelta."""
        return cls._from_ticks(MAX_TICKS)

    @classmethod
    def resolution(cls) -> TimeDelta:
        """Return the smallest positive TimeDelta (one picosecond)."""
        return cls._from_ticks(1)

    @property
    def ticks(self) -> int:
        """Return the span in picoseconds (exact)."""
        return self._ticks

    def to_units(self, unit: TimeUnit | str, rep: type = int) -> Number:
        """Express this span as a count of some unit.

        Args:
            unit: A TimeUnit or its name.
            rep: ``int`` truncates toward zero, ``float`` gives the nearest
                float, ``Fraction`` is exact.

        Examples:
            >>> TimeDelta.milliseconds(-1500).to_units("second")
            -1

            >>> TimeDelta.milliseconds(-1500).to_units("second", float)
            -1.5
        """
        return ticks_to_rep(self._ticks, _as_unit(unit).ticks, rep)

    def total_seconds(self) -> float:
        """Return the span in seconds as a float (approximate).

        Examples:
            >>> TimeDelta.milliseconds(2500).total_seconds()
            2.5
        """
        return float(Fraction(self._ticks, TICKS_PER_SECOND))

    def increment(self) -> TimeDelta:
        """Return the TimeDelta one tick longer."""
        return TimeDelta._from_ticks(self._ticks + 1)

    def decrement(self) -> TimeDelta:
        """Return the TimeDelta one tick shorter."""
        return TimeDelta._from_ticks(self._ticks - 1)

    # Rounding (canonical implementations in picochron.arithmetic.rounding)

    def trunc(self, period: TimeDelta) -> TimeDelta:
        """Round toward zero to a multiple of ``period``."""
        from picochron.arithmetic.rounding import trunc

        return trunc(self, period)

    def floor(self, period: TimeDelta) -> TimeDelta:
        """Round toward negative infinity to a multiple of ``period``."""
        from picochron.arithmetic.rounding import floor

        return floor(self, period)

    def ceil(self, period: TimeDelta) -> TimeDelta:
        """Round toward positive infinity to a multiple of ``period``."""
        from picochron.arithmetic.rounding import ceil

        return ceil(self, period)

    def round(self, period: TimeDelta) -> TimeDelta:
        """Round to the nearest multiple of ``period``, ties to even."""
        from picochron.arithmetic.rounding import round_half_even

        return round_half_even(self, period)

    # Arithmetic

    def __add__(self, other: object) -> TimeDelta:
        """Add two TimeDeltas.

        Raises:
            TickOverflow: If the sum is out of range.
        """
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return TimeDelta._from_ticks(self._ticks + other._ticks)

    def __radd__(self, other: object) -> TimeDelta:
        """Support sum() by handling 0 + TimeDelta."""
        if isinstance(other, int) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> TimeDelta:
        """Subtract one TimeDelta from another."""
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return TimeDelta._from_ticks(self._ticks - other._ticks)

    def __mul__(self, other: object) -> TimeDelta:
        """Multiply by a scalar.

        Integers multiply exactly. Fractions and Decimals multiply exactly
        and then truncate toward zero. Floats multiply the tick count in
        floating point and truncate.

        Examples:
            >>> (TimeDelta.seconds(3) * 2).to_units("second")
            6

            >>> (TimeDelta.picoseconds(10) * 0.25).ticks
            2
        """
        if isinstance(other, numbers.Integral):
            return TimeDelta._from_ticks(self._ticks * int(other))
        if isinstance(other, (numbers.Rational, Decimal)):
            return TimeDelta._from_ticks(int(self._ticks * Fraction(other)))
        if isinstance(other, numbers.Real):
            return TimeDelta._from_ticks(int(float(self._ticks) * float(other)))
        return NotImplemented

    def __rmul__(self, other: object) -> TimeDelta:
        """Support scalar * TimeDelta."""
        return self.__mul__(other)

    def __truediv__(self, other: object) -> TimeDelta:
        """Divide by a scalar.

        An integer divisor truncates toward zero (not toward negative
        infinity). Fraction and Decimal divisors divide exactly and truncate.
        A float divisor divides in floating point and truncates.

        Raises:
            ZeroDivisionError: If other is zero.

        Examples:
            >>> (TimeDelta.picoseconds(-7) / 2).ticks
            -3
        """
        if isinstance(other, numbers.Integral):
            return TimeDelta._from_ticks(trunc_div(self._ticks, int(other)))
        if isinstance(other, (numbers.Rational, Decimal)):
            return TimeDelta._from_ticks(int(self._ticks / Fraction(other)))
        if isinstance(other, numbers.Real):
            return TimeDelta._from_ticks(int(float(self._ticks) / float(other)))
        return NotImplemented

    def __mod__(self, other: object) -> TimeDelta:
        """Truncating remainder by a TimeDelta or an integer tick count.

        The result has the sign of the dividend.

        Raises:
            ZeroDivisionError: If other is zero.

        Examples:
            >>> (TimeDelta.minutes(-7) % TimeDelta.minutes(2)).to_units("minute")
            -1
        """
        if isinstance(other, TimeDelta):
            divisor = other._ticks
        elif isinstance(other, numbers.Integral):
            divisor = int(other)
        else:
            return NotImplemented
        return TimeDelta._from_ticks(trunc_mod(self._ticks, divisor))

    def __neg__(self) -> TimeDelta:
        """Return the negation.

        Raises:
            TickOverflow: For TimeDelta.min(), which has no positive counterpart.
        """
        return TimeDelta._from_ticks(-self._ticks)

    def __pos__(self) -> TimeDelta:
        """Return self (unary +)."""
        return self

    def __abs__(self) -> TimeDelta:
        """Return the magnitude.

        Raises:
            TickOverflow: For TimeDelta.min().
        """
        if self._ticks < 0:
            return -self
        return self

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self._ticks == other._ticks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero span."""
        return self._ticks != 0

    # String conversion

    def format(self, *, show_sign: bool = False, show_point: bool = False) -> str:
        """Format as a compact string such as ``1d23h4m56.789s``.

        Args:
            show_sign: Prefix non-negative values with ``+``.
            show_point: Append ``.0`` when the last component is integral.
        """
        from picochron.format.timedelta import format_timedelta

        return format_timedelta(self, show_sign=show_sign, show_point=show_point)

    def __format__(self, format_spec: str) -> str:
        """Support f-strings; ``+`` shows the sign, ``#`` the point.

        Examples:
            >>> f"{TimeDelta.seconds(10):+}"
            '+10s'
            >>> f"{TimeDelta.seconds(-10):#}"
            '-10.0s'
        """
        unknown = set(format_spec) - {"+", "#"}
        if unknown:
            raise ValueError(
                f"invalid format specifier {format_spec!r} for TimeDelta"
            )
        return self.format(show_sign="+" in format_spec, show_point="#" in format_spec)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"TimeDelta(ticks={self._ticks})"


__all__ = ["TimeDelta"]
