"""Temporal arithmetic operations.

The functions in this module are the canonical implementations of
TimeDelta rounding. ``TimeDelta.trunc``, ``floor``, ``ceil`` and ``round``
delegate to them.

Rounding Operations (from picochron.arithmetic.rounding):
    - trunc: Round toward zero
    - floor: Round toward negative infinity
    - ceil: Round toward positive infinity
    - round_half_even: Round to nearest, ties to the even multiple
"""

from __future__ import annotations

from picochron.arithmetic.rounding import ceil, floor, round_half_even, trunc

__all__ = [
    "trunc",
    "floor",
    "ceil",
    "round_half_even",
]
