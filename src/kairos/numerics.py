#!/usr/bin/env python3
"""
Integer helpers used across the Kairos engine.

Everything here operates on Python ints and Fractions only. Floats never
reach these functions; the boundary guards convert them exactly first.
"""

from __future__ import annotations

from fractions import Fraction

from kairos.errors import KairosInvariantError

# Largest integer a JavaScript Number represents exactly (2**53 - 1)
MAX_SAFE_INTEGER = 9_007_199_254_740_991
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


def euclid_divmod(a: int, m: int) -> tuple[int, int]:
    """Euclidean quotient and remainder for a positive divisor.

    The remainder is always in [0, m), also for negative ``a``. For a
    positive divisor Python's ``divmod`` already floors, which coincides with
    the Euclidean definition; the check makes the precondition explicit.
    """
    if m <= 0:
        raise ValueError(f"divisor must be positive, got {m}")
    return divmod(a, m)


def euclid_div(a: int, m: int) -> int:
    """Floor division toward negative infinity (positive divisor only)."""
    return euclid_divmod(a, m)[0]


def euclid_mod(a: int, m: int) -> int:
    """Remainder in [0, m) (positive divisor only)."""
    return euclid_divmod(a, m)[1]


def mul_div_round_half_even(x: int, num: int, den: int) -> int:
    """Return ``x * num / den`` rounded to the nearest integer, ties to even.

    Sign and magnitude are handled separately so the tie rule is symmetric
    around zero: 2.5 -> 2, 3.5 -> 4, -2.5 -> -2, -3.5 -> -4.
    """
    if den <= 0:
        raise ValueError("denominator must be positive")
    sign = -1 if (x < 0) != (num < 0) else 1
    q, r = divmod(abs(x) * abs(num), den)
    twice = 2 * r
    if twice > den or (twice == den and q & 1):
        q += 1
    return sign * q if q else 0


def round_half_even(value: Fraction | int) -> int:
    """Round an exact rational to the nearest integer, ties to even."""
    value = Fraction(value)
    return mul_div_round_half_even(value.numerator, 1, value.denominator)


def clamp_value(v: int, lo: int, hi: int) -> int:
    """Clamp a value into [lo, hi]."""
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def clamp_index(name: str, raw: int, lo: int, hi: int) -> int:
    """Clamp ``raw`` into [lo, hi], tolerating at most one unit of overshoot.

    The tolerance absorbs the boundary residue of fixed-point division
    (for example a step index of 44 in the short tail of a beat). Anything
    further out raises :class:`KairosInvariantError`.
    """
    if raw < lo - 1 or raw > hi + 1:
        raise KairosInvariantError(name, raw, lo, hi)
    return clamp_value(raw, lo, hi)


def to_safe_int(x: int) -> int:
    """Saturate to the JavaScript safe-integer range.

    Values beyond +/-(2**53 - 1) collapse
    onto the bound instead of wrapping. Exact values must travel as strings.
    """
    if x > MAX_SAFE_INTEGER:
        return MAX_SAFE_INTEGER
    if x < MIN_SAFE_INTEGER:
        return MIN_SAFE_INTEGER
    return int(x)

