"""
Boundary guards for loosely typed numeric input.

Pulse numbers and instants often arrive from decoded share tokens or JSON
bodies. These helpers turn them into exact Fractions before any engine
arithmetic runs. Non-finite values are neutralised to 0; values of the wrong
type raise KairosInputError.
"""

from __future__ import annotations

import logging
import math

from decimal import Decimal
from fractions import Fraction
from numbers import Rational
from typing import Any

from kairos.errors import KairosInputError

logger = logging.getLogger(__name__)


def is_finite_number(value: Any) -> bool:
    """True for real numbers that are neither NaN nor infinite (bools excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, Rational)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


def to_exact(value: Any, *, field: str = "value") -> Fraction:
    """Convert a numeric input to an exact Fraction.

    Floats are converted bit-exactly (no decimal round trip). NaN and
    infinities become 0. Booleans, None, strings and other types raise
    KairosInputError.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, Rational)):
        raise KairosInputError(f"{field} must be a number, got {type(value).__name__}")
    if not is_finite_number(value):
        logger.debug("Neutralised non-finite %s=%r to 0", field, value)
        return Fraction(0)
    return Fraction(value)


def to_exact_int(value: Any, *, field: str = "value") -> int:
    """Like :func:`to_exact` but the value must be integral.

    Integral floats (``12.0``) are accepted; fractional ones raise.
    """
    exact = to_exact(value, field=field)
    if exact.denominator != 1:
        raise KairosInputError(f"{field} must be an integer, got {value!r}")
    return exact.numerator


def was_neutralised(value: Any) -> bool:
    """True when :func:`to_exact` would replace ``value`` with 0."""
    return isinstance(value, (float, Decimal)) and not is_finite_number(value)


# Bounds for numbers from untrusted text (query strings, JSON bodies)
MAX_INPUT_EXPONENT = 40
MAX_INPUT_DIGITS = 80


def check_magnitude(value: Any, *, field: str = "value") -> None:
    """Reject finite numbers whose decimal exponent exceeds +/-MAX_INPUT_EXPONENT.

    Converting ``Decimal("1e30000000")`` to a Fraction builds a 30-million
    digit integer, so service boundaries call this before :func:`to_exact`.
    Decimals with more than MAX_INPUT_DIGITS significant digits are rejected
    too. Non-finite values pass; :func:`to_exact` neutralises them.
    """
    if isinstance(value, bool) or not is_finite_number(value):
        return
    if isinstance(value, int):
        out_of_range = abs(value) >= 10 ** (MAX_INPUT_EXPONENT + 1)
    elif isinstance(value, (float, Decimal)):
        exact = Decimal(value)
        if isinstance(value, Decimal) and len(exact.as_tuple().digits) > MAX_INPUT_DIGITS:
            raise KairosInputError(f"{field} has more than {MAX_INPUT_DIGITS} digits")
        out_of_range = bool(exact) and abs(exact.adjusted()) > MAX_INPUT_EXPONENT
    else:
        return
    if out_of_range:
        raise KairosInputError(
            f"{field} must lie within 1e-{MAX_INPUT_EXPONENT}..1e{MAX_INPUT_EXPONENT} in magnitude"
        )
