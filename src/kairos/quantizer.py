"""
Micro-pulse quantizer.

Converts an instant into the canonical integer representation: micro-pulses
(pulse x 1e6) since genesis. All arithmetic after input conversion is integer
arithmetic, so the result is identical on every platform.
"""

from __future__ import annotations

from datetime import datetime
from fractions import Fraction
from typing import Any

from kairos.constants import GENESIS_MS, MICRO_PER_MS_DEN, MICRO_PER_MS_NUM
from kairos.guards import to_exact
from kairos.numerics import mul_div_round_half_even
from kairos.time_utils import datetime_to_epoch_ms, parse_signed_iso_to_epoch_ms


def epoch_ms_from_input(instant: Any) -> Fraction:
    """Normalise an instant (ms number, datetime or ISO string) to exact epoch ms."""
    if isinstance(instant, datetime):
        return Fraction(datetime_to_epoch_ms(instant))
    if isinstance(instant, str):
        return Fraction(parse_signed_iso_to_epoch_ms(instant))
    return to_exact(instant, field="ms")


def micro_pulses_from_delta_ms(delta_ms: Any) -> int:
    """Micro-pulses spanned by ``delta_ms`` milliseconds, ties-to-even."""
    delta = to_exact(delta_ms, field="delta_ms")
    # x * NUM / DEN with x = p/q  ==  p * NUM / (DEN * q)
    return mul_div_round_half_even(
        delta.numerator, MICRO_PER_MS_NUM, MICRO_PER_MS_DEN * delta.denominator
    )


def micro_pulses_since_genesis(instant: Any) -> int:
    """Exact micro-pulse count since genesis for an instant.

    ``instant`` is Unix milliseconds (int of any size, float, Fraction or
    Decimal), an aware or naive-UTC datetime, or an ISO-8601 string.
    Non-finite numbers are treated as ms = 0.
    """
    return micro_pulses_from_delta_ms(epoch_ms_from_input(instant) - GENESIS_MS)
