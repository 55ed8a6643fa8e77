"""
Epoch bridge: pulse counts <-> Unix milliseconds.

ms = GENESIS_MS + pulse * (3 + sqrt(5)) * 1000, evaluated on the exact
60-digit rational form of the breath duration. Callers pass the pulse
unrounded; rounding happens once, at the millisecond.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any

from kairos.constants import (
    GENESIS_MS,
    MICRO_PER_PULSE,
    MS_PER_PULSE,
    MS_PER_PULSE_DEN,
    MS_PER_PULSE_NUM,
)
from kairos.guards import to_exact, to_exact_int
from kairos.numerics import mul_div_round_half_even, round_half_even


def epoch_ms_from_pulse_exact(pulse: Any) -> Fraction:
    """Exact epoch milliseconds for a (possibly fractional, possibly negative) pulse."""
    return GENESIS_MS + to_exact(pulse, field="pulse") * MS_PER_PULSE


def epoch_ms_from_pulse(pulse: Any) -> int:
    """Epoch milliseconds for a pulse, rounded ties-to-even to a whole ms."""
    return round_half_even(epoch_ms_from_pulse_exact(pulse))


def epoch_ms_from_micro_pulses(micro_pulses: int) -> int:
    """Epoch milliseconds for an integer micro-pulse count since genesis."""
    micro_pulses = to_exact_int(micro_pulses, field="micro_pulses")
    delta_ms = mul_div_round_half_even(
        micro_pulses, MS_PER_PULSE_NUM, MS_PER_PULSE_DEN * MICRO_PER_PULSE
    )
    return GENESIS_MS + delta_ms
