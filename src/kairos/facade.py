#!/usr/bin/env python3
"""
Kairos Facade - one entry point for every consumer
No arithmetic of its own, just orchestration of the engine components
"""

import logging
import math

from fractions import Fraction
from typing import Any

from kairos.arc_chakra import (
    arc_from_beat,
    arc_to_chakra,
    chakra_day_from_day_of_month,
    chakra_day_from_weekday,
    month_name,
    week_index,
    week_title,
)
from kairos.composer import (
    day_index_from_calendar,
    grid_drift_micro_pulses,
    start_of_day_micro_pulses,
    start_of_day_pulse,
)
from kairos.constants import GRID_MICRO_PER_DAY, MICRO_PER_PULSE
from kairos.core_types import DayStart, KairosMoment
from kairos.decomposer import (
    day_index_of,
    decompose,
    grid_day_index,
    micro_pulses_into_beat,
    step_percent,
)
from kairos.epoch_bridge import epoch_ms_from_micro_pulses, epoch_ms_from_pulse_exact
from kairos.guards import to_exact, to_exact_int
from kairos.numerics import euclid_div, round_half_even, to_safe_int
from kairos.quantizer import epoch_ms_from_input, micro_pulses_since_genesis

# Initialize module logger
logger = logging.getLogger(__name__)

# ============================================================================
# MOMENTS
# ============================================================================


def moment_from_micro_pulses(micro_pulses: int) -> KairosMoment:
    """Full moment (calendar plus labels) for a micro-pulse count since genesis."""
    micro_pulses = to_exact_int(micro_pulses, field="micro_pulses")
    cal = decompose(micro_pulses)
    arc = arc_from_beat(cal.beat)

    return KairosMoment(
        micro_pulses=micro_pulses,
        pulse=euclid_div(micro_pulses, MICRO_PER_PULSE),
        calendar=cal,
        arc=arc,
        arc_chakra=arc_to_chakra(arc),
        chakra_day_by_weekday=chakra_day_from_weekday(cal.weekday),
        chakra_day_by_day_of_month=chakra_day_from_day_of_month(cal.day_of_month),
        month_name=month_name(cal.month),
        week_index=week_index(cal.day_of_month),
        week_title=week_title(cal.day_of_month),
        beat_micro_pulses=micro_pulses_into_beat(micro_pulses),
        step_percent=step_percent(micro_pulses),
        beat_step_label=f"{cal.beat}:{cal.step:02d}",
    )


def moment_from_ms(instant: Any) -> KairosMoment:
    """Moment for Unix milliseconds, a datetime, or an ISO-8601 string.

    Args:
        instant: Unix ms (int/float/Fraction/Decimal), datetime, or ISO string.
            Non-finite numbers are treated as ms = 0.

    Returns:
        KairosMoment
    """
    return moment_from_micro_pulses(micro_pulses_since_genesis(instant))


def moment_from_pulse(pulse: Any) -> KairosMoment:
    """Moment for a (possibly fractional) pulse count.

    The pulse is scaled to micro-pulses exactly; it never round-trips
    through milliseconds, so a persisted integer pulse always decodes to
    exactly ``pulse * 1e6`` micro-pulses.
    """
    micro = round_half_even(to_exact(pulse, field="pulse") * MICRO_PER_PULSE)
    return moment_from_micro_pulses(micro)


# ============================================================================
# NAVIGATION
# ============================================================================


def day_start(day_index: int) -> DayStart:
    """Start instant of a Kairos day (jump-to-day, day-granular stamping)."""
    day_index = to_exact_int(day_index, field="day_index")
    micro = start_of_day_micro_pulses(day_index)
    return DayStart(
        day_index=day_index,
        micro_pulses=micro,
        pulse=start_of_day_pulse(day_index),
        epoch_ms=epoch_ms_from_micro_pulses(micro),
    )


def day_starts(start: int, count: int) -> list[DayStart]:
    """Consecutive day starts, e.g. to lay out a month grid."""
    start = to_exact_int(start, field="start")
    return [day_start(start + i) for i in range(max(0, count))]


def day_start_for_calendar(year: int, month: int, day_of_month: int) -> DayStart:
    return day_start(day_index_from_calendar(year, month, day_of_month))


# ============================================================================
# SCHEDULING SUPPORT (caller-owned timers)
# ============================================================================


def next_pulse_boundary_ms(now: Any) -> int:
    """First whole millisecond at or after the next pulse boundary.

    A caller that sleeps until this instant wakes inside the next pulse.
    """
    current_pulse = euclid_div(micro_pulses_since_genesis(now), MICRO_PER_PULSE)
    return math.ceil(epoch_ms_from_pulse_exact(current_pulse + 1))


def ms_until_next_pulse(now: Any) -> int:
    """Whole milliseconds to sleep from ``now`` until the next pulse boundary."""
    now_ms: Fraction = epoch_ms_from_input(now)
    return max(0, math.ceil(next_pulse_boundary_ms(now) - now_ms))


# ============================================================================
# LEGACY GRID COMPARISON
# ============================================================================


def grid_drift_report(day_index: int) -> dict[str, Any]:
    """Compare the continuous start of a day with the legacy 17,424-pulse grid.

    Both day lengths exist in deployed clients. Nothing here picks one; the
    report only shows how far apart they are for a given day.
    """
    day_index = to_exact_int(day_index, field="day_index")
    continuous_micro = start_of_day_micro_pulses(day_index)
    grid_micro = day_index * GRID_MICRO_PER_DAY
    drift = grid_drift_micro_pulses(day_index)
    if drift:
        logger.debug("Grid drift for day %s: %s micro-pulses", day_index, drift)
    return {
        "day_index": to_safe_int(day_index),
        "day_index_exact": str(day_index),
        "continuous_start_micro_pulses": str(continuous_micro),
        "grid_start_micro_pulses": str(grid_micro),
        "drift_micro_pulses": str(drift),
        "drift_pulses": drift / MICRO_PER_PULSE,
        "grid_day_index_at_continuous_start": str(grid_day_index(continuous_micro)),
        "continuous_day_index_at_grid_start": str(day_index_of(grid_micro)),
    }
