#!/usr/bin/env python3
"""
Calendar decomposition of micro-pulse counts.

Every division here is Euclidean (floor toward negative infinity, remainder
in [0, m)), so instants before genesis land in negative days with the same
in-day layout as positive ones:

    micro = -1  ->  day -1, last beat, last step, weekday Kaelith

This module provides:
- decompose(): the full CalendarMoment
- residues inside the day and beat for clock faces
- grid_day_index(): the legacy integer-grid day, for drift reports only
"""

from __future__ import annotations

from kairos.constants import (
    BEATS_PER_DAY,
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    GRID_MICRO_PER_DAY,
    MICRO_PER_BEAT,
    MICRO_PER_DAY,
    MICRO_PER_STEP,
    MONTHS_PER_YEAR,
    STEPS_PER_BEAT,
)
from kairos.core_types import CalendarMoment
from kairos.guards import to_exact_int
from kairos.numerics import clamp_index, euclid_div, euclid_divmod, euclid_mod
from kairos.types import WEEKDAY_NAMES


def _beat_and_step(micro_in_day: int) -> tuple[int, int, int]:
    """(beat, step, micro-pulses into the beat) for a residue inside a day."""
    beat = clamp_index("beat", micro_in_day // MICRO_PER_BEAT, 0, BEATS_PER_DAY - 1)
    micro_in_beat = micro_in_day - beat * MICRO_PER_BEAT
    # A beat is ~44.17 steps long; the raw index reaches 44 in its short tail
    step = clamp_index("step", micro_in_beat // MICRO_PER_STEP, 0, STEPS_PER_BEAT - 1)
    return beat, step, micro_in_beat


def decompose(micro_pulses: int) -> CalendarMoment:
    """Decompose micro-pulses since genesis into a CalendarMoment."""
    micro_pulses = to_exact_int(micro_pulses, field="micro_pulses")
    day_index, micro_in_day = euclid_divmod(micro_pulses, MICRO_PER_DAY)
    beat, step, _ = _beat_and_step(micro_in_day)

    return CalendarMoment(
        day_index=day_index,
        beat=beat,
        step=step,
        weekday=WEEKDAY_NAMES[euclid_mod(day_index, DAYS_PER_WEEK)],
        day_of_month=euclid_mod(day_index, DAYS_PER_MONTH) + 1,
        month=euclid_mod(euclid_div(day_index, DAYS_PER_MONTH), MONTHS_PER_YEAR) + 1,
        year=euclid_div(day_index, DAYS_PER_YEAR),
    )


def day_index_of(micro_pulses: int) -> int:
    """Day index only (cheaper than a full decomposition)."""
    return euclid_div(micro_pulses, MICRO_PER_DAY)


def micro_pulses_into_day(micro_pulses: int) -> int:
    """Micro-pulses elapsed since the start of the containing day."""
    return euclid_mod(micro_pulses, MICRO_PER_DAY)


def micro_pulses_into_beat(micro_pulses: int) -> int:
    """Micro-pulses elapsed since the start of the containing beat."""
    return _beat_and_step(micro_pulses_into_day(micro_pulses))[2]


def micro_pulses_into_step(micro_pulses: int) -> int:
    """Micro-pulses elapsed since the start of the (clamped) step.

    In the tail of a beat the clamped step 43 runs longer than 11 pulses, so
    this can exceed MICRO_PER_STEP there.
    """
    _, step, micro_in_beat = _beat_and_step(micro_pulses_into_day(micro_pulses))
    return micro_in_beat - step * MICRO_PER_STEP


def step_percent(micro_pulses: int) -> float:
    """Fraction of the current step elapsed, in [0, 1)."""
    into = micro_pulses_into_step(micro_pulses)
    if into >= MICRO_PER_STEP:
        return 1.0 - 1e-12
    return into / MICRO_PER_STEP


def grid_day_index(micro_pulses: int) -> int:
    """Legacy day index on the integer 17,424-pulse grid.

    Kept for comparison with older clients only; it drifts from
    decompose().day_index by ~67 pulses per day.
    """
    return euclid_div(micro_pulses, GRID_MICRO_PER_DAY)
