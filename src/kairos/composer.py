"""
Calendar composition: calendar coordinates back to micro-pulses.

Used for jump-to-day navigation and for stamping notes at day granularity
without going through wall-clock time.
"""

from __future__ import annotations

from kairos.constants import (
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    GRID_MICRO_PER_DAY,
    MICRO_PER_DAY,
    MICRO_PER_PULSE,
    MONTHS_PER_YEAR,
)
from kairos.errors import KairosInputError
from kairos.guards import to_exact_int
from kairos.numerics import euclid_div


def start_of_day_micro_pulses(day_index: int) -> int:
    """Micro-pulse count at which ``day_index`` begins."""
    return to_exact_int(day_index, field="day_index") * MICRO_PER_DAY


def start_of_day_pulse(day_index: int) -> int:
    """Integer pulse containing the start of ``day_index`` (floored)."""
    return euclid_div(start_of_day_micro_pulses(day_index), MICRO_PER_PULSE)


def start_of_month_day_index(year: int, month: int) -> int:
    """Day index of day 1 of ``month`` (1..8) in ``year`` (may be negative)."""
    year = to_exact_int(year, field="year")
    month = to_exact_int(month, field="month")
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise KairosInputError(f"month must be in 1..{MONTHS_PER_YEAR}, got {month}")
    return year * DAYS_PER_YEAR + (month - 1) * DAYS_PER_MONTH


def day_index_from_calendar(year: int, month: int, day_of_month: int) -> int:
    """Inverse of the year/month/day-of-month decomposition."""
    day_of_month = to_exact_int(day_of_month, field="day_of_month")
    if not 1 <= day_of_month <= DAYS_PER_MONTH:
        raise KairosInputError(f"day_of_month must be in 1..{DAYS_PER_MONTH}, got {day_of_month}")
    return start_of_month_day_index(year, month) + day_of_month - 1


def grid_drift_micro_pulses(day_index: int) -> int:
    """How far the continuous start of a day lies past the legacy grid start."""
    return to_exact_int(day_index, field="day_index") * (MICRO_PER_DAY - GRID_MICRO_PER_DAY)
