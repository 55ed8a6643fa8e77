"""
Kairos deterministic calendar engine.

Converts Unix milliseconds to exact micro-pulse counts since genesis and
decomposes them into the Kairos calendar (beat, step, day, month, year,
weekday, arc, chakra-day), and back. Pure functions only.
"""

from kairos.arc_chakra import (
    arc_from_beat,
    arc_to_chakra,
    chakra_day_from_day_of_month,
    chakra_day_from_month,
    chakra_day_from_weekday,
)
from kairos.composer import (
    day_index_from_calendar,
    grid_drift_micro_pulses,
    start_of_day_micro_pulses,
    start_of_day_pulse,
)
from kairos.core_types import CalendarMoment, DayStart, KairosMoment
from kairos.decomposer import decompose, grid_day_index
from kairos.epoch_bridge import (
    epoch_ms_from_micro_pulses,
    epoch_ms_from_pulse,
    epoch_ms_from_pulse_exact,
)
from kairos.errors import KairosError, KairosInputError, KairosInvariantError
from kairos.facade import (
    day_start,
    moment_from_micro_pulses,
    moment_from_ms,
    moment_from_pulse,
    next_pulse_boundary_ms,
)
from kairos.quantizer import micro_pulses_from_delta_ms, micro_pulses_since_genesis

__version__ = "1.0.0"

__all__ = [
    "CalendarMoment",
    "DayStart",
    "KairosError",
    "KairosInputError",
    "KairosInvariantError",
    "KairosMoment",
    "arc_from_beat",
    "arc_to_chakra",
    "chakra_day_from_day_of_month",
    "chakra_day_from_month",
    "chakra_day_from_weekday",
    "day_index_from_calendar",
    "day_start",
    "decompose",
    "epoch_ms_from_micro_pulses",
    "epoch_ms_from_pulse",
    "epoch_ms_from_pulse_exact",
    "grid_day_index",
    "grid_drift_micro_pulses",
    "micro_pulses_from_delta_ms",
    "micro_pulses_since_genesis",
    "moment_from_micro_pulses",
    "moment_from_ms",
    "moment_from_pulse",
    "next_pulse_boundary_ms",
    "start_of_day_micro_pulses",
    "start_of_day_pulse",
]
