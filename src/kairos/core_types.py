#!/usr/bin/env python3
"""
Core value types for the Kairos engine
All values are immutable and computed fresh per call
"""

from dataclasses import asdict, dataclass
from typing import Any

from kairos.numerics import to_safe_int
from kairos.types import Arc, Chakra, Weekday

# ============================================================================
# CALENDAR MOMENT
# ============================================================================


@dataclass(frozen=True)
class CalendarMoment:
    """Calendar decomposition of a micro-pulse count"""

    day_index: int  # Days since genesis (negative before genesis)
    beat: int  # 0..35
    step: int  # 0..43
    weekday: Weekday
    day_of_month: int  # 1..42
    month: int  # 1..8
    year: int  # Years since genesis (negative before genesis)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization

        day_index and year are saturated to the JS safe-integer range;
        the *_exact fields carry the exact values as strings.
        """
        data = asdict(self)
        data["day_index"] = to_safe_int(self.day_index)
        data["year"] = to_safe_int(self.year)
        data["day_index_exact"] = str(self.day_index)
        data["year_exact"] = str(self.year)
        return data


# ============================================================================
# FULL MOMENT (CALENDAR + LABELS)
# ============================================================================


@dataclass(frozen=True)
class KairosMoment:
    """Calendar moment plus the display labels derived from it"""

    micro_pulses: int
    pulse: int  # floor(micro_pulses / 1e6)
    calendar: CalendarMoment
    arc: Arc
    arc_chakra: Chakra
    chakra_day_by_weekday: Chakra
    chakra_day_by_day_of_month: Chakra
    month_name: str
    week_index: int  # 0..6
    week_title: str
    beat_micro_pulses: int  # micro-pulses into the beat
    step_percent: float  # [0, 1)
    beat_step_label: str  # "B:SS", zero-based

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "micro_pulses": str(self.micro_pulses),
            "pulse": to_safe_int(self.pulse),
            "pulse_exact": str(self.pulse),
            "calendar": self.calendar.to_dict(),
            "arc": self.arc,
            "arc_chakra": self.arc_chakra,
            "chakra_day_by_weekday": self.chakra_day_by_weekday,
            "chakra_day_by_day_of_month": self.chakra_day_by_day_of_month,
            "month_name": self.month_name,
            "week_index": self.week_index,
            "week_title": self.week_title,
            "beat_micro_pulses": self.beat_micro_pulses,
            "step_percent": self.step_percent,
            "beat_step_label": self.beat_step_label,
        }


# ============================================================================
# DAY START (NAVIGATION)
# ============================================================================


@dataclass(frozen=True)
class DayStart:
    """The instant at which a Kairos day begins"""

    day_index: int
    micro_pulses: int
    pulse: int
    epoch_ms: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "day_index": to_safe_int(self.day_index),
            "day_index_exact": str(self.day_index),
            "micro_pulses": str(self.micro_pulses),
            "pulse": to_safe_int(self.pulse),
            "pulse_exact": str(self.pulse),
            "epoch_ms": to_safe_int(self.epoch_ms),
            "epoch_ms_exact": str(self.epoch_ms),
        }
