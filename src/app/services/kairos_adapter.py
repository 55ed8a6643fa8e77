#!/usr/bin/env python3
"""
Adapter between FastAPI and the Kairos facade
Handles input normalisation, response shaping and metrics
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from api.models.requests import MomentRequest
from api.services.metrics import record_neutralized, track_conversion
from app.core.logging import get_engine_logger
from kairos import facade
from kairos.arc_chakra import arc_description, arc_from_beat, arc_to_chakra
from kairos.constants import (
    BEATS_PER_DAY,
    BREATH_MS_ROUNDED,
    BREATH_SECONDS,
    DAY_LENGTH_POLICY,
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    GENESIS_MS,
    GRID_PULSES_PER_DAY,
    MICRO_PER_BEAT,
    MICRO_PER_DAY,
    MICRO_PER_MS_DEN,
    MICRO_PER_MS_NUM,
    MICRO_PER_PULSE,
    MICRO_PER_STEP,
    MONTHS_PER_YEAR,
    MS_PER_PULSE_DEN,
    MS_PER_PULSE_NUM,
    PULSES_PER_STEP,
    STEPS_PER_BEAT,
)
from kairos.core_types import KairosMoment
from kairos.epoch_bridge import epoch_ms_from_micro_pulses, epoch_ms_from_pulse
from kairos.errors import KairosInputError
from kairos.guards import check_magnitude, was_neutralised
from kairos.numerics import euclid_div, to_safe_int
from kairos.time_utils import epoch_ms_to_iso
from kairos.types import ARC_NAMES, CHAKRA_NAMES, MONTH_NAMES, WEEKDAY_NAMES

logger = get_engine_logger("adapter")


def parse_decimal(text: str, field: str) -> Decimal:
    """Parse a path/query number exactly (no float round trip)."""
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as e:
        raise KairosInputError(f"{field} must be a number, got {text!r}") from e
    check_magnitude(value, field=field)
    return value


class KairosAdapter:
    """
    Adapter between FastAPI models and the Kairos facade

    Responsibilities:
    - Resolve request bodies into a single engine call
    - Count non-finite inputs that were neutralised
    - Shape engine values into response dictionaries
    """

    def moment(self, request: MomentRequest) -> dict[str, Any]:
        """Resolve a MomentRequest into a moment response dictionary."""
        kind = request.kind
        return self._moment(kind, getattr(request, kind))

    def moment_from_query(self, ms: str) -> dict[str, Any]:
        return self._moment("ms", parse_decimal(ms, "ms"))

    def _moment(self, kind: str, raw: Any) -> dict[str, Any]:
        neutralized = was_neutralised(raw)
        if neutralized:
            record_neutralized(kind)
            logger.warning("Non-finite %s neutralised to 0", kind)

        with track_conversion(f"moment_from_{kind}"):
            if kind == "pulse":
                m = facade.moment_from_pulse(raw)
            elif kind == "micro_pulses":
                m = facade.moment_from_micro_pulses(raw)
            else:
                m = facade.moment_from_ms(raw)
        return self._moment_dict(m, kind, neutralized)

    def _moment_dict(self, m: KairosMoment, kind: str, neutralized: bool) -> dict[str, Any]:
        epoch_ms = epoch_ms_from_micro_pulses(m.micro_pulses)
        data = m.to_dict()
        data.update(
            epoch_ms=to_safe_int(epoch_ms),
            epoch_ms_exact=str(epoch_ms),
            input_kind=kind,
            input_neutralized=neutralized,
        )
        return data

    def day_start(self, day_index: int) -> dict[str, Any]:
        check_magnitude(day_index, field="day_index")
        with track_conversion("day_start"):
            return facade.day_start(day_index).to_dict()

    def day_range(self, start: int, count: int) -> dict[str, Any]:
        check_magnitude(start, field="start")
        with track_conversion("day_range"):
            days = [d.to_dict() for d in facade.day_starts(start, count)]
        return {"start": start, "count": len(days), "days": days}

    def day_for_calendar(self, year: int, month: int, day: int) -> dict[str, Any]:
        check_magnitude(year, field="year")
        with track_conversion("day_for_calendar"):
            return facade.day_start_for_calendar(year, month, day).to_dict()

    def pulse_epoch(self, pulse: str) -> dict[str, Any]:
        value = parse_decimal(pulse, "pulse")
        if was_neutralised(value):
            record_neutralized("pulse")
        with track_conversion("pulse_epoch"):
            ms = epoch_ms_from_pulse(value)
        return {
            "pulse": pulse,
            "epoch_ms": to_safe_int(ms),
            "epoch_ms_exact": str(ms),
            "iso": epoch_ms_to_iso(ms),
        }

    def next_pulse(self, now_ms: str) -> dict[str, Any]:
        now = parse_decimal(now_ms, "now_ms")
        if was_neutralised(now):
            record_neutralized("now_ms")
        with track_conversion("next_pulse"):
            boundary = facade.next_pulse_boundary_ms(now)
            wait = facade.ms_until_next_pulse(now)
            current = euclid_div(facade.moment_from_ms(now).micro_pulses, MICRO_PER_PULSE)
        return {
            "now_ms": now_ms,
            "next_pulse": str(current + 1),
            "boundary_ms": to_safe_int(boundary),
            "wait_ms": wait,
        }

    def arc(self, beat: int) -> dict[str, Any]:
        arc = arc_from_beat(beat)
        return {
            "beat": beat,
            "arc": arc,
            "chakra": arc_to_chakra(arc),
            "description": arc_description(arc),
        }

    def grid_drift(self, day_index: int) -> dict[str, Any]:
        check_magnitude(day_index, field="day_index")
        with track_conversion("grid_drift"):
            return facade.grid_drift_report(day_index)

    def constants(self) -> dict[str, Any]:
        return {
            "genesis_ms": GENESIS_MS,
            "breath_seconds": BREATH_SECONDS,
            "breath_ms_rounded": BREATH_MS_ROUNDED,
            "ms_per_pulse": f"{MS_PER_PULSE_NUM}/{MS_PER_PULSE_DEN}",
            "micro_per_ms": f"{MICRO_PER_MS_NUM}/{MICRO_PER_MS_DEN}",
            "micro_per_pulse": MICRO_PER_PULSE,
            "micro_per_day": MICRO_PER_DAY,
            "micro_per_beat": MICRO_PER_BEAT,
            "micro_per_step": MICRO_PER_STEP,
            "beats_per_day": BEATS_PER_DAY,
            "steps_per_beat": STEPS_PER_BEAT,
            "pulses_per_step": PULSES_PER_STEP,
            "days_per_week": DAYS_PER_WEEK,
            "days_per_month": DAYS_PER_MONTH,
            "months_per_year": MONTHS_PER_YEAR,
            "days_per_year": DAYS_PER_YEAR,
            "grid_pulses_per_day": GRID_PULSES_PER_DAY,
            "day_policy": DAY_LENGTH_POLICY,
            "weekday_names": list(WEEKDAY_NAMES),
            "arc_names": list(ARC_NAMES),
            "chakra_names": list(CHAKRA_NAMES),
            "month_names": list(MONTH_NAMES),
        }


kairos_adapter = KairosAdapter()
