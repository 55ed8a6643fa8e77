#!/usr/bin/env python3
"""
Kairos API endpoints
REST access to the calendar engine for non-Python consumers
"""

from fastapi import APIRouter, HTTPException, Query

from api.models.requests import MomentRequest
from api.models.responses import (
    ArcResponse,
    ConstantsResponse,
    DayRangeResponse,
    DayStartResponse,
    GridDriftResponse,
    KairosMomentResponse,
    NextPulseResponse,
    PulseEpochResponse,
)
from app.core.config import get_settings
from app.core.logging import get_api_logger
from app.openapi.common import DEFAULT_ERROR_RESPONSES
from app.services.kairos_adapter import kairos_adapter

router = APIRouter(prefix="/api/v1/kairos", tags=["kairos"], responses=DEFAULT_ERROR_RESPONSES)
logger = get_api_logger("kairos")


@router.get(
    "/constants",
    response_model=ConstantsResponse,
    summary="Interop constants",
    operation_id="kairos_constants",
)
async def get_constants() -> ConstantsResponse:
    """
    The constants every client must share with the engine.

    Rational constants are given as exact ``num/den`` strings.
    """
    return ConstantsResponse(**kairos_adapter.constants())


@router.post(
    "/moment",
    response_model=KairosMomentResponse,
    summary="Moment for an instant",
    operation_id="kairos_moment",
)
async def post_moment(request: MomentRequest) -> KairosMomentResponse:
    """
    Decompose an instant given as exactly one of ``ms``, ``iso``, ``pulse``
    or ``micro_pulses``.

    Non-finite ``ms``/``pulse`` values are treated as 0 and flagged with
    ``input_neutralized``.
    """
    logger.debug("Moment request kind=%s", request.kind)
    return KairosMomentResponse(**kairos_adapter.moment(request))


@router.get(
    "/moment",
    response_model=KairosMomentResponse,
    summary="Moment for Unix milliseconds",
    operation_id="kairos_moment_get",
)
async def get_moment(
    ms: str = Query(..., description="Unix milliseconds; fractional and very large values are exact"),
) -> KairosMomentResponse:
    return KairosMomentResponse(**kairos_adapter.moment_from_query(ms))


@router.get(
    "/days/{day_index}",
    response_model=DayStartResponse,
    summary="Start of a day",
    operation_id="kairos_day_start",
)
async def get_day_start(day_index: int) -> DayStartResponse:
    return DayStartResponse(**kairos_adapter.day_start(day_index))


@router.get(
    "/days",
    response_model=DayRangeResponse,
    summary="Consecutive day starts",
    operation_id="kairos_day_range",
)
async def get_day_range(
    start: int = Query(..., description="First day index"),
    count: int = Query(42, ge=1, description="Number of days"),
) -> DayRangeResponse:
    """Consecutive day starts, e.g. to lay out a month grid."""
    limit = get_settings().max_days_per_range
    if count > limit:
        raise HTTPException(
            status_code=400,
            detail={"title": "Range too large", "detail": f"count must be <= {limit}"},
        )
    return DayRangeResponse(**kairos_adapter.day_range(start, count))


@router.get(
    "/calendar/{year}/{month}/{day}",
    response_model=DayStartResponse,
    summary="Start of a calendar day",
    operation_id="kairos_calendar_day",
)
async def get_calendar_day(year: int, month: int, day: int) -> DayStartResponse:
    """Start of ``year`` (since genesis, may be negative), ``month`` 1..8, ``day`` 1..42."""
    return DayStartResponse(**kairos_adapter.day_for_calendar(year, month, day))


@router.get(
    "/pulse/{pulse}/epoch",
    response_model=PulseEpochResponse,
    summary="Epoch instant of a pulse",
    operation_id="kairos_pulse_epoch",
)
async def get_pulse_epoch(pulse: str) -> PulseEpochResponse:
    return PulseEpochResponse(**kairos_adapter.pulse_epoch(pulse))


@router.get(
    "/next-pulse",
    response_model=NextPulseResponse,
    summary="Next pulse boundary",
    operation_id="kairos_next_pulse",
)
async def get_next_pulse(
    now_ms: str = Query(..., description="Current Unix milliseconds"),
) -> NextPulseResponse:
    """
    First whole millisecond at or after the next pulse boundary.

    The server keeps no timer; callers schedule their own wakeup from
    ``wait_ms``.
    """
    return NextPulseResponse(**kairos_adapter.next_pulse(now_ms))


@router.get(
    "/arc/{beat}",
    response_model=ArcResponse,
    summary="Arc of a beat",
    operation_id="kairos_arc",
)
async def get_arc(beat: int) -> ArcResponse:
    return ArcResponse(**kairos_adapter.arc(beat))


@router.get(
    "/grid-drift/{day_index}",
    response_model=GridDriftResponse,
    summary="Continuous vs. legacy grid day start",
    operation_id="kairos_grid_drift",
)
async def get_grid_drift(day_index: int) -> GridDriftResponse:
    return GridDriftResponse(**kairos_adapter.grid_drift(day_index))
