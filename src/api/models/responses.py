"""
Response models for OpenAPI specification and contract stability.

Every route declares a response model. Integer fields that JavaScript
clients read as plain numbers are saturated to +/-(2**53 - 1); the exact
value always travels alongside as a decimal string (``*_exact``).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from kairos.types import Arc, Chakra, Weekday


# =======================
# Health & Errors
# =======================

class HealthStatus(BaseModel):
    """Basic health status response."""
    status: str = Field(..., description="Health status: ok, warning, error")
    timestamp: datetime = Field(..., description="Check timestamp")
    process_id: str = Field(..., description="Process ID as string")


class VersionResponse(BaseModel):
    build_sha: str = Field(..., description="Build commit SHA")
    algo_version: str = Field(..., description="Engine algorithm version")
    day_policy: str = Field(..., description="Day length policy in force")


class RootInfoResponse(BaseModel):
    name: str
    version: str
    status: str
    docs: str


class Problem(BaseModel):
    """Problem Details per RFC 7807 for error responses."""
    type: Optional[str] = Field(
        None, description="URI reference that identifies the problem type"
    )
    title: str = Field(..., description="Short, human-readable summary of the problem")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(
        None, description="URI reference that identifies the specific occurrence"
    )
    code: Optional[str] = Field(None, description="Application-specific error code")
    request_id: Optional[str] = Field(None, description="Correlation id")


# =======================
# Kairos
# =======================

class CalendarMomentModel(BaseModel):
    """Calendar decomposition of an instant."""
    day_index: int = Field(..., description="Days since genesis (saturated)")
    day_index_exact: str = Field(..., description="Days since genesis, exact")
    beat: int = Field(..., ge=0, le=35)
    step: int = Field(..., ge=0, le=43)
    weekday: Weekday
    day_of_month: int = Field(..., ge=1, le=42)
    month: int = Field(..., ge=1, le=8)
    year: int = Field(..., description="Years since genesis (saturated)")
    year_exact: str = Field(..., description="Years since genesis, exact")


class KairosMomentResponse(BaseModel):
    """Calendar moment with display labels."""
    micro_pulses: str = Field(..., description="Exact micro-pulses since genesis")
    pulse: int = Field(..., description="Whole pulses since genesis (saturated)")
    pulse_exact: str
    calendar: CalendarMomentModel
    arc: Arc
    arc_chakra: Chakra
    chakra_day_by_weekday: Chakra = Field(..., description="Weekday table policy")
    chakra_day_by_day_of_month: Chakra = Field(..., description="Six-day band policy")
    month_name: str
    week_index: int = Field(..., ge=0, le=6)
    week_title: str
    beat_micro_pulses: int = Field(
        ..., ge=0, description="Micro-pulses elapsed in the current beat (clock faces)"
    )
    step_percent: float = Field(..., ge=0.0, lt=1.0)
    beat_step_label: str = Field(..., description="Zero-based 'B:SS'")
    epoch_ms: int = Field(..., description="Instant of the micro-pulse (saturated)")
    epoch_ms_exact: str
    input_kind: str = Field(..., description="ms, iso, pulse or micro_pulses")
    input_neutralized: bool = Field(
        False, description="True when a non-finite input was replaced by 0"
    )


class DayStartResponse(BaseModel):
    """Start instant of a Kairos day."""
    day_index: int
    day_index_exact: str
    micro_pulses: str
    pulse: int
    pulse_exact: str
    epoch_ms: int
    epoch_ms_exact: str


class DayRangeResponse(BaseModel):
    start: int
    count: int
    days: List[DayStartResponse]


class PulseEpochResponse(BaseModel):
    """Epoch instant of a pulse."""
    pulse: str = Field(..., description="Pulse as given")
    epoch_ms: int
    epoch_ms_exact: str
    iso: str


class NextPulseResponse(BaseModel):
    now_ms: str
    next_pulse: str
    boundary_ms: int
    wait_ms: int


class ArcResponse(BaseModel):
    beat: int
    arc: Arc
    chakra: Chakra
    description: str


class GridDriftResponse(BaseModel):
    """Continuous vs. legacy grid start of a day."""
    day_index: int
    day_index_exact: str
    continuous_start_micro_pulses: str
    grid_start_micro_pulses: str
    drift_micro_pulses: str
    drift_pulses: float
    grid_day_index_at_continuous_start: str
    continuous_day_index_at_grid_start: str


class ConstantsResponse(BaseModel):
    """Interop constants; every client must match these exactly."""
    genesis_ms: int
    breath_seconds: float
    breath_ms_rounded: int
    ms_per_pulse: str = Field(..., description="Exact rational 'num/den'")
    micro_per_ms: str = Field(..., description="Exact rational 'num/den'")
    micro_per_pulse: int
    micro_per_day: int
    micro_per_beat: int
    micro_per_step: int
    beats_per_day: int
    steps_per_beat: int
    pulses_per_step: int
    days_per_week: int
    days_per_month: int
    months_per_year: int
    days_per_year: int
    grid_pulses_per_day: int
    day_policy: str
    weekday_names: List[str]
    arc_names: List[str]
    chakra_names: List[str]
    month_names: List[str]
