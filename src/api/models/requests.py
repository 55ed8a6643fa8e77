#!/usr/bin/env python3
"""
API request models using Pydantic V2.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kairos.guards import MAX_INPUT_EXPONENT, check_magnitude


class MomentRequest(BaseModel):
    """Exactly one way of naming an instant"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {"ms": 1715323541888},
                {"iso": "2025-01-01T00:00:00Z"},
                {"pulse": 1000000},
                {"micro_pulses": 485868623},
            ]
        },
    )

    ms: int | float | None = Field(
        default=None,
        description=f"Unix milliseconds, at most 1e{MAX_INPUT_EXPONENT} in magnitude (non-finite values are treated as 0)",
    )
    iso: str | None = Field(
        default=None, description="ISO-8601 instant; signed and extended years allowed"
    )
    pulse: int | float | None = Field(
        default=None, description="Pulse count since genesis, as decoded from a payload"
    )
    micro_pulses: int | None = Field(
        default=None, description="Exact micro-pulse count since genesis"
    )

    @field_validator("ms", "pulse", "micro_pulses")
    @classmethod
    def bounded_magnitude(cls, v, info):
        if v is not None:
            check_magnitude(v, field=info.field_name)
        return v

    @model_validator(mode="after")
    def exactly_one_instant(self) -> "MomentRequest":
        given = [
            name
            for name in ("ms", "iso", "pulse", "micro_pulses")
            if getattr(self, name) is not None
        ]
        if len(given) != 1:
            raise ValueError(
                f"Provide exactly one of ms, iso, pulse, micro_pulses (got {given or 'none'})"
            )
        return self

    @property
    def kind(self) -> str:
        for name in ("ms", "iso", "pulse", "micro_pulses"):
            if getattr(self, name) is not None:
                return name
        return "ms"
