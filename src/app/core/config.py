#!/usr/bin/env python3
"""
Application configuration

Environment-driven settings for the HTTP service. Engine constants live in
kairos.constants and are deliberately not configurable.
"""

import os

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

from kairos.constants import DAYS_PER_YEAR

EnvironmentType = Literal["development", "staging", "test", "production"]

# API limits
DEFAULT_MAX_DAYS_PER_RANGE = DAYS_PER_YEAR  # one Kairos year of day starts


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return int(v)
    except ValueError:
        return default


def get_environment() -> EnvironmentType:
    """Get current environment from ENVIRONMENT variable."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env in ("development", "staging", "test", "production"):
        return env  # type: ignore[return-value]
    return "development"  # Default fallback


@dataclass(frozen=True)
class KairosSettings:
    """Complete service configuration."""

    environment: EnvironmentType
    log_level: str
    log_json: bool
    cors_allowed_origins: list[str] = field(default_factory=list)
    max_days_per_range: int = DEFAULT_MAX_DAYS_PER_RANGE
    build_sha: str = "unknown"
    algo_version: str = "1.0.0"


def load_settings() -> KairosSettings:
    """Read settings from the environment (uncached)."""
    origins = [
        o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if o.strip()
    ]
    return KairosSettings(
        environment=get_environment(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_json=os.getenv("LOG_FORMAT", "json").lower() == "json",
        cors_allowed_origins=origins,
        max_days_per_range=max(1, _env_int("KAIROS_MAX_DAYS_PER_RANGE", DEFAULT_MAX_DAYS_PER_RANGE)),
        build_sha=os.getenv("KAIROS_BUILD_SHA", "unknown"),
        algo_version=os.getenv("KAIROS_ALGO_VERSION", "1.0.0"),
    )


@lru_cache(maxsize=1)
def get_settings() -> KairosSettings:
    """Process-wide settings, read once."""
    return load_settings()
