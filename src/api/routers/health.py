#!/usr/bin/env python3
"""
Health check endpoints for monitoring
"""

import os

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from api.models.responses import HealthStatus

router = APIRouter(tags=["health"])


@router.get(
    "/health/live",
    response_model=HealthStatus,
    summary="Liveness",
    operation_id="health_live",
)
async def liveness_check() -> HealthStatus:
    """
    Kubernetes liveness probe endpoint.

    Returns 200 OK if the application process is alive and responsive.
    The engine has no external dependencies, so there is no separate
    readiness check.
    """
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(UTC),
        process_id=str(os.getpid()),
    )


@router.get(
    "/health/up",
    response_class=PlainTextResponse,
    summary="Up",
    operation_id="health_up",
)
async def health_up() -> PlainTextResponse:
    """Plaintext liveness for external monitors; always "ok"."""
    return PlainTextResponse("ok")
