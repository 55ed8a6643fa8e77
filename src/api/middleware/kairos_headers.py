"""
Kairos Headers Middleware

Adds the request id and the engine's interop constants to all responses.
Clients compare these against their own constants to detect drift.
"""

from __future__ import annotations

import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.logging import get_api_logger
from kairos.constants import DAY_LENGTH_POLICY, GENESIS_MS, MICRO_PER_DAY

logger = get_api_logger("kairos_headers")


def build_static_headers(algo_version: str) -> dict[str, str]:
    """Headers that are the same for every response."""
    return {
        "X-Kairos-Genesis-Ms": str(GENESIS_MS),
        "X-Kairos-Micro-Per-Day": str(MICRO_PER_DAY),
        "X-Kairos-Day-Policy": DAY_LENGTH_POLICY,
        "X-Kairos-Algorithm-Version": algo_version,
    }


class KairosHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add correlation and engine headers to all API responses.

    - X-Request-ID: echoed from the request, or a fresh uuid4
    - X-Kairos-*: genesis anchor, day length and policy, algorithm version
    """

    def __init__(
        self,
        app: ASGIApp,
        algo_version: str = "1.0.0",
        header_name: str = "X-Request-ID",
    ) -> None:
        super().__init__(app)
        self.header_name = header_name
        self.headers = build_static_headers(algo_version)
        logger.info("Kairos headers initialized: %s", self.headers)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        req_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = req_id

        response = await call_next(request)

        response.headers.setdefault(self.header_name, req_id)
        for header, value in self.headers.items():
            response.headers[header] = value
        return response
