#!/usr/bin/env python3
"""
Shared OpenAPI helpers and reusable response docs.
"""

from __future__ import annotations

from typing import Any, Dict


# Reusable default error responses for routers. These are documentation-only
# (the global exception handlers already return RFC7807 Problem JSON).
DEFAULT_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"description": "Bad Request"},
    404: {"description": "Not Found"},
    422: {"description": "Validation Error"},  # FastAPI default + engine input errors
    500: {"description": "Server Error"},
}

# Headers attached to every response by KairosHeadersMiddleware
KAIROS_RESPONSE_HEADERS: Dict[str, Dict[str, Any]] = {
    "X-Request-ID": {"schema": {"type": "string"}, "description": "Correlation id"},
    "X-Kairos-Genesis-Ms": {"schema": {"type": "string"}, "description": "Genesis anchor (Unix ms)"},
    "X-Kairos-Micro-Per-Day": {"schema": {"type": "string"}, "description": "Micro-pulses per day"},
    "X-Kairos-Day-Policy": {"schema": {"type": "string"}, "description": "Day length policy"},
    "X-Kairos-Algorithm-Version": {"schema": {"type": "string"}, "description": "Engine version"},
}
