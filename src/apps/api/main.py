#!/usr/bin/env python3
"""
Kairos Calendar API - Main Application
FastAPI application exposing the deterministic Kairos calendar engine
"""

import uuid

from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware.kairos_headers import KairosHeadersMiddleware, build_static_headers
from api.models.responses import Problem, RootInfoResponse, VersionResponse
from api.routers.health import router as health_router
from api.routers.kairos import router as kairos_router
from api.services.metrics import initialize_build_info
from app.core.config import KairosSettings, get_settings
from app.core.logging import get_api_logger, setup_logging
from app.openapi.common import KAIROS_RESPONSE_HEADERS
from kairos import __version__
from kairos.constants import DAY_LENGTH_POLICY
from kairos.errors import KairosInputError

settings = get_settings()

# Initialize structured logging EARLY (before any logger usage)
setup_logging(level=settings.log_level, format_json=settings.log_json)
logger = get_api_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(
        "Starting Kairos API (env=%s, algo=%s, day_policy=%s)",
        settings.environment,
        settings.algo_version,
        DAY_LENGTH_POLICY,
    )
    initialize_build_info(settings.algo_version)
    try:
        yield
    finally:
        logger.info("Kairos API shutdown complete")


app = FastAPI(
    title="Kairos Calendar API",
    description="Deterministic Kairos calendar: pulses, beats, steps, days and labels",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)


def configure_cors_security(cfg: KairosSettings) -> dict:
    """Configure CORS with production-grade security controls."""
    env = cfg.environment
    allowed_origins = []
    for origin in cfg.cors_allowed_origins:
        if origin == "*":
            if env == "production":
                raise RuntimeError(
                    "CORS Security Error: Wildcard origins prohibited in production"
                )
            logger.warning("Wildcard CORS origin (*) should not be used")
            allowed_origins.append(origin)
        elif origin.startswith(("http://", "https://")) and urlparse(origin).netloc:
            allowed_origins.append(origin)
        else:
            logger.error("Invalid CORS origin: %s", origin)
            if env == "production":
                raise RuntimeError(f"CORS Security Error: Invalid origin format: {origin}")

    if not allowed_origins:
        if env == "production":
            raise RuntimeError(
                "CORS Security Error: CORS_ALLOWED_ORIGINS required for production."
            )
        if env == "development":
            allowed_origins = ["http://localhost:3000", "http://localhost:8000"]
            logger.warning("DEVELOPMENT: Using default localhost CORS origins")

    logger.info("CORS: %s origin(s) configured for %s", len(allowed_origins), env)
    return {
        "allow_origins": allowed_origins,
        "allow_credentials": "*" not in allowed_origins,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["accept", "content-type", "origin", "x-request-id"],
        "expose_headers": ["x-request-id", *[h.lower() for h in KAIROS_RESPONSE_HEADERS if h != "X-Request-ID"]],
        "max_age": 86400,  # 24 hours preflight cache
    }


app.add_middleware(CORSMiddleware, **configure_cors_security(settings))
app.add_middleware(KairosHeadersMiddleware, algo_version=settings.algo_version)

app.include_router(health_router, prefix="/api/v1")
app.include_router(kairos_router)


# Prometheus metrics endpoint
@app.get("/metrics", response_class=PlainTextResponse, tags=["health"], operation_id="metrics")
async def metrics():
    """Prometheus metrics endpoint"""
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)


# Build/version endpoint for deployment verification
@app.get(
    "/api/v1/version",
    response_model=VersionResponse,
    tags=["health"],
    operation_id="version",
)
async def version() -> VersionResponse:
    """Expose build metadata (git SHA), algorithm version and day policy"""
    return VersionResponse(
        build_sha=settings.build_sha,
        algo_version=settings.algo_version,
        day_policy=DAY_LENGTH_POLICY,
    )


@app.get("/", response_model=RootInfoResponse, tags=["health"], operation_id="root")
async def root() -> RootInfoResponse:
    return RootInfoResponse(
        name="Kairos Calendar API",
        version=__version__,
        status="operational",
        docs="/api/docs",
    )


def _request_id(request: Request) -> str:
    return (
        getattr(request.state, "request_id", None)
        or request.headers.get("x-request-id")
        or str(uuid.uuid4())
    )


def _problem_response(request: Request, problem: Problem) -> JSONResponse:
    req_id = problem.request_id or _request_id(request)
    headers = {"X-Request-ID": req_id, **build_static_headers(settings.algo_version)}
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(),
        headers=headers,
        media_type="application/problem+json",
    )


@app.exception_handler(KairosInputError)
async def kairos_input_error_handler(request: Request, exc: KairosInputError):
    logger.info("Rejected input on %s: %s", request.url.path, exc)
    problem = Problem(
        title="Invalid Kairos input",
        status=422,
        detail=str(exc),
        instance=str(request.url),
        code="INVALID_INPUT",
        request_id=_request_id(request),
    )
    return _problem_response(request, problem)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg', '')}" for e in errors
    )
    problem = Problem(
        title="Validation error",
        status=422,
        detail=detail[:500] or None,
        instance=str(request.url),
        code="VALIDATION_ERROR",
        request_id=_request_id(request),
    )
    return _problem_response(request, problem)


# Global HTTPException handler emitting RFC7807 Problem Details
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = None
    title = "HTTP error"
    if isinstance(exc.detail, dict):
        title = exc.detail.get("title") or title
        detail = exc.detail.get("detail") or detail
    elif isinstance(exc.detail, str):
        title = exc.detail
    problem = Problem(
        title=title,
        status=exc.status_code,
        detail=detail,
        instance=str(request.url),
        request_id=_request_id(request),
    )
    return _problem_response(request, problem)


# Fallback handler for uncaught exceptions
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    problem = Problem(
        title="Internal Server Error",
        status=500,
        detail=str(exc)[:200],
        instance=str(request.url),
        code="INTERNAL_ERROR",
        request_id=_request_id(request),
    )
    return _problem_response(request, problem)


# Custom OpenAPI schema with metadata (servers/build)
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    schema["servers"] = [{"url": "/"}]
    schema.setdefault("info", {}).setdefault("x-build", {})
    schema["info"]["x-build"]["sha"] = settings.build_sha
    schema["info"]["x-build"]["algo_version"] = settings.algo_version

    # Document the headers KairosHeadersMiddleware adds to every 200
    for methods in schema.get("paths", {}).values():
        for op in methods.values():
            if not isinstance(op, dict):
                continue
            r200 = op.get("responses", {}).get("200")
            if isinstance(r200, dict):
                r200.setdefault("headers", {}).update(KAIROS_RESPONSE_HEADERS)
    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi
