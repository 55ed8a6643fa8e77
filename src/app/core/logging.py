"""
Kairos Structured JSON Logging

Provides structured logging with JSON output for production environments.
Share links carry signed payload tokens, so messages are redacted before
they are written.
"""

import json
import logging
import re
import sys

from typing import Any

# LogRecord attributes that are not user-supplied extra fields
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
    }
)

_TOKEN_QUERY = re.compile(r"(?i)([?&](?:token|t|p)=)[^&\s\"#]+")
_TOKEN_FRAGMENT = re.compile(r"(#t=)[^\s\"]+")
_STREAM_PAYLOAD = re.compile(r"(/stream/p/)[^\s\"?#]+")
_BEARER = re.compile(r"(?i)(authorization:\s*bearer\s+)[^\s\"]+")


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging output"""

    def _redact(self, text: str) -> str:
        """Redact share tokens and credentials.

        - token=/t=/p= query values
        - #t= fragments
        - payload segments of /stream/p/<payload> links
        - Authorization: Bearer ... values
        """
        text = _TOKEN_QUERY.sub(r"\1[REDACTED]", text)
        text = _TOKEN_FRAGMENT.sub(r"\1[REDACTED]", text)
        text = _STREAM_PAYLOAD.sub(r"\1[REDACTED]", text)
        return _BEARER.sub(r"\1[REDACTED]", text)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Python logging record

        Returns:
            JSON-formatted log string
        """
        base = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": self._redact(record.getMessage()),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)

        # Add extra fields from logger.info("msg", extra={...})
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                base[key] = value

        return json.dumps(base, default=str)


def setup_logging(level: str = "INFO", format_json: bool = True) -> None:
    """
    Setup structured logging for the Kairos service

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to use JSON formatting
    """
    # Clear existing handlers
    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if format_json:
        handler.setFormatter(JsonFormatter())
    else:
        # Use simple formatter for development
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str, extra_fields: dict[str, Any] | None = None) -> logging.Logger:
    """
    Get logger with optional extra fields

    Args:
        name: Logger name (usually __name__)
        extra_fields: Additional fields to include in all log messages

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if extra_fields:
        # Create a logger adapter to automatically include extra fields
        return logging.LoggerAdapter(logger, extra_fields)

    return logger


def get_engine_logger(module: str) -> logging.Logger:
    """Get logger for engine-facing service code"""
    return get_logger(f"kairos.engine.{module}", {"layer": "engine"})


def get_api_logger(endpoint: str) -> logging.Logger:
    """Get logger for API endpoints"""
    return get_logger(f"kairos.api.{endpoint}", {"layer": "api", "type": "endpoint"})
