"""Structured Logging — JSON formatter, setup and per-request logging.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (member_id, error_code, path, status_code...) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: calling it twice does not duplicate output

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency
    - Request logging as HTTP middleware so 404/405 responses are logged too
"""

import logging
import json
import time
from datetime import datetime, timezone

from fastapi import Request

_EXTRA_FIELDS = (
    "member_id", "error_code", "category", "severity", "operation",
    "path", "method", "status_code", "duration_ms",
)

request_logger = logging.getLogger("member_api.requests")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application."""
    for existing in list(logging.root.handlers):
        if getattr(existing, "_member_api", False):
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler._member_api = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


async def log_requests(request: Request, call_next):
    """HTTP middleware: log request start and completion with status and duration."""
    method = request.method
    path = request.url.path
    query = f"?{request.url.query}" if request.url.query else ""
    request_logger.info(
        f"Received request: {method} {path}{query}",
        extra={"method": method, "path": path},
    )
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        request_logger.info(
            f"Completed request: {method} {path} with status {status_code}",
            extra={
                "method": method, "path": path,
                "status_code": status_code, "duration_ms": duration_ms,
            },
        )
