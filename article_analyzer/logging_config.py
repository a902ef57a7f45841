"""
Structured JSON logging for request and scan observability.

Provides single-line JSON logs with request IDs for correlating the records
of one API call, plus a context manager that times bias scans.
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Iterable

# Context variable for request correlation
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Extra record attributes copied into the JSON payload
EXTRA_FIELDS = (
    "event",
    "duration_ms",
    "detectors",
    "text_length",
    "candidates",
    "retained",
    "cache",
    "method",
    "path",
    "status_code",
)


# -----------------------------------------------------------------------------
# JSON Formatter
# -----------------------------------------------------------------------------


class JSONFormatter(logging.Formatter):
    """
    Format log records as single-line JSON.

    Output format:
    {"timestamp": "...", "level": "INFO", "message": "...", "request_id": "...", ...}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


def configure_logging(json_format: bool = True, level: str = "INFO") -> None:
    """
    Configure root logging for production or local development.

    Args:
        json_format: If True, use JSON format. If False, use human-readable format.
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# -----------------------------------------------------------------------------
# Context Managers
# -----------------------------------------------------------------------------


@contextmanager
def log_scan(detectors: Iterable, text_length: int):
    """
    Context manager for bias scan instrumentation.

    Logs scan completion at debug level with timing and match counts, and
    failures at error level before re-raising.

    Usage:
        with log_scan(groups, len(text)) as metrics:
            pool = collect(text)
            metrics["candidates"] = len(pool)
    """
    detector_names = [getattr(d, "value", str(d)) for d in detectors]
    start_time = time.perf_counter()
    logger = logging.getLogger("article_analyzer.scan")
    metrics: dict = {"candidates": 0, "retained": 0}

    try:
        yield metrics

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.debug(
            f"Bias scan completed: {metrics['retained']}/{metrics['candidates']} matches retained ({duration_ms}ms)",
            extra={
                "event": "bias_scan_complete",
                "detectors": detector_names,
                "text_length": text_length,
                "candidates": metrics["candidates"],
                "retained": metrics["retained"],
                "duration_ms": duration_ms,
            },
        )
    except Exception as e:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.error(
            f"Bias scan failed: {e}",
            extra={
                "event": "bias_scan_failed",
                "detectors": detector_names,
                "text_length": text_length,
                "duration_ms": duration_ms,
            },
        )
        raise
