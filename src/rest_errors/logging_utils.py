from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

# Structured fields copied from `extra={...}` into the JSON payload
EXTRA_FIELDS = (
    "event",
    "error_code",
    "error_group",
    "request_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "output_path",
    "rows",
    "exception_type",
)


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter: one machine-readable object per log line.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in EXTRA_FIELDS:
            if hasattr(record, attr):
                log_payload[attr] = getattr(record, attr)

        if record.exc_info:
            log_payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_payload, ensure_ascii=False, default=str)


def configure_logger(name: str = "rest_errors", level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with JSON formatting.

    Calling it again for the same name reuses the existing handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    logger.propagate = False
    return logger
