from __future__ import annotations

import logging
from typing import Any, Dict

from .classifier import DEFAULT_CLASSIFIER, ErrorCodeClassifier
from .error_codes import ErrorGroup, RestServiceErrorCode

HTTP_400 = 400
HTTP_500 = 500

# Attributes set by LogRecord itself; passing them through `extra` raises KeyError
_RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}


def is_client_error(group: ErrorGroup) -> bool:
    return group is ErrorGroup.BAD_REQUEST


def http_status_for(group: ErrorGroup) -> int:
    """
    Status class a boundary layer should answer with for `group`.

    Unknown codes are treated as server faults: the classification itself is
    incomplete, so the caller cannot be blamed.
    """
    return HTTP_400 if is_client_error(group) else HTTP_500


def log_level_for(group: ErrorGroup) -> int:
    """
    Caller faults are logged at DEBUG; everything else at ERROR so it alerts.
    """
    return logging.DEBUG if is_client_error(group) else logging.ERROR


def _safe_extra(extra: Dict[str, Any]) -> Dict[str, Any]:
    """Prefix keys that would collide with LogRecord attributes."""
    return {
        (f"extra_{key}" if key in _RESERVED_RECORD_ATTRS else key): value
        for key, value in extra.items()
    }


def log_error_code(
    logger: logging.Logger,
    code: RestServiceErrorCode,
    message: str,
    exc_info: Any = None,
    classifier: ErrorCodeClassifier = DEFAULT_CLASSIFIER,
    **extra: Any,
) -> ErrorGroup:
    """
    Log `message` at the level implied by the group of `code`.

    The code and its group are attached as structured fields. Keys in `extra`
    that clash with LogRecord attributes (filename, lineno, ...) are stored as
    `extra_<key>`. Returns the group so callers can reuse it for the response.
    """
    group = classifier.classify(code)
    event = extra.pop("event", "rest.error")
    logger.log(
        log_level_for(group),
        message,
        exc_info=exc_info,
        extra={
            **_safe_extra(extra),
            "event": event,
            "error_code": code.value,
            "error_group": group.value,
        },
    )
    return group
