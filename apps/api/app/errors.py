# apps/api/app/errors.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import Request

from apps.api.app.schemas.errors import ErrorResponse
from rest_errors.classifier import DEFAULT_CLASSIFIER, ErrorCodeClassifier
from rest_errors.error_codes import RestServiceErrorCode


UNKNOWN_REQUEST_ID = "unknown"


def get_request_id(request: Request) -> str:
    """
    Return the request correlation id if present.

    This helper expects a middleware to set `request.state.request_id`.
    If missing, it returns a stable sentinel value rather than generating a new id.
    """
    rid = getattr(request.state, "request_id", None)
    if isinstance(rid, str) and rid.strip():
        return rid
    return UNKNOWN_REQUEST_ID


def make_error(
    *,
    code: RestServiceErrorCode,
    message: str,
    request_id: str,
    details: Optional[Any] = None,
    classifier: ErrorCodeClassifier = DEFAULT_CLASSIFIER,
) -> ErrorResponse:
    """
    Build the error response envelope used by the catalog API.

    Notes:
    - `group` is derived from `code` by `classifier`, never passed in.
    - `request_id` must match the `X-Request-ID` response header.
    """
    return ErrorResponse(
        error={
            "code": code.value,
            "group": classifier.classify(code).value,
            "message": message,
            "request_id": request_id,
            "details": details,
        }
    )
