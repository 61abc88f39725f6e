from __future__ import annotations

from typing import Any, Dict, Optional

from rest_errors.classifier import classify
from rest_errors.error_codes import RestServiceErrorCode


def _error_example(
    *,
    code: RestServiceErrorCode,
    message: str,
    request_id: str = "7b2b5a2c4f3a4e1fb7f4f44c9c1c2c9a",
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build an error example matching the runtime error envelope:
    {"error": {"code": "...", "group": "...", "message": "...", "request_id": "...", "details": {...}}}
    """
    payload: Dict[str, Any] = {
        "error": {
            "code": code.value,
            "group": classify(code).value,
            "message": message,
            "request_id": request_id,
        }
    }
    if details is not None:
        payload["error"]["details"] = details
    return payload


def standard_error_responses() -> Dict[int, Dict[str, Any]]:
    """
    Reusable error response docs for the catalog routes.
    Examples are generated from RestServiceErrorCode, so groups always match the classifier.
    """
    return {
        404: {
            "description": "Unknown route",
            "content": {
                "application/json": {
                    "example": _error_example(
                        code=RestServiceErrorCode.UNSUPPORTED_OPERATION,
                        message="Not Found",
                    )
                }
            },
        },
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": _error_example(
                        code=RestServiceErrorCode.INVALID_ARGS,
                        message="Request validation failed",
                        details={
                            "errors": [
                                {
                                    "loc": ["path", "code"],
                                    "msg": "Input should be 'BAD_REQUEST', 'INVALID_ARGS', ...",
                                    "type": "enum",
                                }
                            ]
                        },
                    )
                }
            },
        },
        500: {
            "description": "Internal server error",
            "content": {
                "application/json": {
                    "example": _error_example(
                        code=RestServiceErrorCode.INTERNAL_SERVER_ERROR,
                        message="Internal Server Error",
                    )
                }
            },
        },
    }
