# apps/api/app/error_codes.py
from __future__ import annotations

from typing import Dict

from rest_errors.error_codes import RestServiceErrorCode


# Framework-level HTTP failures expressed as service error codes
_HTTP_STATUS_TO_CODE: Dict[int, RestServiceErrorCode] = {
    400: RestServiceErrorCode.BAD_REQUEST,
    404: RestServiceErrorCode.UNSUPPORTED_OPERATION,
    405: RestServiceErrorCode.UNSUPPORTED_HTTP_METHOD,
    422: RestServiceErrorCode.INVALID_ARGS,
    501: RestServiceErrorCode.UNSUPPORTED_REST_METHOD,
}


def code_for_http_status(status_code: int) -> RestServiceErrorCode:
    """
    Pick the service error code describing an HTTP failure raised by the framework.

    Unmapped 4xx statuses are generic caller faults, anything else is a server fault.
    """
    code = _HTTP_STATUS_TO_CODE.get(status_code)
    if code is not None:
        return code
    if 400 <= status_code < 500:
        return RestServiceErrorCode.BAD_REQUEST
    return RestServiceErrorCode.INTERNAL_SERVER_ERROR
