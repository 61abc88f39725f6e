# src/rest_errors/error_codes.py
from __future__ import annotations

from enum import Enum
from typing import Dict


class RestServiceErrorCode(str, Enum):
    """
    Closed set of error codes surfaced by the REST service layer.

    Fault-detection code picks exactly one of these to describe what went wrong.
    Each code belongs to an ErrorGroup (see rest_errors.classifier), which is what
    boundary layers react to when choosing a status class and a log level.

    Values are part of the tooling contract and must remain stable.
    """

    # Caller faults
    BAD_REQUEST = "BAD_REQUEST"
    INVALID_ARGS = "INVALID_ARGS"
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    MISSING_ARGS = "MISSING_ARGS"
    NO_REQUEST = "NO_REQUEST"
    UNSUPPORTED_HTTP_METHOD = "UNSUPPORTED_HTTP_METHOD"
    UNKNOWN_HTTP_OBJECT = "UNKNOWN_HTTP_OBJECT"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"

    # Server faults
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    CHANNEL_ACTIVE_TASKS_FAILURE = "CHANNEL_ACTIVE_TASKS_FAILURE"
    CHANNEL_ALREADY_CLOSED = "CHANNEL_ALREADY_CLOSED"
    ILLEGAL_RESPONSE_METADATA_STATE_TRANSITION = "ILLEGAL_RESPONSE_METADATA_STATE_TRANSITION"
    OPERATION_INTERRUPTED = "OPERATION_INTERRUPTED"
    REQUEST_HANDLER_SELECTION_ERROR = "REQUEST_HANDLER_SELECTION_ERROR"
    REQUEST_HANDLE_FAILURE = "REQUEST_HANDLE_FAILURE"
    REQUEST_HANDLER_UNAVAILABLE = "REQUEST_HANDLER_UNAVAILABLE"
    REST_REQUEST_INFO_QUEUEING_FAILURE = "REST_REQUEST_INFO_QUEUEING_FAILURE"
    REST_REQUEST_INFO_NULL = "REST_REQUEST_INFO_NULL"
    RESPONSE_BUILDING_FAILURE = "RESPONSE_BUILDING_FAILURE"
    RESPONSE_HANDLER_NULL = "RESPONSE_HANDLER_NULL"
    REQUEST_METADATA_NULL = "REQUEST_METADATA_NULL"
    INTERNAL_OBJECT_CREATION_ERROR = "INTERNAL_OBJECT_CREATION_ERROR"
    UNSUPPORTED_REST_METHOD = "UNSUPPORTED_REST_METHOD"

    # Catch-all
    UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR_CODE"


class ErrorGroup(str, Enum):
    """
    Transport-facing groups that error codes fall into.

    - BAD_REQUEST: the caller is at fault; safe to describe back to them.
    - INTERNAL_SERVER_ERROR: the service is at fault; operators should be alerted.
    - UNKNOWN_ERROR_CODE: any code not explicitly placed in one of the above.
    """

    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR_CODE"

    @property
    def code(self) -> RestServiceErrorCode:
        """The generic error code that carries this group's name."""
        return RestServiceErrorCode(self.value)


ERROR_CODE_DESCRIPTIONS: Dict[RestServiceErrorCode, str] = {
    RestServiceErrorCode.BAD_REQUEST: "Client provided a request that is not fit for processing.",
    RestServiceErrorCode.INVALID_ARGS: "Client supplied arguments that are not valid.",
    RestServiceErrorCode.MALFORMED_REQUEST: "Request cannot be decoded using the REST protocol.",
    RestServiceErrorCode.MISSING_ARGS: "Request is missing arguments necessary to service it.",
    RestServiceErrorCode.NO_REQUEST: "Request content was sent before the request metadata.",
    RestServiceErrorCode.UNSUPPORTED_HTTP_METHOD: "Client requested an HTTP method that is not supported.",
    RestServiceErrorCode.UNKNOWN_HTTP_OBJECT: "Received HTTP object was neither a request nor content.",
    RestServiceErrorCode.UNSUPPORTED_OPERATION: "Requested operation is not supported by the storage service.",
    RestServiceErrorCode.INTERNAL_SERVER_ERROR: "Server-side failure not caused by the client.",
    RestServiceErrorCode.CHANNEL_ACTIVE_TASKS_FAILURE: "Tasks run when a client channel became active failed.",
    RestServiceErrorCode.CHANNEL_ALREADY_CLOSED: "Operation attempted on a channel that is already closed.",
    RestServiceErrorCode.ILLEGAL_RESPONSE_METADATA_STATE_TRANSITION: (
        "Invalid state transition while generating response metadata."
    ),
    RestServiceErrorCode.OPERATION_INTERRUPTED: "Operation was interrupted while waiting.",
    RestServiceErrorCode.REQUEST_HANDLER_SELECTION_ERROR: "Handler controller failed to select a request handler.",
    RestServiceErrorCode.REQUEST_HANDLE_FAILURE: "Request handler failed to handle a submitted request.",
    RestServiceErrorCode.REQUEST_HANDLER_UNAVAILABLE: "Request handler is not started or has died.",
    RestServiceErrorCode.REST_REQUEST_INFO_QUEUEING_FAILURE: "Submitted request info could not be queued for handling.",
    RestServiceErrorCode.REST_REQUEST_INFO_NULL: "Submitted request info is missing.",
    RestServiceErrorCode.RESPONSE_BUILDING_FAILURE: "Response could not be built (usually JSON serialization).",
    RestServiceErrorCode.RESPONSE_HANDLER_NULL: "Request info carries no response handler reference.",
    RestServiceErrorCode.REQUEST_METADATA_NULL: "Request info carries no request metadata reference.",
    RestServiceErrorCode.INTERNAL_OBJECT_CREATION_ERROR: "An object needed for the request could not be created.",
    RestServiceErrorCode.UNSUPPORTED_REST_METHOD: (
        "REST method is not implemented by the request handler (may indicate a missing implementation)."
    ),
    RestServiceErrorCode.UNKNOWN_ERROR_CODE: "Error that is not defined as part of any group.",
}
