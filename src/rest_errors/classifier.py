from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping

from .error_codes import ErrorGroup, RestServiceErrorCode


class OverlappingGroupsError(ValueError):
    """Raised when a code is listed under more than one explicit group."""


BAD_REQUEST_CODES: FrozenSet[RestServiceErrorCode] = frozenset(
    {
        RestServiceErrorCode.BAD_REQUEST,
        RestServiceErrorCode.INVALID_ARGS,
        RestServiceErrorCode.MALFORMED_REQUEST,
        RestServiceErrorCode.MISSING_ARGS,
        RestServiceErrorCode.NO_REQUEST,
        RestServiceErrorCode.UNKNOWN_HTTP_OBJECT,
        RestServiceErrorCode.UNSUPPORTED_OPERATION,
        RestServiceErrorCode.UNSUPPORTED_HTTP_METHOD,
    }
)

INTERNAL_SERVER_ERROR_CODES: FrozenSet[RestServiceErrorCode] = frozenset(
    {
        RestServiceErrorCode.INTERNAL_SERVER_ERROR,
        RestServiceErrorCode.CHANNEL_ACTIVE_TASKS_FAILURE,
        RestServiceErrorCode.CHANNEL_ALREADY_CLOSED,
        RestServiceErrorCode.ILLEGAL_RESPONSE_METADATA_STATE_TRANSITION,
        RestServiceErrorCode.OPERATION_INTERRUPTED,
        RestServiceErrorCode.REQUEST_HANDLER_SELECTION_ERROR,
        RestServiceErrorCode.REQUEST_HANDLE_FAILURE,
        RestServiceErrorCode.REQUEST_HANDLER_UNAVAILABLE,
        RestServiceErrorCode.REST_REQUEST_INFO_QUEUEING_FAILURE,
        RestServiceErrorCode.REST_REQUEST_INFO_NULL,
        RestServiceErrorCode.RESPONSE_BUILDING_FAILURE,
        RestServiceErrorCode.RESPONSE_HANDLER_NULL,
        RestServiceErrorCode.REQUEST_METADATA_NULL,
        RestServiceErrorCode.INTERNAL_OBJECT_CREATION_ERROR,
        RestServiceErrorCode.UNSUPPORTED_REST_METHOD,
    }
)


def _build_group_table(
    bad_request_codes: FrozenSet[RestServiceErrorCode],
    internal_server_error_codes: FrozenSet[RestServiceErrorCode],
) -> Mapping[RestServiceErrorCode, ErrorGroup]:
    overlap = bad_request_codes & internal_server_error_codes
    if overlap:
        names = sorted(code.value for code in overlap)
        raise OverlappingGroupsError(f"Codes listed under more than one group: {names}")

    table = {code: ErrorGroup.BAD_REQUEST for code in bad_request_codes}
    table.update({code: ErrorGroup.INTERNAL_SERVER_ERROR for code in internal_server_error_codes})
    return MappingProxyType(table)


@dataclass(frozen=True)
class ErrorCodeClassifier:
    """
    Maps every RestServiceErrorCode to exactly one ErrorGroup.

    The lookup table is built once from the two explicit membership lists and is
    read-only afterwards, so an instance can be shared across threads freely.
    Any code found in neither list resolves to ErrorGroup.UNKNOWN_ERROR_CODE.
    """

    bad_request_codes: FrozenSet[RestServiceErrorCode] = BAD_REQUEST_CODES
    internal_server_error_codes: FrozenSet[RestServiceErrorCode] = INTERNAL_SERVER_ERROR_CODES
    _table: Mapping[RestServiceErrorCode, ErrorGroup] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        bad_request = frozenset(self.bad_request_codes)
        internal = frozenset(self.internal_server_error_codes)
        object.__setattr__(self, "bad_request_codes", bad_request)
        object.__setattr__(self, "internal_server_error_codes", internal)
        object.__setattr__(self, "_table", _build_group_table(bad_request, internal))

    def classify(self, code: RestServiceErrorCode) -> ErrorGroup:
        """
        Return the group that `code` belongs to.

        Never raises: codes missing from both lists fall through to
        ErrorGroup.UNKNOWN_ERROR_CODE.
        """
        return self._table.get(code, ErrorGroup.UNKNOWN_ERROR_CODE)

    def members(self, group: ErrorGroup) -> FrozenSet[RestServiceErrorCode]:
        if group is ErrorGroup.BAD_REQUEST:
            return self.bad_request_codes
        if group is ErrorGroup.INTERNAL_SERVER_ERROR:
            return self.internal_server_error_codes
        return frozenset(code for code in RestServiceErrorCode if code not in self._table)

    def unclassified_codes(self, codes: Iterable[RestServiceErrorCode] = RestServiceErrorCode) -> List[RestServiceErrorCode]:
        """
        Codes that only resolve through the default group.

        The UNKNOWN_ERROR_CODE sentinel belongs there on purpose and is not reported.
        """
        return [
            code
            for code in codes
            if code is not RestServiceErrorCode.UNKNOWN_ERROR_CODE and code not in self._table
        ]


DEFAULT_CLASSIFIER = ErrorCodeClassifier()


def classify(code: RestServiceErrorCode) -> ErrorGroup:
    """Classify `code` with the process-wide classifier."""
    return DEFAULT_CLASSIFIER.classify(code)


# Name used by the REST layer
get_error_code_group = classify
