from concurrent.futures import ThreadPoolExecutor

import pytest

from rest_errors.classifier import (
    BAD_REQUEST_CODES,
    DEFAULT_CLASSIFIER,
    INTERNAL_SERVER_ERROR_CODES,
    ErrorCodeClassifier,
    OverlappingGroupsError,
    classify,
    get_error_code_group,
)
from rest_errors.error_codes import ErrorGroup, RestServiceErrorCode


# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "code,expected",
    [
        (RestServiceErrorCode.MISSING_ARGS, ErrorGroup.BAD_REQUEST),
        (RestServiceErrorCode.UNSUPPORTED_HTTP_METHOD, ErrorGroup.BAD_REQUEST),
        (RestServiceErrorCode.REQUEST_HANDLER_UNAVAILABLE, ErrorGroup.INTERNAL_SERVER_ERROR),
        (RestServiceErrorCode.RESPONSE_BUILDING_FAILURE, ErrorGroup.INTERNAL_SERVER_ERROR),
        (RestServiceErrorCode.UNKNOWN_ERROR_CODE, ErrorGroup.UNKNOWN_ERROR_CODE),
    ],
)
def test_classify_known_scenarios(code, expected):
    assert classify(code) is expected


def test_code_missing_from_both_lists_falls_back_to_unknown_group():
    # A classifier built without one code stands in for a newly added, unplaced code
    new_code = RestServiceErrorCode.OPERATION_INTERRUPTED
    classifier = ErrorCodeClassifier(
        bad_request_codes=BAD_REQUEST_CODES,
        internal_server_error_codes=INTERNAL_SERVER_ERROR_CODES - {new_code},
    )

    assert classifier.classify(new_code) is ErrorGroup.UNKNOWN_ERROR_CODE
    assert classifier.unclassified_codes() == [new_code]


def test_empty_classifier_maps_everything_to_unknown():
    classifier = ErrorCodeClassifier(bad_request_codes=frozenset(), internal_server_error_codes=frozenset())

    assert {classifier.classify(code) for code in RestServiceErrorCode} == {ErrorGroup.UNKNOWN_ERROR_CODE}


# ---------------------------------------------------------------------------
# Partition properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("code", sorted(BAD_REQUEST_CODES, key=lambda c: c.value))
def test_caller_fault_codes_are_bad_request(code):
    assert classify(code) is ErrorGroup.BAD_REQUEST


@pytest.mark.parametrize("code", sorted(INTERNAL_SERVER_ERROR_CODES, key=lambda c: c.value))
def test_server_fault_codes_are_internal_server_error(code):
    assert classify(code) is ErrorGroup.INTERNAL_SERVER_ERROR


def test_membership_lists_are_disjoint():
    assert BAD_REQUEST_CODES & INTERNAL_SERVER_ERROR_CODES == frozenset()


def test_overlapping_lists_are_rejected_at_build_time():
    shared = RestServiceErrorCode.INVALID_ARGS

    with pytest.raises(OverlappingGroupsError, match="INVALID_ARGS"):
        ErrorCodeClassifier(
            bad_request_codes=BAD_REQUEST_CODES,
            internal_server_error_codes=INTERNAL_SERVER_ERROR_CODES | {shared},
        )


def test_overlapping_groups_error_is_a_value_error():
    assert issubclass(OverlappingGroupsError, ValueError)


# ---------------------------------------------------------------------------
# Totality / determinism / completeness
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("code", list(RestServiceErrorCode))
def test_every_code_maps_to_exactly_one_group(code):
    group = classify(code)

    assert isinstance(group, ErrorGroup)
    assert classify(code) is group

    memberships = [
        code in BAD_REQUEST_CODES,
        code in INTERNAL_SERVER_ERROR_CODES,
        group is ErrorGroup.UNKNOWN_ERROR_CODE,
    ]
    assert memberships.count(True) == 1


def test_every_code_is_placed_in_an_explicit_group():
    # Fails when a code is added to the enum without being put in a membership list
    assert DEFAULT_CLASSIFIER.unclassified_codes() == []


def test_group_named_codes_classify_into_their_own_group():
    for group in ErrorGroup:
        assert classify(group.code) is group


def test_get_error_code_group_is_an_alias_of_classify():
    for code in RestServiceErrorCode:
        assert get_error_code_group(code) is classify(code)


def test_accepts_codes_given_by_wire_value():
    assert classify(RestServiceErrorCode("MISSING_ARGS")) is ErrorGroup.BAD_REQUEST


# ---------------------------------------------------------------------------
# members / immutability
# ---------------------------------------------------------------------------

def test_members_cover_the_whole_code_set_without_overlap():
    members = [DEFAULT_CLASSIFIER.members(group) for group in ErrorGroup]

    assert frozenset().union(*members) == frozenset(RestServiceErrorCode)
    assert sum(len(m) for m in members) == len(RestServiceErrorCode)
    assert DEFAULT_CLASSIFIER.members(ErrorGroup.UNKNOWN_ERROR_CODE) == {RestServiceErrorCode.UNKNOWN_ERROR_CODE}


def test_classifier_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CLASSIFIER._table[RestServiceErrorCode.UNKNOWN_ERROR_CODE] = ErrorGroup.BAD_REQUEST


def test_classifier_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_CLASSIFIER.bad_request_codes = frozenset()


def test_classifier_accepts_plain_iterables():
    classifier = ErrorCodeClassifier(
        bad_request_codes=[RestServiceErrorCode.MISSING_ARGS],
        internal_server_error_codes=(RestServiceErrorCode.CHANNEL_ALREADY_CLOSED,),
    )

    assert classifier.bad_request_codes == frozenset({RestServiceErrorCode.MISSING_ARGS})
    assert classifier.classify(RestServiceErrorCode.CHANNEL_ALREADY_CLOSED) is ErrorGroup.INTERNAL_SERVER_ERROR
    assert classifier.classify(RestServiceErrorCode.INVALID_ARGS) is ErrorGroup.UNKNOWN_ERROR_CODE


def test_shared_classifier_gives_serial_results_across_threads():
    codes = list(RestServiceErrorCode) * 50
    serial = [classify(code) for code in codes]

    with ThreadPoolExecutor(max_workers=8) as pool:
        concurrent = list(pool.map(DEFAULT_CLASSIFIER.classify, codes))

    assert concurrent == serial
