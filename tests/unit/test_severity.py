import json
import logging
from io import StringIO

import pytest

from rest_errors.classifier import ErrorCodeClassifier
from rest_errors.error_codes import ErrorGroup, RestServiceErrorCode
from rest_errors.logging_utils import JsonFormatter
from rest_errors.severity import http_status_for, is_client_error, log_error_code, log_level_for


@pytest.mark.parametrize(
    "group,status,level",
    [
        (ErrorGroup.BAD_REQUEST, 400, logging.DEBUG),
        (ErrorGroup.INTERNAL_SERVER_ERROR, 500, logging.ERROR),
        (ErrorGroup.UNKNOWN_ERROR_CODE, 500, logging.ERROR),
    ],
)
def test_group_policy(group, status, level):
    assert http_status_for(group) == status
    assert log_level_for(group) == level


def test_only_bad_request_is_a_client_error():
    assert [g for g in ErrorGroup if is_client_error(g)] == [ErrorGroup.BAD_REQUEST]


def test_log_error_code_uses_debug_for_caller_faults(caplog):
    logger = logging.getLogger("severity_test_debug")

    with caplog.at_level(logging.DEBUG, logger="severity_test_debug"):
        group = log_error_code(logger, RestServiceErrorCode.MISSING_ARGS, "missing")

    assert group is ErrorGroup.BAD_REQUEST
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert record.error_code == "MISSING_ARGS"
    assert record.error_group == "BAD_REQUEST"
    assert record.event == "rest.error"


def test_log_error_code_uses_error_for_server_faults(caplog):
    logger = logging.getLogger("severity_test_error")

    with caplog.at_level(logging.DEBUG, logger="severity_test_error"):
        group = log_error_code(
            logger,
            RestServiceErrorCode.CHANNEL_ALREADY_CLOSED,
            "closed",
            event="channel.write",
            request_id="abc",
        )

    assert group is ErrorGroup.INTERNAL_SERVER_ERROR
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.event == "channel.write"
    assert record.request_id == "abc"


def test_log_error_code_for_unknown_sentinel_is_error(caplog):
    logger = logging.getLogger("severity_test_unknown")

    with caplog.at_level(logging.DEBUG, logger="severity_test_unknown"):
        log_error_code(logger, RestServiceErrorCode.UNKNOWN_ERROR_CODE, "???")

    assert caplog.records[-1].levelno == logging.ERROR


def test_log_error_code_renders_through_json_formatter():
    logger = logging.getLogger("severity_json_test")
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    log_error_code(logger, RestServiceErrorCode.INVALID_ARGS, "bad args", request_id="r1")
    payload = json.loads(stream.getvalue())

    assert payload == {
        "level": "DEBUG",
        "logger": "severity_json_test",
        "message": "bad args",
        "event": "rest.error",
        "error_code": "INVALID_ARGS",
        "error_group": "BAD_REQUEST",
        "request_id": "r1",
    }


def test_log_error_code_keeps_extras_that_clash_with_record_attributes(caplog):
    logger = logging.getLogger("severity_test_reserved")

    with caplog.at_level(logging.DEBUG, logger="severity_test_reserved"):
        log_error_code(
            logger,
            RestServiceErrorCode.CHANNEL_ALREADY_CLOSED,
            "closed",
            filename="x.csv",
            lineno=7,
            request_id="r2",
        )

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.extra_filename == "x.csv"
    assert record.extra_lineno == 7
    assert record.filename != "x.csv"
    assert record.request_id == "r2"


def test_log_error_code_uses_injected_classifier(caplog):
    logger = logging.getLogger("severity_test_injected")
    empty = ErrorCodeClassifier(bad_request_codes=frozenset(), internal_server_error_codes=frozenset())

    with caplog.at_level(logging.DEBUG, logger="severity_test_injected"):
        group = log_error_code(logger, RestServiceErrorCode.MISSING_ARGS, "missing", classifier=empty)

    assert group is ErrorGroup.UNKNOWN_ERROR_CODE
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.error_group == "UNKNOWN_ERROR_CODE"
