import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import (
    ErrorKind,
    RemoteReadError,
    RemoteWriteError,
    classify,
    describe_failure,
)


@pytest.mark.parametrize(
    "message",
    [
        'column "pixKey" does not exist',
        "Could not find the 'relatives' COLUMN of 'employees'",
        "invalid Schema reference",
        "stale schema CACHE",
    ],
)
def test_classify_schema_drift_any_case(message):
    assert classify(message) is ErrorKind.SCHEMA_DRIFT
    assert classify({"message": message}) is ErrorKind.SCHEMA_DRIFT
    assert classify(RemoteWriteError(message)) is ErrorKind.SCHEMA_DRIFT
    assert classify(ValueError(message)) is ErrorKind.SCHEMA_DRIFT


@pytest.mark.parametrize(
    "failure",
    [
        "duplicate key value violates unique constraint",
        {"message": "permission denied"},
        RemoteReadError("connection refused"),
        None,
        42,
    ],
)
def test_classify_ordinary(failure):
    assert classify(failure) is ErrorKind.ORDINARY


def test_classify_prefers_structured_code():
    assert classify(RemoteWriteError("boom", code="42703")) is ErrorKind.SCHEMA_DRIFT
    assert classify({"code": "PGRST204", "message": "boom"}) is ErrorKind.SCHEMA_DRIFT
    assert classify(RemoteWriteError("boom", code="23505")) is ErrorKind.ORDINARY


def test_classify_reads_code_from_wrapped_driver_error():
    class DriverError(Exception):
        sqlstate = "42P01"

    exc = OperationalError("SELECT 1", {}, DriverError("relation missing"))
    assert classify(exc) is ErrorKind.SCHEMA_DRIFT


def test_describe_failure_prefers_message_fields():
    assert describe_failure({"message": "m", "error": "e"}) == "m"
    assert describe_failure({"error_description": "d", "error": "e"}) == "d"
    assert describe_failure({"error": "e"}) == "e"
    assert describe_failure({"hint": "h"}) == '{"hint": "h"}'


def test_describe_failure_other_values():
    assert describe_failure(None) == ""
    assert describe_failure("plain") == "plain"
    assert describe_failure(RemoteWriteError("write failed")) == "write failed"
    assert describe_failure(KeyError("x")) == "'x'"
    assert describe_failure(3.5) == "3.5"


def test_gateway_errors_expose_kind():
    assert RemoteWriteError('column "x" does not exist').kind is ErrorKind.SCHEMA_DRIFT
    assert RemoteReadError("timeout").kind is ErrorKind.ORDINARY
