"""
Failure taxonomy for the data gateway and the classifier that decides how a
failure is presented to the operator.
"""

import json
from enum import Enum
from typing import Any, Mapping


# SQLSTATE / PostgREST codes meaning the store does not know a column or table
SCHEMA_DRIFT_CODES = frozenset({"42703", "42P01", "PGRST204", "PGRST205"})

SCHEMA_DRIFT_MARKERS = ("column", "schema", "cache")


class ErrorKind(str, Enum):
    SCHEMA_DRIFT = "schema_drift"
    ORDINARY = "ordinary"


class GatewayError(Exception):
    """Base class for every failure that leaves the gateway."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def kind(self) -> ErrorKind:
        return classify(self)


class RemoteReadError(GatewayError):
    pass


class RemoteWriteError(GatewayError):
    pass


def describe_failure(value: Any) -> str:
    """
    Most informative text for an arbitrary failure value.

    Mappings prefer "message", then "error_description", then "error", and
    fall back to their JSON form.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        message = getattr(value, "message", None)
        if isinstance(message, str) and message:
            return message
        return str(value)
    if isinstance(value, Mapping):
        for key in ("message", "error_description", "error"):
            if value.get(key):
                return describe_failure(value[key])
        return json.dumps(value, default=str, ensure_ascii=False)
    return str(value)


def failure_code(value: Any) -> str | None:
    if isinstance(value, Mapping):
        code = value.get("code")
        return str(code) if code else None

    # SQLAlchemy DBAPIError wraps the driver exception; its own `code` is a
    # documentation link id, not a store code
    orig = getattr(value, "orig", None)
    if orig is not None and orig is not value:
        return failure_code(orig)

    for attr in ("sqlstate", "pgcode", "code"):
        code = getattr(value, attr, None)
        if isinstance(code, str) and code:
            return code
    return None


def classify(value: Any) -> ErrorKind:
    code = failure_code(value)
    if code is not None and code.upper() in SCHEMA_DRIFT_CODES:
        return ErrorKind.SCHEMA_DRIFT

    # Unstructured messages: substring heuristic
    text = describe_failure(value).lower()
    if any(marker in text for marker in SCHEMA_DRIFT_MARKERS):
        return ErrorKind.SCHEMA_DRIFT
    return ErrorKind.ORDINARY
