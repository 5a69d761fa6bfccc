from typing import Any, Mapping


def sanitize_payload(record: Mapping[str, Any]) -> dict[str, Any]:
    """
    Copy of a write payload without the entries whose value is None.

    Only None is dropped: "", 0 and False are meaningful values and stay.
    Nested mappings (bank_info, cnh) and lists (relatives) are passed through
    as they are, not cleaned recursively.
    """
    return {key: value for key, value in record.items() if value is not None}


def strip_identity(record: Mapping[str, Any], identity: str = "id") -> dict[str, Any]:
    return {key: value for key, value in record.items() if key != identity}
