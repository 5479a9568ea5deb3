"""Typed, path-based access to decoded WikiTree API records."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from wikitree_api.exceptions import (
    MalformedValueError,
    MissingValueError,
    WikiTreeUsageError,
)

Record = Mapping
ExpectedType = Union[type, tuple]

# Placeholder month/day suffix used by WikiTree dates ("1874-11-00").
DATE_PLACEHOLDER = "-00"
UNKNOWN_DATE = "<<unknown>>"


def format_path(path) -> str:
    """Render a key path as '"a" -> "b" -> "c"'."""
    return " -> ".join(f'"{key}"' for key in path)


def _type_name(expected: ExpectedType) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def _matches(value: Any, expected: ExpectedType) -> bool:
    """isinstance() that refuses to treat a bool as a number."""
    allowed = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in allowed:
        return False
    return isinstance(value, allowed)


def _walk(record: Record, path: tuple, mandatory: bool) -> Any:
    if not path:
        raise WikiTreeUsageError("record lookup needs at least one key")
    if not isinstance(record, Mapping):
        raise MalformedValueError(
            "lookup target is not a record",
            path=format_path(path),
            expected="record",
            found=type(record).__name__,
        )

    current = record
    for depth, key in enumerate(path, start=1):
        value = current.get(key)
        if depth == len(path):
            return value

        if isinstance(value, Mapping):
            current = value
            continue

        if not mandatory:
            return None
        where = format_path(path[:depth])
        if value is None:
            raise MissingValueError("found nothing on the way down", path=where)
        raise MissingValueError(
            "expected a nested record on the way down",
            path=where,
            expected="record",
            found=value,
        )
    return None


def _check_type(value: Any, path: tuple, expected: Optional[ExpectedType]) -> Any:
    if expected is not None and not _matches(value, expected):
        raise MalformedValueError(
            "value has the wrong type",
            path=format_path(path),
            expected=_type_name(expected),
            found=value,
        )
    return value


def get_mandatory(record: Record, *path: str, expected: Optional[ExpectedType] = None) -> Any:
    """
    Get a value which must exist.

    Args:
        record: Where to look
        path: Keys leading down through nested records to the value
        expected: Type (or tuple of types) the value must have

    Returns:
        The value, never None

    Raises:
        MissingValueError: a path segment or the value itself is missing
        MalformedValueError: the value is not of the expected type
    """
    value = _walk(record, path, mandatory=True)
    if value is None:
        raise MissingValueError("required value is null or absent", path=format_path(path))
    return _check_type(value, path, expected)


def get_optional(record: Record, *path: str, expected: Optional[ExpectedType] = None) -> Any:
    """
    Get a value which may be absent.

    Returns None when any segment of the path is missing. A value that is
    present but of the wrong type is still a MalformedValueError.
    """
    value = _walk(record, path, mandatory=False)
    if value is None:
        return None
    return _check_type(value, path, expected)


def get_mandatory_string(record: Record, *path: str) -> str:
    return get_mandatory(record, *path, expected=str)


def get_optional_string(record: Record, *path: str) -> Optional[str]:
    return get_optional(record, *path, expected=str)


def collect_values(record: Record, key: str) -> list:
    """
    Flatten a relationship container into a list.

    WikiTree returns relatives either as a list, as a mapping keyed by
    numeric id, or leaves the field out entirely.
    """
    container = record.get(key)
    if container is None:
        return []
    if isinstance(container, Mapping):
        return list(container.values())
    if isinstance(container, list):
        return list(container)
    raise MalformedValueError(
        "unexpected relationship container shape",
        path=format_path((key,)),
        expected="list, dict or nothing",
        found=type(container).__name__,
    )


def is_marker_set(value: Any) -> bool:
    """True for the number 1 or the string "1"."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 1
    return value == "1"


def cleanup_date(value: Any) -> Optional[str]:
    """Strip trailing "-00" month/day placeholders from a WikiTree date."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedValueError("date is not a string", expected="str", found=value)
    while value.endswith(DATE_PLACEHOLDER):
        value = value[: -len(DATE_PLACEHOLDER)]
    return value


def display_date(value: Any) -> str:
    """cleanup_date() for printing; missing dates become <<unknown>>."""
    cleaned = cleanup_date(value)
    return UNKNOWN_DATE if cleaned is None else cleaned


def as_numeric_id(value: Any, *path: str) -> Optional[int]:
    """
    Interpret a Person.Id style value.

    The server sends these as numbers, occasionally as numeric strings.
    None stays None; anything that is not an integer is malformed.
    """
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise MalformedValueError(
        "numeric id is not an integer",
        path=format_path(path) if path else None,
        expected="int",
        found=value,
    )
