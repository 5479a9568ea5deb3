"""WikiTree identifiers and profile key interpretation."""

import re
from dataclasses import dataclass, field
from typing import Union

from wikitree_api.exceptions import InvalidKeyError, WikiTreeDefectError

WIKITREE_ID_NAME_PATTERN = re.compile(r".*-\d+")
SPACE_NAME_PATTERN = re.compile(r"Space:.+")


def is_valid_numeric_id_string(value: str) -> bool:
    """True if the string parses as a positive integer (a Person.Id or PageId)."""
    try:
        return int(value) > 0
    except (TypeError, ValueError):
        return False


def is_valid_space_name(value: str) -> bool:
    """'Space:' followed by at least one character."""
    return SPACE_NAME_PATTERN.fullmatch(value) is not None


def is_valid_person_name(value: str) -> bool:
    """Anything ending in a minus sign and digits that is not a space name."""
    if is_valid_space_name(value):
        return False
    return WIKITREE_ID_NAME_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True, order=True)
class WikiTreeId:
    """
    A WikiTree ID: either a person name ("Churchill-4") or a space name
    ("Space:Allied_POW_camps").

    The check is deliberately loose. It only rejects strings that cannot be
    either kind so the server gets the final say on validity. A numeric
    string such as "5589" is a Person.Id and never a WikiTree ID.
    """
    value: str
    is_person_name: bool = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidKeyError(f"WikiTree ID must be a string, got {type(self.value).__name__}")
        if not self.value:
            raise InvalidKeyError("WikiTree ID must not be empty")
        if is_valid_numeric_id_string(self.value):
            raise InvalidKeyError(f"{self.value!r} is a numeric id, not a WikiTree ID")

        person = is_valid_person_name(self.value)
        space = is_valid_space_name(self.value)
        if person and space:
            raise WikiTreeDefectError(
                "identifier classified as both a person name and a space name",
                found=self.value,
            )
        if not person and not space:
            raise InvalidKeyError(f"{self.value!r} is neither a WikiTree ID name nor a space name")
        object.__setattr__(self, "is_person_name", person)

    @property
    def is_space_name(self) -> bool:
        return not self.is_person_name

    def __str__(self) -> str:
        return self.value


ProfileKey = Union[WikiTreeId, int, str]


def interpret_key(key: ProfileKey, who: str = "key") -> Union[int, str]:
    """
    Turn a caller-supplied key into what goes on the wire.

    Numeric strings and ints become ints (Person.Id / PageId). Anything else
    is passed through as a name for the server to resolve.

    Raises:
        InvalidKeyError: empty string, non-positive number or unsupported type
    """
    if isinstance(key, WikiTreeId):
        return key.value
    if isinstance(key, bool):
        raise InvalidKeyError(f"{who}: a boolean is not a profile key")
    if isinstance(key, int):
        if key <= 0:
            raise InvalidKeyError(f"{who}: numeric ids are positive, got {key}")
        return key
    if not isinstance(key, str):
        raise InvalidKeyError(f"{who}: unsupported key type {type(key).__name__}")

    key = key.strip()
    if not key:
        raise InvalidKeyError(f"{who}: key must not be an empty string")
    try:
        number = int(key)
    except ValueError:
        return key
    if number <= 0:
        raise InvalidKeyError(f"{who}: numeric ids are positive, got {key!r}")
    return number


def key_is_numeric(key: ProfileKey) -> bool:
    return isinstance(interpret_key(key), int)
