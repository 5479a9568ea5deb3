"""Shared enums, field lists and request parameter models."""

from enum import Enum
from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wikitree_api.ids import interpret_key


class Gender(str, Enum):
    """Biological gender as recorded on a person profile."""
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class RequestType(str, Enum):
    """How a wrapped record was requested from the server."""
    UNSPECIFIED = "unspecified"
    UNKNOWN = "unknown"
    SPACE_NAME = "space_name"
    WIKITREE_ID = "wikitree_id"
    PERSON_ID = "person_id"


# Fields returned by getPerson (https://www.wikitree.com/wiki/Help:API_Documentation#getPerson).
ALL_PERSON_FIELDS = frozenset({
    "Id", "Name", "FirstName", "MiddleName", "LastNameAtBirth", "LastNameCurrent",
    "Nicknames", "LastNameOther", "RealName", "Prefix", "Suffix",
    "Gender", "BirthDate", "DeathDate", "BirthLocation", "DeathLocation",
    "BirthDateDecade", "DeathDateDecade", "Photo", "IsLiving", "Privacy",
    "Mother", "Father", "Parents", "Children", "Siblings", "Spouses",
    "Derived.ShortName", "Derived.BirthNamePrivate", "Derived.LongNamePrivate",
    "Manager",
})

# Fields a PersonProfile cannot be built without.
REQUIRED_PERSON_FIELDS = ("Name", "IsLiving")

BASIC_PERSON_FIELDS = (
    "Id", "Name", "Derived.ShortName", "LastNameAtBirth", "Gender",
    "BirthDate", "DeathDate", "BirthDateDecade", "DeathDateDecade",
)


def excluded_person_fields(*excluded: str) -> list[str]:
    """All getPerson fields except the named ones, sorted."""
    return sorted(ALL_PERSON_FIELDS.difference(excluded))


def person_fields_string(fields: Union[str, Iterable[str]]) -> str:
    """
    Build a getPerson ``fields`` parameter that always includes Name and IsLiving.

    "*" is passed through untouched.
    """
    if isinstance(fields, str):
        if fields.strip() == "*":
            return "*"
        names = [f.strip() for f in fields.split(",") if f.strip()]
    else:
        names = list(fields)
    for required in REQUIRED_PERSON_FIELDS:
        if required not in names:
            names.append(required)
    return ",".join(names)


def _flag(value: bool) -> int:
    return 1 if value else 0


class AncestorsRequest(BaseModel):
    """Parameters for getAncestors."""

    key: Union[int, str]
    depth: Optional[int] = Field(default=None, ge=1, le=10)

    @field_validator("key", mode="before")
    @classmethod
    def _check_key(cls, value):
        return interpret_key(value, "getAncestors")

    def to_params(self) -> dict:
        params = {"action": "getAncestors", "key": self.key}
        if self.depth is not None:
            params["depth"] = self.depth
        return params


class RelativesRequest(BaseModel):
    """Parameters for getRelatives."""

    keys: list[Union[int, str]]
    get_parents: bool = False
    get_children: bool = False
    get_spouses: bool = False
    get_siblings: bool = False

    @field_validator("keys", mode="before")
    @classmethod
    def _check_keys(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        try:
            keys = [interpret_key(k, "getRelatives") for k in value]
        except TypeError:
            raise ValueError(
                f"getRelatives: keys must be a string or a list of keys, got {type(value).__name__}"
            ) from None
        if not keys:
            raise ValueError("getRelatives: at least one key is required")
        return keys

    @property
    def keys_string(self) -> str:
        return ",".join(str(k) for k in self.keys)

    def to_params(self) -> dict:
        return {
            "action": "getRelatives",
            "keys": self.keys_string,
            "getParents": _flag(self.get_parents),
            "getChildren": _flag(self.get_children),
            "getSpouses": _flag(self.get_spouses),
            "getSiblings": _flag(self.get_siblings),
        }


class WatchlistRequest(BaseModel):
    """Parameters for getWatchlist. None means 'let the server decide'."""

    model_config = ConfigDict(extra="forbid")

    get_person: Optional[bool] = None
    get_space: Optional[bool] = None
    only_living: Optional[bool] = None
    exclude_living: Optional[bool] = None
    fields: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1)
    offset: Optional[int] = Field(default=None, ge=0)
    order: Optional[str] = None

    def to_params(self) -> dict:
        params: dict = {"action": "getWatchlist"}
        if self.get_person is not None:
            params["getPerson"] = _flag(self.get_person)
        if self.get_space is not None:
            params["getSpace"] = _flag(self.get_space)
        if self.only_living:
            params["onlyLiving"] = 1
        if self.exclude_living:
            params["excludeLiving"] = 1
        if self.fields is not None:
            params["fields"] = self.fields
        if self.limit is not None:
            params["limit"] = self.limit
        if self.offset is not None:
            params["offset"] = self.offset
        if self.order is not None:
            params["order"] = self.order
        return params
