"""Record wrappers and the person/space profile dispatcher."""

from collections.abc import Mapping
from typing import Any, Iterator, Optional, Union

from wikitree_api.exceptions import RequestTypeError, UnrecognizedProfileError
from wikitree_api.models import RequestType
from wikitree_api.records import format_path, get_mandatory, is_marker_set


class RecordWrapper(Mapping):
    """
    Read-only view over one decoded API record.

    Carries a request-type tag describing how the record was fetched. The tag
    starts out UNSPECIFIED and may be set exactly once.
    """

    # Profiles are identities shared between lookup maps and tree links.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(self, record: Mapping):
        self._record = record
        self._request_type = RequestType.UNSPECIFIED

    def __getitem__(self, key: str) -> Any:
        return self._record[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._record)

    def __len__(self) -> int:
        return len(self._record)

    @property
    def record(self) -> Mapping:
        return self._record

    @property
    def request_type(self) -> RequestType:
        return self._request_type

    def set_request_type(self, request_type: RequestType) -> None:
        if request_type == RequestType.UNSPECIFIED:
            raise RequestTypeError(
                f"{type(self).__name__}: cannot set request type to {RequestType.UNSPECIFIED.name}"
            )
        if self._request_type != RequestType.UNSPECIFIED:
            raise RequestTypeError(
                f"{type(self).__name__}: request type can only be set once "
                f"(is {self._request_type.name}, asked to set {request_type.name})"
            )
        self._request_type = request_type


class Profile(RecordWrapper):
    """
    Some kind of WikiTree profile.

    Args:
        record: The record received from the server
        profile_location: Keys leading to the actual profile inside ``record``;
            empty when ``record`` is the profile itself
    """

    def __init__(self, record: Mapping, *profile_location: str):
        self.profile_location = tuple(profile_location)
        if self.profile_location:
            profile = get_mandatory(record, *self.profile_location, expected=Mapping)
        else:
            profile = record
        super().__init__(profile)
        self._original_record = record

    @property
    def original_record(self) -> Mapping:
        """The full envelope this profile was cut out of."""
        return self._original_record

    @property
    def location_string(self) -> str:
        return format_path(self.profile_location)


def distinguish(record: Optional[Mapping]) -> Union["PersonProfile", "SpaceProfile", None]:
    """
    Wrap a getProfile response in a PersonProfile or a SpaceProfile.

    Returns None when there is no record or the record carries no profile.

    Raises:
        UnrecognizedProfileError: the profile is marked as both or neither
    """
    from wikitree_api.family.person import PersonProfile
    from wikitree_api.family.space import SpaceProfile

    if record is None:
        return None

    profile = record.get("profile")
    if profile is None:
        return None
    if not isinstance(profile, Mapping):
        raise UnrecognizedProfileError(
            "asked for a profile, got something else",
            path=format_path(("profile",)),
            expected="record",
            found=type(profile).__name__,
        )

    is_person = is_marker_set(profile.get("IsPerson"))
    is_space = is_marker_set(profile.get("IsSpace"))
    if is_person and is_space:
        raise UnrecognizedProfileError(
            "profile claims to be both a person and a space",
            path=format_path(("profile",)),
            found=dict(profile),
        )
    if is_person:
        return PersonProfile(record, "profile")
    if is_space:
        return SpaceProfile(record)
    raise UnrecognizedProfileError(
        "unable to tell whether the profile is a person or a space",
        path=format_path(("profile",)),
        expected="IsPerson=1 or IsSpace=1",
        found=dict(profile),
    )
