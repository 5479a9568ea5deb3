"""Person profiles and their immediate relationships."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from wikitree_api.exceptions import MalformedValueError, NotAProfileError
from wikitree_api.family.profile import Profile
from wikitree_api.models import Gender, RequestType
from wikitree_api.records import (
    as_numeric_id,
    cleanup_date,
    collect_values,
    format_path,
    get_optional,
    get_optional_string,
)

logger = logging.getLogger(__name__)

GENDER_MAP = {
    "Male": Gender.MALE,
    "Female": Gender.FEMALE,
}

RELATIONSHIP_KEYS = ("Parents", "Children", "Spouses", "Siblings")


def resolve_gender(value: Any, who: str = "") -> Gender:
    """Map the raw ``Gender`` field to a Gender, logging anything odd."""
    if value is None:
        return Gender.UNKNOWN
    if not isinstance(value, str):
        logger.warning("%s: gender is not a string: %r", who, value)
        return Gender.UNKNOWN
    gender = GENDER_MAP.get(value)
    if gender is None:
        logger.warning("%s: unrecognized gender %r", who, value)
        return Gender.UNKNOWN
    return gender


def request_type_from_envelope(envelope: Mapping) -> RequestType:
    """Work out how a getPerson/getProfile response was asked for."""
    if "user_name" in envelope or "page_name" in envelope:
        return RequestType.WIKITREE_ID
    if "user_id" in envelope:
        return RequestType.PERSON_ID
    return RequestType.UNKNOWN


class PersonProfile(Profile):
    """
    A WikiTree person profile.

    Args:
        record: The record received from the server
        profile_location: Keys leading to the person inside ``record``
        request_type: How the record was requested; derived from the
            envelope when not given

    Raises:
        NotAProfileError: the person record has no ``IsLiving`` field
    """

    def __init__(
        self,
        record: Mapping,
        *profile_location: str,
        request_type: Optional[RequestType] = None,
    ):
        super().__init__(record, *profile_location)
        if request_type is None:
            request_type = request_type_from_envelope(self.original_record)
        self.set_request_type(request_type)

        if "IsLiving" not in self.record:
            raise NotAProfileError(
                f"{request_type.name} record is not a person profile",
                path=self.location_string or None,
                expected='"IsLiving" field',
                found=sorted(self.record.keys()),
            )

        self._gender = resolve_gender(self.record.get("Gender"), self.describe())

        self._parents = tuple(self.people_from(self.record, "Parents"))
        self._children = tuple(self.people_from(self.record, "Children"))
        self._spouses = tuple(self.people_from(self.record, "Spouses"))
        self._siblings = tuple(self.people_from(self.record, "Siblings"))

        self._biological_father: Optional["PersonProfile"] = None
        self._biological_mother: Optional["PersonProfile"] = None
        self._pick_parents()

    @staticmethod
    def people_from(record: Mapping, key: str) -> list["PersonProfile"]:
        """
        Wrap every record found under ``key`` as a PersonProfile.

        Elements that are not records are skipped.
        """
        return [
            PersonProfile(element, request_type=RequestType.UNKNOWN)
            for element in collect_values(record, key)
            if isinstance(element, Mapping)
        ]

    def _pick_parents(self) -> None:
        for parent in self._parents:
            if parent.is_male:
                if self._biological_father is None:
                    self._biological_father = parent
                else:
                    logger.warning(
                        "%s has more than one father: keeping %s, ignoring %s",
                        self.describe(), self._biological_father.describe(), parent.describe(),
                    )
            elif parent.is_female:
                if self._biological_mother is None:
                    self._biological_mother = parent
                else:
                    logger.warning(
                        "%s has more than one mother: keeping %s, ignoring %s",
                        self.describe(), self._biological_mother.describe(), parent.describe(),
                    )

    def link_parents(
        self,
        father: Optional["PersonProfile"],
        mother: Optional["PersonProfile"],
    ) -> None:
        """Replace both parent links. Used while assembling ancestor trees."""
        self._biological_father = father
        self._biological_mother = mother

    # Relationships

    @property
    def parents(self) -> tuple:
        return self._parents

    @property
    def children(self) -> tuple:
        return self._children

    @property
    def spouses(self) -> tuple:
        return self._spouses

    @property
    def siblings(self) -> tuple:
        return self._siblings

    @property
    def biological_father(self) -> Optional["PersonProfile"]:
        return self._biological_father

    @property
    def biological_mother(self) -> Optional["PersonProfile"]:
        return self._biological_mother

    # Identity

    @property
    def person_id(self) -> int:
        """The numeric Person.Id, or -1 when the record does not carry one."""
        value = self.record.get("Id")
        if value is None:
            return -1
        return as_numeric_id(value, *self.profile_location, "Id")

    @property
    def wikitree_id(self) -> str:
        """The WikiTree ID ("Churchill-4"), or "Id=<person id>" when absent."""
        name = get_optional_string(self, "Name")
        if name is None:
            return f"Id={self.person_id}"
        return name

    @property
    def short_name(self) -> str:
        short_name = get_optional_string(self, "ShortName")
        if short_name is None:
            return self.wikitree_id
        return short_name

    @property
    def father_id(self) -> Optional[int]:
        """Raw numeric ``Father`` field (0 means unknown on the server side)."""
        return as_numeric_id(self.record.get("Father"), *self.profile_location, "Father")

    @property
    def mother_id(self) -> Optional[int]:
        return as_numeric_id(self.record.get("Mother"), *self.profile_location, "Mother")

    # Vital data

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def is_male(self) -> bool:
        return self._gender == Gender.MALE

    @property
    def is_female(self) -> bool:
        return self._gender == Gender.FEMALE

    @property
    def is_gender_unknown(self) -> bool:
        return self._gender == Gender.UNKNOWN

    @property
    def birth_date(self) -> Optional[str]:
        return self._date("BirthDate")

    @property
    def death_date(self) -> Optional[str]:
        return self._date("DeathDate")

    def _date(self, key: str) -> Optional[str]:
        value = get_optional(self, key)
        try:
            return cleanup_date(value)
        except MalformedValueError as e:
            raise MalformedValueError(
                "date is not a string",
                path=format_path(self.profile_location + (key,)),
                expected="str",
                found=e.found,
            ) from e

    def describe(self) -> str:
        """Short label for log messages; never raises."""
        name = self.record.get("Name")
        if isinstance(name, str):
            return name
        return f"Id={self.record.get('Id')}"

    def __repr__(self) -> str:
        gender = {Gender.MALE: "M", Gender.FEMALE: "F"}.get(self._gender, "?")
        return (
            f"PersonProfile({self.short_name}, gender={gender}, "
            f"birth={self.birth_date}, death={self.death_date})"
        )
