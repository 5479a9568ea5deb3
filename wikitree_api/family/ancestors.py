"""
Ancestor trees built from getAncestors results.

getAncestors returns a flat list of person records. Each one names its
parents through the numeric ``Father`` and ``Mother`` fields, which point back
into the same list. This module turns that list into a linked tree rooted at
the person the request was about.

The data on the server is user edited and can contain loops (someone recorded
as their own great-grandparent). The tree is built depth first, father before
mother, keeping the ids on the current path in a lineage set. A profile whose
id is already on the path is left out of that branch. It is still reachable
through ``profiles_by_person_id``, ``fathers_of`` and ``mothers_of``.
"""

import logging
from collections.abc import Mapping
from typing import Iterator, Optional, Union

from wikitree_api.exceptions import (
    BasePersonMissingError,
    MalformedValueError,
    MissingValueError,
)
from wikitree_api.family.person import PersonProfile
from wikitree_api.family.profile import RecordWrapper
from wikitree_api.family.relatives import sorted_index
from wikitree_api.models import RequestType
from wikitree_api.records import format_path, get_mandatory, get_optional

logger = logging.getLogger(__name__)


class Ancestors(RecordWrapper):
    """
    Someone's ancestors, as a tree and as lookup tables.

    Args:
        key: The key the caller used for the request
        depth: Requested number of generations, None for the server default
        record: The getAncestors result record
    """

    def __init__(self, key: Union[int, str], depth: Optional[int], record: Mapping):
        super().__init__(record)
        self.request_key = key
        self.request_depth = depth

        self.result_wikitree_id = get_optional(record, "user_name", expected=str)
        user_id = get_optional(record, "user_id", expected=(int, str))
        self.result_person_id = None if user_id is None else str(user_id)
        if self.result_wikitree_id is not None:
            self._base_key = self.result_wikitree_id
        elif self.result_person_id is not None:
            self._base_key = self.result_person_id
        else:
            raise MissingValueError(
                "ancestors result names no subject",
                expected='"user_name" or "user_id"',
                found=sorted(record.keys()),
            )

        raw_ancestors = get_mandatory(record, "ancestors", expected=list)
        profiles = []
        for ix, element in enumerate(raw_ancestors):
            if not isinstance(element, Mapping):
                raise MalformedValueError(
                    "found something other than a record in the ancestors array",
                    path=format_path(("ancestors", str(ix))),
                    expected="record",
                    found=element,
                )
            profiles.append(PersonProfile(element, request_type=RequestType.UNKNOWN))
        self.result_ancestors = tuple(profiles)

        self.ancestral_tree = self.build_tree()

    def build_tree(self) -> Optional[PersonProfile]:
        """
        (Re)build the tree from ``result_ancestors``.

        Safe to call again: every parent link is reset first, so the same
        input always produces the same tree.
        """
        for profile in self.result_ancestors:
            profile.link_parents(None, None)

        self.profiles_by_person_id = sorted_index(
            (profile.person_id, profile) for profile in self.result_ancestors
        )
        self.profiles_by_wikitree_id = sorted_index(
            (profile.wikitree_id, profile) for profile in self.result_ancestors
        )

        self.base_person_profile = self._find_base_person()

        fathers_of = []
        mothers_of = []
        for profile in self.result_ancestors:
            self._remember_parent(fathers_of, profile, profile.father_id)
            self._remember_parent(mothers_of, profile, profile.mother_id)
        self.fathers_of = sorted_index(fathers_of)
        self.mothers_of = sorted_index(mothers_of)

        lineage: set[int] = set()
        tree = self._build(self.base_person_profile, lineage)
        logger.debug(
            "built ancestral tree for %s from %d profiles",
            self._base_key, len(self.result_ancestors),
        )
        return tree

    def _find_base_person(self) -> PersonProfile:
        # Last match wins when the batch repeats the base person.
        for profile in reversed(self.result_ancestors):
            if str(profile.person_id) == self._base_key or profile.wikitree_id == self._base_key:
                return profile
        raise BasePersonMissingError(
            "base person is not present in the ancestors result",
            expected=self._base_key,
            found=[profile.wikitree_id for profile in self.result_ancestors],
        )

    def _remember_parent(self, pairs: list, child: PersonProfile, parent_id: Optional[int]) -> None:
        if parent_id is None:
            return
        parent = self.profiles_by_person_id.get(parent_id)
        if parent is not None:
            pairs.append((child.person_id, parent))

    def _build(self, profile: PersonProfile, lineage: set) -> Optional[PersonProfile]:
        person_id = profile.person_id
        if person_id in lineage:
            logger.debug("dropping %s from one branch: already on the path", profile.describe())
            return None

        lineage.add(person_id)
        try:
            father = self.fathers_of.get(person_id)
            if father is not None:
                father = self._build(father, lineage)
            mother = self.mothers_of.get(person_id)
            if mother is not None:
                mother = self._build(mother, lineage)
            profile.link_parents(father, mother)
        finally:
            lineage.remove(person_id)
        return profile

    def iter_tree(self) -> Iterator[tuple[int, str, PersonProfile]]:
        """Yield (generation, role, profile), depth first, father before mother."""
        if self.ancestral_tree is None:
            return
        stack = [(0, "B", self.ancestral_tree)]
        while stack:
            generation, role, profile = stack.pop()
            yield generation, role, profile
            if profile.biological_mother is not None:
                stack.append((generation + 1, "M", profile.biological_mother))
            if profile.biological_father is not None:
                stack.append((generation + 1, "F", profile.biological_father))

    def __repr__(self) -> str:
        return (
            f"Ancestors(key={self.request_key!r}, depth={self.request_depth}, "
            f"profiles={len(self.result_ancestors)})"
        )
