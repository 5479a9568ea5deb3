"""getRelatives results indexed by key, WikiTree ID and Person.Id."""

from collections.abc import Mapping
from typing import Optional

from wikitree_api.exceptions import MalformedValueError
from wikitree_api.family.person import PersonProfile
from wikitree_api.family.profile import RecordWrapper
from wikitree_api.ids import key_is_numeric
from wikitree_api.models import RelativesRequest, RequestType
from wikitree_api.records import format_path, get_mandatory_string, get_optional


def sorted_index(pairs) -> dict:
    """Dict whose iteration order follows the keys."""
    return dict(sorted(pairs, key=lambda pair: pair[0]))


class Relatives(RecordWrapper):
    """
    The base people returned by a getRelatives call.

    A base person is one of the people named in the request keys; their
    parents, children, spouses and siblings hang off each PersonProfile.
    When the same person is asked for by both Person.Id and WikiTree ID,
    ``by_key`` keeps both copies while the other two indexes keep one.
    """

    def __init__(self, request: RelativesRequest, record: Mapping):
        super().__init__(record)
        self.request = request

        by_key = []
        items = get_optional(record, "items", expected=list) or []
        for ix, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise MalformedValueError(
                    "found something other than a record in the items array",
                    path=format_path(("items", str(ix))),
                    expected="record",
                    found=item,
                )
            key = get_mandatory_string(item, "key")
            request_type = RequestType.PERSON_ID if key_is_numeric(key) else RequestType.WIKITREE_ID
            by_key.append((key, PersonProfile(item, "person", request_type=request_type)))

        self._by_key = sorted_index(by_key)
        self._by_wikitree_id = sorted_index(
            (profile.wikitree_id, profile) for _, profile in by_key
        )
        self._by_person_id = sorted_index(
            (profile.person_id, profile) for _, profile in by_key
        )

    @property
    def by_key(self) -> dict:
        return dict(self._by_key)

    @property
    def by_wikitree_id(self) -> dict:
        return dict(self._by_wikitree_id)

    @property
    def by_person_id(self) -> dict:
        return dict(self._by_person_id)

    def find(self, key) -> Optional[PersonProfile]:
        """Look a base person up by request key, WikiTree ID or Person.Id."""
        if isinstance(key, int):
            return self._by_person_id.get(key)
        return self._by_key.get(key) or self._by_wikitree_id.get(key)

    @property
    def request_keys(self) -> str:
        return self.request.keys_string

    @property
    def request_parents(self) -> bool:
        return self.request.get_parents

    @property
    def request_children(self) -> bool:
        return self.request.get_children

    @property
    def request_spouses(self) -> bool:
        return self.request.get_spouses

    @property
    def request_siblings(self) -> bool:
        return self.request.get_siblings

    def __repr__(self) -> str:
        return (
            f"Relatives(keys={self.request_keys!r}, parents={self.request_parents}, "
            f"children={self.request_children}, spouses={self.request_spouses}, "
            f"siblings={self.request_siblings})"
        )
