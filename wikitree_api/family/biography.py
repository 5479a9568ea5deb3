"""getBio results."""

from collections.abc import Mapping

from wikitree_api.family.profile import RecordWrapper
from wikitree_api.ids import ProfileKey, key_is_numeric
from wikitree_api.models import RequestType
from wikitree_api.records import as_numeric_id, get_mandatory_string, get_optional_string


class Biography(RecordWrapper):
    """A profile's biography text (WikiTree markup, not HTML)."""

    def __init__(self, key: ProfileKey, record: Mapping):
        super().__init__(record)
        self.request_key = key
        if key_is_numeric(key):
            self.set_request_type(RequestType.PERSON_ID)
        else:
            self.set_request_type(RequestType.WIKITREE_ID)

    @property
    def person_id(self) -> int:
        person_id = as_numeric_id(self.record.get("user_id"), "user_id")
        return -1 if person_id is None else person_id

    @property
    def wikitree_id(self) -> str:
        page_name = get_optional_string(self, "page_name")
        if page_name is None:
            return f"Id={self.person_id}"
        return page_name

    @property
    def bio(self) -> str:
        return get_mandatory_string(self, "bio")

    def __repr__(self) -> str:
        return f"Biography(page_name={self.wikitree_id!r}, id={self.person_id}, bio={self.bio!r})"
