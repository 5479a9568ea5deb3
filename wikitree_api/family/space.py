"""Space (free-space page) profiles."""

from collections.abc import Mapping
from typing import Optional, Union

from wikitree_api.family.profile import Profile
from wikitree_api.models import RequestType
from wikitree_api.records import get_mandatory, get_optional_string


class SpaceProfile(Profile):
    """A WikiTree space profile, e.g. "Space:Allied_POW_camps"."""

    def __init__(self, record: Mapping):
        super().__init__(record, "profile")
        if "page_name" in record:
            self.set_request_type(RequestType.SPACE_NAME)
        else:
            self.set_request_type(RequestType.UNKNOWN)

    @property
    def page_name(self) -> Optional[str]:
        return get_optional_string(self.original_record, "page_name")

    @property
    def page_id(self) -> Union[int, str]:
        return get_mandatory(self, "PageId", expected=(int, str))

    def __repr__(self) -> str:
        return f"SpaceProfile({self.page_name!r}, PageId={self.get('PageId')!r})"
