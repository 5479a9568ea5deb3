"""getWatchlist results."""

from collections.abc import Mapping

from wikitree_api.exceptions import MalformedValueError
from wikitree_api.family.person import PersonProfile
from wikitree_api.family.profile import RecordWrapper
from wikitree_api.models import RequestType, WatchlistRequest
from wikitree_api.records import get_mandatory


class Watchlist(RecordWrapper):
    """
    One batch of the authenticated user's watchlist.

    ``watchlist_count`` is the size of the whole watchlist on the server;
    ``profiles`` holds just the batch selected by limit/offset.
    """

    def __init__(self, request: WatchlistRequest, record: Mapping):
        super().__init__(record)
        self.request = request

        entries = get_mandatory(record, "watchlist", expected=list)
        if entries:
            self.watchlist_count = get_mandatory(record, "watchlistCount", expected=int)
        else:
            self.watchlist_count = 0

        offset = request.offset or 0
        profiles = []
        for ix, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise MalformedValueError(
                    f"watchlist entry at offset {offset}+{ix} is not a record",
                    path='"watchlist"',
                    expected="record",
                    found=entry,
                )
            profiles.append(PersonProfile(entry, request_type=RequestType.UNKNOWN))
        self.profiles = tuple(profiles)

    @property
    def batch_size(self) -> int:
        return len(self.profiles)

    def __repr__(self) -> str:
        params = ", ".join(f"{name}={value!r}" for name, value in self.request.model_dump().items())
        return (
            f"Watchlist({params}, watchlist_count={self.watchlist_count}, "
            f"batch_size={self.batch_size})"
        )
