"""Main WikiTreeSession facade returning wrapped results."""

from typing import Iterable, Optional, Union

from pydantic import BaseModel, ValidationError

from wikitree_api.api.client import WikiTreeApiClient
from wikitree_api.api.config import ApiConfig
from wikitree_api.exceptions import InvalidKeyError, WikiTreeUsageError, WrongProfileKindError
from wikitree_api.family.ancestors import Ancestors
from wikitree_api.family.biography import Biography
from wikitree_api.family.person import PersonProfile
from wikitree_api.family.profile import distinguish
from wikitree_api.family.relatives import Relatives
from wikitree_api.family.space import SpaceProfile
from wikitree_api.family.watchlist import Watchlist
from wikitree_api.ids import ProfileKey, WikiTreeId, interpret_key, is_valid_space_name
from wikitree_api.models import (
    BASIC_PERSON_FIELDS,
    AncestorsRequest,
    RelativesRequest,
    WatchlistRequest,
    person_fields_string,
)


def build_request(model: type, error: type = InvalidKeyError, **values) -> BaseModel:
    """Validate request parameters, reporting bad input as a usage error."""
    try:
        return model(**values)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise error(f"{model.__name__}: {messages}") from e


class WikiTreeSession:
    """
    Main interface for talking to WikiTree.

    Wraps a WikiTreeApiClient and turns its raw result records into
    PersonProfile, Ancestors, Relatives and friends. Every getter returns
    None when the server has nothing for the key.

    Usage:
        with WikiTreeSession() as session:
            churchill = session.get_person_profile("Churchill-4")
            ancestors = session.get_ancestors("Churchill-4", depth=3)
            print_ancestral_tree(ancestors.ancestral_tree)
    """

    def __init__(self, config: ApiConfig = None, client: WikiTreeApiClient = None):
        self.client = client or WikiTreeApiClient(config)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.client.close()

    # ─────────────────────────────────────────
    # Authentication (delegated)
    # ─────────────────────────────────────────

    def login(self, email: str, password: str) -> bool:
        return self.client.login(email, password)

    @property
    def is_authenticated(self) -> bool:
        return self.client.is_authenticated

    @property
    def authenticated_wikitree_id(self) -> Optional[str]:
        return self.client.authenticated_wikitree_id

    # ─────────────────────────────────────────
    # Profiles
    # ─────────────────────────────────────────

    def get_person(self, key: ProfileKey, fields: Union[str, Iterable[str]] = "*") -> Optional[PersonProfile]:
        """
        Fetch a person via getPerson.

        Name and IsLiving are always requested so the result can be wrapped.
        """
        result = self.client.get_person(key, person_fields_string(fields))
        if result is None:
            return None
        return PersonProfile(result, "person")

    def get_basic_person_profile(self, key: ProfileKey) -> Optional[PersonProfile]:
        """Names, gender and dates only; no relatives."""
        return self.get_person(key, BASIC_PERSON_FIELDS)

    def get_profile(self, key: ProfileKey) -> Union[PersonProfile, SpaceProfile, None]:
        return distinguish(self.client.get_profile(key))

    def get_person_profile(self, key: ProfileKey) -> Optional[PersonProfile]:
        """
        Fetch a person's profile via getProfile.

        Raises:
            WrongProfileKindError: the key names a space
        """
        wire_key = interpret_key(key, "getPersonProfile")
        if isinstance(wire_key, str) and is_valid_space_name(wire_key):
            raise WrongProfileKindError(f"getPersonProfile: {wire_key!r} is not a person's WikiTree ID")

        profile = self.get_profile(wire_key)
        if isinstance(profile, SpaceProfile):
            raise WrongProfileKindError(f"getPersonProfile: {wire_key!r} is a space, not a person")
        return profile

    def get_bio(self, key: ProfileKey) -> Optional[Biography]:
        result = self.client.get_bio(key)
        if result is None:
            return None
        return Biography(key, result)

    # ─────────────────────────────────────────
    # Family
    # ─────────────────────────────────────────

    def get_ancestors(self, key: ProfileKey, depth: Optional[int] = None) -> Optional[Ancestors]:
        """Fetch up to ``depth`` generations and link them into a tree."""
        request = build_request(AncestorsRequest, key=key, depth=depth)
        result = self.client.get_ancestors(request)
        if result is None:
            return None
        return Ancestors(request.key, request.depth, result)

    def get_relatives(
        self,
        keys: Union[str, Iterable[ProfileKey]],
        parents: bool = False,
        children: bool = False,
        spouses: bool = False,
        siblings: bool = False,
    ) -> Optional[Relatives]:
        if isinstance(keys, (int, WikiTreeId)):
            keys = [keys]
        elif isinstance(keys, Iterable) and not isinstance(keys, str):
            keys = list(keys)
        request = build_request(
            RelativesRequest,
            keys=keys,
            get_parents=parents,
            get_children=children,
            get_spouses=spouses,
            get_siblings=siblings,
        )
        result = self.client.get_relatives(request)
        if result is None:
            return None
        return Relatives(request, result)

    def get_watchlist(self, **params) -> Optional[Watchlist]:
        """
        Fetch the logged-in user's watchlist.

        Accepts the WatchlistRequest fields: get_person, get_space,
        only_living, exclude_living, fields, limit, offset, order.
        """
        request = build_request(WatchlistRequest, error=WikiTreeUsageError, **params)
        result = self.client.get_watchlist(request)
        if result is None:
            return None
        return Watchlist(request, result)
