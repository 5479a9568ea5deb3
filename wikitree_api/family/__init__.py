"""Wrapped WikiTree results: profiles, relatives, ancestor trees."""

from wikitree_api.family.ancestors import Ancestors
from wikitree_api.family.biography import Biography
from wikitree_api.family.person import GENDER_MAP, PersonProfile
from wikitree_api.family.profile import Profile, RecordWrapper, distinguish
from wikitree_api.family.relatives import Relatives
from wikitree_api.family.session import WikiTreeSession
from wikitree_api.family.space import SpaceProfile
from wikitree_api.family.tree_view import print_ancestral_tree, render_ancestral_tree
from wikitree_api.family.watchlist import Watchlist

__all__ = [
    "Ancestors",
    "Biography",
    "GENDER_MAP",
    "PersonProfile",
    "Profile",
    "RecordWrapper",
    "Relatives",
    "SpaceProfile",
    "Watchlist",
    "WikiTreeSession",
    "distinguish",
    "print_ancestral_tree",
    "render_ancestral_tree",
]
