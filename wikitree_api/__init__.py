"""Python client for the WikiTree genealogy API."""

from wikitree_api.exceptions import (
    WikiTreeDefectError,
    WikiTreeError,
    WikiTreeUsageError,
)
from wikitree_api.family import (
    Ancestors,
    PersonProfile,
    Relatives,
    SpaceProfile,
    WikiTreeSession,
    distinguish,
    print_ancestral_tree,
)
from wikitree_api.ids import WikiTreeId
from wikitree_api.models import Gender, RequestType

__version__ = "0.1.0"

__all__ = [
    "Ancestors",
    "Gender",
    "PersonProfile",
    "Relatives",
    "RequestType",
    "SpaceProfile",
    "WikiTreeDefectError",
    "WikiTreeError",
    "WikiTreeId",
    "WikiTreeSession",
    "WikiTreeUsageError",
    "distinguish",
    "print_ancestral_tree",
]
