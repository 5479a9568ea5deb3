"""Transport layer: configuration, response parsing and the HTTP client."""

from wikitree_api.api.client import TimingStats, WikiTreeApiClient
from wikitree_api.api.config import ApiConfig
from wikitree_api.api.parser import ResponseParser

__all__ = ["ApiConfig", "ResponseParser", "TimingStats", "WikiTreeApiClient"]
