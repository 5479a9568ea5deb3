"""HTTP client for the WikiTree API server."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Optional

import httpx

from wikitree_api.api.config import ApiConfig
from wikitree_api.api.parser import ResponseParser
from wikitree_api.exceptions import NotAuthenticatedError, TransportError
from wikitree_api.ids import ProfileKey, interpret_key
from wikitree_api.models import AncestorsRequest, RelativesRequest, WatchlistRequest
from wikitree_api.records import get_mandatory

logger = logging.getLogger(__name__)

LOGIN_SUCCESS = "Success"


@dataclass
class TimingStats:
    """Wall clock time spent waiting on the server."""
    count: int = 0
    total: float = 0.0
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def record(self, seconds: float) -> None:
        self.count += 1
        self.total += seconds
        self.minimum = seconds if self.minimum is None else min(self.minimum, seconds)
        self.maximum = seconds if self.maximum is None else max(self.maximum, seconds)

    @property
    def mean(self) -> Optional[float]:
        return self.total / self.count if self.count else None


class WikiTreeApiClient:
    """
    Python client for the WikiTree JSON API.

    Every call returns the decoded result record, or None when the server
    sent nothing back. One request is in flight at a time per client.

    Args:
        config: Server settings; read from the environment when omitted
        http_client: An httpx.Client to send requests with. Tests pass one
            built on httpx.MockTransport.
    """

    def __init__(self, config: ApiConfig = None, http_client: httpx.Client = None):
        self.config = config or ApiConfig.from_settings()
        self.parser = ResponseParser()
        self._http = http_client or httpx.Client(timeout=self.config.timeout)
        self._lock = threading.Lock()
        self.timing_stats = TimingStats()

        self._authenticated_email: Optional[str] = None
        self._authenticated_wikitree_id: Optional[str] = None
        self._login_result_status: Optional[str] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self._http.close()

    # Authentication

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated_wikitree_id is not None

    @property
    def authenticated_email(self) -> Optional[str]:
        return self._authenticated_email

    @property
    def authenticated_wikitree_id(self) -> Optional[str]:
        return self._authenticated_wikitree_id

    @property
    def login_result_status(self) -> Optional[str]:
        """Result of the last login ("Success", "WrongPass", ...); None before any login."""
        return self._login_result_status

    def login(self, email: str, password: str) -> bool:
        """
        Log in so later requests see what the account can see.

        The session cookies the server hands back are kept by the underlying
        httpx client. Any earlier authentication is forgotten first.

        Returns:
            True if the server accepted the credentials
        """
        self._authenticated_email = None
        self._authenticated_wikitree_id = None
        self._login_result_status = None
        self._http.cookies.clear()

        result = self._request(
            {"action": "login", "email": email, "password": password, "fields": "*"}
        )
        if result is None:
            return False

        status = get_mandatory(result, "login", "result", expected=str)
        self._login_result_status = status
        if status == LOGIN_SUCCESS:
            self._authenticated_wikitree_id = get_mandatory(result, "login", "username", expected=str)
            self._authenticated_email = email
        else:
            self._http.cookies.clear()
        return self.is_authenticated

    # Requests

    def get_person(self, key: ProfileKey, fields: str = "*") -> Optional[dict]:
        return self._request(
            {"action": "getPerson", "key": interpret_key(key, "getPerson"), "fields": fields},
            payload_key="person",
        )

    def get_profile(self, key: ProfileKey) -> Optional[dict]:
        return self._request(
            {"action": "getProfile", "key": interpret_key(key, "getProfile")},
            payload_key="profile",
        )

    def get_bio(self, key: ProfileKey) -> Optional[dict]:
        return self._request(
            {"action": "getBio", "key": interpret_key(key, "getBio")},
            payload_key="bio",
        )

    def get_ancestors(self, request: AncestorsRequest) -> Optional[dict]:
        return self._request(request.to_params(), payload_key="ancestors")

    def get_relatives(self, request: RelativesRequest) -> Optional[dict]:
        return self._request(request.to_params(), payload_key="items")

    def get_watchlist(self, request: WatchlistRequest) -> Optional[dict]:
        """The logged-in user's watchlist."""
        if not self.is_authenticated:
            raise NotAuthenticatedError("getWatchlist needs a logged-in session")
        return self._request(request.to_params(), payload_key="watchlist")

    def _request(self, params: dict, payload_key: Optional[str] = None) -> Optional[dict]:
        """Send one GET request and return the unwrapped result record."""
        action = params["action"]
        query = {"format": "json", **params}
        if self.config.app_id:
            query["appId"] = self.config.app_id

        with self._lock:
            start = time.perf_counter()
            try:
                response = self._http.get(self.config.base_url, params=query)
            except httpx.HTTPError as e:
                if action == "login":
                    raise TransportError(f"login request failed: {type(e).__name__}") from None
                raise TransportError(f"{action} request failed: {e}") from e
            finally:
                self.timing_stats.record(time.perf_counter() - start)

        if self.config.show_urls and action != "login":
            logger.info("%s %s", action, response.request.url)

        if not 200 <= response.status_code < 400:
            raise TransportError(f"{action} request failed: HTTP {response.status_code}")

        result = self.parser.parse(response.text)
        if result is None:
            return None
        if payload_key is not None:
            self.parser.check_status(result, action, payload_key)
        return result
