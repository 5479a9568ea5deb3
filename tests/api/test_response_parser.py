"""Tests for response body parsing."""

import pytest

from wikitree_api.api.parser import ResponseParser
from wikitree_api.exceptions import MalformedValueError, RequestFailedError


class TestParse:
    """Unwrapping response bodies."""

    def test_empty_body(self):
        assert ResponseParser.parse("") is None
        assert ResponseParser.parse("  \n") is None

    def test_single_element_array(self):
        assert ResponseParser.parse('[{"status": 0, "person": {}}]') == {"status": 0, "person": {}}

    def test_array_holding_null(self):
        assert ResponseParser.parse("[null]") is None

    def test_bare_object(self):
        assert ResponseParser.parse('{"login": {"result": "Success"}}') == {"login": {"result": "Success"}}

    @pytest.mark.parametrize("body", ["[]", "[{}, {}]", "[5]", "5", '"text"', "null"])
    def test_unexpected_shapes(self, body):
        with pytest.raises(MalformedValueError):
            ResponseParser.parse(body)

    def test_not_json(self):
        with pytest.raises(MalformedValueError):
            ResponseParser.parse("<html>oops</html>")


class TestCheckStatus:
    """Failure status detection."""

    @pytest.mark.parametrize("status", [None, 0, "0", "", " "])
    def test_success_statuses(self, status):
        assert not ResponseParser.is_failure_status(status)

    @pytest.mark.parametrize("status", [1, "Illegal WikiTree ID", "Invalid page name"])
    def test_failure_statuses(self, status):
        assert ResponseParser.is_failure_status(status)

    def test_failure_without_payload(self):
        result = {"page_name": "Nobody", "status": "Invalid page name"}
        with pytest.raises(RequestFailedError) as exc_info:
            ResponseParser.check_status(result, "getProfile", "profile")
        assert exc_info.value.status == "Invalid page name"
        assert exc_info.value.result is result

    def test_status_with_payload_is_kept(self):
        result = {"status": "Partial", "ancestors": []}
        assert ResponseParser.check_status(result, "getAncestors", "ancestors") is result
