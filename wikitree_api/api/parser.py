"""Parse WikiTree API response bodies."""

import json
from collections.abc import Mapping
from typing import Any, Optional

from wikitree_api.exceptions import MalformedValueError, RequestFailedError


class ResponseParser:
    """Turn JSON response bodies into result records."""

    @staticmethod
    def parse(body: str) -> Optional[dict]:
        """
        Unwrap a response body into a single result record.

        Most actions answer with a one element array; some answer with a bare
        object. An empty body means there is nothing to report.
        """
        if not body or not body.strip():
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedValueError(
                "response body is not JSON",
                expected="JSON array or object",
                found=body[:200],
            ) from e
        return ResponseParser.unwrap(parsed)

    @staticmethod
    def unwrap(parsed: Any) -> Optional[dict]:
        if isinstance(parsed, list):
            if len(parsed) != 1:
                raise MalformedValueError(
                    "expected exactly one result in the response array",
                    expected="array of length 1",
                    found=f"array of length {len(parsed)}",
                )
            element = parsed[0]
            if element is None:
                return None
            if isinstance(element, Mapping):
                return dict(element)
            raise MalformedValueError(
                "response array holds something other than a record",
                expected="record",
                found=element,
            )
        if isinstance(parsed, Mapping):
            return dict(parsed)
        raise MalformedValueError(
            "response is neither an array nor an object",
            expected="JSON array or object",
            found=parsed,
        )

    @staticmethod
    def is_failure_status(status: Any) -> bool:
        """The server reports success as status 0 (or leaves it out)."""
        if status is None or status == "" or isinstance(status, bool):
            return False
        if isinstance(status, (int, float)):
            return status != 0
        if isinstance(status, str):
            return status.strip() not in ("", "0")
        return True

    @staticmethod
    def check_status(result: dict, action: str, payload_key: str) -> dict:
        """
        Raise RequestFailedError when the server says the request failed.

        A failure status only counts when the payload the action should
        produce is missing; partial results still carry a status message.
        """
        status = result.get("status")
        if payload_key not in result and ResponseParser.is_failure_status(status):
            raise RequestFailedError(f"{action} failed: {status}", result)
        return result
