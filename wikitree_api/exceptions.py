"""
Exception hierarchy for the WikiTree API client.

Two families of errors are kept apart:

    WikiTreeError (base)
    ├── WikiTreeUsageError        caller misuse, recoverable
    │   ├── InvalidKeyError
    │   ├── WrongProfileKindError
    │   └── NotAuthenticatedError
    ├── WikiTreeDefectError       records that break the documented shape
    │   ├── MissingValueError
    │   ├── MalformedValueError
    │   ├── NotAProfileError
    │   ├── UnrecognizedProfileError
    │   ├── BasePersonMissingError
    │   └── RequestTypeError
    ├── RequestFailedError        the server answered with a failure status
    └── TransportError            the HTTP exchange itself failed

Defects are never turned into default values. They abort the operation that
detected them and carry the path, the expected shape and what was found.
"""

from typing import Any, Optional


class WikiTreeError(Exception):
    """Base class for every error raised by this package."""


class WikiTreeUsageError(WikiTreeError, ValueError):
    """The caller asked for something that cannot work."""


class InvalidKeyError(WikiTreeUsageError):
    """Empty, malformed or wrongly typed profile key."""


class WrongProfileKindError(WikiTreeUsageError):
    """A person-only operation was pointed at a space (or vice versa)."""


class NotAuthenticatedError(WikiTreeUsageError):
    """The operation needs a logged-in session."""


class WikiTreeDefectError(WikiTreeError):
    """
    A record does not have the shape the WikiTree API documents.

    Args:
        message: What went wrong
        path: Formatted path within the record, if known
        expected: Description of what should have been there
        found: The offending value
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected: Optional[str] = None,
        found: Any = None,
    ):
        super().__init__(message)
        self.path = path
        self.expected = expected
        self.found = found

    def __str__(self) -> str:
        details = []
        if self.path:
            details.append(f"path={self.path}")
        if self.expected:
            details.append(f"expected={self.expected}")
        if self.found is not None:
            details.append(f"found={self.found!r}")
        base = super().__str__()
        return f"{base} ({', '.join(details)})" if details else base


class MissingValueError(WikiTreeDefectError):
    """A mandatory value is absent or null."""


class MalformedValueError(WikiTreeDefectError):
    """A value is present but has the wrong type or shape."""


class NotAProfileError(WikiTreeDefectError):
    """A record wrapped as a person profile lacks the IsLiving marker."""


class UnrecognizedProfileError(WikiTreeDefectError):
    """A profile is marked as neither (or both) a person and a space."""


class BasePersonMissingError(WikiTreeDefectError):
    """The subject of an ancestors request is not among its own results."""


class RequestTypeError(WikiTreeDefectError):
    """The request classification tag was set twice or to UNSPECIFIED."""


class RequestFailedError(WikiTreeError):
    """The WikiTree API server returned a failure status."""

    def __init__(self, message: str, result: dict):
        super().__init__(message)
        self.result = result

    @property
    def status(self) -> Any:
        return self.result.get("status")


class TransportError(WikiTreeError):
    """The HTTP request could not be completed."""
