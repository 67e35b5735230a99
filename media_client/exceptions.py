from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCause(str, Enum):
    """Classification of a permanent error."""

    NOT_FOUND = "not_found"
    INVALID_URI = "invalid_uri"
    INVALID_DOC = "invalid_doc"
    # Reserved; no code path produces it yet.
    INVALID_BODY = "invalid_body"


class MediaFetchError(Exception):
    """Raised when a rendered document cannot be fetched. May succeed on retry."""


class PermanentError(MediaFetchError):
    """
    Raised when a fetch can never succeed as given.

    The underlying error (parse error, decode error) is chained as ``__cause__``.
    Retrying without changing the input is pointless.
    """

    def __init__(self, message: str, cause: ErrorCause) -> None:
        super().__init__(f"{message}: permanent error: {cause.value}")
        self.cause = cause


class ConfigError(Exception):
    """Raised when client settings are missing or invalid."""


def permanent_cause(exc: Optional[BaseException]) -> Optional[ErrorCause]:
    """Return the ErrorCause of the first PermanentError in exc's ``raise ... from`` chain."""
    seen = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, PermanentError):
            return exc.cause
        seen.add(id(exc))
        exc = exc.__cause__
    return None


def is_permanent(exc: Optional[BaseException]) -> bool:
    """Return True if exc, or any error it was raised from, is a PermanentError."""
    return permanent_cause(exc) is not None
