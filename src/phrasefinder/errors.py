"""Exception types raised by the phrasefinder client."""
from __future__ import annotations

from typing import Optional

__all__ = [
    "PhraseFinderError",
    "InvalidArgumentError",
    "DecodeError",
    "TransportError",
]


class PhraseFinderError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(PhraseFinderError, ValueError):
    """A value (option, wire field, status code, tag digit) is out of contract."""


class DecodeError(InvalidArgumentError):
    """A response line could not be decoded into a phrase."""

    def __init__(
        self,
        message: str,
        *,
        line_no: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        self.line_no = line_no
        self.field = field
        location = []
        if line_no is not None:
            location.append(f"line {line_no}")
        if field is not None:
            location.append(f"field {field!r}")
        if location:
            message = f"{', '.join(location)}: {message}"
        super().__init__(message)


class TransportError(PhraseFinderError):
    """Reaching the service or reading its response failed."""
