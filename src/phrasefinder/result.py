"""Search outcome: a status plus the decoded phrases."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .errors import InvalidArgumentError
from .phrase import Phrase

__all__ = ["Status", "SearchResult"]


class Status(Enum):
    """
    Outcome of a request, derived from the HTTP status code.

    The member values are names, not HTTP codes; use
    ``Status.from_http_status`` / ``Status.http_status`` to translate.
    """

    OK = "ok"
    BAD_REQUEST = "bad_request"
    BAD_GATEWAY = "bad_gateway"

    # Earlier server contract
    PAYMENT_REQUIRED = "payment_required"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    TOO_MANY_REQUESTS = "too_many_requests"
    SERVER_ERROR = "server_error"

    @property
    def http_status(self) -> int:
        return _HTTP_BY_STATUS[self]

    @classmethod
    def from_http_status(cls, code: int) -> "Status":
        """Map an HTTP status code; codes outside the table raise."""
        try:
            return _STATUS_BY_HTTP[code]
        except (KeyError, TypeError):
            raise InvalidArgumentError(f"Unexpected HTTP status code: {code!r}") from None


_STATUS_BY_HTTP: dict[int, Status] = {
    200: Status.OK,
    400: Status.BAD_REQUEST,
    502: Status.BAD_GATEWAY,
    402: Status.PAYMENT_REQUIRED,
    405: Status.METHOD_NOT_ALLOWED,
    429: Status.TOO_MANY_REQUESTS,
    500: Status.SERVER_ERROR,
}
_HTTP_BY_STATUS: dict[Status, int] = {s: code for code, s in _STATUS_BY_HTTP.items()}

if set(_HTTP_BY_STATUS) != set(Status) or len(_HTTP_BY_STATUS) != len(_STATUS_BY_HTTP):
    raise RuntimeError("HTTP status table must map each Status to exactly one code")


@dataclass(frozen=True)
class SearchResult:
    """Status plus phrases in the order the server sent them."""

    status: Status
    phrases: Tuple[Phrase, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "phrases", tuple(self.phrases))
        if self.status is not Status.OK and self.phrases:
            raise InvalidArgumentError(f"{self.status.name} result cannot carry phrases")

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def failed(cls, status: Status) -> "SearchResult":
        return cls(status=status)
