"""Optional per-query parameters."""
from __future__ import annotations

from typing import Optional

from .corpus import Corpus
from .errors import InvalidArgumentError

__all__ = [
    "MIN_PHRASE_LENGTH",
    "MAX_PHRASE_LENGTH",
    "DEFAULT_MAX_RESULTS",
    "Options",
]

MIN_PHRASE_LENGTH = 1
MAX_PHRASE_LENGTH = 5
DEFAULT_MAX_RESULTS = 100


def _check_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")


def _check_phrase_length(name: str, value: int) -> None:
    _check_int(name, value)
    if not (MIN_PHRASE_LENGTH <= value <= MAX_PHRASE_LENGTH):
        raise InvalidArgumentError(
            f"{name} must be in {MIN_PHRASE_LENGTH}..{MAX_PHRASE_LENGTH}, got {value}"
        )


class Options:
    """
    Search parameters sent along with a query.

    Every setter validates eagerly and raises ``InvalidArgumentError``;
    values are never clamped. The defaults equal the server's defaults.
    """

    def __init__(
        self,
        *,
        corpus: Corpus = Corpus.AMERICAN_ENGLISH,
        min_phrase_length: int = MIN_PHRASE_LENGTH,
        max_phrase_length: int = MAX_PHRASE_LENGTH,
        max_results: int = DEFAULT_MAX_RESULTS,
        api_key: Optional[str] = None,
    ) -> None:
        self.corpus = corpus
        self.min_phrase_length = min_phrase_length
        self.max_phrase_length = max_phrase_length
        self.max_results = max_results
        self.api_key = api_key

    @classmethod
    def defaults(cls) -> "Options":
        """Fresh instance holding the server defaults."""
        return cls()

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @corpus.setter
    def corpus(self, value: Corpus) -> None:
        if not isinstance(value, Corpus):
            raise InvalidArgumentError(f"corpus must be a Corpus, got {value!r}")
        self._corpus = value

    @property
    def min_phrase_length(self) -> int:
        """Minimum number of tokens of a matching phrase."""
        return self._min_phrase_length

    @min_phrase_length.setter
    def min_phrase_length(self, value: int) -> None:
        _check_phrase_length("min_phrase_length", value)
        self._min_phrase_length = value

    @property
    def max_phrase_length(self) -> int:
        """Maximum number of tokens of a matching phrase."""
        return self._max_phrase_length

    @max_phrase_length.setter
    def max_phrase_length(self, value: int) -> None:
        _check_phrase_length("max_phrase_length", value)
        self._max_phrase_length = value

    @property
    def max_results(self) -> int:
        """Maximum number of phrases returned; smaller values answer slightly faster."""
        return self._max_results

    @max_results.setter
    def max_results(self, value: int) -> None:
        _check_int("max_results", value)
        if value < 0:
            raise InvalidArgumentError(f"max_results must be >= 0, got {value}")
        self._max_results = value

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @api_key.setter
    def api_key(self, value: Optional[str]) -> None:
        if value is not None and (not isinstance(value, str) or not value):
            raise InvalidArgumentError("api_key must be None or a non-empty string")
        self._api_key = value

    def __repr__(self) -> str:
        key = "***" if self._api_key else None
        return (
            f"Options(corpus={self._corpus}, min_phrase_length={self._min_phrase_length}, "
            f"max_phrase_length={self._max_phrase_length}, max_results={self._max_results}, "
            f"api_key={key!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return (
            self._corpus is other._corpus
            and self._min_phrase_length == other._min_phrase_length
            and self._max_phrase_length == other._max_phrase_length
            and self._max_results == other._max_results
            and self._api_key == other._api_key
        )

    __hash__ = None  # mutable
