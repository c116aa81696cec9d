"""Corpora of the Google Books Ngram dataset (version 2) served by PhraseFinder."""
from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError

__all__ = ["Corpus"]


class Corpus(Enum):
    """A searchable corpus."""

    AMERICAN_ENGLISH = "american_english"
    BRITISH_ENGLISH = "british_english"
    CHINESE = "chinese"
    FRENCH = "french"
    GERMAN = "german"
    RUSSIAN = "russian"
    SPANISH = "spanish"

    @property
    def short_code(self) -> str:
        """Wire code sent as the ``corpus`` request parameter, e.g. ``"eng-us"``."""
        return _WIRE_TABLE[self][0]

    @property
    def ordinal(self) -> int:
        """Stable numeric id, also packed into phrase ids."""
        return _WIRE_TABLE[self][1]

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Corpus":
        try:
            return _BY_ORDINAL[ordinal]
        except (KeyError, TypeError):
            raise InvalidArgumentError(
                f"Invalid corpus ordinal {ordinal!r}; expected 0..{len(_BY_ORDINAL) - 1}"
            ) from None

    @classmethod
    def from_short_code(cls, code: str) -> "Corpus":
        try:
            return _BY_SHORT_CODE[code]
        except (KeyError, TypeError):
            known = ", ".join(sorted(_BY_SHORT_CODE))
            raise InvalidArgumentError(
                f"Unknown corpus code {code!r}; expected one of: {known}"
            ) from None


# Pinned explicitly; ordinals are embedded in phrase ids and must never change.
_WIRE_TABLE: dict[Corpus, tuple[str, int]] = {
    Corpus.AMERICAN_ENGLISH: ("eng-us", 0),
    Corpus.BRITISH_ENGLISH: ("eng-gb", 1),
    Corpus.CHINESE: ("chi", 2),
    Corpus.FRENCH: ("fre", 3),
    Corpus.GERMAN: ("ger", 4),
    Corpus.RUSSIAN: ("rus", 5),
    Corpus.SPANISH: ("spa", 6),
}

if set(_WIRE_TABLE) != set(Corpus):
    missing = sorted(c.name for c in set(Corpus) - set(_WIRE_TABLE))
    raise RuntimeError(f"Corpus wire table is missing entries: {missing}")

_BY_ORDINAL: dict[int, Corpus] = {ordinal: c for c, (_, ordinal) in _WIRE_TABLE.items()}
_BY_SHORT_CODE: dict[str, Corpus] = {code: c for c, (code, _) in _WIRE_TABLE.items()}

if len(_BY_ORDINAL) != len(_WIRE_TABLE) or len(_BY_SHORT_CODE) != len(_WIRE_TABLE):
    raise RuntimeError("Corpus wire table must map each corpus to a unique code and ordinal")
