"""Token and phrase value types returned by a search."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .corpus import Corpus
from .encoding import DEFAULT_ID_LAYOUT, IdLayout, corpus_from_phrase_id
from .errors import InvalidArgumentError

__all__ = ["Tag", "Token", "Phrase", "EMPTY_PHRASE"]


class Tag(Enum):
    """Why a token appears in a matching phrase."""

    GIVEN = "given"
    """The token was given literally in the query."""

    INSERTED = "inserted"
    """The token was inserted by the ``?`` or ``*`` operator."""

    ALTERNATIVE = "alternative"
    """The token was one side of the ``/`` operator."""

    COMPLETED = "completed"
    """The token was completed by the ``+`` operator."""

    @property
    def wire_digit(self) -> int:
        return _DIGIT_BY_TAG[self]

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Tag":
        try:
            return _TAG_BY_DIGIT[ordinal]
        except (KeyError, TypeError):
            raise InvalidArgumentError(
                f"Invalid tag ordinal {ordinal!r}; expected 0..{len(_TAG_BY_DIGIT) - 1}"
            ) from None


_TAG_BY_DIGIT: dict[int, Tag] = {
    0: Tag.GIVEN,
    1: Tag.INSERTED,
    2: Tag.ALTERNATIVE,
    3: Tag.COMPLETED,
}
_DIGIT_BY_TAG: dict[Tag, int] = {tag: digit for digit, tag in _TAG_BY_DIGIT.items()}

if set(_DIGIT_BY_TAG) != set(Tag):
    raise RuntimeError("Tag wire table must cover every tag exactly once")


@dataclass(frozen=True)
class Token:
    """A single word or punctuation mark of a phrase."""

    text: str
    tag: Tag

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise InvalidArgumentError("token text must be a non-empty string")
        if not isinstance(self.tag, Tag):
            raise InvalidArgumentError(f"token tag must be a Tag, got {self.tag!r}")


@dataclass(frozen=True)
class Phrase:
    """
    One matching n-gram plus its frequency statistics.

    Instances are snapshots of a single response line and are never
    modified after decoding.
    """

    tokens: Tuple[Token, ...]
    match_count: int
    """Absolute frequency in the corpus."""
    volume_count: int
    """Number of books the phrase appears in."""
    first_year: int
    last_year: int
    score: float
    """Relative frequency with respect to the query."""
    id: int
    """Service-wide unique id with the corpus ordinal packed into its high bits."""
    id_layout: IdLayout = field(default=DEFAULT_ID_LAYOUT, compare=False, repr=False)
    """Layout of ``id``, set by the decoder from the client configuration."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        if self.match_count < 0:
            raise InvalidArgumentError(f"match_count must be >= 0, got {self.match_count}")
        if self.volume_count < 0:
            raise InvalidArgumentError(f"volume_count must be >= 0, got {self.volume_count}")
        if not math.isfinite(self.score) or self.score < 0:
            raise InvalidArgumentError(f"score must be finite and >= 0, got {self.score}")
        if self.id < 0:
            raise InvalidArgumentError(f"id must be >= 0, got {self.id}")
        if not isinstance(self.id_layout, IdLayout):
            raise InvalidArgumentError(f"id_layout must be an IdLayout, got {self.id_layout!r}")

    def __str__(self) -> str:
        return " ".join(token.text for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def corpus(self, layout: Optional[IdLayout] = None) -> Corpus:
        """
        Corpus this phrase was found in, decoded from ``id``.

        Uses ``id_layout`` unless a layout is given. The empty phrase
        belongs to no corpus and raises.
        """
        if self.is_empty:
            raise InvalidArgumentError("the empty phrase has no corpus")
        return corpus_from_phrase_id(self.id, layout if layout is not None else self.id_layout)


EMPTY_PHRASE = Phrase(
    tokens=(),
    match_count=0,
    volume_count=0,
    first_year=0,
    last_year=0,
    score=0.0,
    id=0,
)
