"""Packing and unpacking of 64-bit phrase ids.

A phrase id carries the ordinal of the corpus it belongs to in its high
bits. Two layouts have been served over the lifetime of the service:

``IdLayout.CORPUS_SHIFT_40``
    bits 40..63 hold the corpus ordinal, bits 0..39 the corpus-local id.
    ``corpus = id >> 40``. This is what the current service returns.

``IdLayout.CORPUS_BYTE_32``
    bits 32..39 hold the corpus ordinal, bits 0..31 the corpus-local id.
    ``corpus = (id >> 32) & 0xFF``.

The two are incompatible for any id with bits set above bit 39, so the
layout is always an explicit argument rather than something inferred.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

from .corpus import Corpus
from .errors import InvalidArgumentError

__all__ = [
    "ID_BITS",
    "IdLayout",
    "DEFAULT_ID_LAYOUT",
    "pack_phrase_id",
    "unpack_phrase_id",
    "corpus_ordinal_from_id",
    "corpus_from_phrase_id",
]

ID_BITS = 64
_ID_MAX = (1 << ID_BITS) - 1


class IdLayout(Enum):
    """Bit layout of a phrase id: (corpus shift, corpus field width)."""

    CORPUS_SHIFT_40 = (40, ID_BITS - 40)
    CORPUS_BYTE_32 = (32, 8)

    @property
    def shift(self) -> int:
        return self.value[0]

    @property
    def corpus_bits(self) -> int:
        return self.value[1]

    @property
    def local_mask(self) -> int:
        return (1 << self.shift) - 1

    @property
    def corpus_mask(self) -> int:
        return (1 << self.corpus_bits) - 1


DEFAULT_ID_LAYOUT = IdLayout.CORPUS_SHIFT_40


def _check_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")


def _check_id(phrase_id: int) -> None:
    _check_int("phrase id", phrase_id)
    if not (0 <= phrase_id <= _ID_MAX):
        raise InvalidArgumentError(f"phrase id {phrase_id} outside unsigned {ID_BITS}-bit range")


def pack_phrase_id(
    corpus_ordinal: int,
    local_id: int,
    layout: IdLayout = DEFAULT_ID_LAYOUT,
) -> int:
    """
    Combine a corpus ordinal and a corpus-local id into a phrase id.

    Args:
        corpus_ordinal: Value of ``Corpus.ordinal``
        local_id: Id of the phrase within its corpus
        layout: Bit layout to pack into

    Returns:
        Unsigned 64-bit phrase id

    Raises:
        InvalidArgumentError: If either part is not an int or does not fit
            its bit field
    """
    _check_int("corpus ordinal", corpus_ordinal)
    _check_int("local id", local_id)
    if not (0 <= corpus_ordinal <= layout.corpus_mask):
        raise InvalidArgumentError(
            f"corpus ordinal {corpus_ordinal} does not fit {layout.corpus_bits} bits"
        )
    if not (0 <= local_id <= layout.local_mask):
        raise InvalidArgumentError(f"local id {local_id} does not fit {layout.shift} bits")
    return (corpus_ordinal << layout.shift) | local_id


def unpack_phrase_id(
    phrase_id: int,
    layout: IdLayout = DEFAULT_ID_LAYOUT,
) -> Tuple[int, int]:
    """
    Split a phrase id into ``(corpus_ordinal, local_id)``.

    Bits above the corpus field (only possible with ``CORPUS_BYTE_32``)
    are ignored, matching the masking the service applied for that layout.
    """
    _check_id(phrase_id)
    corpus_ordinal = (phrase_id >> layout.shift) & layout.corpus_mask
    return corpus_ordinal, phrase_id & layout.local_mask


def corpus_ordinal_from_id(phrase_id: int, layout: IdLayout = DEFAULT_ID_LAYOUT) -> int:
    return unpack_phrase_id(phrase_id, layout)[0]


def corpus_from_phrase_id(phrase_id: int, layout: IdLayout = DEFAULT_ID_LAYOUT) -> Corpus:
    """Resolve the corpus a phrase id belongs to; unknown ordinals raise."""
    return Corpus.from_ordinal(corpus_ordinal_from_id(phrase_id, layout))
