"""Decoder for the PhraseFinder TSV response format.

Format (one phrase per line, UTF-8, newline terminated)::

    <tokens>\\t<matchCount>\\t<volumeCount>\\t<firstYear>\\t<lastYear>\\t<id>\\t<score>

where ``<tokens>`` is a single-space separated list of ``<text>_<tagDigit>``
terms, e.g. ``"I_0 like_0 to_1\\t123\\t45\\t1800\\t2008\\t77\\t0.5"``.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List, Optional, Union

from .encoding import DEFAULT_ID_LAYOUT, IdLayout
from .errors import DecodeError, InvalidArgumentError
from .phrase import Phrase, Tag, Token
from .result import SearchResult, Status

logger = logging.getLogger(__name__)

__all__ = [
    "FIELDS",
    "TERM_SEPARATOR",
    "parse_term",
    "parse_line",
    "decode_lines",
    "decode_body",
    "decode_response",
]

FIELDS = (
    "tokens",
    "match_count",
    "volume_count",
    "first_year",
    "last_year",
    "id",
    "score",
)
TERM_SEPARATOR = "_"

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_ID_MAX = (1 << 64) - 1


def parse_term(term: str, *, line_no: Optional[int] = None) -> Token:
    """
    Decode one ``<text>_<tagDigit>`` term.

    The tag digit is the last character and the separator the one before
    it; everything to the left is token text, so text may itself contain
    underscores (``"snake_case_0"`` -> ``Token("snake_case", GIVEN)``).
    """
    if len(term) < 3:
        raise DecodeError(f"term {term!r} is too short", line_no=line_no, field="tokens")
    text, separator, digit = term[:-2], term[-2], term[-1]
    if separator != TERM_SEPARATOR:
        raise DecodeError(
            f"term {term!r} lacks the {TERM_SEPARATOR!r} tag separator",
            line_no=line_no,
            field="tokens",
        )
    if not ("0" <= digit <= "9"):
        raise DecodeError(f"term {term!r} has non-digit tag {digit!r}", line_no=line_no, field="tokens")
    try:
        tag = Tag.from_ordinal(int(digit))
    except InvalidArgumentError as exc:
        raise DecodeError(f"term {term!r}: {exc}", line_no=line_no, field="tokens") from None
    return Token(text=text, tag=tag)


def _parse_int(raw: str, field: str, line_no: Optional[int], *, minimum: Optional[int] = None) -> int:
    if not _INT_RE.fullmatch(raw):
        raise DecodeError(f"malformed integer {raw!r}", line_no=line_no, field=field)
    value = int(raw)
    if minimum is not None and value < minimum:
        raise DecodeError(f"{value} is below {minimum}", line_no=line_no, field=field)
    return value


def _parse_score(raw: str, line_no: Optional[int]) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise DecodeError(f"malformed number {raw!r}", line_no=line_no, field="score")
    value = float(raw)
    if not math.isfinite(value) or value < 0:
        raise DecodeError(f"{raw!r} is not a finite non-negative number", line_no=line_no, field="score")
    return value


def parse_line(
    line: str,
    *,
    line_no: Optional[int] = None,
    layout: IdLayout = DEFAULT_ID_LAYOUT,
) -> Phrase:
    """
    Decode one response line into a Phrase.

    Fields beyond the seventh are ignored. The number of tokens is not
    checked against the 1..5 range; whatever the server sends is kept.
    ``layout`` is recorded on the phrase and used by ``Phrase.corpus()``.

    Raises:
        DecodeError: On fewer than 7 fields, a malformed term or a
            malformed numeric field (message names line and field)
    """
    parts = line.split("\t")
    if len(parts) < len(FIELDS):
        raise DecodeError(
            f"expected {len(FIELDS)} tab-separated fields, got {len(parts)}",
            line_no=line_no,
        )

    tokens = tuple(parse_term(term, line_no=line_no) for term in parts[0].split(" "))

    phrase_id = _parse_int(parts[5], "id", line_no, minimum=0)
    if phrase_id > _ID_MAX:
        raise DecodeError(f"{phrase_id} exceeds 64 bits", line_no=line_no, field="id")

    return Phrase(
        tokens=tokens,
        match_count=_parse_int(parts[1], "match_count", line_no, minimum=0),
        volume_count=_parse_int(parts[2], "volume_count", line_no, minimum=0),
        first_year=_parse_int(parts[3], "first_year", line_no),
        last_year=_parse_int(parts[4], "last_year", line_no),
        id=phrase_id,
        score=_parse_score(parts[6], line_no),
        id_layout=layout,
    )


def decode_lines(lines: Iterable[str], *, layout: IdLayout = DEFAULT_ID_LAYOUT) -> List[Phrase]:
    """Decode lines (without terminators) in order; line numbers start at 1."""
    phrases: List[Phrase] = []
    for line_no, line in enumerate(lines, start=1):
        try:
            phrases.append(parse_line(line, line_no=line_no, layout=layout))
        except DecodeError as exc:
            logger.error("Failed to decode response %s", exc)
            raise
    return phrases


def decode_body(body: Union[bytes, str], *, layout: IdLayout = DEFAULT_ID_LAYOUT) -> List[Phrase]:
    """
    Decode a complete response body.

    An empty body yields an empty list. A trailing newline does not
    produce an extra line; ``\\r\\n`` terminators are accepted.
    """
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"response body is not valid UTF-8: {exc}") from exc
    else:
        text = body

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return decode_lines(
        (line[:-1] if line.endswith("\r") else line for line in lines),
        layout=layout,
    )


def decode_response(
    status_code: int,
    body: Union[bytes, str, None],
    *,
    layout: IdLayout = DEFAULT_ID_LAYOUT,
) -> SearchResult:
    """
    Turn a raw HTTP status code and body into a SearchResult.

    The body is only looked at for status OK; for any other known status
    the result carries no phrases. Unknown status codes raise.
    """
    status = Status.from_http_status(status_code)
    if status is not Status.OK:
        return SearchResult.failed(status)
    return SearchResult(status=status, phrases=decode_body(body or b"", layout=layout))
