"""Plain-text formatting of search results."""
from __future__ import annotations

from typing import List

from .phrase import Phrase
from .result import SearchResult

__all__ = ["format_banner", "format_phrase", "format_result"]


def format_banner(title: str, width: int = 80, style: str = "═") -> str:
    """Title followed by a separator line of ``width`` ``style`` characters."""
    return f"{title}\n{style * width}"


def format_phrase(phrase: Phrase, *, show_tags: bool = False) -> str:
    """
    Format a phrase as ``"<score> <token> <token> ..."``.

    Examples:
        >>> format_phrase(phrase)
        '0.175468 I struggled to my feet'
        >>> format_phrase(phrase, show_tags=True)
        '0.175468 I_0 struggled_0 to_1 my_1 feet_1'
    """
    if show_tags:
        words = [f"{t.text}_{t.tag.wire_digit}" for t in phrase.tokens]
    else:
        words = [t.text for t in phrase.tokens]
    return " ".join([f"{phrase.score:6f}", *words])


def format_result(result: SearchResult, *, show_tags: bool = False, details: bool = False) -> str:
    """Format every phrase of a result, one per line."""
    lines: List[str] = []
    for phrase in result.phrases:
        line = format_phrase(phrase, show_tags=show_tags)
        if details:
            line += (
                f"  (matches={phrase.match_count:,} volumes={phrase.volume_count:,} "
                f"years={phrase.first_year}-{phrase.last_year})"
            )
        lines.append(line)
    return "\n".join(lines)
