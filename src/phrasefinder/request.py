"""Request URL construction for the PhraseFinder search endpoint."""
from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import quote, urlencode

from .config import DEFAULT_BASE_URL
from .corpus import Corpus
from .errors import InvalidArgumentError
from .options import Options

__all__ = ["RESPONSE_FORMAT", "build_search_params", "build_search_url"]

RESPONSE_FORMAT = "tsv"


def build_search_params(
    corpus: Corpus,
    query: str,
    options: Optional[Options] = None,
) -> Dict[str, str]:
    """
    Build the query parameters of a search request, in wire order.

    ``nmin``, ``nmax`` and ``topk`` are always sent, even when they equal
    the server defaults. ``key`` is sent only when an API key is set.

    The query is passed through untouched; operators such as ``?``, ``*``,
    ``/`` and ``+`` are interpreted by the server only.

    Raises:
        InvalidArgumentError: If the corpus is not a Corpus or the query
            is not a string that can be encoded as UTF-8
    """
    if not isinstance(corpus, Corpus):
        raise InvalidArgumentError(f"corpus must be a Corpus, got {corpus!r}")
    if not isinstance(query, str):
        raise InvalidArgumentError(f"query must be a str, got {type(query).__name__}")
    try:
        query.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidArgumentError(f"query cannot be encoded as UTF-8: {exc}") from exc

    opts = options if options is not None else Options.defaults()
    params = {
        "format": RESPONSE_FORMAT,
        "corpus": corpus.short_code,
        "query": query,
        "nmin": str(opts.min_phrase_length),
        "nmax": str(opts.max_phrase_length),
        "topk": str(opts.max_results),
    }
    if opts.api_key is not None:
        params["key"] = opts.api_key
    return params


def build_search_url(
    corpus: Corpus,
    query: str,
    options: Optional[Options] = None,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """
    Build the full GET target for a search.

    Examples:
        >>> build_search_url(Corpus.AMERICAN_ENGLISH, "I like ???")
        'http://phrasefinder.io/search?format=tsv&corpus=eng-us&query=I%20like%20%3F%3F%3F&nmin=1&nmax=5&topk=100'
    """
    params = build_search_params(corpus, query, options)
    encoded = urlencode(params, quote_via=quote, safe="", encoding="utf-8")
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{encoded}"
