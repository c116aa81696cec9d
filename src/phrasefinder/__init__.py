"""
Client for the PhraseFinder web service (https://phrasefinder.io).

PhraseFinder searches the Google Books Ngram dataset (version 2). This
package encodes a query plus options into a GET request and decodes the
tab-separated response into immutable phrase values.

Main entry point:
    search() - Send one query and return a SearchResult

Example:
    >>> from phrasefinder import Corpus, Options, search
    >>> result = search("I struggled ???", Options(max_results=3), corpus=Corpus.AMERICAN_ENGLISH)
    >>> [str(p) for p in result.phrases]
    ['I struggled to my feet', 'I struggled to keep my', 'I struggled to sit up']
"""

__version__ = "1.0.0"

from .config import ClientConfig
from .corpus import Corpus
from .decode import decode_body, decode_response, parse_line
from .encoding import IdLayout, corpus_from_phrase_id, pack_phrase_id, unpack_phrase_id
from .errors import DecodeError, InvalidArgumentError, PhraseFinderError, TransportError
from .options import Options
from .phrase import EMPTY_PHRASE, Phrase, Tag, Token
from .request import build_search_url
from .result import SearchResult, Status
from .search import search

__all__ = [
    # Search API
    "search",
    "SearchResult",
    "Status",
    "Options",
    "ClientConfig",

    # Data model
    "Corpus",
    "Phrase",
    "Token",
    "Tag",
    "EMPTY_PHRASE",

    # Wire-level utilities
    "build_search_url",
    "parse_line",
    "decode_body",
    "decode_response",
    "IdLayout",
    "pack_phrase_id",
    "unpack_phrase_id",
    "corpus_from_phrase_id",

    # Errors
    "PhraseFinderError",
    "InvalidArgumentError",
    "DecodeError",
    "TransportError",
]
