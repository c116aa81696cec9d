"""
Command-line interface for querying PhraseFinder.

Examples:
  phrasefinder "I struggled ???"
  phrasefinder "I like ???" --corpus eng-gb --topk 10 --tags
  python -m phrasefinder "* hello *" --nmin 3 --log-dir ~/.phrasefinder/logs
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import DEFAULT_BASE_URL, ClientConfig
from .corpus import Corpus
from .display import format_banner, format_result
from .errors import InvalidArgumentError, TransportError
from .logger import setup_logger
from .options import DEFAULT_MAX_RESULTS, MAX_PHRASE_LENGTH, MIN_PHRASE_LENGTH, Options
from .search import search

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]

EXIT_OK = 0
EXIT_NOT_OK = 1
EXIT_ERROR = 2

_CORPUS_CODES = [c.short_code for c in Corpus]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrasefinder",
        description="Search the Google Books Ngram dataset via phrasefinder.io.",
    )
    parser.add_argument("query", help="Query string, e.g. \"I struggled ???\"")
    parser.add_argument("--corpus", choices=_CORPUS_CODES, default=Corpus.AMERICAN_ENGLISH.short_code,
                        help="Corpus short code (default: %(default)s)")
    parser.add_argument("--nmin", type=int, default=MIN_PHRASE_LENGTH,
                        help="Minimum phrase length (default: %(default)s)")
    parser.add_argument("--nmax", type=int, default=MAX_PHRASE_LENGTH,
                        help="Maximum phrase length (default: %(default)s)")
    parser.add_argument("--topk", type=int, default=DEFAULT_MAX_RESULTS,
                        help="Maximum number of phrases (default: %(default)s)")
    parser.add_argument("--key", default=None, help="API key, if you own one")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help=argparse.SUPPRESS)
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("--tags", action="store_true", help="Append _<tag> to each token")
    parser.add_argument("--details", action="store_true", help="Show counts and year range")
    parser.add_argument("--log-dir", default=None, help="Also write a log file to this directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a search and print the phrases; returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logger(
        args.log_dir,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        console=True,
    )

    try:
        options = Options(
            corpus=Corpus.from_short_code(args.corpus),
            min_phrase_length=args.nmin,
            max_phrase_length=args.nmax,
            max_results=args.topk,
            api_key=args.key,
        )
        logger.debug("Search options: %r", options)
        config = ClientConfig(base_url=args.base_url, timeout=args.timeout)
        result = search(args.query, options, config=config)
    except (InvalidArgumentError, TransportError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if not result.ok:
        print(f"Request was not successful: {result.status.name}", file=sys.stderr)
        return EXIT_NOT_OK

    if args.details:
        print(format_banner(f"{len(result.phrases)} phrases for {args.query!r} ({args.corpus})"))
    output = format_result(result, show_tags=args.tags, details=args.details)
    if output:
        print(output)
    return EXIT_OK
