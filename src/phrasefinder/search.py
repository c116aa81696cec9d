"""Single-shot search against the PhraseFinder web service."""
from __future__ import annotations

import logging
from contextlib import closing
from typing import Optional

import requests

from .config import ClientConfig
from .corpus import Corpus
from .decode import decode_body
from .errors import InvalidArgumentError, TransportError
from .options import Options
from .request import build_search_url
from .result import SearchResult, Status

logger = logging.getLogger(__name__)

__all__ = ["search"]

_ACCEPT = "text/tab-separated-values, text/plain;q=0.9"


def search(
    query: str,
    options: Optional[Options] = None,
    *,
    corpus: Optional[Corpus] = None,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
) -> SearchResult:
    """
    Send one search request and decode the whole response.

    There is no retry: a non-OK status is returned as the result's
    status and a transport failure is raised.

    Args:
        query: Query string, passed to the server verbatim
        options: Search parameters (defaults when omitted)
        corpus: Corpus to search; overrides ``options.corpus`` when given
        config: Client configuration (defaults when omitted)
        session: requests-compatible session; a private one is opened
                 and closed around the call when omitted

    Returns:
        SearchResult with status OK and phrases in server order, or a
        non-OK status with no phrases

    Raises:
        InvalidArgumentError: Invalid query/corpus, an HTTP status code
            outside the known table, or a malformed response body
            (``DecodeError``)
        TransportError: Connecting to or reading from the service failed
    """
    cfg = config if config is not None else ClientConfig()
    opts = options if options is not None else Options.defaults()
    target = corpus if corpus is not None else opts.corpus

    url = build_search_url(target, query, opts, base_url=cfg.base_url)
    logger.info("Searching %s for %r (corpus=%s)", cfg.base_url, query, target.short_code)

    if session is not None:
        return _send(session, url, cfg)
    with requests.Session() as sess:
        return _send(sess, url, cfg)


def _send(sess: requests.Session, url: str, cfg: ClientConfig) -> SearchResult:
    try:
        resp = sess.get(
            url,
            timeout=cfg.timeout,
            headers={"User-Agent": cfg.user_agent, "Accept": _ACCEPT},
            stream=True,
        )
    except requests.RequestException as exc:
        logger.error("Request to %s failed: %s", cfg.base_url, exc)
        raise TransportError(f"Request to {cfg.base_url} failed: {exc}") from exc

    with closing(resp):
        try:
            status = Status.from_http_status(resp.status_code)
        except InvalidArgumentError:
            logger.error("Unexpected HTTP status %s from %s", resp.status_code, cfg.base_url)
            raise

        if status is not Status.OK:
            logger.warning("Search was not successful: %s (HTTP %d)", status.name, resp.status_code)
            return SearchResult.failed(status)

        try:
            body = resp.content
        except requests.RequestException as exc:
            logger.error("Reading response from %s failed: %s", cfg.base_url, exc)
            raise TransportError(f"Reading response from {cfg.base_url} failed: {exc}") from exc

        phrases = decode_body(body, layout=cfg.id_layout)

    logger.info("Received %d phrases", len(phrases))
    return SearchResult(status=status, phrases=phrases)
