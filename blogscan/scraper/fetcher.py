"""HTTP helpers: fetch a page for the CLI and probe candidate feed URLs.

Neither is part of the extraction pipeline, which works purely on HTML it is
handed.  They exist for callers who want to go from a URL list to a result
in one step, or who want to confirm that guessed feed URLs really serve a
feed.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import feedparser
import httpx
from loguru import logger

from blogscan.config import settings
from blogscan.errors import FetchError
from blogscan.scraper.models import Page


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/rss+xml,"
        "application/atom+xml,application/xml;q=0.9,*/*;q=0.8",
    }


def _client() -> httpx.Client:
    return httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


def fetch_page(url: str, client: Optional[httpx.Client] = None) -> Page:
    """Fetch *url* and return it as a :class:`Page`.

    Raises:
        FetchError: On any network failure or 4xx/5xx status.
    """
    owns_client = client is None
    client = client or _client()
    try:
        response = client.get(url)
        response.raise_for_status()
        return Page(url=url, html=response.text)
    except httpx.HTTPError as exc:
        raise FetchError(url, str(exc)) from exc
    finally:
        if owns_client:
            client.close()


def looks_like_feed(response: httpx.Response) -> bool:
    """Return ``True`` if *response* is a successful RSS/Atom/RDF document.

    Only the body is inspected: servers label feeds ``text/html`` and HTML
    pages ``application/xhtml+xml`` often enough that the header is noise.
    """
    if not response.is_success:
        return False
    parsed = feedparser.parse(response.content)
    if not parsed.get("version"):
        return False
    return not parsed.get("bozo") or bool(parsed.entries)


def verify_feeds(
    urls: Iterable[str],
    client: Optional[httpx.Client] = None,
    max_probes: Optional[int] = None,
) -> List[str]:
    """Return the subset of *urls* that actually serve a feed.

    At most *max_probes* URLs (default ``settings.max_feed_probes``) are
    requested, in the given order.  A URL that errors is dropped; the probe as
    a whole never raises.
    """
    limit = settings.max_feed_probes if max_probes is None else max_probes
    owns_client = client is None
    client = client or _client()
    confirmed: List[str] = []
    try:
        for idx, url in enumerate(urls):
            if idx >= limit:
                logger.debug("Feed probe limit {} reached", limit)
                break
            try:
                response = client.get(url)
            except httpx.HTTPError as exc:
                logger.debug("Feed probe failed for {}: {}", url, exc)
                continue
            if looks_like_feed(response):
                confirmed.append(url)
            else:
                logger.debug("Not a feed: {} (status {})", url, response.status_code)
    finally:
        if owns_client:
            client.close()
    logger.info("Confirmed {} feed(s)", len(confirmed))
    return confirmed
