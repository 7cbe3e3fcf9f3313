"""RSS/Atom feed discovery from candidate pages.

Purely static: feed ``<link>`` tags and feed-looking anchors are collected
from the HTML, and when none exist a list of well-known feed paths on the
site root is returned instead.  Those guesses are unverified; see
:func:`blogscan.scraper.fetcher.verify_feeds` for an optional network check.
"""

from __future__ import annotations

from typing import List

from loguru import logger

from blogscan.blog.models import ScoredPage
from blogscan.blog.patterns import FEED_LINK_SELECTOR, FEED_PATHS
from blogscan.blog.urls import resolve_url, site_root
from blogscan.scraper.dom import HtmlNode, parse_html

_FEED_ANCHOR_SELECTOR = 'a[href*="feed"], a[href*="rss"], a[href*="atom"]'
_FEED_HREF_MARKERS = ("/feed", "/rss", "/atom")


def _page_feeds(document: HtmlNode, base_url: str) -> List[str]:
    found: List[str] = []
    for link in document.find(FEED_LINK_SELECTOR):
        url = resolve_url(link.attr("href"), base_url)
        if url:
            found.append(url)
    for anchor in document.find(_FEED_ANCHOR_SELECTOR):
        href = anchor.attr("href") or ""
        if not any(marker in href for marker in _FEED_HREF_MARKERS):
            continue
        url = resolve_url(href, base_url)
        if url:
            found.append(url)
    return found


def fallback_feed_urls(page_url: str) -> List[str]:
    """Return the well-known feed paths on *page_url*'s scheme and host."""
    root = site_root(page_url)
    if root is None:
        return []
    return [root + path for path in FEED_PATHS]


def discover_feeds(candidates: List[ScoredPage]) -> List[str]:
    """Collect feed URLs referenced by *candidates*, deduplicated.

    Falls back to :func:`fallback_feed_urls` for the top candidate when no
    page references a feed.  A page that fails to scan contributes nothing.
    """
    feeds: dict[str, None] = {}
    for candidate in candidates:
        try:
            document = candidate.document or parse_html(candidate.html)
            for url in _page_feeds(document, candidate.url):
                feeds.setdefault(url, None)
        except Exception as exc:
            logger.debug("Error scanning {} for feeds: {}", candidate.url, exc)

    if not feeds and candidates:
        for url in fallback_feed_urls(candidates[0].url):
            feeds.setdefault(url, None)
        logger.info("No feeds referenced; guessing {} common feed paths", len(feeds))
    else:
        logger.info("Found {} RSS feeds", len(feeds))
    return list(feeds)
