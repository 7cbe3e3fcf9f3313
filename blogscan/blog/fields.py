"""Per-field extractors that turn one container element into an article.

Each extractor walks an ordered selector list and takes the first non-empty
hit.  A failing extractor leaves its field empty; only a missing title or
URL causes the whole record to be dropped.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, TypeVar

from loguru import logger

from blogscan.blog.models import ArticleRecord
from blogscan.blog.urls import resolve_url, text_similarity
from blogscan.scraper.dom import HtmlNode

T = TypeVar("T")

TITLE_SELECTORS = (
    "h1", "h2", "h3", "h4",
    ".title", ".entry-title", ".post-title",
    ".heading", ".headline", ".article-title",
    'a[rel="bookmark"]', ".headline a",
)

EXCERPT_SELECTORS = (
    ".excerpt", ".summary", ".entry-summary", ".post-excerpt",
    ".description", ".post-content p", ".entry-content p",
    ".teaser", ".intro", ".preview",
)

IMAGE_SELECTORS = (
    "img", ".featured-image img", ".post-thumbnail img",
    ".entry-image img", ".post-image img", ".thumbnail img",
    "picture source, picture img", ".image img", "figure img",
)

DATE_SELECTORS = (
    "time", ".date", ".published", ".post-date",
    ".entry-date", 'meta[itemprop="datePublished"]',
    ".publish-date", ".timestamp", ".meta-date",
)

AUTHOR_SELECTORS = (
    ".author", ".byline", ".entry-author",
    'meta[itemprop="author"]', ".meta-author",
    ".writer", ".post-author", ".by",
)

IMAGE_SOURCE_ATTRS = ("src", "data-src", "data-lazy-src")

_AUTHOR_PREFIX = re.compile(r"^(?:by|posted by|written by|author:)\s+", re.IGNORECASE)


def _safely(extractor: Callable[..., T], *args) -> Optional[T]:
    try:
        return extractor(*args)
    except Exception as exc:
        logger.debug("{} failed: {}", extractor.__name__, exc)
        return None


def strip_author_prefix(text: str) -> str:
    """Drop a leading "By" / "Posted by" / "Written by" / "Author:"."""
    return _AUTHOR_PREFIX.sub("", text.strip())


def date_value(node: HtmlNode) -> str:
    """``datetime`` attribute, then ``content`` (for ``<meta>``), then text."""
    return node.attr("datetime") or node.attr("content") or node.text()


def image_source(node: HtmlNode, base_url: str) -> Optional[str]:
    for name in IMAGE_SOURCE_ATTRS:
        url = resolve_url(node.attr(name), base_url)
        if url:
            return url
    return None


# ---------------------------------------------------------------------------
# Field extractors
# ---------------------------------------------------------------------------

def extract_title(element: HtmlNode, base_url: str) -> tuple[Optional[str], Optional[str]]:
    """Return ``(title, url)`` for *element*.

    ``url`` is only set when the title element is, or wraps, a link.  With no
    selector hit, the first descendant whose text is 11-99 characters long is
    used as the title.
    """
    for selector in TITLE_SELECTORS:
        node = element.find_first(selector)
        if node is None:
            continue
        title = node.text()
        if not title:
            continue
        link = node if node.matches("a") else node.find_first("a")
        url = resolve_url(link.attr("href"), base_url) if link is not None else None
        return title, url

    for node in element.descendants():
        text = node.text()
        if 10 < len(text) < 100:
            return text, None
    return None, None


def extract_url(element: HtmlNode, title: str, base_url: str) -> Optional[str]:
    """Pick the link in *element* that most likely points at the article."""
    for link in element.find("a"):
        href = link.attr("href")
        if not href:
            continue
        link_text = link.text()
        if text_similarity(title, link_text) > 0.7 or len(link_text) > 20:
            url = resolve_url(href, base_url)
            if url:
                return url

    first = element.find_first('a[href]:not([href=""])')
    if first is not None:
        return resolve_url(first.attr("href"), base_url)
    return None


def extract_excerpt(element: HtmlNode) -> Optional[str]:
    for selector in EXCERPT_SELECTORS:
        node = element.find_first(selector)
        if node is not None and node.text():
            return node.text()
    paragraph = element.find_first("p")
    if paragraph is not None and paragraph.text():
        return paragraph.text()
    return None


def extract_image(element: HtmlNode, base_url: str) -> Optional[str]:
    for selector in IMAGE_SELECTORS:
        node = element.find_first(selector)
        if node is None:
            continue
        url = image_source(node, base_url)
        if url:
            return url
    return None


def extract_date(element: HtmlNode) -> Optional[str]:
    for selector in DATE_SELECTORS:
        node = element.find_first(selector)
        if node is not None:
            value = date_value(node)
            if value:
                return value
    return None


def extract_author(element: HtmlNode) -> Optional[str]:
    for selector in AUTHOR_SELECTORS:
        node = element.find_first(selector)
        if node is None:
            continue
        author = strip_author_prefix(node.text() or node.attr("content") or "")
        if author:
            return author
    return None


def extract_article(element: HtmlNode, base_url: str) -> Optional[ArticleRecord]:
    """Build an :class:`ArticleRecord` from one container element.

    Returns ``None`` when no title or no URL can be found.  Every other field
    is optional and left ``None`` if its extractor finds nothing or fails.
    """
    title, url = _safely(extract_title, element, base_url) or (None, None)
    if not title:
        return None
    if not url:
        url = _safely(extract_url, element, title, base_url)
    if not url:
        return None

    return ArticleRecord(
        title=title,
        url=url,
        excerpt=_safely(extract_excerpt, element),
        image_url=_safely(extract_image, element, base_url),
        date=_safely(extract_date, element),
        author=_safely(extract_author, element),
    )
