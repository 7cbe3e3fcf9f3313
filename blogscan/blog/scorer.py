"""Page scoring and candidate filtering.

Every page gets a blog-likelihood score in ``[0, 10]`` built from URL shape,
title/heading keywords, DOM structure and CMS/schema fingerprints.  Pages at
or above :data:`~blogscan.blog.patterns.BLOG_SCORE_THRESHOLD` become the
candidate set the rest of the pipeline works on.
"""

from __future__ import annotations

from typing import Iterable, List

from loguru import logger

from blogscan.blog.metadata import detect_blog_metadata
from blogscan.blog.models import BlogMetadata, ScoredPage
from blogscan.blog.patterns import (
    BLOG_SCORE_THRESHOLD,
    BLOG_SIGNALS,
    DIRECT_PATHS,
    INLINE_DATE_PATTERNS,
    MAX_BLOG_SCORE,
    PAGINATION_SELECTOR,
    POST_SELECTOR,
    SUBPATHS,
    contains_keyword,
    fold,
)
from blogscan.blog.urls import has_date_pattern, path_segments, url_path
from blogscan.scraper.dom import HtmlNode, parse_html
from blogscan.scraper.models import Page


# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------

def _has_date_markup(document: HtmlNode, body_text: str) -> bool:
    if document.exists("time, span.date, div.date, .post-date, .published"):
        return True
    return any(pattern.search(body_text) for pattern in INLINE_DATE_PATTERNS)


def page_signals(document: HtmlNode, url: str, metadata: BlogMetadata) -> dict[str, float]:
    """Return the activation of every entry in ``BLOG_SIGNALS`` for one page."""
    segments = path_segments(url)
    body = document.find_first("body") or document
    article_count = document.count("article")
    post_count = document.count(POST_SELECTOR)

    return {
        "url_direct_path": any(s in DIRECT_PATHS for s in segments),
        "url_subpath": any(s in SUBPATHS for s in segments),
        "url_date": has_date_pattern(url_path(url)),
        "title_keyword": contains_keyword(document.select_text("title")),
        "heading_keyword": contains_keyword(document.select_text("h1, h2, h3")),
        "metadata_indicator": metadata.blog_indicator_score,
        "many_articles": article_count > 3,
        "some_articles": 0 < article_count <= 3,
        "many_posts": post_count > 3,
        "some_posts": 0 < post_count <= 3,
        "pagination": document.exists(PAGINATION_SELECTOR),
        "date_markup": _has_date_markup(document, body.text().lower()),
        "author_markup": document.exists(".author, .byline, span.by, .writer"),
        "comments": document.exists("#comments, .comments, .responses, .discussion"),
        "tags": document.exists(".tags, .categories, .topics, .labels"),
        "social_share": document.exists(".share, .social-share, .social-links"),
        "blog_class": document.exists("body.blog, .blog-page, #blog, .news-page, #news"),
        "cms": metadata.is_known_cms,
        "rss_feed": metadata.has_rss_feed,
        "schema": metadata.has_blog_schema or metadata.has_article_schema,
    }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def score_page(page: Page) -> ScoredPage:
    """Score a single page.

    Never raises: a page without a URL or HTML, or one that fails to parse or
    score, comes back with score 0 and empty metadata.
    """
    if not page.url or not page.html:
        return ScoredPage(page=page, blog_score=0.0)

    try:
        document = parse_html(page.html)
        metadata = detect_blog_metadata(document, page.url)
        raw = fold(page_signals(document, page.url, metadata), BLOG_SIGNALS)
    except Exception as exc:
        logger.debug("Error scoring page {}: {}", page.url, exc)
        return ScoredPage(page=page, blog_score=0.0)

    score = min(MAX_BLOG_SCORE, max(0.0, raw))
    return ScoredPage(page=page, blog_score=score, metadata=metadata, document=document)


def score_pages(pages: Iterable[Page]) -> List[ScoredPage]:
    """Score every page, preserving input order."""
    return [score_page(page) for page in pages]


def filter_candidates(
    scored: List[ScoredPage],
    threshold: float = BLOG_SCORE_THRESHOLD,
) -> List[ScoredPage]:
    """Keep pages scoring at least *threshold*, highest first.

    The sort is stable, so equal scores keep their input order.
    """
    candidates = sorted(
        (item for item in scored if item.blog_score >= threshold),
        key=lambda item: item.blog_score,
        reverse=True,
    )
    logger.info(
        "Found {} potential blog pages out of {} total pages (score threshold: {})",
        len(candidates),
        len(scored),
        threshold,
    )
    return candidates
