"""Pick the blog's listing page out of the candidate set.

Blog score answers "is this page about blog content?"; a single post scores
very well on that.  The index score asks a different question ("is this the
page that lists the posts?") and rewards short keyword paths, many post
containers, pagination and sidebar widgets instead.
"""

from __future__ import annotations

import re
from typing import List, Optional

from loguru import logger

from blogscan.blog.models import ScoredPage
from blogscan.blog.patterns import (
    DIRECT_PATHS,
    INDEX_PAGINATION_SELECTOR,
    INDEX_SIGNALS,
    POST_SELECTOR,
    RSS_LINK_SELECTOR,
    contains_keyword,
    fold,
)
from blogscan.blog.urls import has_date_pattern, path_segments, url_path
from blogscan.scraper.dom import parse_html

_LISTING_SUFFIX = re.compile(r"index|home|page\d*")


def _path_signals(url: str) -> dict[str, bool]:
    segments = path_segments(url)
    if len(segments) == 1 and segments[0] in DIRECT_PATHS:
        return {"path_blog_root": True}
    if (
        len(segments) == 2
        and segments[0] in DIRECT_PATHS
        and _LISTING_SUFFIX.fullmatch(segments[1])
    ):
        return {"path_blog_paged": True}
    return {"path_undated": not has_date_pattern(url_path(url))}


def index_signals(candidate: ScoredPage) -> dict[str, float]:
    """Return the activation of every entry in ``INDEX_SIGNALS``."""
    document = candidate.document or parse_html(candidate.html)
    article_count = document.count("article")
    post_count = document.count(POST_SELECTOR)
    metadata = candidate.metadata

    signals: dict[str, float] = dict(_path_signals(candidate.url))
    signals.update({
        "many_articles": article_count > 5,
        "several_articles": 2 < article_count <= 5,
        "few_articles": 0 < article_count <= 2,
        "many_posts": post_count > 5,
        "several_posts": 2 < post_count <= 5,
        "few_posts": 0 < post_count <= 2,
        "pagination": document.exists(INDEX_PAGINATION_SELECTOR),
        "category_widgets": document.exists(".categories, .tags, .topics, .widget, .sidebar"),
        "archive_widgets": document.exists(".archive, .archives, .calendar, .widget_archive"),
        "recent_posts_widget": document.exists(
            ".recent-posts, .recent, .latest, .widget_recent_entries"
        ),
        "home_with_posts": not path_segments(candidate.url) and (article_count + post_count) > 0,
        "title_keyword": contains_keyword(document.select_text("title")),
        "h1_keyword": contains_keyword(document.select_text("h1")),
        "had_pagination": metadata.has_pagination,
        "had_multiple_articles": metadata.has_multiple_articles,
        "had_categories": metadata.has_categories,
        "had_rss_feed": metadata.has_rss_feed,
        "rss_link": document.exists(RSS_LINK_SELECTOR),
        "blog_score": candidate.blog_score,
    })
    return signals


def index_score(candidate: ScoredPage) -> float:
    """Score how likely *candidate* is to be the blog's listing page.

    A candidate that cannot be scored gets 0.
    """
    try:
        return fold(index_signals(candidate), INDEX_SIGNALS)
    except Exception as exc:
        logger.debug("Error computing index score for {}: {}", candidate.url, exc)
        return 0.0


def select_index_page(candidates: List[ScoredPage]) -> Optional[ScoredPage]:
    """Return the candidate with the highest index score.

    Ties go to the earliest candidate.  A single candidate is returned as-is,
    and ``None`` only for an empty list.
    """
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    ranked = sorted(
        ((index_score(candidate), candidate) for candidate in candidates),
        key=lambda pair: pair[0],
        reverse=True,
    )
    for position, (score, candidate) in enumerate(ranked[:3], start=1):
        logger.info("Blog index candidate {}: {} (score: {:.2f})", position, candidate.url, score)
    return ranked[0][1]
