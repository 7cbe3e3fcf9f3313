"""Blog extraction pipeline.

``extract`` is the single entry point:

    score → filter → discover feeds → select index → harvest → rank

It is a pure function of the page list (no network, no shared state), so
separate sites can be processed in parallel without coordination.
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from blogscan.blog.feeds import discover_feeds
from blogscan.blog.harvester import harvest_articles
from blogscan.blog.index import select_index_page
from blogscan.blog.models import BlogExtractionResult
from blogscan.blog.ranking import rank_articles
from blogscan.blog.scorer import filter_candidates, score_pages
from blogscan.scraper.models import Page


def extract(pages: Iterable[Page]) -> BlogExtractionResult:
    """Detect a blog in *pages* and harvest its articles.

    Pipeline:
        1. :func:`~blogscan.blog.scorer.score_pages`: blog score per page.
        2. :func:`~blogscan.blog.scorer.filter_candidates`: threshold and
           rank.  No candidates short-circuits to an empty result.
        3. :func:`~blogscan.blog.feeds.discover_feeds`: feed URLs.
        4. :func:`~blogscan.blog.index.select_index_page`: listing page.
        5. :func:`~blogscan.blog.harvester.harvest_articles`: records.
        6. :func:`~blogscan.blog.ranking.rank_articles`: dedup, sort, cap.

    Never raises: anything escaping the stages yields
    :meth:`BlogExtractionResult.empty`.
    """
    try:
        pages = list(pages)
        logger.info("Starting blog content extraction from {} pages", len(pages))

        candidates = filter_candidates(score_pages(pages))
        if not candidates:
            logger.info("No blog pages found")
            return BlogExtractionResult.empty()

        feeds = discover_feeds(candidates)
        index_page = select_index_page(candidates) or candidates[0]
        logger.info("Main blog index page: {}", index_page.url)

        articles = rank_articles(harvest_articles(candidates))
        logger.info("Extracted {} articles", len(articles))

        return BlogExtractionResult(
            has_blog=True,
            blog_url=index_page.url,
            articles=tuple(articles),
            rss_feeds=tuple(feeds),
        )
    except Exception:
        logger.exception("Error extracting blog content")
        return BlogExtractionResult.empty()
