"""Detect CMS, feed, schema.org and structural blog fingerprints on a page."""

from __future__ import annotations

from loguru import logger

from blogscan.blog.models import BlogMetadata
from blogscan.blog.patterns import FEED_LINK_SELECTOR, PAGINATION_SELECTOR
from blogscan.blog.urls import has_date_pattern, url_path
from blogscan.scraper.dom import HtmlNode

_JSON_LD_SELECTOR = 'script[type="application/ld+json"]'


def _json_ld_text(document: HtmlNode) -> str:
    # Unnormalised, so the substring checks see exactly what was serialised.
    return "".join(node.raw_text() for node in document.find(_JSON_LD_SELECTOR))


def detect_blog_metadata(document: HtmlNode, url: str) -> BlogMetadata:
    """Return the :class:`BlogMetadata` fingerprints for one parsed page.

    Schema.org detection is a plain substring check for ``"@type":"Blog"`` /
    ``"@type":"Article"`` in the JSON-LD script text.  It does not parse the
    JSON, so pretty-printed ``"@type": "Blog"`` is not recognised; the score
    threshold was calibrated against this behaviour.

    Returns an all-false record if detection fails.
    """
    try:
        json_ld = _json_ld_text(document)
        article_count = document.count("article")
        return BlogMetadata(
            is_wordpress=(
                document.exists('meta[name="generator"][content*="WordPress"]')
                or document.exists("#wpadminbar")
                or document.exists('link[href*="/wp-content/"]')
            ),
            is_drupal=(
                document.exists('meta[name="generator"][content*="Drupal"]')
                or document.exists("body.drupal")
            ),
            is_ghost=document.exists('meta[name="generator"][content*="Ghost"]'),
            has_rss_feed=document.exists(FEED_LINK_SELECTOR),
            has_blog_schema='"@type":"Blog"' in json_ld,
            has_article_schema='"@type":"Article"' in json_ld,
            has_article_elements=article_count > 0,
            has_multiple_articles=article_count > 1,
            has_pagination=document.exists(PAGINATION_SELECTOR),
            has_authors=document.exists(".author, .byline, .writer"),
            has_date_elements=document.exists("time, .date, .published, .post-date"),
            has_comments=document.exists(".comments, #comments, .responses, .discussion"),
            has_sidebar=document.exists(".sidebar, .widget-area, .aside"),
            has_categories=document.exists(".categories, .tags, .topics, .labels"),
            has_archives=document.exists(".archive, .archives, .history"),
            has_date_in_url=has_date_pattern(url_path(url)),
            has_blog_class=document.exists("body.blog, .blog, #blog, .news, #news"),
            has_blog_id=document.exists("#blog, #news, #articles"),
        )
    except Exception as exc:
        logger.debug("Metadata detection failed for {}: {}", url, exc)
        return BlogMetadata()
