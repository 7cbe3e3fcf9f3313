"""Article harvesting from candidate pages.

Two passes run per page, in candidate order:

1. **Structured** - every element matching a known article container
   selector is turned into a record by :func:`~blogscan.blog.fields.extract_article`.
2. **Unstructured fallback** - when fewer than ``FALLBACK_TRIGGER`` records
   have been collected so far (across all pages processed up to this one),
   every anchor on the page is considered as a potential article link.

Both passes share one :class:`HarvestAccumulator`, so a URL accepted on an
earlier page is never harvested again.  Because the fallback check uses the
running total, page order decides whether later pages get a fallback pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Set

from loguru import logger

from blogscan.blog.fields import (
    date_value,
    extract_article,
    image_source,
    strip_author_prefix,
)
from blogscan.blog.models import ArticleRecord, ScoredPage
from blogscan.blog.patterns import FALLBACK_TRIGGER
from blogscan.blog.urls import is_blog_post_url, resolve_url
from blogscan.scraper.dom import HtmlNode, parse_html

ARTICLE_CONTAINER_SELECTORS = (
    "article",
    ".post",
    ".blog-post, .blogpost",
    ".entry, .blog-entry",
    ".news-item, .news-article",
    ".article, .post-content",
    ".item, .card, .content-card",
    ".excerpt, .post-excerpt",
    ".post-summary, .article-summary",
    ".teaser, .post-teaser",
    '[class*="blog-"], [class*="post-"]',
    '[id*="blog-"], [id*="post-"]',
)

LINK_CONTAINER_SELECTOR = ".item, .card, .post, .entry, .article, .content, .col, .row"
HEADING_SELECTOR = "h1, h2, h3, h4"

_SKIP_HREF_PREFIXES = ("#",)
_SKIP_HREF_MARKERS = ("javascript:", "mailto:", "tel:", "login", "signup", "cart", "account")

MIN_LINK_TITLE = 5
MAX_LINK_TITLE = 200


@dataclass
class HarvestAccumulator:
    """Records harvested so far for one site, plus the URLs they claim."""

    records: List[ArticleRecord] = field(default_factory=list)
    seen_urls: Set[str] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.records)

    def has_seen(self, url: str) -> bool:
        return url in self.seen_urls

    def accept(self, record: Optional[ArticleRecord]) -> bool:
        """Add *record* if it has a title, an unseen URL, and the URL looks
        like a post.  Returns whether it was added."""
        if record is None or not record.title or not record.url:
            return False
        if record.url in self.seen_urls or not is_blog_post_url(record.url):
            return False
        self.records.append(record)
        self.seen_urls.add(record.url)
        return True


# ---------------------------------------------------------------------------
# Structured pass
# ---------------------------------------------------------------------------

def harvest_structured(document: HtmlNode, page_url: str, acc: HarvestAccumulator) -> int:
    """Run the container-selector pass over one page.  Returns records added."""
    added = 0
    for selector in ARTICLE_CONTAINER_SELECTORS:
        for element in document.find(selector):
            try:
                if acc.accept(extract_article(element, page_url)):
                    added += 1
            except Exception as exc:
                logger.debug("Skipping {} element on {}: {}", selector, page_url, exc)
    return added


# ---------------------------------------------------------------------------
# Unstructured fallback pass
# ---------------------------------------------------------------------------

def _skip_href(href: str) -> bool:
    return href.startswith(_SKIP_HREF_PREFIXES) or any(m in href for m in _SKIP_HREF_MARKERS)


def enrich_from_container(
    record: ArticleRecord, container: HtmlNode, page_url: str
) -> ArticleRecord:
    """Backfill empty fields of *record* from the element around its link."""
    updates: dict[str, str] = {}

    if not record.date:
        node = container.find_first("time, .date, .published, .post-date, [datetime]")
        if node is not None and date_value(node):
            updates["date"] = date_value(node)

    if not record.excerpt:
        node = container.find_first("p, .excerpt, .summary, .description")
        if node is not None and node.text():
            updates["excerpt"] = node.text()

    if not record.image_url:
        node = container.find_first("img")
        image = image_source(node, page_url) if node is not None else None
        if image:
            updates["image_url"] = image

    if not record.author:
        node = container.find_first(".author, .byline, .meta-author")
        author = strip_author_prefix(node.text()) if node is not None else ""
        if author:
            updates["author"] = author

    return replace(record, **updates) if updates else record


def enrich_from_heading(record: ArticleRecord, heading: HtmlNode, page_url: str) -> ArticleRecord:
    """Backfill date, image and excerpt from the siblings of a title heading."""
    parent = heading.parent()
    if parent is None:
        return record
    updates: dict[str, str] = {}

    node = parent.find_first("time, .date, .published, [datetime]")
    if node is not None and date_value(node):
        updates["date"] = date_value(node)

    node = parent.find_first("img")
    if node is not None:
        image = resolve_url(node.attr("src"), page_url)
        if image:
            updates["image_url"] = image

    excerpt = parent.select_text("p")
    if excerpt:
        updates["excerpt"] = excerpt

    return replace(record, **updates) if updates else record


def link_record(anchor: HtmlNode, page_url: str, acc: HarvestAccumulator) -> Optional[ArticleRecord]:
    """Build a record from a bare anchor, or ``None`` if it is not an article link."""
    href = anchor.attr("href")
    if not href or _skip_href(href):
        return None
    url = resolve_url(href, page_url)
    if url is None or acc.has_seen(url) or not is_blog_post_url(url):
        return None

    record = ArticleRecord(title=anchor.text(), url=url)
    container = anchor.closest(LINK_CONTAINER_SELECTOR)
    if container is not None:
        record = enrich_from_container(record, container, page_url)
    else:
        heading = anchor.closest(HEADING_SELECTOR)
        if heading is not None:
            record = enrich_from_heading(record, heading, page_url)

    if not MIN_LINK_TITLE <= len(record.title) <= MAX_LINK_TITLE:
        return None
    return record


def harvest_links(document: HtmlNode, page_url: str, acc: HarvestAccumulator) -> int:
    """Run the anchor-scanning fallback over one page.  Returns records added."""
    added = 0
    for anchor in document.find("a"):
        try:
            if acc.accept(link_record(anchor, page_url, acc)):
                added += 1
        except Exception as exc:
            logger.debug("Skipping link on {}: {}", page_url, exc)
    return added


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def harvest_page(candidate: ScoredPage, acc: HarvestAccumulator) -> None:
    """Harvest one candidate page into *acc*.  Never raises."""
    try:
        document = candidate.document or parse_html(candidate.html)
        structured = harvest_structured(document, candidate.url, acc)
        fallback = 0
        if len(acc) < FALLBACK_TRIGGER:
            fallback = harvest_links(document, candidate.url, acc)
        logger.debug(
            "Harvested {} structured + {} fallback records from {} (score {:.2f})",
            structured,
            fallback,
            candidate.url,
            candidate.blog_score,
        )
    except Exception as exc:
        logger.debug("Error harvesting {}: {}", candidate.url, exc)


def harvest_articles(candidates: List[ScoredPage]) -> List[ArticleRecord]:
    """Harvest every candidate in order and return records in encounter order."""
    acc = HarvestAccumulator()
    for candidate in candidates:
        if not candidate.html:
            continue
        harvest_page(candidate, acc)
    return list(acc.records)
