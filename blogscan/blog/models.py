"""Data models for the blog extraction pipeline.

Every stage returns new objects; nothing here is mutated after construction.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Optional

from blogscan.scraper.dom import HtmlNode
from blogscan.scraper.models import Page


@dataclass(frozen=True)
class BlogMetadata:
    """Boolean blog fingerprints detected on a single page."""

    # CMS identity
    is_wordpress: bool = False
    is_drupal: bool = False
    is_ghost: bool = False
    # Feeds and schema.org
    has_rss_feed: bool = False
    has_blog_schema: bool = False
    has_article_schema: bool = False
    # Structure
    has_article_elements: bool = False
    has_multiple_articles: bool = False
    has_pagination: bool = False
    has_authors: bool = False
    has_date_elements: bool = False
    has_comments: bool = False
    has_sidebar: bool = False
    has_categories: bool = False
    has_archives: bool = False
    # URL and page-level markup
    has_date_in_url: bool = False
    has_blog_class: bool = False
    has_blog_id: bool = False

    @property
    def is_known_cms(self) -> bool:
        return self.is_wordpress or self.is_drupal or self.is_ghost

    @property
    def blog_indicator_score(self) -> float:
        """Fraction of fingerprints present, in ``[0, 1]``."""
        flags = [getattr(self, f.name) for f in fields(self)]
        return sum(1 for flag in flags if flag) / len(flags)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["blog_indicator_score"] = self.blog_indicator_score
        return data


@dataclass(frozen=True)
class ScoredPage:
    """A :class:`Page` with its blog-likelihood score and fingerprints.

    ``document`` is the parsed tree kept for the later stages; it is
    ``None`` when the page could not be scored.
    """

    page: Page
    blog_score: float
    metadata: BlogMetadata = field(default_factory=BlogMetadata)
    document: Optional[HtmlNode] = field(default=None, repr=False, compare=False)

    @property
    def url(self) -> str:
        return self.page.url

    @property
    def html(self) -> str:
        return self.page.html


@dataclass(frozen=True)
class ArticleRecord:
    """One harvested article.  ``title`` and ``url`` are always set."""

    title: str
    url: str
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    date: Optional[str] = None
    author: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "title": self.title,
            "url": self.url,
            "excerpt": self.excerpt,
            "imageUrl": self.image_url,
            "date": self.date,
            "author": self.author,
        }


@dataclass(frozen=True)
class BlogExtractionResult:
    """Final pipeline output for one site."""

    has_blog: bool
    blog_url: Optional[str] = None
    articles: tuple[ArticleRecord, ...] = ()
    rss_feeds: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "BlogExtractionResult":
        return cls(has_blog=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase shape consumers of the JSON output expect."""
        return {
            "hasBlog": self.has_blog,
            "blogUrl": self.blog_url,
            "articles": [article.to_dict() for article in self.articles],
            "rssFeeds": list(self.rss_feeds),
        }
