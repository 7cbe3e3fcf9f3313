"""blogscan: find a site's blog among crawled pages and harvest its articles."""

from blogscan.blog import ArticleRecord, BlogExtractionResult, extract
from blogscan.scraper.models import Page

__version__ = "0.1.0"

__all__ = ["extract", "Page", "ArticleRecord", "BlogExtractionResult"]
