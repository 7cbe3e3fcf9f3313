"""Blog detection and article harvesting."""

from blogscan.blog.models import ArticleRecord, BlogExtractionResult, BlogMetadata, ScoredPage
from blogscan.blog.pipeline import extract
from blogscan.blog.urls import is_blog_post_url

__all__ = [
    "extract",
    "is_blog_post_url",
    "ArticleRecord",
    "BlogExtractionResult",
    "BlogMetadata",
    "ScoredPage",
]
