"""Plain-text rendering of extraction results and page scores for the CLI."""

from __future__ import annotations

from typing import List

from blogscan.blog.models import BlogExtractionResult, ScoredPage
from blogscan.blog.patterns import BLOG_SCORE_THRESHOLD


def render_result(result: BlogExtractionResult) -> str:
    """Render *result* as a short human-readable report."""
    if not result.has_blog:
        return "❌ No blog found."

    lines = [f"📰 Blog: {result.blog_url}"]

    if result.rss_feeds:
        lines.append(f"Feeds ({len(result.rss_feeds)}):")
        lines.extend(f"  - {feed}" for feed in result.rss_feeds)
    else:
        lines.append("Feeds: none")

    lines.append(f"Articles ({len(result.articles)}):")
    for idx, article in enumerate(result.articles, start=1):
        # "2023-05-15 · Jane Doe" when either is known
        meta = " · ".join(part for part in (article.date, article.author) if part)
        suffix = f"  [{meta}]" if meta else ""
        lines.append(f"  {idx:>2}. {article.title}{suffix}")
        lines.append(f"      {article.url}")
    return "\n".join(lines)


def render_scores(scored: List[ScoredPage]) -> str:
    """Render one line per page: candidate marker, score, indicator, URL."""
    if not scored:
        return "No pages."
    lines = []
    for item in scored:
        marker = "✅" if item.blog_score >= BLOG_SCORE_THRESHOLD else "  "
        lines.append(
            f"{marker} {item.blog_score:5.2f}  "
            f"(indicators {item.metadata.blog_indicator_score:.2f})  {item.url}"
        )
    return "\n".join(lines)
