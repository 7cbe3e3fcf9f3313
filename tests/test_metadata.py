"""Tests for blog fingerprint detection."""

from __future__ import annotations

from dataclasses import fields

import pytest

from blogscan.blog.metadata import detect_blog_metadata
from blogscan.blog.models import BlogMetadata
from blogscan.scraper.dom import parse_html

_WORDPRESS_HTML = """\
<html>
<head>
  <meta name="generator" content="WordPress 6.4">
  <link rel="alternate" type="application/rss+xml" href="/feed/">
  <script type="application/ld+json">{"@context":"https://schema.org","@type":"Blog"}</script>
</head>
<body class="blog">
  <article><h2>One</h2><span class="author">Ann</span><time>May 1</time></article>
  <article><h2>Two</h2></article>
  <nav class="nav-links"><a href="/page/2">Next</a></nav>
  <aside class="sidebar"><div class="categories">News</div></aside>
</body>
</html>
"""


class TestDetectBlogMetadata:
    def test_wordpress_blog_index(self) -> None:
        meta = detect_blog_metadata(parse_html(_WORDPRESS_HTML), "https://ex.com/blog")
        assert meta.is_wordpress
        assert meta.is_known_cms
        assert meta.has_rss_feed
        assert meta.has_blog_schema
        assert not meta.has_article_schema
        assert meta.has_article_elements and meta.has_multiple_articles
        assert meta.has_pagination
        assert meta.has_authors
        assert meta.has_date_elements
        assert meta.has_sidebar
        assert meta.has_categories
        assert meta.has_blog_class
        assert not meta.has_date_in_url

    def test_wp_content_asset_marks_wordpress(self) -> None:
        html = '<html><head><link rel="stylesheet" href="/wp-content/themes/x.css"></head></html>'
        assert detect_blog_metadata(parse_html(html), "https://ex.com/").is_wordpress

    def test_ghost_and_drupal_generators(self) -> None:
        ghost = '<meta name="generator" content="Ghost 5.0">'
        drupal = '<html><body class="drupal"></body></html>'
        assert detect_blog_metadata(parse_html(ghost), "https://ex.com/").is_ghost
        assert detect_blog_metadata(parse_html(drupal), "https://ex.com/").is_drupal

    def test_schema_check_is_substring_only(self) -> None:
        spaced = '<script type="application/ld+json">{"@type": "Article"}</script>'
        compact = '<script type="application/ld+json">{"@type":"Article"}</script>'
        assert not detect_blog_metadata(parse_html(spaced), "https://ex.com/").has_article_schema
        assert detect_blog_metadata(parse_html(compact), "https://ex.com/").has_article_schema

    def test_date_in_url(self) -> None:
        meta = detect_blog_metadata(parse_html("<p></p>"), "https://ex.com/2023/05/hello")
        assert meta.has_date_in_url

    def test_empty_page_has_no_indicators(self) -> None:
        meta = detect_blog_metadata(parse_html("<html><body></body></html>"), "https://ex.com/about")
        assert meta == BlogMetadata()
        assert meta.blog_indicator_score == 0.0


class TestBlogIndicatorScore:
    def test_fraction_of_true_fields(self) -> None:
        total = len(fields(BlogMetadata))
        meta = BlogMetadata(is_wordpress=True, has_rss_feed=True)
        assert meta.blog_indicator_score == pytest.approx(2 / total)

    def test_all_true_is_one(self) -> None:
        meta = BlogMetadata(**{f.name: True for f in fields(BlogMetadata)})
        assert meta.blog_indicator_score == 1.0

    def test_to_dict_includes_score(self) -> None:
        data = BlogMetadata(has_comments=True).to_dict()
        assert data["has_comments"] is True
        assert 0 < data["blog_indicator_score"] < 1
