"""Tests for page scoring and candidate filtering."""

from __future__ import annotations

import pytest

from blogscan.blog.models import BlogMetadata, ScoredPage
from blogscan.blog.patterns import BLOG_SCORE_THRESHOLD, BLOG_SIGNALS, MAX_BLOG_SCORE, fold
from blogscan.blog.scorer import filter_candidates, page_signals, score_page, score_pages
from blogscan.scraper.dom import parse_html
from blogscan.scraper.models import Page

_BLOG_INDEX_HTML = """\
<html>
<head>
  <title>Acme</title>
  <link rel="alternate" type="application/rss+xml" href="/feed">
</head>
<body>
  <article><h2>Alpha</h2><a href="/blog/alpha-release">Alpha</a></article>
  <article><h2>Beta</h2><a href="/blog/beta-release">Beta</a></article>
  <article><h2>Gamma</h2><a href="/blog/gamma-release">Gamma</a></article>
  <article><h2>Delta</h2><a href="/blog/delta-release">Delta</a></article>
  <article><h2>Omega</h2><a href="/blog/omega-release">Omega</a></article>
</body>
</html>
"""

_KITCHEN_SINK_HTML = """\
<html>
<head>
  <title>Company blog</title>
  <meta name="generator" content="WordPress 6.4">
  <link type="application/rss+xml" href="/feed">
  <script type="application/ld+json">{"@type":"Blog"}</script>
</head>
<body class="blog">
  <h1>Latest news</h1>
  <div class="post"><span class="author">A</span></div>
  <div class="post"></div><div class="post"></div><div class="post"></div>
  <article></article><article></article><article></article><article></article>
  <time>Jan 1</time>
  <div class="pagination"></div><div id="comments"></div>
  <div class="tags"></div><div class="share"></div>
</body>
</html>
"""


class TestPageSignals:
    def test_blog_index_signals(self) -> None:
        doc = parse_html(_BLOG_INDEX_HTML)
        meta = BlogMetadata(has_rss_feed=True, has_article_elements=True, has_multiple_articles=True)
        signals = page_signals(doc, "https://ex.com/blog", meta)
        assert signals["url_direct_path"]
        assert not signals["url_subpath"]
        assert not signals["title_keyword"]
        assert signals["many_articles"] and not signals["some_articles"]
        assert signals["rss_feed"]
        assert not signals["pagination"]

    def test_inline_body_date_counts_as_date_markup(self) -> None:
        doc = parse_html("<html><body><p>Published March 3, 2024 by us</p></body></html>")
        assert page_signals(doc, "https://ex.com/x", BlogMetadata())["date_markup"]

    def test_subpath_and_date_url(self) -> None:
        doc = parse_html("<p></p>")
        signals = page_signals(doc, "https://ex.com/category/2023/05/x", BlogMetadata())
        assert signals["url_subpath"] and signals["url_date"]


class TestScorePage:
    def test_blog_index_score(self) -> None:
        scored = score_page(Page(url="https://ex.com/blog", html=_BLOG_INDEX_HTML))
        # url 2.0 + indicator 3/18*3 + many articles 2.0 + rss 2.0
        assert scored.blog_score == pytest.approx(6.5)
        assert scored.metadata.has_rss_feed
        assert scored.document is not None

    def test_plain_page_scores_zero(self) -> None:
        scored = score_page(Page(url="https://ex.com/about", html="<html><body></body></html>"))
        assert scored.blog_score == 0.0
        assert scored.blog_score < BLOG_SCORE_THRESHOLD

    def test_score_is_capped(self) -> None:
        scored = score_page(Page(url="https://ex.com/blog/2023/05/", html=_KITCHEN_SINK_HTML))
        assert scored.blog_score == MAX_BLOG_SCORE

    @pytest.mark.parametrize("page", [Page(url="", html="<p>x</p>"), Page(url="https://ex.com/blog", html="")])
    def test_missing_url_or_html_scores_zero(self, page: Page) -> None:
        scored = score_page(page)
        assert scored.blog_score == 0.0
        assert scored.metadata == BlogMetadata()
        assert scored.document is None

    def test_scoring_failure_is_contained(self, monkeypatch) -> None:
        def boom(*_args):
            raise RuntimeError("parser exploded")

        monkeypatch.setattr("blogscan.blog.scorer.parse_html", boom)
        scored = score_page(Page(url="https://ex.com/blog", html=_BLOG_INDEX_HTML))
        assert scored.blog_score == 0.0
        assert scored.metadata == BlogMetadata()

    def test_score_pages_preserves_order(self) -> None:
        pages = [
            Page(url="https://ex.com/about", html="<p>hi</p>"),
            Page(url="https://ex.com/blog", html=_BLOG_INDEX_HTML),
        ]
        assert [s.url for s in score_pages(pages)] == [p.url for p in pages]


class TestFold:
    def test_fold_weights_booleans_and_fractions(self) -> None:
        signals = {"url_direct_path": True, "metadata_indicator": 0.5, "unknown": True}
        assert fold(signals, BLOG_SIGNALS) == pytest.approx(2.0 + 1.5)


class TestFilterCandidates:
    def _scored(self, url: str, score: float) -> ScoredPage:
        return ScoredPage(page=Page(url=url, html="<p></p>"), blog_score=score)

    def test_threshold_and_descending_order(self) -> None:
        scored = [
            self._scored("https://ex.com/a", 3.0),
            self._scored("https://ex.com/b", 5.0),
            self._scored("https://ex.com/c", 3.0),
            self._scored("https://ex.com/d", 1.0),
            self._scored("https://ex.com/e", 2.5),
        ]
        result = filter_candidates(scored)
        assert [s.url for s in result] == [
            "https://ex.com/b",
            "https://ex.com/a",
            "https://ex.com/c",
            "https://ex.com/e",
        ]

    def test_no_candidates(self) -> None:
        assert filter_candidates([self._scored("https://ex.com/a", 2.49)]) == []
