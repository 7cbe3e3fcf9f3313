"""Tests for the blogscan CLI commands."""

import json
import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from blogscan.errors import FetchError
from blogscan.scraper.models import Page
from cli.main import app

runner = CliRunner()

_ARTICLES = "".join(
    f"<article><h2>{name}</h2><a href='/blog/{name.lower()}-post'>{name}</a></article>"
    for name in ("Alpha", "Beta", "Gamma", "Delta", "Omega")
)

_BLOG_HTML = (
    '<html><head><link rel="alternate" type="application/rss+xml" href="/feed"></head>'
    f"<body>{_ARTICLES}</body></html>"
)

_PAGES = [
    {"url": "https://ex.com/about", "html": "<html><body><p>About us</p></body></html>"},
    {"url": "https://ex.com/blog", "html": _BLOG_HTML},
]


@pytest.fixture(autouse=True)
def restore_logger():
    """The commands point loguru at the runner's captured stderr; undo that."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def pages_file(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(json.dumps(_PAGES))
    return path


def test_extract_json(pages_file):
    result = runner.invoke(app, ["extract", str(pages_file), "--log-level", "ERROR"])
    assert result.exit_code == 0

    data = json.loads(result.stdout)
    assert data["hasBlog"] is True
    assert data["blogUrl"] == "https://ex.com/blog"
    assert data["rssFeeds"] == ["https://ex.com/feed"]
    assert data["articles"][0]["url"] == "https://ex.com/blog/alpha-post"
    assert set(data["articles"][0]) == {"title", "url", "excerpt", "imageUrl", "date", "author"}


def test_extract_text(pages_file):
    result = runner.invoke(app, ["extract", str(pages_file), "--text", "--log-level", "ERROR"])
    assert result.exit_code == 0
    assert "📰 Blog: https://ex.com/blog" in result.stdout
    assert "https://ex.com/blog/alpha-post" in result.stdout


def test_extract_no_blog(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(json.dumps(_PAGES[:1]))
    result = runner.invoke(app, ["extract", str(path), "--text", "--log-level", "ERROR"])
    assert result.exit_code == 0
    assert "❌ No blog found." in result.stdout


def test_extract_bad_file(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text("{not json")
    result = runner.invoke(app, ["extract", str(path), "--log-level", "ERROR"])
    assert result.exit_code == 1
    assert "❌" in result.output


def test_extract_verify_feeds(pages_file, monkeypatch):
    probed = []

    def mock_verify(urls):
        probed.extend(urls)
        return []

    monkeypatch.setattr("cli.main.verify_feeds", mock_verify)

    result = runner.invoke(
        app, ["extract", str(pages_file), "--verify-feeds", "--log-level", "ERROR"]
    )
    assert result.exit_code == 0
    assert probed == ["https://ex.com/feed"]
    assert json.loads(result.stdout)["rssFeeds"] == []


def test_extract_skips_verify_by_default(pages_file, monkeypatch):
    monkeypatch.setattr("cli.main.settings.verify_feeds", False)

    def fail_verify(urls):
        raise AssertionError("verify_feeds should not be called")

    monkeypatch.setattr("cli.main.verify_feeds", fail_verify)

    result = runner.invoke(app, ["extract", str(pages_file), "--log-level", "ERROR"])
    assert result.exit_code == 0


def test_score(pages_file):
    result = runner.invoke(app, ["score", str(pages_file), "--log-level", "ERROR"])
    assert result.exit_code == 0

    lines = result.stdout.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("https://ex.com/about")
    assert not lines[0].startswith("✅")
    assert lines[1].startswith("✅")
    assert lines[1].endswith("https://ex.com/blog")


def test_scan_skips_unreachable_pages(monkeypatch):
    def mock_fetch(url):
        if url.endswith("/down"):
            raise FetchError(url, "refused")
        return Page(url=url, html=_BLOG_HTML)

    monkeypatch.setattr("cli.main.fetch_page", mock_fetch)

    result = runner.invoke(
        app,
        ["scan", "https://ex.com/blog", "https://ex.com/down", "--no-verify-feeds", "--log-level", "ERROR"],
    )
    assert result.exit_code == 0
    assert "⚠️ Skipping https://ex.com/down: refused" in result.output
    assert '"hasBlog": true' in result.output


def test_scan_nothing_fetched(monkeypatch):
    def mock_fetch(url):
        raise FetchError(url, "refused")

    monkeypatch.setattr("cli.main.fetch_page", mock_fetch)

    result = runner.invoke(app, ["scan", "https://ex.com/blog", "--log-level", "ERROR"])
    assert result.exit_code == 1
    assert "No pages could be fetched" in result.output
