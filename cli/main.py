"""blogscan CLI: entry-point for running blog extraction from the shell.

Usage:
    blogscan --help
    python cli/main.py --help

Commands:
    extract   → run the pipeline over a JSON page list
    score     → show each page's blog score (debugging the threshold)
    scan      → fetch URLs over HTTP, then run the pipeline
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from blogscan.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import List, Optional

import typer
from loguru import logger

from blogscan.blog.models import BlogExtractionResult
from blogscan.blog.pipeline import extract
from blogscan.blog.scorer import score_pages
from blogscan.config import settings
from blogscan.errors import BlogScanError, FetchError
from blogscan.scraper.fetcher import fetch_page, verify_feeds
from blogscan.scraper.loader import load_pages
from blogscan.scraper.models import Page
from cli.rendering import render_result, render_scores

app = typer.Typer(
    name="blogscan",
    help="Find a site's blog among crawled pages and harvest its articles.",
    no_args_is_help=True,
)


def _configure_logging(level: Optional[str]) -> None:
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper())


def _load_or_exit(path: Path) -> List[Page]:
    try:
        return load_pages(path)
    except BlogScanError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=1)


def _with_verified_feeds(result: BlogExtractionResult) -> BlogExtractionResult:
    if not result.rss_feeds:
        return result
    confirmed = verify_feeds(result.rss_feeds)
    return BlogExtractionResult(
        has_blog=result.has_blog,
        blog_url=result.blog_url,
        articles=result.articles,
        rss_feeds=tuple(confirmed),
    )


def _emit(result: BlogExtractionResult, as_text: bool) -> None:
    if as_text:
        typer.echo(render_result(result))
    else:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("extract")
def extract_cmd(
    pages_file: Path = typer.Argument(..., help="JSON list of {url, html} objects."),
    verify: Optional[bool] = typer.Option(
        None, "--verify-feeds/--no-verify-feeds", help="Probe feed URLs over HTTP."
    ),
    text: bool = typer.Option(False, "--text", help="Human-readable output instead of JSON."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for stderr."),
) -> None:
    """Run blog extraction over a saved page list."""
    _configure_logging(log_level)
    pages = _load_or_exit(pages_file)

    result = extract(pages)
    if (settings.verify_feeds if verify is None else verify) and result.has_blog:
        result = _with_verified_feeds(result)
    _emit(result, text)


@app.command("score")
def score_cmd(
    pages_file: Path = typer.Argument(..., help="JSON list of {url, html} objects."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for stderr."),
) -> None:
    """Show the blog score of every page, in input order."""
    _configure_logging(log_level)
    pages = _load_or_exit(pages_file)
    typer.echo(render_scores(score_pages(pages)))


@app.command("scan")
def scan_cmd(
    urls: List[str] = typer.Argument(..., help="Page URLs of one site."),
    verify: Optional[bool] = typer.Option(
        None, "--verify-feeds/--no-verify-feeds", help="Probe feed URLs over HTTP."
    ),
    text: bool = typer.Option(False, "--text", help="Human-readable output instead of JSON."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for stderr."),
) -> None:
    """Fetch each URL, then run blog extraction over the fetched pages."""
    _configure_logging(log_level)

    pages: List[Page] = []
    for url in urls:
        try:
            pages.append(fetch_page(url))
        except FetchError as exc:
            typer.echo(f"⚠️ Skipping {url}: {exc.reason}", err=True)

    if not pages:
        typer.echo("❌ No pages could be fetched.", err=True)
        raise typer.Exit(code=1)

    result = extract(pages)
    if (settings.verify_feeds if verify is None else verify) and result.has_blog:
        result = _with_verified_feeds(result)
    _emit(result, text)


if __name__ == "__main__":
    app()
