"""Load crawled page lists from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from blogscan.errors import PageListError
from blogscan.scraper.models import Page


def load_pages(path: str | Path) -> List[Page]:
    """Read a JSON list of ``{"url": ..., "html": ...}`` objects.

    ``content`` is accepted as an alias for ``html`` since that is what the
    crawler writes.

    Raises:
        PageListError: If the file is not valid JSON, not a list, or holds an
            entry without a string ``url`` and ``html``/``content``.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PageListError(f"Cannot read page list {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise PageListError(f"Page list {path} must be a JSON array")

    pages: List[Page] = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise PageListError(f"Entry {idx} in {path} is not an object")
        url = entry.get("url")
        html = entry.get("html", entry.get("content"))
        if not isinstance(url, str) or not isinstance(html, str):
            raise PageListError(f"Entry {idx} in {path} needs string 'url' and 'html'")
        pages.append(Page(url=url, html=html))
    return pages
