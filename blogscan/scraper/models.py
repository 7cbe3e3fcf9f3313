"""Data models for the scraper layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """One crawled page: its URL and the raw HTML served for it.

    Identity is the exact URL string; it is never canonicalised here.
    """

    url: str
    html: str
