"""Exceptions raised by the parts of blogscan that touch the outside world.

The extraction pipeline itself never raises; these only surface from the
network helpers and from loading page lists off disk.
"""

from __future__ import annotations


class BlogScanError(Exception):
    """Base class for all blogscan errors."""


class FetchError(BlogScanError):
    """A page could not be fetched over HTTP."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class PageListError(BlogScanError):
    """A page-list file is not a JSON list of ``{url, html}`` objects."""
