"""URL helpers: resolution, path shape, and the article-URL predicate."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin, urlsplit

from blogscan.blog.patterns import (
    DATE_PATTERNS,
    DIRECT_PATHS,
    POST_FILE_SUFFIXES,
    SUBPATHS,
    WORDPRESS_PERMALINK,
    WORDPRESS_QUERY,
)

_WEB_SCHEMES = ("http", "https")


def resolve_url(href: Optional[str], base: str) -> Optional[str]:
    """Resolve *href* against *base*.

    Returns ``None`` for empty input, unparseable URLs, and anything that
    does not end up as an ``http(s)`` URL with a host.
    """
    if not href or not href.strip():
        return None
    try:
        absolute = urljoin(base, href.strip())
        parts = urlsplit(absolute)
    except ValueError:
        return None
    if parts.scheme not in _WEB_SCHEMES or not parts.netloc:
        return None
    return absolute


def site_root(url: str) -> Optional[str]:
    """Return ``scheme://host`` for *url*, or ``None`` if it has no host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return f"{parts.scheme}://{parts.netloc}"


def url_path(url: str) -> str:
    """Return the lower-cased path of *url* (``""`` on parse failure)."""
    try:
        return urlsplit(url).path.lower()
    except ValueError:
        return ""


def path_segments(url: str) -> List[str]:
    """Return the non-empty, lower-cased path segments of *url*."""
    return [segment for segment in url_path(url).split("/") if segment]


def has_date_pattern(path: str) -> bool:
    """Return ``True`` if *path* carries a blog-style date."""
    path = path.lower()
    return any(pattern.search(path) for pattern in DATE_PATTERNS)


def is_blog_post_url(url: str) -> bool:
    """Return ``True`` if *url* looks like an individual post rather than
    navigation or a utility page.

    Any one of these is enough: a blog keyword segment, a date in the path,
    a blog sub-path segment, a WordPress ``?p=123`` / ``/p/123`` permalink, a
    ``.html``/``.php`` ending, a ``/blog/x/y`` shape, or a long final slug.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not parts.scheme or not parts.netloc:
        return False

    path = parts.path.lower()
    segments = [segment for segment in path.split("/") if segment]

    if any(segment in DIRECT_PATHS for segment in segments):
        return True
    if has_date_pattern(path):
        return True
    if any(segment in SUBPATHS for segment in segments):
        return True
    if WORDPRESS_QUERY.search(parts.query) or WORDPRESS_PERMALINK.search(path):
        return True
    if path.endswith(POST_FILE_SUFFIXES):
        return True
    if len(segments) >= 3 and segments[0] == "blog":
        return True
    # Slug heuristic: only for nested paths, so a bare /long-landing-page
    # is not mistaken for a post.
    if len(segments) > 1 and len(segments[-1]) > 10:
        return True
    return False


def text_similarity(first: str, second: str) -> float:
    """Word-overlap similarity between two strings, in ``[0, 1]``.

    Counts words of *first* (with repeats) that also occur in *second*,
    divided by the number of distinct words across both.
    """
    if not first or not second:
        return 0.0
    words_a = first.lower().split()
    words_b = second.lower().split()
    if not words_a or not words_b:
        return 0.0
    present = set(words_b)
    matches = sum(1 for word in words_a if word in present)
    return matches / len(set(words_a) | present)
