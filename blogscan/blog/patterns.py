"""Keyword sets, URL patterns and weight tables for blog detection.

Scores are computed as a fold over the weight tables below: each signal
function yields an activation (booleans count as 0/1, the metadata indicator
is a fraction, the blog-score carry-over is the raw score) and the score is
the sum of ``activation * weight``.  Tuning a heuristic means editing a row
here.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

DIRECT_PATHS = frozenset({
    "blog", "news", "articles", "insights", "posts", "updates",
    "press", "journal", "diary", "digest", "chronicles", "thoughts",
    "editorial", "column", "commentary", "newsletter",
    "publication", "releases", "announcements", "media", "stories",
})

# Ordered copy for substring checks against titles and headings.
DIRECT_KEYWORDS = tuple(sorted(DIRECT_PATHS))

SUBPATHS = frozenset({
    "category", "tag", "author", "archive", "topic",
    "page", "entry", "article", "post", "read",
})

_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

DATE_PATTERNS = (
    re.compile(r"/\d{4}/\d{2}/"),
    re.compile(r"/\d{4}/\d{2}/\d{2}/"),
    re.compile(r"/" + _MONTH + r"(?=[/\-_.\d]|$)"),
    re.compile(r"/\d{4}-(?:0[1-9]|1[0-2])"),
)

WORDPRESS_PERMALINK = re.compile(r"/p/\d+")
WORDPRESS_QUERY = re.compile(r"(?:^|&)p=\d+")
POST_FILE_SUFFIXES = (".html", ".php")

INLINE_DATE_PATTERNS = (
    re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}"),
    re.compile(r"\w+ \d{1,2}, \d{4}"),
)

FEED_PATHS = (
    "/feed", "/rss", "/atom.xml", "/feed.xml", "/rss.xml",
    "/blog/feed", "/news/feed", "/articles/feed", "/index.xml",
)

# ---------------------------------------------------------------------------
# Pipeline constants
# ---------------------------------------------------------------------------

BLOG_SCORE_THRESHOLD = 2.5
MAX_BLOG_SCORE = 10.0
MAX_ARTICLES = 15
FALLBACK_TRIGGER = 3

# ---------------------------------------------------------------------------
# Selectors shared by scoring, metadata detection and index selection
# ---------------------------------------------------------------------------

POST_SELECTOR = ".post, .blog-post, .entry, .blog-entry"
PAGINATION_SELECTOR = ".pagination, .nav-links, .pager, .pages"
INDEX_PAGINATION_SELECTOR = PAGINATION_SELECTOR + ", ul.page-numbers"
RSS_LINK_SELECTOR = 'link[type="application/rss+xml"]'
FEED_LINK_SELECTOR = 'link[type="application/rss+xml"], link[type="application/atom+xml"]'

# ---------------------------------------------------------------------------
# Weight tables
# ---------------------------------------------------------------------------

# Page "blog-ness".  Tiered signals (many_/some_) are mutually exclusive.
BLOG_SIGNALS: tuple[tuple[str, float], ...] = (
    ("url_direct_path", 2.0),
    ("url_subpath", 1.0),
    ("url_date", 1.5),
    ("title_keyword", 1.5),
    ("heading_keyword", 1.0),
    ("metadata_indicator", 3.0),
    ("many_articles", 2.0),
    ("some_articles", 1.0),
    ("many_posts", 1.5),
    ("some_posts", 0.8),
    ("pagination", 1.5),
    ("date_markup", 1.0),
    ("author_markup", 0.8),
    ("comments", 0.8),
    ("tags", 1.0),
    ("social_share", 0.5),
    ("blog_class", 1.5),
    ("cms", 1.5),
    ("rss_feed", 2.0),
    ("schema", 1.5),
)

# Page "index-ness", on its own scale.
INDEX_SIGNALS: tuple[tuple[str, float], ...] = (
    ("path_blog_root", 3.0),
    ("path_blog_paged", 2.0),
    ("path_undated", 0.5),
    ("many_articles", 3.0),
    ("several_articles", 2.0),
    ("few_articles", 0.5),
    ("many_posts", 2.5),
    ("several_posts", 1.5),
    ("few_posts", 0.5),
    ("pagination", 3.0),
    ("category_widgets", 1.5),
    ("archive_widgets", 1.5),
    ("recent_posts_widget", 1.5),
    ("home_with_posts", 1.0),
    ("title_keyword", 1.5),
    ("h1_keyword", 2.0),
    ("had_pagination", 2.0),
    ("had_multiple_articles", 2.0),
    ("had_categories", 1.5),
    ("had_rss_feed", 1.5),
    ("rss_link", 2.0),
    ("blog_score", 0.2),
)


def fold(signals: dict[str, float], table: tuple[tuple[str, float], ...]) -> float:
    """Sum ``activation * weight`` over *table*; missing signals count as 0."""
    return sum(float(signals.get(name, 0.0)) * weight for name, weight in table)


def contains_keyword(text: str) -> bool:
    """Return ``True`` if lower-cased *text* contains any blog keyword."""
    text = text.lower()
    return any(keyword in text for keyword in DIRECT_KEYWORDS)
