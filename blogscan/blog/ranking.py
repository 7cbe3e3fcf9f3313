"""Deduplicate harvested articles and order them by recency."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from dateutil import parser as date_parser

from blogscan.blog.models import ArticleRecord
from blogscan.blog.patterns import MAX_ARTICLES

# Two defaults that differ in every field; a component the string does not
# supply comes back different between the two parses.
_DEFAULTS = (datetime(1970, 1, 1), datetime(1971, 2, 2))


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a free-form date string into a naive UTC datetime.

    Returns ``None`` for empty or unparseable input, for text with no year in
    it ("3 comments", "5 min read"), and for values that fall outside the
    representable range once converted to UTC.
    """
    if not value:
        return None
    try:
        first, second = (
            date_parser.parse(value, default=default, fuzzy=True) for default in _DEFAULTS
        )
        if first.year != second.year:
            return None
        if first.tzinfo is not None:
            first = first.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError, TypeError):
        return None
    return first


def rank_articles(records: Iterable[ArticleRecord], limit: int = MAX_ARTICLES) -> List[ArticleRecord]:
    """Return at most *limit* unique-URL records, newest first.

    Records with a parseable date come first, newest to oldest.  Records with
    a date string that does not parse follow, in encounter order, then
    records with no date at all.  The first record seen for a URL wins.
    """
    records = list(records)
    dated = [(parse_date(r.date), r) for r in records if r.date]
    parsed = [(when, r) for when, r in dated if when is not None]
    unparsed = [r for when, r in dated if when is None]
    parsed.sort(key=lambda pair: pair[0], reverse=True)

    ordered = [r for _, r in parsed] + unparsed + [r for r in records if not r.date]

    seen: set[str] = set()
    ranked: List[ArticleRecord] = []
    for record in ordered:
        if record.url in seen:
            continue
        seen.add(record.url)
        ranked.append(record)
    return ranked[:limit]
