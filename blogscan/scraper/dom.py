"""A small typed wrapper over BeautifulSoup trees.

The extraction heuristics only ever need three things from a node: run a CSS
selector beneath it, read its text, read one attribute.  :class:`HtmlNode`
exposes exactly that (plus a little tree navigation) so the rest of the code
never touches ``bs4`` objects directly.  Selector grammar is whatever
soupsieve accepts, i.e. CSS level 4 minus the jQuery extensions.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, Tag


def _normalise(text: str) -> str:
    """Collapse runs of whitespace and strip the ends."""
    return " ".join(text.split())


class HtmlNode:
    """An element in a parsed HTML document."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    def __repr__(self) -> str:
        return f"HtmlNode(<{self.name}>)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HtmlNode) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    # ------------------------------------------------------------------
    # Basic accessors
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._tag.name or ""

    def text(self) -> str:
        """Return the whitespace-normalised text of this node and its descendants."""
        return _normalise(self._tag.get_text())

    def raw_text(self) -> str:
        """Return the text exactly as it appears in the source."""
        return self._tag.get_text()

    def attr(self, name: str) -> Optional[str]:
        """Return attribute *name*, or ``None`` when absent.

        Multi-valued attributes (``class``, ``rel``) are joined with spaces.
        """
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return value

    # ------------------------------------------------------------------
    # Selector queries
    # ------------------------------------------------------------------
    def find(self, selector: str) -> List["HtmlNode"]:
        """Return every descendant matching *selector*, in document order."""
        return [HtmlNode(tag) for tag in self._tag.select(selector)]

    def find_first(self, selector: str) -> Optional["HtmlNode"]:
        """Return the first descendant matching *selector*, or ``None``."""
        tag = self._tag.select_one(selector)
        return HtmlNode(tag) if tag is not None else None

    def count(self, selector: str) -> int:
        return len(self._tag.select(selector))

    def exists(self, selector: str) -> bool:
        return self._tag.select_one(selector) is not None

    def select_text(self, selector: str) -> str:
        """Concatenate the text of every descendant matching *selector*."""
        return " ".join(node.text() for node in self.find(selector))

    def matches(self, selector: str) -> bool:
        return self._tag.css.match(selector)

    def closest(self, selector: str) -> Optional["HtmlNode"]:
        """Return the nearest ancestor-or-self matching *selector*."""
        tag = self._tag.css.closest(selector)
        return HtmlNode(tag) if tag is not None else None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def parent(self) -> Optional["HtmlNode"]:
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return HtmlNode(parent)

    def descendants(self) -> Iterator["HtmlNode"]:
        """Yield descendant elements (not text nodes) in document order."""
        for child in self._tag.descendants:
            if isinstance(child, Tag):
                yield HtmlNode(child)


def parse_html(html: str) -> HtmlNode:
    """Parse *html* and return the document root.

    ``html.parser`` is lenient: it accepts any string, including fragments
    and badly nested markup, so this only fails on non-string input.
    """
    soup = BeautifulSoup(html, "html.parser")
    return HtmlNode(soup)
