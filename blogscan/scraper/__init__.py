"""Scraper package: page model, HTML tree wrapper, and HTTP helpers."""

from blogscan.scraper.dom import HtmlNode, parse_html
from blogscan.scraper.fetcher import fetch_page, verify_feeds
from blogscan.scraper.loader import load_pages
from blogscan.scraper.models import Page

__all__ = ["Page", "HtmlNode", "parse_html", "fetch_page", "verify_feeds", "load_pages"]
