"""Scraper package: page rendering & link filtering."""

from linkcrawler.scraper.crawler import crawl_links, validate_page_url
from linkcrawler.scraper.links import build_link_set, normalize_url
from linkcrawler.scraper.models import (
    BaseContext,
    CrawlResult,
    NormalizedLink,
    PageMetadata,
    PageSnapshot,
    RawAnchor,
)
from linkcrawler.scraper.renderer import PlaywrightRenderer, Renderer

__all__ = [
    "crawl_links",
    "validate_page_url",
    "build_link_set",
    "normalize_url",
    "BaseContext",
    "CrawlResult",
    "NormalizedLink",
    "PageMetadata",
    "PageSnapshot",
    "RawAnchor",
    "PlaywrightRenderer",
    "Renderer",
]
