"""Crawl service: validate → render → filter links → :class:`CrawlResult`."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from linkcrawler.errors import InvalidURLError, MissingURLError
from linkcrawler.logger import get_logger
from linkcrawler.scraper.links import build_link_set
from linkcrawler.scraper.models import BaseContext, CrawlResult
from linkcrawler.scraper.renderer import PlaywrightRenderer, Renderer

logger = get_logger(__name__)


def validate_page_url(url: Optional[str]) -> str:
    """Return the stripped *url* if it is an absolute http(s) URL.

    Raises:
        InvalidURLError: If *url* is missing, blank, or not parseable.
    """
    if url is None or not url.strip():
        raise MissingURLError(url)
    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
        _ = parts.port  # raises ValueError on a bad port
    except ValueError as exc:
        raise InvalidURLError(url) from exc
    if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
        raise InvalidURLError(url)
    return candidate


def crawl_links(url: str, renderer: Optional[Renderer] = None) -> CrawlResult:
    """Render *url* and return its internal links plus page metadata.

    The requested URL (not the post-redirect final URL) is the base for
    resolving relative hrefs and deciding scope.

    Raises:
        InvalidURLError: Before any rendering, if *url* is unusable.
        RenderError: If the page could not be loaded; no partial result.
    """
    page_url = validate_page_url(url)
    renderer = renderer or PlaywrightRenderer()

    logger.info("Starting crawl: %s", page_url)
    snapshot = renderer.render(page_url)
    links = build_link_set(snapshot.anchors, BaseContext(origin_url=page_url))
    logger.info(
        "Crawled %s: %d anchors, %d internal links",
        page_url,
        len(snapshot.anchors),
        len(links),
    )
    return CrawlResult(crawled_url=page_url, page_info=snapshot.metadata, links=links)
