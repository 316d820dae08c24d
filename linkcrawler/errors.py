"""Exceptions raised by the crawl service.

Only request-level failures are exceptions.  Problems with individual anchors
(malformed hrefs, off-site links, excluded files) never raise; the pipeline
simply leaves those anchors out.
"""

from __future__ import annotations


class LinkCrawlerError(Exception):
    """Base class for all link crawler errors."""


class InvalidURLError(LinkCrawlerError):
    """The requested page URL is missing or cannot be parsed."""

    def __init__(self, url: str | None, reason: str = "Invalid URL format") -> None:
        super().__init__(f"{reason}: {url!r}")
        self.url = url
        self.reason = reason


class MissingURLError(InvalidURLError):
    """No URL was supplied at all."""

    def __init__(self, url: str | None = None) -> None:
        super().__init__(url, "URL parameter is required")


class RenderError(LinkCrawlerError):
    """The renderer could not load the page (timeout, network error, crash)."""

    def __init__(self, url: str, details: str) -> None:
        super().__init__(details)
        self.url = url
        self.details = details
