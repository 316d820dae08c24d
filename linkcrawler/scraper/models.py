"""Data models for the link crawler pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List


@dataclass(frozen=True)
class RawAnchor:
    """A single ``<a href>`` element as read from the rendered DOM."""

    href: str
    text: str = ""
    is_image_only: bool = False


@dataclass(frozen=True)
class BaseContext:
    """The page URL used to resolve relative hrefs and decide scope."""

    origin_url: str


@dataclass(frozen=True)
class NormalizedLink:
    """An absolute, canonical in-scope URL plus its cleaned anchor text."""

    url: str
    title: str


@dataclass
class PageMetadata:
    """Basic metadata of the rendered page."""

    title: str = ""
    description: str = ""
    final_url: str = ""


@dataclass
class PageSnapshot:
    """Everything the renderer hands over: anchors in DOM order + metadata."""

    anchors: List[RawAnchor] = field(default_factory=list)
    metadata: PageMetadata = field(default_factory=PageMetadata)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CrawlResult:
    """Outcome of one successful crawl request."""

    crawled_url: str
    page_info: PageMetadata
    links: List[NormalizedLink] = field(default_factory=list)
    crawled_at: datetime = field(default_factory=_utcnow)

    @property
    def total_links(self) -> int:
        return len(self.links)
