"""Response schemas shared by the HTTP API and the CLI.

Field names go over the wire in camelCase (``crawledUrl``,
``internalLinks``, ...); the Python side stays snake_case.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from linkcrawler.scraper.models import CrawlResult

CRAWL_USAGE = "GET /crawl-links?url=https://example.com"


def isoformat_utc(moment: datetime) -> str:
    """``2024-05-01T12:00:00.000Z`` style timestamp."""
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LinkOut(_CamelModel):
    url: str
    title: str


class PageInfoOut(_CamelModel):
    title: str
    description: str
    url: str


class CrawlResponse(_CamelModel):
    success: bool = True
    crawled_url: str
    page_info: PageInfoOut
    total_internal_links: int
    internal_links: List[LinkOut]
    crawled_at: str

    @classmethod
    def from_result(cls, result: CrawlResult) -> "CrawlResponse":
        meta = result.page_info
        return cls(
            crawled_url=result.crawled_url,
            page_info=PageInfoOut(
                title=meta.title, description=meta.description, url=meta.final_url
            ),
            total_internal_links=result.total_links,
            internal_links=[LinkOut(url=link.url, title=link.title) for link in result.links],
            crawled_at=isoformat_utc(result.crawled_at),
        )


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: str
