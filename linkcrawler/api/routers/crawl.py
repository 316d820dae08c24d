"""Crawl endpoint.

Routes
------
GET /crawl-links?url=https://...    → render the page and list its internal links
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from linkcrawler.api.schemas import CRAWL_USAGE, CrawlResponse
from linkcrawler.errors import InvalidURLError, MissingURLError, RenderError
from linkcrawler.logger import get_logger
from linkcrawler.scraper.crawler import crawl_links, validate_page_url

router = APIRouter()
logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _bad_request(exc: InvalidURLError) -> JSONResponse:
    if isinstance(exc, MissingURLError):
        content = {"error": exc.reason, "usage": CRAWL_USAGE}
    else:
        content = {"error": exc.reason, "providedUrl": exc.url}
    return JSONResponse(status_code=400, content=content)


def _crawl_failed(url: str, details: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Failed to crawl page",
            "details": details,
            "crawledUrl": url,
        },
    )


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("/crawl-links", response_model=CrawlResponse)
def crawl_links_endpoint(request: Request, url: Optional[str] = None) -> Any:
    """Render *url* in a headless browser and return its same-site links.

    Relative hrefs are resolved against *url*; fragments and trailing
    slashes are stripped, off-site links and links to images, documents,
    archives and media files are dropped, and duplicates keep the first
    anchor's text.
    """
    try:
        page_url = validate_page_url(url)
    except InvalidURLError as exc:
        return _bad_request(exc)

    renderer = request.app.state.renderer
    try:
        result = crawl_links(page_url, renderer)
    except RenderError as exc:
        logger.error("Crawl error: %s", exc.details)
        return _crawl_failed(url, exc.details)
    except Exception as exc:
        logger.exception("Crawl error: %s", exc)
        return _crawl_failed(url, str(exc))

    return CrawlResponse.from_result(result)
