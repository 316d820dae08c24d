"""FastAPI application factory.

Renderer
--------
The page renderer lives on ``app.state.renderer``.  By default each request
launches its own headless Chromium through :class:`PlaywrightRenderer`;
tests swap in a stub.

Routers
-------
    /crawl-links   render a page and list its internal links
    /health        liveness probe
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkcrawler.api.routers import crawl as crawl_router
from linkcrawler.api.routers import health as health_router
from linkcrawler.config import settings
from linkcrawler.logger import configure
from linkcrawler.scraper.renderer import PlaywrightRenderer, Renderer


def create_app(renderer: Optional[Renderer] = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure(level=settings.log_level, log_file=settings.log_file)

    app = FastAPI(
        title="Link Crawler API",
        description=(
            "Renders a single page in a headless browser and returns its "
            "normalized, deduplicated same-site links plus page metadata."
        ),
        version="0.1.0",
    )
    app.state.renderer = renderer or PlaywrightRenderer(settings)

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(crawl_router.router, tags=["crawl"])
    app.include_router(health_router.router, tags=["health"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn linkcrawler.api.app:app --port 3000
app = create_app()
