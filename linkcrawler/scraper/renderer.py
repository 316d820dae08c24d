"""Headless-browser renderer: loads a URL and returns a :class:`PageSnapshot`."""

from __future__ import annotations

from typing import Optional, Protocol

from linkcrawler.config import Settings, settings as default_settings
from linkcrawler.errors import RenderError
from linkcrawler.logger import get_logger
from linkcrawler.scraper.models import PageSnapshot
from linkcrawler.scraper.snapshot import parse_snapshot

logger = get_logger(__name__)


class Renderer(Protocol):
    """Anything that can turn a URL into a rendered page snapshot."""

    def render(self, url: str) -> PageSnapshot:
        ...


class PlaywrightRenderer:
    """Render pages with a fresh headless Chromium per call.

    Playwright is imported lazily so tests that don't exercise a real browser
    don't need one installed.  The browser is closed on every exit path.
    """

    def __init__(self, config: Optional[Settings] = None) -> None:
        self.config = config or default_settings

    def render(self, url: str) -> PageSnapshot:
        """Navigate to *url*, wait for the network to settle, and snapshot it.

        Raises:
            RenderError: If the browser cannot be launched or navigation
                fails (timeout, DNS/network error, crash).
        """
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415
        from playwright.sync_api import sync_playwright  # noqa: PLC0415

        cfg = self.config
        timeout_ms = int(cfg.navigation_timeout * 1000)

        try:
            with sync_playwright() as pw:
                browser = pw.chromium.launch(headless=cfg.headless, args=cfg.browser_args)
                try:
                    page = browser.new_page(user_agent=cfg.user_agent, viewport=cfg.viewport)
                    page.set_default_navigation_timeout(timeout_ms)
                    page.goto(url, wait_until=cfg.wait_until, timeout=timeout_ms)
                    if cfg.settle_delay > 0:
                        page.wait_for_timeout(int(cfg.settle_delay * 1000))
                    html = page.content()
                    title = page.title()
                    final_url = page.url
                finally:
                    browser.close()
        except PlaywrightError as exc:
            raise RenderError(url, exc.message or str(exc)) from exc

        logger.debug("Rendered %s (final URL %s, %d bytes)", url, final_url, len(html))
        return parse_snapshot(html, final_url, title=title)
