"""Tests for the Playwright renderer.

Playwright is *not* driven for real (requires a browser install);
``sync_playwright`` is patched with a mock browser/page chain so the
navigation options, the snapshot and the cleanup path can be checked.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from linkcrawler.config import Settings
from linkcrawler.errors import RenderError
from linkcrawler.scraper.renderer import PlaywrightRenderer


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_RENDERED_HTML = """\
<html><head><title>Static title</title>
<meta name="description" content="Rendered page."></head>
<body><a href="/docs">Docs</a><a href="/logo"><img src="/l.png"></a></body></html>
"""


def _mock_playwright(page: MagicMock):
    """Return ``(sync_playwright_factory, browser)`` wired to *page*."""
    browser = MagicMock()
    browser.new_page.return_value = page
    pw = MagicMock()
    pw.chromium.launch.return_value = browser
    manager = MagicMock()
    manager.__enter__.return_value = pw
    manager.__exit__.return_value = False
    return MagicMock(return_value=manager), browser


@pytest.fixture()
def page() -> MagicMock:
    page = MagicMock()
    page.content.return_value = _RENDERED_HTML
    page.title.return_value = "Live title"
    page.url = "https://example.com/docs-home"
    return page


@pytest.fixture()
def config() -> Settings:
    return Settings(
        headless=True,
        user_agent="TestAgent/1.0",
        viewport_width=800,
        viewport_height=600,
        navigation_timeout=30.0,
        settle_delay=0.5,
        wait_until="networkidle",
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestPlaywrightRenderer:
    def test_returns_snapshot(self, page, config) -> None:
        factory, _ = _mock_playwright(page)
        with patch("playwright.sync_api.sync_playwright", factory):
            snap = PlaywrightRenderer(config).render("https://example.com/")

        assert [a.href for a in snap.anchors] == ["/docs", "/logo"]
        assert snap.anchors[1].is_image_only is True
        assert snap.metadata.title == "Live title"
        assert snap.metadata.description == "Rendered page."
        assert snap.metadata.final_url == "https://example.com/docs-home"

    def test_browser_and_navigation_options(self, page, config) -> None:
        factory, browser = _mock_playwright(page)
        with patch("playwright.sync_api.sync_playwright", factory):
            PlaywrightRenderer(config).render("https://example.com/")

        pw = factory.return_value.__enter__.return_value
        pw.chromium.launch.assert_called_once_with(
            headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"]
        )
        browser.new_page.assert_called_once_with(
            user_agent="TestAgent/1.0", viewport={"width": 800, "height": 600}
        )
        page.set_default_navigation_timeout.assert_called_once_with(30000)
        page.goto.assert_called_once_with(
            "https://example.com/", wait_until="networkidle", timeout=30000
        )
        page.wait_for_timeout.assert_called_once_with(500)

    def test_no_settle_wait_when_disabled(self, page, config) -> None:
        config.settle_delay = 0
        factory, _ = _mock_playwright(page)
        with patch("playwright.sync_api.sync_playwright", factory):
            PlaywrightRenderer(config).render("https://example.com/")

        page.wait_for_timeout.assert_not_called()

    def test_browser_closed_on_success(self, page, config) -> None:
        factory, browser = _mock_playwright(page)
        with patch("playwright.sync_api.sync_playwright", factory):
            PlaywrightRenderer(config).render("https://example.com/")

        browser.close.assert_called_once()

    def test_navigation_timeout_raises_render_error(self, page, config) -> None:
        page.goto.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")
        factory, browser = _mock_playwright(page)
        with patch("playwright.sync_api.sync_playwright", factory):
            with pytest.raises(RenderError) as excinfo:
                PlaywrightRenderer(config).render("https://slow.example.com/")

        assert excinfo.value.url == "https://slow.example.com/"
        assert "Timeout 30000ms exceeded." in excinfo.value.details
        browser.close.assert_called_once()
        page.content.assert_not_called()
