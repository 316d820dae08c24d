"""Tests for the CLI entry-point (crawl / serve)."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

from typer.testing import CliRunner

from cli.main import app
from linkcrawler.errors import RenderError
from linkcrawler.logger import configure
from linkcrawler.scraper.models import CrawlResult, NormalizedLink, PageMetadata

runner = CliRunner()


def _result(url: str) -> CrawlResult:
    return CrawlResult(
        crawled_url=url,
        page_info=PageMetadata(title="T", description="D", final_url=url),
        links=[NormalizedLink(url="https://site.com/a", title="A")],
    )


def test_crawl_prints_json(monkeypatch):
    monkeypatch.setattr("cli.main.crawl_links", _result)

    result = runner.invoke(app, ["crawl", "https://site.com", "--indent", "0"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["crawledUrl"] == "https://site.com"
    assert data["totalInternalLinks"] == 1
    assert data["internalLinks"] == [{"url": "https://site.com/a", "title": "A"}]
    assert data["pageInfo"]["url"] == "https://site.com"


def test_crawl_invalid_url_exits_2():
    result = runner.invoke(app, ["crawl", "not a url"])
    assert result.exit_code == 2
    assert "Invalid URL format" in result.output


def test_crawl_render_error_exits_1(monkeypatch):
    def _fail(url):
        raise RenderError(url, "net::ERR_CONNECTION_REFUSED")

    monkeypatch.setattr("cli.main.crawl_links", _fail)

    result = runner.invoke(app, ["crawl", "https://site.com"])
    assert result.exit_code == 1
    assert "ERR_CONNECTION_REFUSED" in result.output


def test_serve_runs_uvicorn():
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "8080"])

    assert result.exit_code == 0
    mock_run.assert_called_once_with("linkcrawler.api.app:app", host="0.0.0.0", port=8080)


def test_crawl_log_file_option(monkeypatch, tmp_path):
    monkeypatch.setattr("cli.main.crawl_links", _result)
    log_path = tmp_path / "cli.log"

    result = runner.invoke(
        app, ["crawl", "https://site.com", "--log-level", "INFO", "--log-file", str(log_path)]
    )
    assert result.exit_code == 0
    handlers = logging.getLogger("linkcrawler").handlers
    assert any(getattr(h, "baseFilename", None) == str(log_path) for h in handlers)
    configure(level="INFO")
