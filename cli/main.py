"""Link crawler CLI: crawl a page from the terminal or run the HTTP API.

Usage:
    python cli/main.py --help
    python cli/main.py crawl https://example.com
    python cli/main.py serve --port 3000
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkcrawler.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from linkcrawler.api.schemas import CrawlResponse
from linkcrawler.config import settings
from linkcrawler.errors import InvalidURLError, RenderError
from linkcrawler.logger import configure
from linkcrawler.scraper.crawler import crawl_links

app = typer.Typer(
    name="linkcrawler",
    help="Render a page and list its same-site links.",
    no_args_is_help=True,
)


@app.command("crawl")
def crawl(
    url: str = typer.Argument(..., help="Page URL to render."),
    indent: int = typer.Option(2, help="JSON indentation (0 for compact)."),
    log_level: str = typer.Option("WARNING", help="Log level for progress messages."),
    log_file: Optional[str] = typer.Option(None, help="Also log to this file (default: $LOG_FILE)."),
) -> None:
    """Render URL and print its internal links as JSON."""
    configure(level=log_level, log_file=log_file or settings.log_file)
    try:
        result = crawl_links(url)
    except InvalidURLError as exc:
        typer.echo(f"[crawl] {exc.reason}: {url!r}", err=True)
        raise typer.Exit(2)
    except RenderError as exc:
        typer.echo(f"[crawl] Failed to crawl page {url!r}: {exc.details}", err=True)
        raise typer.Exit(1)

    payload = CrawlResponse.from_result(result).model_dump(by_alias=True)
    typer.echo(json.dumps(payload, indent=indent or None, ensure_ascii=False))


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: $HOST)."),
    port: Optional[int] = typer.Option(None, help="Port (default: $PORT or 3000)."),
) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn  # noqa: PLC0415

    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"[serve] Server running at http://{bind_host}:{bind_port}")
    uvicorn.run("linkcrawler.api.app:app", host=bind_host, port=bind_port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
