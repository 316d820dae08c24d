"""Centralised settings for the link crawler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.environ.get("LOG_FILE") or None)

    # ------------------------------------------------------------------
    # Renderer (headless Chromium via Playwright)
    # ------------------------------------------------------------------
    headless: bool = field(default_factory=lambda: _env_bool("RENDER_HEADLESS", "true"))
    user_agent: str = field(
        default_factory=lambda: os.environ.get("RENDER_USER_AGENT", _DEFAULT_USER_AGENT)
    )
    viewport_width: int = field(
        default_factory=lambda: int(os.environ.get("RENDER_VIEWPORT_WIDTH", "1280"))
    )
    viewport_height: int = field(
        default_factory=lambda: int(os.environ.get("RENDER_VIEWPORT_HEIGHT", "720"))
    )
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("RENDER_NAVIGATION_TIMEOUT", "90.0"))
    )
    settle_delay: float = field(
        default_factory=lambda: float(os.environ.get("RENDER_SETTLE_DELAY", "5.0"))
    )
    wait_until: str = field(
        default_factory=lambda: os.environ.get("RENDER_WAIT_UNTIL", "networkidle")
    )
    browser_args: list[str] = field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"]
    )

    @property
    def viewport(self) -> dict[str, int]:
        """Viewport in the shape Playwright's ``new_page`` expects."""
        return {"width": self.viewport_width, "height": self.viewport_height}


# Module-level singleton, import this everywhere:
#   from linkcrawler.config import settings
settings = Settings()
