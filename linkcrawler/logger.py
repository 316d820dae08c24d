"""Logging configuration for the link crawler.

Every module logs through a child of the ``linkcrawler`` logger::

    from linkcrawler.logger import get_logger
    logger = get_logger(__name__)

:func:`configure` installs the handlers; the API factory and the CLI call it
once at startup.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "linkcrawler"

_LevelT = Union[int, str]


def _stdout_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)configure the project logger.

    Existing handlers are replaced, so calling this twice (app factory and
    CLI) never duplicates output.

    Args:
        level: Numeric or textual logging level (e.g. ``"DEBUG"``).
        log_file: Optional path to a rotating logfile. ``None`` keeps output
            on stdout only.
        log_format: Format string for :class:`logging.Formatter`.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level.upper() if isinstance(level, str) else level)
    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()
    lg.addHandler(_stdout_handler(log_format))
    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))
    lg.propagate = False
    return lg


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the project logger or one of its children."""
    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


__all__ = ["configure", "get_logger"]
