"""Logging setup for the Border 7 command line tools."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["LOG_LEVELS", "parse_level", "setup_logging", "setup_textual_logging"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_level(level: str) -> int:
    """Map a level name onto a ``logging`` constant."""

    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"unknown log level '{level}'")
    return getattr(logging, name)


def setup_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Call once at program start for console commands."""

    logging.basicConfig(
        level=parse_level(level),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )


def setup_textual_logging(level: str = "WARNING") -> None:
    """Route records to the Textual devtools console while the UI owns the terminal."""

    from textual.logging import TextualHandler

    logging.basicConfig(level=parse_level(level), handlers=[TextualHandler()], force=True)
