"""Textual front-end."""

from .app import Border7App, run_textual_app

__all__ = ["Border7App", "run_textual_app"]
