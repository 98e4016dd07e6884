"""Command-line interface for the portfolio analyst."""

from .app import app

__all__ = ["app"]
