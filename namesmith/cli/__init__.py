"""Command-line interface for namesmith."""

from .app import app

__all__ = ["app"]
