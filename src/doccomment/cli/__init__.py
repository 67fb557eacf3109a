"""Command-line interface for doccomment."""

from doccomment.cli.app import app

__all__ = ["app"]
