"""Command-line interface for easyfs."""

from easyfs.cli.main import app

__all__ = ["app"]
