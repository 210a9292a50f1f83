"""CLI commands for easyfs.

This package contains all subcommand implementations.
"""

from easyfs.cli.commands import config, dirs, files, paths

__all__ = ["config", "dirs", "files", "paths"]
