"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from easyfs.core.theme import get_theme
from easyfs.filesystem.path import FsPath


def _detect_color_system() -> str | None:
    """Return "truecolor" for interactive terminals, None to let Rich decide."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route library logging to stderr through Rich.

    Args:
        verbose: Show DEBUG records.
        quiet: Show only ERROR records.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def entry_kind(entry: FsPath) -> str:
    """Return "symlink", "directory", "file" or "missing" for an entry."""
    if entry.is_symlink():
        return "symlink"
    if entry.is_dir():
        return "directory"
    if entry.is_file():
        return "file"
    return "missing"


def format_entry(entry: FsPath, label: str | None = None) -> str:
    """Format an entry name with the style of its kind."""
    kind = entry_kind(entry)
    text = escape(label if label is not None else entry.path)
    if kind == "directory":
        return f"[directory]{text}/[/]"
    if kind == "missing":
        return f"[muted]{text}[/]"
    return f"[{kind}]{text}[/]"


def format_size(size_bytes: int) -> str:
    """Format a byte count for display (e.g. "1.2 MB")."""
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def create_entry_table(title: str) -> Table:
    """Create a pre-configured table for listing entries.

    Args:
        title: Table title.

    Returns:
        Rich Table with Type, Name and Size columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Type", width=9)
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", style="info", justify="right")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
