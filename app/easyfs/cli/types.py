"""Shared types and helpers for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import typer
from rich.markup import escape

from easyfs.errors import BatchOperationError, EasyFSError
from easyfs.utils.formatting import err_console, print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


class EntryKind(str, Enum):
    """Entry kinds accepted by search commands."""

    ANY = "any"
    FILE = "file"
    DIR = "dir"


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn easyfs errors into an error message and exit code 1.

    Raises:
        typer.Exit: If the wrapped block raised an EasyFSError.
    """
    try:
        yield
    except BatchOperationError as e:
        print_error(escape(str(e)))
        for path, error in e.failures:
            err_console.print(f"  [muted]{escape(path)}[/]: {escape(str(error))}")
        raise typer.Exit(code=1) from e
    except EasyFSError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
