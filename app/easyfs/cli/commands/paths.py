"""Path commands.

Inspection and identity-changing operations that apply to any entry.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from easyfs.cli.types import handle_errors
from easyfs.filesystem.path import FsPath
from easyfs.utils.formatting import console, entry_kind, format_size, print_error, print_success

app = typer.Typer(
    help="Inspect, rename, move and chmod paths.",
    no_args_is_help=True,
)

PathArgument = Annotated[Path, typer.Argument(help="File or directory path.")]


@app.command()
def info(path: PathArgument) -> None:
    """Show what is known about a path."""
    entry = FsPath(str(path))

    table = Table(show_header=False, border_style="border")
    table.add_column("Property", style="bold_header")
    table.add_column("Value")

    table.add_row("Path", entry.path)
    with handle_errors():
        table.add_row("Absolute", entry.abs())
    table.add_row("Kind", entry_kind(entry))
    table.add_row("Exists", str(entry.exists()))
    table.add_row("Symlink", str(entry.is_symlink()))
    table.add_row("Portable name", str(entry.is_valid_path()))
    if entry.exists():
        with handle_errors():
            stat = entry.stat()
        table.add_row("Mode", oct(stat.st_mode & 0o7777))
        if entry.is_file():
            table.add_row("Size", format_size(stat.st_size))
            table.add_row("Modified", entry.as_file().mod_time().isoformat())

    console.print(table)


@app.command()
def rename(
    path: PathArgument,
    new_name: Annotated[str, typer.Argument(help="New name within the same directory.")],
) -> None:
    """Rename an entry in place."""
    with handle_errors():
        renamed = FsPath(str(path)).rename(new_name)
    print_success(f"Renamed {path} -> {renamed}")


@app.command()
def move(
    path: PathArgument,
    new_parent: Annotated[Path, typer.Argument(help="Directory to move the entry into.")],
) -> None:
    """Move an entry into another directory."""
    with handle_errors():
        moved = FsPath(str(path)).move(str(new_parent))
    print_success(f"Moved {path} -> {moved}")


@app.command()
def chmod(
    path: PathArgument,
    mode: Annotated[str, typer.Argument(help="Octal permission bits, e.g. 755.")],
) -> None:
    """Change the permission bits of an entry."""
    try:
        bits = int(mode, 8)
    except ValueError:
        print_error(f"Invalid octal mode: {mode}")
        raise typer.Exit(code=1) from None

    with handle_errors():
        FsPath(str(path)).set_perm(bits)
    print_success(f"Set mode {bits:o} on {path}")
