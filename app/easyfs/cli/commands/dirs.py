"""Directory commands.

Listing, snapshots, searches and lifecycle operations on directories.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from easyfs.cli.display import build_tree, create_listing_table
from easyfs.cli.types import EntryKind, OutputFormat, handle_errors
from easyfs.core.config import get_config
from easyfs.filesystem.directory import Directory
from easyfs.filesystem.path import FsPath
from easyfs.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Directory listing, search and management.",
    no_args_is_help=True,
)

DirArgument = Annotated[Path, typer.Argument(help="Directory path.")]


@app.command("ls")
def list_dir(
    path: DirArgument = Path("."),
    only_files: Annotated[
        bool,
        typer.Option("--files", help="List files only."),
    ] = False,
    only_dirs: Annotated[
        bool,
        typer.Option("--dirs", help="List subdirectories only."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List the immediate children of a directory."""
    directory = Directory(str(path))
    with handle_errors():
        entries: list[FsPath]
        if only_files:
            entries = list(directory.files())
        elif only_dirs:
            entries = list(directory.dirs())
        else:
            entries = directory.all()

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([e.name for e in entries]))
        return

    if not entries:
        print_info(f"{directory} is empty.")
        return
    console.print(create_listing_table(str(directory), entries))


@app.command()
def tree(
    path: DirArgument = Path("."),
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Show a snapshot of the directory tree."""
    directory = Directory(str(path))
    if not directory.is_dir():
        print_error(f"Not a directory: {directory}")
        raise typer.Exit(code=1)

    structure = directory.get_tree()
    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(structure.to_dict()))
        return

    console.print(build_tree(directory.name, structure))
    console.print(f"\n[dim]{structure.file_count} files[/dim]")


@app.command()
def find(
    pattern: Annotated[str, typer.Argument(help="Glob pattern matched against full paths.")],
    path: DirArgument = Path("."),
    recursive: Annotated[
        bool,
        typer.Option("--recursive/--no-recursive", help="Search subdirectories."),
    ] = True,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=0, help="Maximum number of results."),
    ] = None,
    kind: Annotated[
        EntryKind,
        typer.Option("--type", "-t", help="Restrict results by kind.", case_sensitive=False),
    ] = EntryKind.ANY,
) -> None:
    """Find entries whose path matches a glob pattern."""
    directory = Directory(str(path))
    quantity = get_config().search_quantity if limit is None else limit

    with handle_errors():
        results: list[FsPath]
        if kind == EntryKind.FILE:
            results = list(directory.find_file(pattern, recursive, quantity))
        elif kind == EntryKind.DIR:
            results = list(directory.find_dir(pattern, recursive, quantity))
        else:
            results = directory.find(pattern, recursive, quantity)

    for entry in results:
        console.print(entry.path, markup=False, highlight=False, soft_wrap=True)
    console.print(f"[dim]{len(results)} match(es)[/dim]")


@app.command()
def mkdir(path: DirArgument) -> None:
    """Create a directory and any missing parents."""
    with handle_errors():
        Directory(str(path)).create_if_not_exist()
    print_success(f"Directory ready: {path}")


@app.command("copy")
def copy_dir(
    source: Annotated[Path, typer.Argument(help="Directory to copy.")],
    destination: Annotated[Path, typer.Argument(help="Directory that receives the contents.")],
) -> None:
    """Copy a directory tree into a destination directory."""
    with handle_errors():
        Directory(str(source)).copy(str(destination))
    print_success(f"Copied {source} -> {destination}")


@app.command()
def clear(
    path: DirArgument,
    force: Annotated[
        bool,
        typer.Option("--force", help="Remove non-empty subdirectories too."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete everything inside a directory, keeping the directory."""
    directory = Directory(str(path))
    if not yes:
        confirmed = typer.confirm(f"Delete all contents of {directory}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    with handle_errors():
        directory.clear(force)
    print_success(f"Cleared {directory}")


@app.command("rm")
def remove_dir(
    path: DirArgument,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Remove contents too."),
    ] = False,
) -> None:
    """Delete a directory."""
    with handle_errors():
        Directory(str(path)).delete(recursive)
    print_success(f"Removed {path}")
