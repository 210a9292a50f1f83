"""File commands.

Streaming reads, writes, appends and lifecycle operations on files.
"""

from pathlib import Path
from typing import Annotated

import typer

from easyfs.cli.types import handle_errors
from easyfs.filesystem.file import File
from easyfs.utils.formatting import console, format_size, print_info, print_success

app = typer.Typer(
    help="File reading, writing and management.",
    no_args_is_help=True,
)

FileArgument = Annotated[Path, typer.Argument(help="File path.")]


@app.command()
def cat(
    path: FileArgument,
    chunk_size: Annotated[
        int | None,
        typer.Option("--chunk-size", "-c", min=1, help="Read size in bytes."),
    ] = None,
) -> None:
    """Stream a file to standard output chunk by chunk."""
    with handle_errors(), File(str(path)).chunk_reader(chunk_size) as reader:
        for chunk in reader:
            typer.echo(chunk, nl=False)


@app.command()
def lines(
    path: FileArgument,
    number: Annotated[
        bool,
        typer.Option("--number", "-n", help="Prefix each line with its number."),
    ] = False,
) -> None:
    """Print a file line by line."""
    with handle_errors(), File(str(path)).iterate_lines() as reader:
        for line in reader:
            if number:
                typer.echo(f"{reader.line_number:6}  {line}")
            else:
                typer.echo(line)


@app.command()
def write(
    path: FileArgument,
    text: Annotated[str, typer.Argument(help="New content.")],
) -> None:
    """Replace a file's content with TEXT."""
    with handle_errors():
        File(str(path)).write_string(text)
    print_success(f"Wrote {path}")


@app.command()
def append(
    path: FileArgument,
    texts: Annotated[list[str], typer.Argument(help="Strings to append, in order.")],
    new_line: Annotated[
        bool,
        typer.Option("--new-line", "-n", help="Prefix every string with a newline."),
    ] = False,
) -> None:
    """Append one or more strings to a file through a single open handle."""
    with handle_errors(), File(str(path)).append_string_iterative(new_line) as writer:
        for text in texts:
            writer.append(text)
    print_success(f"Appended {len(texts)} string(s) to {path}")


@app.command("copy")
def copy_file(
    source: Annotated[Path, typer.Argument(help="File to copy.")],
    destination: Annotated[Path, typer.Argument(help="Directory that receives the copy.")],
) -> None:
    """Copy a file into a directory, keeping its name."""
    with handle_errors():
        copied = File(str(source)).copy(str(destination))
    print_success(f"Copied {source} -> {copied}")


@app.command()
def touch(
    path: FileArgument,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Truncate an existing file."),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail if the file already exists."),
    ] = False,
) -> None:
    """Create an empty file."""
    file = File(str(path))
    existed = file.exists()
    with handle_errors():
        file.create(overwrite, strict=strict)
    if existed and not overwrite:
        print_info(f"{path} already exists, left untouched.")
    else:
        print_success(f"Created {path}")


@app.command("rm")
def remove_file(path: FileArgument) -> None:
    """Delete a file."""
    with handle_errors():
        File(str(path)).delete()
    print_success(f"Removed {path}")


@app.command()
def size(
    path: FileArgument,
    human: Annotated[
        bool,
        typer.Option("--human", "-H", help="Print a human-readable size."),
    ] = False,
) -> None:
    """Print the size of a file."""
    with handle_errors():
        size_bytes = File(str(path)).size()
    console.print(format_size(size_bytes) if human else str(size_bytes), highlight=False)
