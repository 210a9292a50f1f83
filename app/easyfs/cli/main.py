"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from easyfs import __version__
from easyfs.cli.commands import config, dirs, files, paths
from easyfs.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="easyfs",
    help="Typed directory and file operations from the command line.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"easyfs version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every filesystem operation.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
) -> None:
    """easyfs - treat paths as typed directories and files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.add_typer(dirs.app, name="dir")
app.add_typer(files.app, name="file")
app.add_typer(paths.app, name="path")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
