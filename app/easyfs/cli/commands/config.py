"""Configuration commands.

Show the active configuration and write a config file with defaults.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from easyfs.core.config import FSConfig, config_to_dict, get_config, save_config
from easyfs.core.paths import get_config_path
from easyfs.errors import ConfigError
from easyfs.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize easyfs configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the active configuration."""
    config = get_config()
    console.print(f"[dim]Config file: {get_config_path()}[/dim]")
    console.print_json(json.dumps(config_to_dict(config)))


@app.command()
def init(
    path: Annotated[
        Path | None,
        typer.Option("--path", "-p", help="Where to write the config file."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file containing the default settings."""
    target = path or get_config_path()
    if target.exists() and not force:
        print_info(f"Config already exists: {target} (use --force to overwrite)")
        return

    try:
        saved = save_config(FSConfig(), target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Config written to {saved}")
