# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from momentum import configuration
from momentum.repository.configuration import CONFIGURATION_REPO
from momentum.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("store_url", config["store_url"] or "(local file)")
    table.add_row(
        "store_path", config["store_path"] or str(configuration.DATA_STATE_PATH)
    )
    table.add_row("request_timeout", f"{config['request_timeout']:g}s")
    table.add_row(
        "youtube_api_key", "✓ Set" if config["youtube_api_key"] else "✗ Not set"
    )
    table.add_row("meditation_minutes", str(config["meditation_minutes"]))
    table.add_row("yoga_minutes", str(config["yoga_minutes"]))
    table.add_row("dance_minutes", str(config["dance_minutes"]))
    table.add_row("log_level", config["log_level"])

    console.print(table)
    console.print(f"\n[dim]Config file: {configuration.APP_CONFIG_PATH}[/dim]")


@app.command("set, s", no_args_is_help=True)
def set_config(
    store_url: Annotated[
        Optional[str],
        typer.Option("--store-url", help="base URL of the remote state store"),
    ] = None,
    remove_store_url: Annotated[
        bool, typer.Option("--remove-store-url", help="use the local state file")
    ] = False,
    store_path: Annotated[
        Optional[str],
        typer.Option("--store-path", help="location of the local state file"),
    ] = None,
    remove_store_path: Annotated[bool, typer.Option("--remove-store-path")] = False,
    request_timeout: Annotated[Optional[float], typer.Option("--timeout")] = None,
    youtube_api_key: Annotated[
        Optional[str], typer.Option("--youtube-api-key")
    ] = None,
    remove_youtube_api_key: Annotated[
        bool, typer.Option("--remove-youtube-api-key")
    ] = False,
    meditation_minutes: Annotated[
        Optional[int], typer.Option("--meditation-minutes", min=1)
    ] = None,
    yoga_minutes: Annotated[Optional[int], typer.Option("--yoga-minutes", min=1)] = None,
    dance_minutes: Annotated[
        Optional[int], typer.Option("--dance-minutes", min=1)
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in VALID_LOG_LEVELS:
        typer.echo(
            f"Invalid log level: {log_level}. Valid options: {', '.join(VALID_LOG_LEVELS)}"
        )
        raise typer.Exit(1)
    if request_timeout is not None and request_timeout <= 0:
        typer.echo("Timeout must be greater than zero.")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        store_url=store_url,
        remove_store_url=remove_store_url,
        store_path=store_path,
        remove_store_path=remove_store_path,
        request_timeout=request_timeout,
        youtube_api_key=youtube_api_key,
        remove_youtube_api_key=remove_youtube_api_key,
        meditation_minutes=meditation_minutes,
        yoga_minutes=yoga_minutes,
        dance_minutes=dance_minutes,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()
    typer.echo("Configuration updated.")
