# SPDX-License-Identifier: MIT

import asyncio
import os
from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from momentum.model.video import VideoPage
from momentum.repository.configuration import CONFIGURATION_REPO
from momentum.service.video import VideoSearchClient, VideoSearchError
from momentum.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

API_KEY_ENV = "YT_API_KEY"


async def _search(
    client: VideoSearchClient,
    topic: str,
    level: str,
    query: str,
    page_token: Optional[str],
) -> VideoPage:
    try:
        return await client.search(topic, level, query, page_token)
    finally:
        await client.close()


@app.command("search, s")
def search(
    topic: str,
    level: Annotated[
        str, typer.Option("--level", "-l", help="e.g. beginner, intermediate")
    ] = "",
    query: Annotated[str, typer.Option("--query", "-q")] = "",
    page_token: Annotated[Optional[str], typer.Option("--page-token", "-pt")] = None,
) -> None:
    """Find guided videos for a routine (meditation, yoga, dance...)."""
    config = CONFIGURATION_REPO.get_config()
    api_key = config["youtube_api_key"] or os.environ.get(API_KEY_ENV)
    if not api_key:
        typer.echo(
            f"No video API key configured. Set {API_KEY_ENV} or run "
            "`momentum config set --youtube-api-key ...`"
        )
        raise typer.Exit(1)

    client = VideoSearchClient(api_key, timeout=config["request_timeout"])
    try:
        page = asyncio.run(_search(client, topic, level, query, page_token))
    except VideoSearchError as e:
        typer.echo(f"Video search failed: {e}")
        raise typer.Exit(1)

    table = Table(box=box.SIMPLE)
    table.add_column("title")
    table.add_column("channel")
    table.add_column("duration", justify="right")
    table.add_column("views", justify="right")
    table.add_column("link")
    for item in page["items"]:
        table.add_row(
            item["title"],
            item["channel"],
            item["duration"],
            f"{item['views']:,}",
            f"https://www.youtube.com/watch?v={item['id']}",
        )

    console = Console()
    console.print(table)
    if page["next_page_token"]:
        console.print(f"More: --page-token {page['next_page_token']}")
