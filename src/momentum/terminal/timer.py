# SPDX-License-Identifier: MIT

import asyncio
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.text import Text

from momentum.configuration import Configuration
from momentum.repository.configuration import CONFIGURATION_REPO
from momentum.service.timer import CountdownTimer
from momentum.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

REFRESH_SECONDS = 0.25

ROUTINE_TITLES = {
    "meditate": "Guided meditation. Try box breathing: in 4, hold 4, out 4, hold 4.",
    "yoga": "Mobility / yoga flow.",
    "dance": "Dance break. Groove basics, sidestep, body roll, light bounce.",
}


def build_timers(config: Configuration) -> dict[str, CountdownTimer]:
    return {
        "meditate": CountdownTimer(config["meditation_minutes"] * 60),
        "yoga": CountdownTimer(config["yoga_minutes"] * 60),
        "dance": CountdownTimer(config["dance_minutes"] * 60),
    }


def _render(timer: CountdownTimer) -> Text:
    state = "running" if timer.running else "paused"
    return Text.assemble((timer.label, "bold"), "  ", (state, "bright_black"))


async def _countdown(timer: CountdownTimer) -> None:
    timer.start()
    with Live(_render(timer), console=Console(), refresh_per_second=4) as live:
        while timer.running:
            await asyncio.sleep(REFRESH_SECONDS)
            live.update(_render(timer))
        live.update(_render(timer))


def _run_routine(routine: str, minutes: Optional[float]) -> None:
    timer = build_timers(CONFIGURATION_REPO.get_config())[routine]
    if minutes is not None:
        timer.reset(round(minutes * 60))

    typer.echo(ROUTINE_TITLES[routine])
    try:
        asyncio.run(_countdown(timer))
    except KeyboardInterrupt:
        timer.pause()
        typer.echo(f"Paused at {timer.label}")
        return
    typer.echo("Done. Momentum > perfection.")


@app.command("meditate, m")
def meditate(
    minutes: Annotated[
        Optional[float], typer.Option("--minutes", "-m", help="5, 10, 15, 20...")
    ] = None,
) -> None:
    """Start a meditation countdown. Ctrl-C pauses."""
    _run_routine("meditate", minutes)


@app.command("yoga, y")
def yoga(
    minutes: Annotated[Optional[float], typer.Option("--minutes", "-m")] = None,
) -> None:
    """Start a yoga flow countdown. Ctrl-C pauses."""
    _run_routine("yoga", minutes)


@app.command("dance, d")
def dance(
    minutes: Annotated[Optional[float], typer.Option("--minutes", "-m")] = None,
) -> None:
    """Start a dance break countdown. Ctrl-C pauses."""
    _run_routine("dance", minutes)
