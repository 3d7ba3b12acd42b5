# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from momentum.logger import configure_logging
from momentum.repository.configuration import CONFIGURATION_REPO
from momentum.terminal import (
    configuration,
    journal,
    steps,
    task,
    timer,
    video,
    water,
    weight,
)
from momentum.terminal.common import run_board_action
from momentum.terminal.custom_typer import OrderedAliasedTyperGroup
from momentum.view import state as view_state
from momentum.view.board import today_view

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Momentum - Mind, Body, Mood. The tiny daily system.",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t")
app.add_typer(water.app, name="water, wa")
app.add_typer(steps.app, name="steps, s")
app.add_typer(weight.app, name="weight, w")
app.add_typer(journal.app, name="journal, j")
app.add_typer(timer.app, name="timer, ti")
app.add_typer(video.app, name="video, vi")
app.add_typer(configuration.app, name="config, c")


@app.command("today, td")
def today() -> None:
    """Show today's tasks, water and trends."""
    run_board_action(today_view)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-vb", help="Log store reads and writes"),
    ] = False,
) -> None:
    """
    Momentum - Mind, Body, Mood

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    configure_logging("DEBUG" if verbose else CONFIGURATION_REPO.get_config()["log_level"])


def run() -> None:
    app()
