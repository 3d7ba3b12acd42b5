# SPDX-License-Identifier: MIT

import typer

from momentum.service.board import HabitBoard
from momentum.terminal.common import run_board_action
from momentum.terminal.custom_typer import AliasedTyperGroup
from momentum.view.board import steps_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("log, l", no_args_is_help=True)
def log(count: float) -> None:
    """Log today's steps. Only the last 30 logs are kept."""

    def action(board: HabitBoard) -> None:
        board.log_steps(count)
        steps_view(board.steps.value, board.step_series)

    run_board_action(action)


@app.command("show, sh")
def show() -> None:
    """Show the step history."""
    run_board_action(lambda board: steps_view(board.steps.value, board.step_series))
