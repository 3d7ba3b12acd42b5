# SPDX-License-Identifier: MIT

import typer

from momentum.service.board import HabitBoard
from momentum.terminal.common import run_board_action
from momentum.terminal.custom_typer import AliasedTyperGroup
from momentum.view.board import weights_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _show(board: HabitBoard) -> None:
    weights_view(board.weights.value, board.weight_last_date.value)


@app.command("log, l", no_args_is_help=True)
def log(kg: float) -> None:
    """
    Log your weight in kg.

    Logging again in the same week replaces that week's value.
    """

    def action(board: HabitBoard) -> None:
        board.log_weight(kg)
        _show(board)

    run_board_action(action)


@app.command("show, sh")
def show() -> None:
    """Show the weekly weight trend."""
    run_board_action(_show)
