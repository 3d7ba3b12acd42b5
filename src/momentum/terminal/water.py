# SPDX-License-Identifier: MIT

import typer

from momentum.service.board import HabitBoard
from momentum.terminal.common import run_board_action
from momentum.terminal.custom_typer import AliasedTyperGroup
from momentum.view.board import water_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(ml: float) -> None:
    """Add water in ml. The day's total is capped at 3000 ml."""

    def action(board: HabitBoard) -> None:
        board.add_water(ml)
        water_view(board)

    run_board_action(action)


@app.command("reset, r")
def reset() -> None:
    """Start the day's water count again from zero."""

    def action(board: HabitBoard) -> None:
        board.reset_water()
        water_view(board)

    run_board_action(action)


@app.command("show, sh")
def show() -> None:
    """Show today's water."""
    run_board_action(water_view)
