# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from momentum.service.board import HabitBoard
from momentum.terminal.common import run_board_action
from momentum.terminal.custom_typer import AliasedTyperGroup
from momentum.view.board import tasks_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

VALID_HABITS = ["mind", "body", "mood"]


def _show(board: HabitBoard) -> None:
    tasks_view(board.tasks.value)


@app.command("add, a", no_args_is_help=True)
def add(
    text: str,
    habit: Annotated[
        Optional[str],
        typer.Option("--habit", "-hb", help="mind, body, mood"),
    ] = None,
) -> None:
    """Add a task to the daily list."""
    if habit is not None and habit not in VALID_HABITS:
        typer.echo(f"Invalid habit: {habit}. Valid options: {', '.join(VALID_HABITS)}")
        raise typer.Exit(1)

    def action(board: HabitBoard) -> None:
        board.add_task(text, habit=habit)  # type: ignore[arg-type]
        _show(board)

    run_board_action(action)


@app.command("toggle, d", no_args_is_help=True)
def toggle(position: int) -> None:
    """Mark a task done, or not done again."""

    def action(board: HabitBoard) -> None:
        board.toggle_task(position - 1)
        _show(board)

    run_board_action(action)


@app.command("remove, rm", no_args_is_help=True)
def remove(position: int) -> None:
    """Delete a task from the list."""

    def action(board: HabitBoard) -> None:
        board.remove_task(position - 1)
        _show(board)

    run_board_action(action)


@app.command("clear, cl")
def clear() -> None:
    """Untick every task to start a new day."""

    def action(board: HabitBoard) -> None:
        board.clear_today()
        _show(board)

    run_board_action(action)


@app.command("walk, wk")
def walk() -> None:
    """Add the 20 minute walk task."""

    def action(board: HabitBoard) -> None:
        board.add_task("Walk 20 mins (any pace)")
        _show(board)

    run_board_action(action)


@app.command("list, ls")
def list_tasks() -> None:
    """List the daily tasks."""
    run_board_action(_show)
