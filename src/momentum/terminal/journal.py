# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from momentum.service.board import HabitBoard
from momentum.template.note import get_random_prompt
from momentum.terminal.common import run_board_action
from momentum.terminal.custom_typer import AliasedTyperGroup
from momentum.view.board import journal_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    body: Annotated[Optional[str], typer.Argument()] = None,
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="defaults to the prompt"),
    ] = None,
) -> None:
    """
    Write a journal entry. Without BODY a prompt is shown and an editor opens.
    """
    prompt = get_random_prompt()
    if body is None:
        typer.echo(prompt)
        body = typer.edit("")

    def action(board: HabitBoard) -> None:
        board.add_note(body, title=title, prompt=prompt)
        journal_view(board.journal.value[:1])

    run_board_action(action)


@app.command("prompt, p")
def prompt() -> None:
    """Show a journaling prompt."""
    typer.echo(get_random_prompt())


@app.command("list, ls")
def list_notes(
    limit: Annotated[Optional[int], typer.Option("--limit", "-l")] = None,
) -> None:
    """Show recent entries, newest first."""
    run_board_action(lambda board: journal_view(board.journal.value[:limit]))
