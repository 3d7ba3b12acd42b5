# SPDX-License-Identifier: MIT

from typing import Callable, TypeVar

import typer

from momentum.repository.configuration import CONFIGURATION_REPO
from momentum.service.board import HabitBoard, HabitValidationError
from momentum.session import run_with_board

T = TypeVar("T")


def run_board_action(action: Callable[[HabitBoard], T]) -> T:
    """Run `action` against a loaded board; rejected input exits with status 1."""
    config = CONFIGURATION_REPO.get_config()
    try:
        return run_with_board(config, action)
    except HabitValidationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
