# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from momentum.model.note import JournalNote
from momentum.model.step import StepEntry
from momentum.model.task import Task
from momentum.service.accumulator import WATER_MAX_ML
from momentum.service.board import HabitBoard
from momentum.view.header import header
from momentum.view.sparkline import sparkline

COMPLETED_TASK_STYLE = "bright_black strike"


def _print_sparkline(console: Console, label: str, data: list[float], up_is_good: bool) -> None:
    line = sparkline(data, up_is_good=up_is_good)
    if line is None:
        console.print(Padding(f"[bold]{label}[/bold]  no entries yet", (0, 1)))
        return
    console.print(Padding(Text.assemble((label, "bold"), "  ", line), (0, 1)))


def tasks_table(tasks: list[Task]) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("#")
    table.add_column("done")
    table.add_column("task")
    table.add_column("habit")

    for position, task in enumerate(tasks, start=1):
        style = COMPLETED_TASK_STYLE if task["done"] else ""
        table.add_row(
            str(position),
            "X" if task["done"] else " ",
            Text(task["text"], style=style),
            task.get("habit", ""),
        )
    return table


def today_view(board: HabitBoard) -> None:
    """Display the day's essentials: tasks, water and trends."""
    header(f"your 30-min minimum, {board.progress}% complete")
    console = Console()

    tasks = board.tasks.value
    if tasks:
        console.print(tasks_table(tasks))
    else:
        console.print(Padding("No tasks yet.", (0, 1)))

    water_view(board, console)
    _print_sparkline(console, "Steps", board.step_series, up_is_good=True)
    _print_sparkline(console, "Weight", board.weights.value, up_is_good=False)


def water_view(board: HabitBoard, console: Console | None = None) -> None:
    console = console or Console()
    water_ml = board.water_ml
    table = Table.grid(padding=(0, 1))
    table.add_row(
        Text("Water (3L)", style="bold"),
        ProgressBar(total=WATER_MAX_ML, completed=water_ml, width=30),
        f"{water_ml:g} ml",
        f"{board.water_percent}%",
    )
    console.print(Padding(table, (0, 1)))
    if water_ml >= WATER_MAX_ML:
        console.print(Padding("[red]Capped at 3L for today.[/red]", (0, 1)))


def tasks_view(tasks: list[Task]) -> None:
    header("tasks")
    console = Console()
    if not tasks:
        console.print(Padding("No tasks yet.", (0, 1)))
        return
    console.print(tasks_table(tasks))


def steps_view(steps: list[StepEntry], series: list[float]) -> None:
    header("steps")
    console = Console()
    table = Table(box=box.SIMPLE)
    table.add_column("date")
    table.add_column("steps", justify="right")
    for entry in steps:
        table.add_row(entry["date"], f"{entry['steps']:g}")
    console.print(table)
    _print_sparkline(console, "Steps", series, up_is_good=True)


def weights_view(weights: list[float], last_logged: str | None) -> None:
    header("weight (kg), one value per week")
    console = Console()
    _print_sparkline(console, "Weight", weights, up_is_good=False)
    if last_logged is not None:
        console.print(Padding(f"Last new week logged on {last_logged}", (0, 1)))


def journal_view(notes: list[JournalNote]) -> None:
    header("journal")
    console = Console()
    if not notes:
        console.print(Padding("No entries yet.", (0, 1)))
        return
    for note in notes:
        console.print(Padding(f"[bright_black]{note['date']}[/bright_black]", (1, 1, 0, 1)))
        console.print(Padding(f"[bold]{note['title']}[/bold]", (0, 1)))
        console.print(Padding(note["body"], (0, 1)))
