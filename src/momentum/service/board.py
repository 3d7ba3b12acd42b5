# SPDX-License-Identifier: MIT

import logging
from typing import Any, Callable, Optional, cast

import pendulum

from momentum.model.note import JournalNote
from momentum.model.step import StepEntry
from momentum.model.task import Habit, Task
from momentum.service import accumulator, bounded_log, week
from momentum.service.bounded_log import (
    STEP_HISTORY_CAPACITY,
    WEIGHT_HISTORY_CAPACITY,
    is_finite_number,
)
from momentum.sync.registry import FieldRegistry
from momentum.template.note import get_note_template, get_random_prompt
from momentum.template.task import get_quick_tasks_template, get_task_template
from momentum.time import date_from_str_optional, date_to_str, today_local

logger = logging.getLogger(__name__)

TASKS_KEY = "reset.tasks"
JOURNAL_KEY = "reset.journal"
STEPS_KEY = "reset.steps"
WEIGHTS_KEY = "reset.weights"
WATER_KEY = "reset.water"
WEIGHT_LAST_DATE_KEY = "reset.weightLastDate"

DEFAULT_WEIGHTS = [71.5, 71.1, 70.9]


class HabitValidationError(Exception):
    """Raised when a requested change is rejected before it is applied."""

    pass


def _require_positive_number(value: Any, name: str) -> float:
    if not is_finite_number(value):
        raise HabitValidationError(f"{name} must be a number. Got: {value!r}")
    if value <= 0:
        raise HabitValidationError(f"{name} must be greater than zero. Got: {value}")
    return cast(float, value)


class HabitBoard:
    """
    The day's habit state: tasks, journal, steps, weight and water.

    Each piece of state is one synced field owned by the registry passed in.
    Every operation validates its input first and then writes the next value
    computed by the pure helpers in `momentum.service`.
    """

    def __init__(
        self,
        registry: FieldRegistry,
        today: Callable[[], pendulum.Date] = today_local,
    ) -> None:
        self.registry = registry
        self._today = today

        self.tasks = registry.field(TASKS_KEY, get_quick_tasks_template())
        self.journal = registry.field(JOURNAL_KEY, cast(list[JournalNote], []))
        self.steps = registry.field(STEPS_KEY, cast(list[StepEntry], []))
        self.weights = registry.field(WEIGHTS_KEY, list(DEFAULT_WEIGHTS))
        self.water = registry.field(WATER_KEY, cast(float, 0))
        self.weight_last_date = registry.field(
            WEIGHT_LAST_DATE_KEY, cast(Optional[str], None)
        )

    @property
    def today(self) -> pendulum.Date:
        return self._today()

    async def wait_loaded(self) -> None:
        await self.registry.wait_loaded()

    # Tasks

    @property
    def progress(self) -> int:
        tasks = self.tasks.value
        done = len([task for task in tasks if task["done"]])
        return accumulator.round_half_up(done / max(1, len(tasks)) * 100)

    def add_task(self, text: Optional[str], habit: Optional[Habit] = None) -> Task:
        if text is None or not text.strip():
            raise HabitValidationError("Task text must not be empty.")
        task = get_task_template()
        task["text"] = text.strip()
        if habit is not None:
            task["habit"] = habit
        self.tasks.update(lambda tasks: [*tasks, task])
        return task

    def toggle_task(self, index: int) -> Task:
        self.__check_task_index(index)
        tasks = [dict(task) for task in self.tasks.value]
        tasks[index]["done"] = not tasks[index]["done"]
        self.tasks.set(cast(list[Task], tasks))
        return cast(Task, tasks[index])

    def remove_task(self, index: int) -> Task:
        self.__check_task_index(index)
        removed = self.tasks.value[index]
        self.tasks.update(
            lambda tasks: [task for i, task in enumerate(tasks) if i != index]
        )
        return removed

    def clear_today(self) -> None:
        self.tasks.update(
            lambda tasks: [cast(Task, {**task, "done": False}) for task in tasks]
        )

    def __check_task_index(self, index: int) -> None:
        if not 0 <= index < len(self.tasks.value):
            raise HabitValidationError(f"No task at position {index + 1}.")

    # Journal

    def add_note(
        self,
        body: Optional[str],
        title: Optional[str] = None,
        prompt: Optional[str] = None,
    ) -> JournalNote:
        if body is None or not body.strip():
            raise HabitValidationError("Journal entry must not be empty.")
        note = get_note_template()
        note["date"] = date_to_str(self.today)
        note["title"] = title or prompt or get_random_prompt()
        note["body"] = body.strip()
        self.journal.update(lambda notes: [note, *notes])
        return note

    # Steps

    @property
    def step_series(self) -> list[float]:
        return [entry["steps"] for entry in self.steps.value]

    def log_steps(self, count: Any) -> StepEntry:
        steps = _require_positive_number(count, "Steps")
        entry: StepEntry = {"date": date_to_str(self.today), "steps": steps}
        self.steps.update(
            lambda log: list(
                bounded_log.append(
                    log,
                    entry,
                    STEP_HISTORY_CAPACITY,
                    payload=lambda step_entry: step_entry["steps"],
                )
            )
        )
        return entry

    # Weight

    def log_weight(self, kg: Any) -> None:
        value = _require_positive_number(kg, "Weight")
        today = self.today
        series, last_logged_date = week.upsert(
            self.weights.value,
            self.__weight_last_logged_date(),
            today,
            value,
            WEIGHT_HISTORY_CAPACITY,
        )
        self.weights.set(series)
        if last_logged_date is not None:
            self.weight_last_date.set(date_to_str(last_logged_date))

    def __weight_last_logged_date(self) -> Optional[pendulum.Date]:
        try:
            return date_from_str_optional(self.weight_last_date.value)
        except (ValueError, TypeError):
            logger.warning(
                "Ignoring unreadable %s: %r",
                WEIGHT_LAST_DATE_KEY,
                self.weight_last_date.value,
            )
            return None

    # Water

    @property
    def water_ml(self) -> float:
        value = self.water.value
        return value if is_finite_number(value) else 0

    @property
    def water_percent(self) -> int:
        return accumulator.percent_of_goal(self.water_ml)

    def add_water(self, ml: Any) -> float:
        if not is_finite_number(ml):
            raise HabitValidationError(f"Water must be a number of ml. Got: {ml!r}")
        total = accumulator.add(self.water_ml, ml)
        self.water.set(total)
        return total

    def reset_water(self) -> None:
        self.water.set(0)
