# SPDX-License-Identifier: MIT

from momentum.model.task import Task


def get_task_template() -> Task:
    return {
        "text": "",
        "done": False,
    }


def get_quick_tasks_template() -> list[Task]:
    return [
        {"text": "10-min guided meditation", "habit": "mind", "done": False},
        {"text": "7-min mobility/yoga flow", "habit": "body", "done": False},
        {"text": "10-min dance/move break", "habit": "body", "done": False},
        {"text": "Log water (3L target)", "habit": "body", "done": False},
        {"text": "2-min journal check-in", "habit": "mood", "done": False},
    ]
