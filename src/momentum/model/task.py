# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, TypedDict

Habit = Literal["mind", "body", "mood"]


class Task(TypedDict):
    text: str
    habit: NotRequired[Habit]
    done: bool
