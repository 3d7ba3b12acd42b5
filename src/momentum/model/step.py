# SPDX-License-Identifier: MIT

from typing import TypedDict


class StepEntry(TypedDict):
    date: str  # YYYY-MM-DD
    steps: int | float
