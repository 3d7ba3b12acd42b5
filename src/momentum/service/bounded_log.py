# SPDX-License-Identifier: MIT

import math
from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")

STEP_HISTORY_CAPACITY = 30
WEIGHT_HISTORY_CAPACITY = 60


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def truncate(log: Sequence[T], capacity: int) -> list[T]:
    """Keep only the newest `capacity` entries, oldest dropped first."""
    if capacity <= 0:
        return []
    return list(log[-capacity:])


def append(
    log: Sequence[T],
    entry: T,
    capacity: int,
    payload: Callable[[T], Any] = lambda entry: entry,
) -> Sequence[T]:
    """
    Append `entry` to a copy of `log` and keep the newest `capacity` entries.

    The input sequence is never mutated. When the numeric payload of the
    entry (the entry itself unless `payload` extracts it) is missing or not a
    finite number the input is returned unchanged.
    """
    try:
        value = payload(entry)
    except (LookupError, TypeError):
        return log
    if not is_finite_number(value):
        return log
    return truncate([*log, entry], capacity)
