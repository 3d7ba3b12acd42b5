# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

import pendulum

from momentum.service.bounded_log import truncate
from momentum.time import week_key


def is_same_week(
    first: Optional[pendulum.Date | str], second: pendulum.Date | str
) -> bool:
    if first is None:
        return False
    return week_key(first) == week_key(second)


def upsert(
    series: Sequence[float],
    last_logged_date: Optional[pendulum.Date],
    today: pendulum.Date,
    new_value: float,
    capacity: int,
) -> tuple[list[float], Optional[pendulum.Date]]:
    """
    Record `new_value` for the week `today` falls in.

    - same ISO week as `last_logged_date` and a non-empty series: the last
      value is replaced and `last_logged_date` is kept
    - otherwise: the value is appended and `today` becomes the new
      `last_logged_date`

    Re-logging within a week always overwrites, so a week never holds more
    than one value. The result is truncated to `capacity`.
    """
    next_series = list(series)
    next_last_logged_date = last_logged_date

    if next_series and is_same_week(last_logged_date, today):
        next_series[-1] = new_value
    else:
        next_series.append(new_value)
        next_last_logged_date = today

    return truncate(next_series, capacity), next_last_logged_date
