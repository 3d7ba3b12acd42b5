# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def now_millis() -> int:
    return int(now_utc().timestamp() * 1000)


def date_from_str(date: str) -> pendulum.Date:
    parsed = pendulum.parse(date, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if not isinstance(parsed, pendulum.Date):
        raise ValueError(f"Not a calendar date: {date}")
    return cast(pendulum.Date, parsed)


def date_from_str_optional(date: Optional[str]) -> Optional[pendulum.Date]:
    if date is None:
        return None
    return date_from_str(date)


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def week_key(date: pendulum.Date | str) -> str:
    """
    Identity of the ISO-8601 week a date falls in, e.g. "2025-W33".

    Weeks run Monday to Sunday and belong to the year that owns their
    Thursday, so 2024-12-30 is "2025-W01" and 2021-01-01 is "2020-W53".
    """
    if isinstance(date, str):
        date = date_from_str(date)
    iso_year, iso_week, _ = date.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"


def seconds_to_clock_str(seconds: int) -> str:
    minutes, seconds = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"
