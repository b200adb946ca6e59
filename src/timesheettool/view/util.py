# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timesheettool.time import TimezoneLike


def format_duration(seconds: int) -> str:
    """Render seconds as e.g. ``1h 11m 11s``, dropping leading zero units."""
    parts: list[str] = []
    days, seconds = divmod(seconds, 24 * 60 * 60)
    hours, seconds = divmod(seconds, 60 * 60)
    minutes, seconds = divmod(seconds, 60)
    for value, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s")):
        if value > 0 or len(parts) > 0:
            parts.append(f"{value}{unit}")
    return " ".join(parts) if len(parts) > 0 else "0s"


def format_hours(seconds: int) -> str:
    return f"{seconds / 3600:.2f}"


def format_day(day: pendulum.Date) -> str:
    return day.format("ddd D MMM YYYY")


def format_times(
    started_at: pendulum.DateTime,
    ended_at: Optional[pendulum.DateTime],
    timezone: TimezoneLike,
) -> str:
    local_start = started_at.in_tz(timezone)
    rendered = f"{local_start.format('HH:mm:ss')}-"
    if ended_at is None:
        return rendered

    local_end = ended_at.in_tz(timezone)
    rendered += local_end.format("HH:mm:ss")
    day_gap = local_end.date().toordinal() - local_start.date().toordinal()
    if day_gap > 0:
        rendered += f"+{day_gap}"
    return rendered


def format_project(project: Optional[str]) -> str:
    if project is None or project == "":
        return "-"
    return project
