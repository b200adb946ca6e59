# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timesheettool.model.granularity import Granularity
from timesheettool.model.record import Record
from timesheettool.model.report import AggregateRow, DayTimes, OvertimeDay
from timesheettool.time import TimezoneLike, local_date

SECONDS_PER_HOUR = 60 * 60


def record_end(record: Record, now: pendulum.DateTime) -> pendulum.DateTime:
    return record["ended_at"] if record["ended_at"] is not None else now


def record_duration(record: Record, now: pendulum.DateTime) -> int:
    """Duration in whole seconds, counting open records up to ``now``."""
    return max(int((record_end(record, now) - record["started_at"]).total_seconds()), 0)


def round_to_next(value: int, unit: int) -> int:
    if unit <= 0:
        return value
    remainder = value % unit
    if remainder == 0:
        return value
    return value + unit - remainder


def daily_project_seconds(
    records: list[Record],
    now: pendulum.DateTime,
    timezone: TimezoneLike,
    rounding_minutes: int,
) -> dict[pendulum.Date, dict[str, int]]:
    """
    Sum record durations per local day and project, then round each
    (day, project) bucket up to the next multiple of ``rounding_minutes``.

    Records are assigned to the local day they started on.
    """
    unit = rounding_minutes * 60
    raw: dict[pendulum.Date, dict[str, int]] = {}
    for record in records:
        day = local_date(record["started_at"], timezone)
        project = record["project"] or ""
        projects = raw.setdefault(day, {})
        projects[project] = projects.get(project, 0) + record_duration(record, now)

    return {
        day: {
            project: round_to_next(seconds, unit)
            for project, seconds in sorted(raw[day].items())
        }
        for day in sorted(raw)
    }


def period_start(day: pendulum.Date, granularity: Granularity) -> pendulum.Date:
    if granularity == Granularity.WEEKLY:
        return day.subtract(days=day.weekday())
    if granularity == Granularity.MONTHLY:
        return day.replace(day=1)
    return day


def aggregate(
    records: list[Record],
    now: pendulum.DateTime,
    timezone: TimezoneLike,
    granularity: Granularity,
    rounding_minutes: int,
) -> list[AggregateRow]:
    if granularity in (Granularity.AUTO, Granularity.ALL):
        raise ValueError(f"cannot aggregate records with granularity {granularity.value}")

    totals: dict[tuple[pendulum.Date, str], int] = {}
    daily = daily_project_seconds(records, now, timezone, rounding_minutes)
    for day, projects in daily.items():
        period = period_start(day, granularity)
        for project, seconds in projects.items():
            totals[(period, project)] = totals.get((period, project), 0) + seconds

    return [
        {"period_start": period, "project": project, "seconds": seconds}
        for (period, project), seconds in sorted(totals.items())
    ]


def resolve_granularity(
    granularity: Granularity,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
) -> Granularity:
    if granularity != Granularity.AUTO:
        return granularity

    # TODO: derive this from the unit the user asked for ("2 weeks" → daily)
    # rather than from the length of the range
    length = end - start
    if length <= pendulum.duration(days=6):
        return Granularity.ALL
    if length <= pendulum.duration(weeks=4):
        return Granularity.DAILY
    if length <= pendulum.duration(days=60):
        return Granularity.WEEKLY
    return Granularity.MONTHLY


def expected_hours_for_day(day: pendulum.Date, hours_per_day: float) -> float:
    # Saturday and Sunday
    if day.weekday() >= 5:
        return 0.0
    return hours_per_day


def overtime(
    records: list[Record],
    now: pendulum.DateTime,
    timezone: TimezoneLike,
    hours_per_day: float,
    rounding_minutes: int,
) -> list[OvertimeDay]:
    """
    Hours worked per day against the expected hours, with a running balance
    carried from one day to the next in chronological order.
    """
    overtime_days: list[OvertimeDay] = []
    balance = 0.0
    daily = daily_project_seconds(records, now, timezone, rounding_minutes)
    for day, projects in daily.items():
        hours = sum(projects.values()) / SECONDS_PER_HOUR
        expected_hours = expected_hours_for_day(day, hours_per_day)
        balance += hours - expected_hours
        overtime_days.append(
            {
                "day": day,
                "hours": hours,
                "expected_hours": expected_hours,
                "balance": balance,
            }
        )
    return overtime_days


def day_times(
    records: list[Record],
    now: pendulum.DateTime,
    timezone: TimezoneLike,
) -> list[DayTimes]:
    """
    First start, last end, time worked and time spent on breaks per local day.

    Overlapping records are merged, so worked time plus breaks spans exactly
    from the first start to the last end.
    """
    by_day: dict[pendulum.Date, list[Record]] = {}
    for record in records:
        by_day.setdefault(local_date(record["started_at"], timezone), []).append(record)

    times: list[DayTimes] = []
    for day in sorted(by_day):
        day_records = sorted(by_day[day], key=lambda record: record["started_at"])
        worked_seconds = 0
        break_seconds = 0
        covered_until: Optional[pendulum.DateTime] = None
        for record in day_records:
            end = record_end(record, now)
            if covered_until is None:
                worked_seconds += record_duration(record, now)
                covered_until = max(end, record["started_at"])
                continue

            if record["started_at"] > covered_until:
                break_seconds += int(
                    (record["started_at"] - covered_until).total_seconds()
                )
            if end > covered_until:
                worked_seconds += int(
                    (end - max(record["started_at"], covered_until)).total_seconds()
                )
                covered_until = end

        last_end: Optional[pendulum.DateTime] = covered_until
        if any(record["ended_at"] is None for record in day_records):
            last_end = None

        times.append(
            {
                "day": day,
                "first_start": day_records[0]["started_at"],
                "last_end": last_end,
                "worked_seconds": worked_seconds,
                "break_seconds": break_seconds,
            }
        )
    return times
