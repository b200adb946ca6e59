# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from timesheettool.model.granularity import Granularity
from timesheettool.model.record import Record
from timesheettool.model.report import AggregateRow, DayTimes, OvertimeDay
from timesheettool.record_id import encode_record_id
from timesheettool.service.aggregate import record_duration
from timesheettool.time import TimezoneLike, local_date
from timesheettool.view.util import (
    format_day,
    format_duration,
    format_hours,
    format_project,
    format_times,
)

PERIOD_COLUMN = {
    Granularity.DAILY: "day",
    Granularity.WEEKLY: "week of",
    Granularity.MONTHLY: "month",
}


def records_view(
    records: list[Record],
    now: pendulum.DateTime,
    timezone: TimezoneLike,
    console: Optional[Console] = None,
) -> None:
    table = Table(box=box.SIMPLE)
    table.add_column("date")
    table.add_column("times")
    table.add_column("duration", justify="right")
    table.add_column("id")
    table.add_column("project")
    table.add_column("task")

    last_day: Optional[pendulum.Date] = None
    for record in records:
        day = local_date(record["started_at"], timezone)
        table.add_row(
            format_day(day) if day != last_day else "",
            format_times(record["started_at"], record["ended_at"], timezone),
            format_duration(record_duration(record, now)),
            encode_record_id(record["id"]),
            format_project(record["project"]),
            record["task"],
        )
        last_day = day

    (console or Console()).print(table)


def aggregate_view(
    rows: list[AggregateRow],
    granularity: Granularity,
    console: Optional[Console] = None,
) -> None:
    table = Table(box=box.SIMPLE, show_footer=True)
    table.add_column(PERIOD_COLUMN[granularity], footer="total")
    table.add_column("project")
    table.add_column(
        "hours",
        justify="right",
        footer=format_hours(sum(row["seconds"] for row in rows)),
    )

    last_period: Optional[pendulum.Date] = None
    for row in rows:
        period = row["period_start"]
        if granularity == Granularity.MONTHLY:
            period_label = period.format("MMMM YYYY")
        else:
            period_label = format_day(period)
        table.add_row(
            period_label if period != last_period else "",
            format_project(row["project"]),
            format_hours(row["seconds"]),
        )
        last_period = period

    (console or Console()).print(table)


def overtime_view(
    overtime_days: list[OvertimeDay], console: Optional[Console] = None
) -> None:
    table = Table(box=box.SIMPLE)
    table.add_column("day")
    table.add_column("worked", justify="right")
    table.add_column("expected", justify="right")
    table.add_column("balance", justify="right")

    for overtime_day in overtime_days:
        balance = overtime_day["balance"]
        balance_color = "green" if balance >= 0 else "red"
        table.add_row(
            format_day(overtime_day["day"]),
            f"{overtime_day['hours']:.2f}",
            f"{overtime_day['expected_hours']:.2f}",
            f"[{balance_color}]{balance:+.2f}[/{balance_color}]",
        )

    (console or Console()).print(table)


def times_view(
    day_times: list[DayTimes],
    timezone: TimezoneLike,
    console: Optional[Console] = None,
) -> None:
    table = Table(box=box.SIMPLE)
    table.add_column("day")
    table.add_column("start")
    table.add_column("end")
    table.add_column("worked", justify="right")
    table.add_column("breaks", justify="right")

    for day in day_times:
        last_end = day["last_end"]
        table.add_row(
            format_day(day["day"]),
            day["first_start"].in_tz(timezone).format("HH:mm"),
            last_end.in_tz(timezone).format("HH:mm") if last_end is not None else "",
            format_duration(day["worked_seconds"]),
            format_duration(day["break_seconds"]),
        )

    (console or Console()).print(table)
