# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class AggregateRow(TypedDict):
    period_start: pendulum.Date
    project: str
    seconds: int


class OvertimeDay(TypedDict):
    day: pendulum.Date
    hours: float
    expected_hours: float
    balance: float


class DayTimes(TypedDict):
    day: pendulum.Date
    first_start: pendulum.DateTime
    last_end: Optional[pendulum.DateTime]
    worked_seconds: int
    break_seconds: int
