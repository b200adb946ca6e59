# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Optional

import pendulum

from timesheettool.time import TimezoneLike, latest_local_datetime

WEEKDAYS = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]

DATE_PATTERN = re.compile(
    r"""
    ^
    (?:
        (?:
            (?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})
            \s*T?\s*
        ) | (?:
            (?P<relative>yesterday|today|monday|tuesday|wednesday|thursday|friday|saturday|sunday)
            \s*
        )
    )?
    (?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})(?::(?P<second>[0-9]{2}))?
    $
    """,
    re.VERBOSE | re.IGNORECASE,
)


def parse_date(
    date: str, timezone: TimezoneLike, today: datetime.date
) -> Optional[pendulum.DateTime]:
    """
    Parse an absolute point in time such as ``2024-01-05 09:30``,
    ``yesterday 17:00``, ``tuesday 08:15:30`` or ``12:00``.

    The date part defaults to ``today``. Weekday names refer to the most recent
    strictly prior occurrence of that day; naming today's weekday is rejected
    since it could mean either today or a week ago.

    Returns the instant in UTC, or None if the text cannot be parsed or names a
    local time that does not exist. Repeated local times resolve to the later
    instant.
    """
    match = DATE_PATTERN.match(date.strip())
    if match is None:
        return None

    if match.group("year") is not None:
        year = int(match.group("year"))
        month = int(match.group("month"))
        day = int(match.group("day"))
    else:
        relative_day = parse_relative_day(match.group("relative"), today)
        if relative_day is None:
            return None
        year, month, day = relative_day.year, relative_day.month, relative_day.day

    second = match.group("second")
    try:
        naive = datetime.datetime(
            year,
            month,
            day,
            int(match.group("hour")),
            int(match.group("minute")),
            int(second) if second is not None else 0,
        )
    except ValueError:
        return None

    return latest_local_datetime(naive, timezone)


def parse_relative_day(
    relation: Optional[str], today: datetime.date
) -> Optional[datetime.date]:
    if relation is None:
        return today

    relation = relation.lower()
    if relation == "today":
        return today
    if relation == "yesterday":
        try:
            return today - datetime.timedelta(days=1)
        except OverflowError:
            return None
    return find_last_weekday(today, WEEKDAYS.index(relation))


def find_last_weekday(today: datetime.date, weekday: int) -> Optional[datetime.date]:
    days_since = (today.weekday() - weekday) % 7
    # don't allow "monday" on a monday, it's ambiguous between today and last week
    if days_since == 0:
        return None
    try:
        return today - datetime.timedelta(days=days_since)
    except OverflowError:
        return None
