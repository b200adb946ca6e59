# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Optional

import pendulum

from timesheettool.time import TimezoneLike, start_of_local_day

RELATIVE_DATE_PATTERN = re.compile(
    r"""
    ^
    (?P<count>[0-9]+)
    \s*
    (?:
        (?P<days>d(?:ay|ays)?)
        | (?P<weeks>w(?:k|eek|ks|eeks)?)
        | (?P<months>m(?:o|onth|os|onths)?)
        | (?P<years>y(?:r|e|ear|rs|es|ears)?)
    )
    $
    """,
    re.VERBOSE | re.IGNORECASE,
)


def parse_relative_date(
    date: str, timezone: TimezoneLike, today: datetime.date
) -> Optional[pendulum.DateTime]:
    """
    Parse a range boundary such as ``now``, ``1 day``, ``2w``, ``3 months``
    or ``1y`` into the UTC instant of a local midnight.

    Counts include the current period: ``1 week`` is the start of this week,
    ``2 weeks`` the start of last week. ``now`` is the start of tomorrow so
    that the whole of today falls inside a range ending there.
    """
    date = date.strip()
    today = pendulum.date(today.year, today.month, today.day)

    if date.lower() == "now":
        try:
            tomorrow = today.add(days=1)
        except (OverflowError, ValueError):
            return None
        return start_of_local_day(tomorrow, timezone)

    match = RELATIVE_DATE_PATTERN.match(date)
    if match is None:
        return None

    try:
        count = max(int(match.group("count")) - 1, 0)
        if match.group("days") is not None:
            start_date = today.subtract(days=count)
        elif match.group("weeks") is not None:
            week_start = today.subtract(days=today.weekday())
            start_date = week_start.subtract(weeks=count)
        elif match.group("months") is not None:
            start_date = today.replace(day=1).subtract(months=count)
        else:
            start_date = pendulum.date(today.year - count, 1, 1)
    except (OverflowError, ValueError):
        return None

    return start_of_local_day(start_date, timezone)
