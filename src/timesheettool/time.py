# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Union, cast

import pendulum

TimezoneLike = Union[pendulum.Timezone, pendulum.FixedTimezone]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC").set(microsecond=0)


def get_timezone(name: Optional[str] = None) -> TimezoneLike:
    if name is None:
        return pendulum.local_timezone()
    return pendulum.timezone(name)


def today_local(timezone: TimezoneLike) -> pendulum.Date:
    return pendulum.now(timezone).date()


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    return pendulum.instance(python_value).in_tz("UTC")


def local_datetime_candidates(
    naive: datetime.datetime, timezone: TimezoneLike
) -> list[pendulum.DateTime]:
    """
    Every UTC instant whose wall-clock time in ``timezone`` equals ``naive``.

    Empty when the local time falls into a DST gap or maps outside the
    representable years 1 to 9999. Two instants when it is repeated by a DST
    fall-back, one otherwise. Sorted earliest first.
    """
    candidates: list[pendulum.DateTime] = []
    for fold in (0, 1):
        aware = naive.replace(tzinfo=timezone, fold=fold)
        try:
            utc_value = aware.astimezone(datetime.timezone.utc)
            round_trip = utc_value.astimezone(timezone).replace(tzinfo=None)
        except OverflowError:
            continue
        if round_trip != naive:
            continue
        instant = python_to_pendulum_utc(utc_value)
        if instant not in candidates:
            candidates.append(instant)
    return sorted(candidates)


def earliest_local_datetime(
    naive: datetime.datetime, timezone: TimezoneLike
) -> Optional[pendulum.DateTime]:
    candidates = local_datetime_candidates(naive, timezone)
    if len(candidates) == 0:
        return None
    return candidates[0]


def latest_local_datetime(
    naive: datetime.datetime, timezone: TimezoneLike
) -> Optional[pendulum.DateTime]:
    candidates = local_datetime_candidates(naive, timezone)
    if len(candidates) == 0:
        return None
    return candidates[-1]


def start_of_local_day(
    day: datetime.date, timezone: TimezoneLike
) -> Optional[pendulum.DateTime]:
    return earliest_local_datetime(
        datetime.datetime(day.year, day.month, day.day), timezone
    )


def local_date(value: pendulum.DateTime, timezone: TimezoneLike) -> pendulum.Date:
    return value.in_tz(timezone).date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("UTC")


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_to_display_local_str(
    datetime: pendulum.DateTime, timezone: TimezoneLike
) -> str:
    return datetime.in_tz(timezone).format("YYYY-MM-DD HH:mm:ss")


def datetime_to_display_local_str_optional(
    datetime: Optional[pendulum.DateTime], timezone: TimezoneLike
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_str(datetime, timezone)
