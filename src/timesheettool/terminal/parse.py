# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

import pendulum
import typer

from timesheettool.parse.date import parse_date
from timesheettool.parse.relative_date import parse_relative_date
from timesheettool.record_id import InvalidRecordIdError, decode_record_id
from timesheettool.repository.configuration import CONFIGURATION_REPO
from timesheettool.time import TimezoneLike, get_timezone, now_utc


class Clock(NamedTuple):
    timezone: TimezoneLike
    now: pendulum.DateTime
    today: pendulum.Date


def sample_clock() -> Clock:
    """Read the wall clock once for the current command."""
    timezone = get_timezone(CONFIGURATION_REPO.get_config().get("timezone"))
    now = now_utc()
    return Clock(timezone, now, now.in_tz(timezone).date())


def parse_datetime_option(
    value: Optional[str], label: str, clock: Clock
) -> Optional[pendulum.DateTime]:
    if value is None:
        return None

    parsed = parse_date(value, clock.timezone, clock.today)
    if parsed is None:
        raise typer.BadParameter(f"could not parse {label} time '{value}'")
    return parsed


def parse_range_option(value: str, label: str, clock: Clock) -> pendulum.DateTime:
    parsed = parse_relative_date(value, clock.timezone, clock.today)
    if parsed is None:
        raise typer.BadParameter(f"could not parse {label} time '{value}'")
    return parsed


def parse_record_id(value: str) -> int:
    try:
        return decode_record_id(value)
    except InvalidRecordIdError as e:
        raise typer.BadParameter(str(e))
