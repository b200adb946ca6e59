import pendulum
import pytest

from timesheettool.parse.relative_date import parse_relative_date

from conftest import utc

BERLIN = pendulum.timezone("Europe/Berlin")


@pytest.fixture
def today() -> pendulum.Date:
    # a Friday
    return pendulum.date(2024, 4, 5)


def test_now_is_start_of_next_day(today):
    assert parse_relative_date("now", pendulum.UTC, today) == utc(2024, 4, 6)


def test_now_is_start_of_next_day_in_other_timezone(today):
    assert parse_relative_date("now", BERLIN, today) == utc(2024, 4, 5, 22)


def test_now_is_case_insensitive(today):
    assert parse_relative_date("  NoW ", pendulum.UTC, today) == utc(2024, 4, 6)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0 day", utc(2024, 4, 5)),
        ("1 day", utc(2024, 4, 5)),
        ("2 day", utc(2024, 4, 4)),
        ("2days", utc(2024, 4, 4)),
        ("10d", utc(2024, 3, 27)),
    ],
)
def test_days(text, expected, today):
    assert parse_relative_date(text, pendulum.UTC, today) == expected


def test_one_week_is_monday_of_current_week(today):
    result = parse_relative_date("1w", pendulum.UTC, today)
    assert result == utc(2024, 4, 1)
    assert result.weekday() == 0


@pytest.mark.parametrize("text", ["3w", "3 wk", "3 wks", "3 weeks", "3 Week"])
def test_weeks(text, today):
    assert parse_relative_date(text, pendulum.UTC, today) == utc(2024, 3, 18)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1m", utc(2024, 4, 1)),
        ("4m", utc(2024, 1, 1)),
        ("5 months", utc(2023, 12, 1)),
        ("2mo", utc(2024, 3, 1)),
    ],
)
def test_months(text, expected, today):
    assert parse_relative_date(text, pendulum.UTC, today) == expected


def test_months_from_end_of_month():
    assert parse_relative_date(
        "2 months", pendulum.UTC, pendulum.date(2024, 3, 31)
    ) == utc(2024, 2, 1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1y", utc(2024, 1, 1)),
        ("5y", utc(2020, 1, 1)),
        ("2 yrs", utc(2023, 1, 1)),
        ("3 years", utc(2022, 1, 1)),
    ],
)
def test_years(text, expected, today):
    assert parse_relative_date(text, pendulum.UTC, today) == expected


def test_midnight_uses_local_timezone(today):
    assert parse_relative_date("1 day", BERLIN, today) == utc(2024, 4, 4, 22)


@pytest.mark.parametrize(
    "text", ["5y 4m", "week", "3", "", "3 fortnights", "-1 day", "1.5 days"]
)
def test_rejects_malformed_input(text, today):
    assert parse_relative_date(text, pendulum.UTC, today) is None


def test_rejects_counts_beyond_the_calendar(today):
    assert parse_relative_date("999999999999 days", pendulum.UTC, today) is None
    assert parse_relative_date("5000 years", pendulum.UTC, today) is None
    assert parse_relative_date("9" * 5000 + " days", pendulum.UTC, today) is None


def test_rejects_midnight_before_the_first_utc_year(today):
    assert parse_relative_date("2024 years", BERLIN, today) is None


def test_rejects_midnight_that_does_not_exist():
    # DST started at midnight in Sao Paulo on 2018-11-04
    sao_paulo = pendulum.timezone("America/Sao_Paulo")
    assert parse_relative_date("1 day", sao_paulo, pendulum.date(2018, 11, 4)) is None
