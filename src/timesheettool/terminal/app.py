# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from timesheettool.initialize import use_config_file
from timesheettool.log import setup_logging
from timesheettool.model.granularity import Granularity
from timesheettool.record_id import encode_record_id
from timesheettool.repository.configuration import CONFIGURATION_REPO
from timesheettool.repository.record import RECORD_REPO
from timesheettool.service.aggregate import (
    aggregate,
    day_times,
    overtime as overtime_days,
    resolve_granularity,
)
from timesheettool.service.record import add_record, complete_last_record
from timesheettool.terminal import configuration
from timesheettool.terminal.completion import complete_project
from timesheettool.terminal.custom_typer import AliasedTyperGroup
from timesheettool.terminal.errors import exit_on_store_error
from timesheettool.terminal.parse import (
    parse_datetime_option,
    parse_range_option,
    parse_record_id,
    sample_clock,
)
from timesheettool.view.records import (
    aggregate_view,
    overtime_view,
    records_view,
    times_view,
)

logger = logging.getLogger(__name__)

TIME_HELP = "valid inputs: [YYYY-MM-DD | today | yesterday | monday..sunday] HH:mm[:ss]"
RANGE_HELP = "valid inputs: now, or a count and unit like 1 day, 2w, 3 months, 1y"

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="timesheettool - track the time you spend on tasks",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase log verbosity"),
    ] = 0,
    quiet: Annotated[
        bool, typer.Option("--quiet", help="Disable logging to stderr")
    ] = False,
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config-file",
            dir_okay=False,
            help="Read settings from this file instead of the default one",
        ),
    ] = None,
) -> None:
    """
    timesheettool - track the time you spend on tasks

    Global options that apply to all commands.
    """
    setup_logging(verbose, quiet)
    if config_file is not None:
        use_config_file(config_file.expanduser())


@app.command("go, start, record", no_args_is_help=True)
@exit_on_store_error
def go(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    task: str,
    start: Annotated[
        Optional[str], typer.Option("--start", "-s", help=TIME_HELP)
    ] = None,
    end: Annotated[Optional[str], typer.Option("--end", "-e", help=TIME_HELP)] = None,
    allow_overlap: Annotated[
        bool,
        typer.Option(
            "--allow-overlap",
            help="Leave the previous record untouched even if it overlaps",
        ),
    ] = False,
) -> None:
    """
    start a new record

    The record starts now unless --start is given and stays open unless --end
    is given. An open or overlapping previous record is ended where this one
    starts, and resumed afterwards if it ran past this record's end.
    """
    clock = sample_clock()
    started_at = parse_datetime_option(start, "start", clock) or clock.now
    ended_at = parse_datetime_option(end, "end", clock)

    record, changes = add_record(task, project, started_at, ended_at, allow_overlap)

    if len(changes) == 2:
        logger.info(
            "Updated previous record for %s to end at %s and start again at %s",
            changes[0]["task"],
            started_at,
            changes[1]["started_at"],
        )
    elif len(changes) == 1:
        logger.info(
            "Updated previous record for %s to end at %s",
            changes[0]["task"],
            started_at,
        )

    if ended_at is None:
        logger.info(
            "Added record %s for %s starting at %s",
            encode_record_id(record["id"]),
            task,
            started_at,
        )
    else:
        logger.info(
            "Added record %s for %s starting at %s and ending at %s",
            encode_record_id(record["id"]),
            task,
            started_at,
            ended_at,
        )


@app.command("stop")
@exit_on_store_error
def stop(
    end: Annotated[Optional[str], typer.Option("--end", "-e", help=TIME_HELP)] = None,
) -> None:
    """
    stop the current record
    """
    clock = sample_clock()
    ended_at = parse_datetime_option(end, "end", clock) or clock.now

    changes = complete_last_record(ended_at)
    if len(changes) == 1:
        logger.info(
            "Updated previous record for %s to end at %s", changes[0]["task"], ended_at
        )
    else:
        logger.warning("No previous record found to be ended at %s", ended_at)


@app.command("ls, list")
def ls(
    since: Annotated[
        str, typer.Option("--since", "-s", help=RANGE_HELP)
    ] = "1 week",
    until: Annotated[str, typer.Option("--until", "-u", help=RANGE_HELP)] = "now",
    granularity: Annotated[
        Granularity,
        typer.Option(
            "--granularity",
            "-g",
            case_sensitive=False,
            help="how to group records; auto picks one from the range length",
        ),
    ] = Granularity.AUTO,
    rounding: Annotated[
        Optional[int],
        typer.Option(
            "--rounding",
            "-r",
            min=0,
            help="round time per project and day up to this many minutes",
        ),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
) -> None:
    """
    list records
    """
    clock = sample_clock()
    start = parse_range_option(since, "since", clock)
    end = parse_range_option(until, "until", clock)
    rounding_minutes = (
        rounding
        if rounding is not None
        else CONFIGURATION_REPO.get_config()["time_round_minutes"]
    )

    records = RECORD_REPO.query_records(start, end)
    if project is not None:
        records = [record for record in records if record["project"] == project]

    if len(records) == 0:
        logger.info("No records found between %s and %s", start, end)
        return

    resolved = resolve_granularity(granularity, start, end)
    if resolved == Granularity.ALL:
        records_view(records, clock.now, clock.timezone)
    else:
        rows = aggregate(records, clock.now, clock.timezone, resolved, rounding_minutes)
        aggregate_view(rows, resolved)


@app.command("edit", no_args_is_help=True)
@exit_on_store_error
def edit(
    record_id: str,
    start: Annotated[
        Optional[str], typer.Option("--start", "-s", help=TIME_HELP)
    ] = None,
    end: Annotated[Optional[str], typer.Option("--end", "-e", help=TIME_HELP)] = None,
    task: Annotated[Optional[str], typer.Option("--task", "-t")] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
) -> None:
    """
    edit an existing record

    Edits are applied as given; neighbouring records are not adjusted.
    """
    clock = sample_clock()
    real_id = parse_record_id(record_id)
    started_at = parse_datetime_option(start, "start", clock)
    ended_at = parse_datetime_option(end, "end", clock)

    record = RECORD_REPO.update_record(real_id, started_at, ended_at, task, project)
    logger.info("Record %s updated", encode_record_id(record["id"]))

    records_view([record], clock.now, clock.timezone)


@app.command("overtime")
def overtime(
    hours: Annotated[
        Optional[float],
        typer.Option("--hours", min=0, help="hours in a conventional work day"),
    ] = None,
    since: Annotated[
        str, typer.Option("--since", "-s", help=RANGE_HELP)
    ] = "1 week",
    rounding: Annotated[
        Optional[int],
        typer.Option(
            "--rounding",
            "-r",
            min=0,
            help="round time per project and day up to this many minutes",
        ),
    ] = None,
) -> None:
    """
    show hours worked per day and the running overtime balance
    """
    clock = sample_clock()
    config = CONFIGURATION_REPO.get_config()
    start = parse_range_option(since, "since", clock)
    end = parse_range_option("now", "until", clock)
    hours_per_day = hours if hours is not None else config["hours_per_day"]
    rounding_minutes = (
        rounding if rounding is not None else config["time_round_minutes"]
    )

    records = RECORD_REPO.query_records(start, end)
    if len(records) == 0:
        logger.info("No records found since %s", start)
        return

    overtime_view(
        overtime_days(
            records, clock.now, clock.timezone, hours_per_day, rounding_minutes
        )
    )


@app.command("times")
def times(
    since: Annotated[
        str, typer.Option("--since", "-s", help=RANGE_HELP)
    ] = "1 week",
    until: Annotated[str, typer.Option("--until", "-u", help=RANGE_HELP)] = "now",
) -> None:
    """
    show when each day started and ended, and how long the breaks were
    """
    clock = sample_clock()
    start = parse_range_option(since, "since", clock)
    end = parse_range_option(until, "until", clock)

    records = RECORD_REPO.query_records(start, end)
    if len(records) == 0:
        logger.info("No records found between %s and %s", start, end)
        return

    times_view(day_times(records, clock.now, clock.timezone), clock.timezone)


def run() -> None:
    app()
