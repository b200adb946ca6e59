# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timesheettool import configuration
from timesheettool.repository.configuration import CONFIGURATION_REPO
from timesheettool.terminal.custom_typer import AliasedTyperGroup
from timesheettool.time import get_timezone

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("time_round_minutes", str(config["time_round_minutes"]))
    table.add_row("hours_per_day", str(config["hours_per_day"]))
    table.add_row("timezone", config.get("timezone") or "local")
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table())


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for the record files (takes effect on the next run)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    time_round_minutes: Annotated[
        Optional[int],
        typer.Option(
            "--time-round-minutes",
            min=0,
            help="Default rounding unit for ls and overtime",
        ),
    ] = None,
    hours_per_day: Annotated[
        Optional[float],
        typer.Option("--hours-per-day", min=0, help="Expected hours per work day"),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", help="IANA timezone name, e.g. Europe/Berlin"),
    ] = None,
    remove_timezone: Annotated[
        bool,
        typer.Option("--remove-timezone", help="Use the system timezone"),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    if timezone is not None:
        try:
            get_timezone(timezone)
        except (ValueError, KeyError):
            raise typer.BadParameter(f"unknown timezone '{timezone}'")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        time_round_minutes=time_round_minutes,
        hours_per_day=hours_per_day,
        timezone=timezone,
        remove_timezone=remove_timezone,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table("Updated Configuration"))
