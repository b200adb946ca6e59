# SPDX-License-Identifier: MIT

from functools import wraps
from typing import Any, Callable, TypeVar

import typer
from rich.console import Console

from timesheettool.repository.record import RecordConstraintError, RecordNotFoundError

F = TypeVar("F", bound=Callable[..., Any])

error_console = Console(stderr=True)


def exit_on_store_error(func: F) -> F:
    """Report record store failures and exit with status 1 instead of a traceback."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (RecordNotFoundError, RecordConstraintError) as e:
            error_console.print(f"[red]{e}[/red]")
            raise typer.Exit(code=1)

    return wrapper  # type: ignore[return-value]
