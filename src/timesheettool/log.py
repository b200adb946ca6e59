# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logging(verbose: int = 0, quiet: bool = False) -> None:
    """
    Route log records to stderr through rich.

    INFO is shown by default and every ``-v`` lowers the threshold one step.
    ``quiet`` silences logging entirely; command output on stdout is unaffected.
    """
    root_logger = logging.getLogger("timesheettool")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if quiet:
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.CRITICAL + 1)
        return

    level = max(logging.INFO - 10 * verbose, logging.NOTSET + 1)
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose > 0,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
