# SPDX-License-Identifier: MIT

import atexit

from timesheettool.repository.configuration import CONFIGURATION_REPO
from timesheettool.repository.project import PROJECT_REPO
from timesheettool.repository.record import RECORD_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    RECORD_REPO.flush()
    PROJECT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
