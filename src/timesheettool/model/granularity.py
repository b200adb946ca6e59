# SPDX-License-Identifier: MIT

from enum import Enum


class Granularity(str, Enum):
    AUTO = "auto"
    ALL = "all"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
