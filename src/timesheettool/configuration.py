# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "timesheettool"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_DATA_PATH = platformdirs.user_data_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = DEFAULT_DATA_PATH
DATA_RECORDS_PATH: Path = DATA_PATH / "records.yaml"
DATA_PROJECTS_PATH: Path = DATA_PATH / "projects.yaml"

DEFAULT_TIME_ROUND_MINUTES = 15
DEFAULT_HOURS_PER_DAY = 8.0


class Configuration(TypedDict):
    data_path: Optional[str]
    time_round_minutes: int
    hours_per_day: float
    timezone: NotRequired[Optional[str]]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "time_round_minutes": DEFAULT_TIME_ROUND_MINUTES,
        "hours_per_day": DEFAULT_HOURS_PER_DAY,
        "timezone": None,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_RECORDS_PATH, DATA_PROJECTS_PATH

    DATA_PATH = data_path
    DATA_RECORDS_PATH = DATA_PATH / "records.yaml"
    DATA_PROJECTS_PATH = DATA_PATH / "projects.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())


def set_config_path(config_path: Path) -> None:
    global APP_CONFIG_PATH

    APP_CONFIG_PATH = config_path
