# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timesheettool import configuration
from timesheettool.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()


def use_config_file(config_path: Path) -> None:
    """
    Switch to a configuration file other than the default one.

    A missing file means default settings; it is only written once a setting
    changes.
    """
    logger.debug("Reading configuration at path %s", config_path)
    configuration.set_config_path(config_path)
    configuration.set_data_path(configuration.DEFAULT_DATA_PATH)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    CONFIGURATION_REPO.reset()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
