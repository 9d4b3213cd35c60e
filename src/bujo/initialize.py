# SPDX-License-Identifier: MIT

from bujo import configuration
from bujo.logging_setup import configure_logging, get_logger
from bujo.repository.configuration import CONFIGURATION_REPO

logger = get_logger(__name__)


def initialize() -> None:
    """
    Prepare directories, the config file and logging.

    Errors propagate: a session never starts on a broken setup.
    """
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    # Loading writes the defaults on first run
    config = CONFIGURATION_REPO.get_config()

    configure_logging(
        config["logging"]["level"],
        configuration.LOG_PATH / config["logging"]["filename"],
    )
    logger.info(
        "Starting with config %s and data %s",
        configuration.APP_CONFIG_PATH,
        configuration.DATA_JOURNAL_PATH,
    )
