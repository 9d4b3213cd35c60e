# SPDX-License-Identifier: MIT

from enum import StrEnum
from pathlib import Path
from typing import Optional, TypedDict

import platformdirs
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

APP_NAME = "bujo"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_JOURNAL_PATH: Path = DATA_PATH / "journal.yaml"


class ConfigurationError(Exception):
    pass


class BorderStyle(StrEnum):
    ROUNDED = "rounded"
    PLAIN = "plain"
    THICK = "thick"
    DOUBLE = "double"


class ColorScheme(TypedDict):
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    success: str
    warning: str
    error: str
    muted: str


class Theme(TypedDict):
    name: str
    colors: ColorScheme


class LayoutConfiguration(TypedDict):
    border_style: str  # one of BorderStyle
    compact_mode: bool
    show_line_numbers: bool
    tab_width: int


class JournalConfiguration(TypedDict):
    week_starts_monday: bool
    show_completed_tasks: bool
    auto_migrate_tasks: bool
    date_format: str  # pendulum format tokens
    default_view: str


class LoggingConfiguration(TypedDict):
    level: str
    filename: str


class Configuration(TypedDict):
    theme: Theme
    layout: LayoutConfiguration
    journal: JournalConfiguration
    logging: LoggingConfiguration
    data_path: Optional[str]


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the
    journal repository is used.
    """
    global DATA_PATH, DATA_JOURNAL_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    try:
        config = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    except YAMLError as e:
        raise ConfigurationError(f"Could not parse config file: {e}") from e

    if not isinstance(config, dict):
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        if not isinstance(data_path_setting, str):
            raise ConfigurationError("Invalid config value for data_path: expected str")
        DATA_PATH = Path(data_path_setting).expanduser()
        DATA_JOURNAL_PATH = DATA_PATH / "journal.yaml"
