# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bujo import configuration
from bujo.configuration import BorderStyle, ConfigurationError
from bujo.logging_setup import get_logger
from bujo.template.configuration import (
    get_configuration_template,
    get_predefined_themes,
)

logger = get_logger(__name__)


def _fill_missing(target: dict[str, Any], defaults: dict[str, Any]) -> None:
    for key, default_value in defaults.items():
        if key not in target:
            target[key] = deepcopy(default_value)
        elif isinstance(default_value, dict) and isinstance(target[key], dict):
            _fill_missing(target[key], default_value)


def _check_types(
    target: dict[str, Any], defaults: dict[str, Any], prefix: str = ""
) -> None:
    """Raise ConfigurationError where a value does not have its default's type."""
    for key, default_value in defaults.items():
        path = f"{prefix}{key}"
        value = target[key]
        if isinstance(default_value, dict):
            if not isinstance(value, dict):
                raise ConfigurationError(
                    f"Invalid config value for {path}: expected a mapping"
                )
            _check_types(value, default_value, prefix=f"{path}.")
        elif default_value is None:
            # Optional settings, data_path only
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"Invalid config value for {path}: expected a string"
                )
        elif not isinstance(value, type(default_value)):
            raise ConfigurationError(
                f"Invalid config value for {path}: "
                f"expected {type(default_value).__name__}"
            )


class ConfigurationRepository:
    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path
        self._config: Optional[configuration.Configuration] = None

    @property
    def file_path(self) -> Path:
        if self._file_path is not None:
            return self._file_path
        return configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ConfigurationError("Configuration could not be loaded")
        return self._config

    def __load_data(self) -> None:
        if not self.file_path.is_file():
            # First run: persist the defaults
            self._config = get_configuration_template()
            self.__save_data(self._config)
            return

        try:
            raw_config = load(self.file_path.read_text(encoding="utf-8"), Loader=Loader)
        except OSError as e:
            raise ConfigurationError(f"Could not read config file: {e}") from e
        except YAMLError as e:
            raise ConfigurationError(f"Could not parse config file: {e}") from e

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError("Could not parse config file: not a mapping")

        # Migration: add sections and fields introduced after the file was written
        defaults = cast(dict[str, Any], get_configuration_template())
        _fill_missing(raw_config, defaults)
        _check_types(raw_config, defaults)
        self._config = cast(configuration.Configuration, raw_config)

    def __save_data(self, config: configuration.Configuration) -> None:
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(
                dump(config, Dumper=Dumper, sort_keys=False), encoding="utf-8"
            )
        except OSError as e:
            raise ConfigurationError(f"Could not write config file: {e}") from e

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self, updater: Callable[[configuration.Configuration], None]
    ) -> None:
        """
        Apply updater to a copy of the configuration and persist it.

        The in-memory configuration only changes once the file is written.
        """
        updated = deepcopy(self.config)
        updater(updated)
        self.__save_data(updated)
        self._config = updated
        logger.info("Configuration updated")

    def reset_to_defaults(self) -> None:
        defaults = get_configuration_template()
        self.__save_data(defaults)
        self._config = defaults

    def set_theme(self, theme_name: str) -> None:
        for name, color_scheme in get_predefined_themes():
            if name == theme_name:

                def apply(config: configuration.Configuration) -> None:
                    config["theme"]["name"] = name
                    config["theme"]["colors"] = color_scheme

                self.update_config(apply)
                return

    def cycle_theme(self) -> str:
        names = [name for name, _ in get_predefined_themes()]
        current = self.config["theme"]["name"]
        next_index = (names.index(current) + 1) % len(names) if current in names else 0
        self.set_theme(names[next_index])
        return names[next_index]

    def cycle_border_style(self) -> str:
        styles = [style.value for style in BorderStyle]
        current = self.config["layout"]["border_style"]
        next_index = (
            (styles.index(current) + 1) % len(styles) if current in styles else 0
        )

        def apply(config: configuration.Configuration) -> None:
            config["layout"]["border_style"] = styles[next_index]

        self.update_config(apply)
        return styles[next_index]

    def toggle_compact_mode(self) -> bool:
        compact_mode = not self.config["layout"]["compact_mode"]

        def apply(config: configuration.Configuration) -> None:
            config["layout"]["compact_mode"] = compact_mode

        self.update_config(apply)
        return compact_mode


CONFIGURATION_REPO = ConfigurationRepository()
