# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from loguru import logger
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from schedule_chart import configuration
from schedule_chart.template.configuration import get_configuration_template


class ConfigurationRepository:
    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._config_path = config_path
        self._config: Optional[configuration.AppConfiguration] = None

    @property
    def config_path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.AppConfiguration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError(f"No configuration loaded from {self.config_path}")
        return self._config

    def __load_data(self) -> None:
        config_path = self.config_path
        if not config_path.is_file():
            if self._config_path is not None:
                raise ValueError(f"Configuration file {config_path} does not exist")
            logger.debug(f"No configuration at {config_path}, using defaults")
            self._config = get_configuration_template()
            return

        try:
            raw_config = load(config_path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise ValueError(f"Configuration file {config_path} is not valid YAML: {e}") from e
        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ValueError(f"Configuration file {config_path} must hold a mapping")

        logger.debug(f"Loaded configuration from {config_path}")
        self._config = self.__fill_defaults(raw_config)

    def __fill_defaults(
        self, raw_config: dict[str, Any]
    ) -> configuration.AppConfiguration:
        template = get_configuration_template()
        config = cast(dict[str, Any], template) | raw_config

        statuses = config["statuses"]
        if not isinstance(statuses, list):
            raise ValueError("'statuses' must be a list")
        for status in statuses:
            if not isinstance(status, dict) or "name" not in status:
                raise ValueError(f"Status entry {status!r} has no name")
            status["name"] = str(status["name"])
            status.setdefault("primary", "white")
            status.setdefault("secondary", status["primary"])
            status.setdefault("completed", False)
            status.setdefault("priority", 0)

        return cast(configuration.AppConfiguration, config)

    def get_config(self) -> configuration.AppConfiguration:
        return deepcopy(self.config)
