# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from schedule_chart.configuration import AppConfiguration
from schedule_chart.model.configuration import Configuration

# Per-invocation CLI state, set by the global callback
_app_config: ContextVar[Optional[AppConfiguration]] = ContextVar(
    "app_config", default=None
)
_configuration: ContextVar[Optional[Configuration[str]]] = ContextVar(
    "configuration", default=None
)
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_app_config(
    app_config: AppConfiguration, configuration: Configuration[str]
) -> None:
    """Keep the loaded configuration and the status strategy built from it.

    Args:
        app_config: Configuration as read from the configuration file
        configuration: Status colors and strategy functions for the views
    """
    _app_config.set(app_config)
    _configuration.set(configuration)


def get_app_config() -> AppConfiguration:
    app_config = _app_config.get()
    if app_config is None:
        raise RuntimeError("Configuration has not been loaded")
    return app_config


def get_configuration() -> Configuration[str]:
    configuration = _configuration.get()
    if configuration is None:
        raise RuntimeError("Configuration has not been loaded")
    return configuration


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    return _show_header.get()
