# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import TypedDict

import pendulum
import platformdirs

APP_NAME = "schedule-chart"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

# First day of the week for weekly timelines
WEEK_STARTS_ON = pendulum.WeekDay.MONDAY

# Longest timeline, in days, still drawn with one column per day
DAILY_GRANULARITY_MAX_LENGTH = 7


class StatusConfiguration(TypedDict):
    name: str
    primary: str
    secondary: str
    completed: bool
    priority: int


class AppConfiguration(TypedDict):
    show_header: bool
    left_column_width: int
    log_level: str
    statuses: list[StatusConfiguration]
