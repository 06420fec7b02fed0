# SPDX-License-Identifier: MIT

from schedule_chart.configuration import AppConfiguration, StatusConfiguration


def get_status_configuration_template() -> list[StatusConfiguration]:
    return [
        {
            "name": "Open",
            "primary": "green",
            "secondary": "dark_green",
            "completed": False,
            "priority": 1,
        },
        {
            "name": "InProgress",
            "primary": "gold1",
            "secondary": "dark_goldenrod",
            "completed": False,
            "priority": 2,
        },
        {
            "name": "Closed",
            "primary": "medium_violet_red",
            "secondary": "purple",
            "completed": True,
            "priority": 0,
        },
    ]


def get_configuration_template() -> AppConfiguration:
    return {
        "show_header": True,
        "left_column_width": 24,
        "log_level": "WARNING",
        "statuses": get_status_configuration_template(),
    }
