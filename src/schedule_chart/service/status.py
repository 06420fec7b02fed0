# SPDX-License-Identifier: MIT

from rich.color import Color, ColorParseError

from schedule_chart.configuration import AppConfiguration, StatusConfiguration
from schedule_chart.model.configuration import Colors, Configuration


def build_configuration(app_config: AppConfiguration) -> Configuration[str]:
    """
    Turn the configured statuses into the chart's status strategy.

    A status counts as completed when its entry sets `completed`. When a span
    mixes statuses, the one with the highest `priority` is drawn; ties go to
    the status met first.

    Raises:
        ValueError: If no status is configured, a status name repeats or a
            color is not a valid rich color
    """
    statuses = app_config["statuses"]
    if len(statuses) == 0:
        raise ValueError("At least one status must be configured")

    by_name: dict[str, StatusConfiguration] = {}
    for status in statuses:
        if status["name"] in by_name:
            raise ValueError(f"Status '{status['name']}' is configured twice")
        for color in (status["primary"], status["secondary"]):
            try:
                Color.parse(color)
            except ColorParseError as e:
                raise ValueError(
                    f"Status '{status['name']}' has an invalid color: {e}"
                ) from e
        by_name[status["name"]] = status

    colors: Colors[str] = {
        name: {"primary": status["primary"], "secondary": status["secondary"]}
        for name, status in by_name.items()
    }
    completed_statuses = {
        name for name, status in by_name.items() if status["completed"]
    }

    def is_completed(status: str) -> bool:
        return status in completed_statuses

    def get_most_relevant_status(statuses: list[str]) -> str:
        return max(statuses, key=lambda status: by_name[status]["priority"])

    return {
        "colors": colors,
        "is_completed": is_completed,
        "get_most_relevant_status": get_most_relevant_status,
    }


def get_unknown_statuses(
    configuration: Configuration[str], statuses: list[str]
) -> list[str]:
    """Return the statuses without configured colors, in first-seen order."""
    unknown: list[str] = []
    for status in statuses:
        if status not in configuration["colors"] and status not in unknown:
            unknown.append(status)
    return unknown
