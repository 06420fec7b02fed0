# SPDX-License-Identifier: MIT

from collections.abc import Hashable

from loguru import logger

from schedule_chart.model.activity import Activity
from schedule_chart.model.task import Task
from schedule_chart.time import start_of_day


def remove_malformed_activities[TStatus: Hashable](
    activities: list[Activity[TStatus]],
) -> list[Activity[TStatus]]:
    """
    Drop the parts of the input that cannot be drawn.

    Every task's dates are truncated to the start of their day, tasks ending
    before they start are removed and activities left without tasks are
    removed. Order is preserved and the input is never modified.

    Args:
        activities: Activities as supplied by the caller

    Returns:
        New activities holding only well formed, day-truncated tasks
    """
    sanitized_activities: list[Activity[TStatus]] = []

    for activity in activities:
        tasks: list[Task[TStatus]] = []
        for task in activity["tasks"]:
            start_date = start_of_day(task["start_date"])
            end_date = start_of_day(task["end_date"])
            if start_date > end_date:
                logger.debug(
                    f"Dropping task of activity {activity['id']} ending "
                    f"{end_date.to_date_string()} before it starts "
                    f"{start_date.to_date_string()}"
                )
                continue
            tasks.append(
                {
                    "status": task["status"],
                    "start_date": start_date,
                    "end_date": end_date,
                }
            )

        if len(tasks) == 0:
            logger.debug(f"Dropping activity {activity['id']} without valid tasks")
            continue

        sanitized_activities.append(
            {"id": activity["id"], "title": activity["title"], "tasks": tasks}
        )

    return sanitized_activities
