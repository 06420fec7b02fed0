# SPDX-License-Identifier: MIT

from collections.abc import Hashable, Sequence
from typing import Optional

import pendulum

from schedule_chart.model.activity import Activity, ActivityExtended
from schedule_chart.model.task import Task
from schedule_chart.service.sanitize import remove_malformed_activities
from schedule_chart.time import max_datetime


def is_schedule_empty[TStatus: Hashable](
    activities: Sequence[Activity[TStatus] | ActivityExtended[TStatus]],
) -> bool:
    """Check whether there is no task at all to put on a timeline."""
    return not any(len(activity["tasks"]) > 0 for activity in activities)


def get_latest_completion_date[TStatus: Hashable](
    tasks: list[Task[TStatus]],
) -> Optional[pendulum.DateTime]:
    if len(tasks) == 0:
        return None
    return max_datetime(task["end_date"] for task in tasks)


def extend_activities[TStatus: Hashable](
    activities: list[Activity[TStatus]],
) -> list[ActivityExtended[TStatus]]:
    return [
        {
            "id": activity["id"],
            "title": activity["title"],
            "tasks": list(activity["tasks"]),
            "latest_completion_date": get_latest_completion_date(activity["tasks"]),
        }
        for activity in activities
    ]


def prepare_schedule[TStatus: Hashable](
    activities: list[Activity[TStatus]],
) -> list[ActivityExtended[TStatus]]:
    """Sanitize raw activities and annotate them for display."""
    return extend_activities(remove_malformed_activities(activities))
