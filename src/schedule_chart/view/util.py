# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import Optional

import pendulum

from schedule_chart.model.schedule import ScheduleAction, ScheduleCheckpoint
from schedule_chart.time import is_same_year

SHORT_TASK_DATE_FORMAT = "MMM Do"
LONG_TASK_DATE_FORMAT = "MMM Do, YYYY"


def format_task_duration(
    start: pendulum.DateTime, end: pendulum.DateTime, task_number: Optional[int]
) -> str:
    """
    Format a task's dates for display, e.g. "Task 5: Jun 27th - Sep 13th, 2021".

    The year is printed once when both dates share it, and a single date is
    printed when the task starts and ends on the same day.
    """
    formatted_range = end.format(LONG_TASK_DATE_FORMAT)

    if start != end:
        start_format = (
            SHORT_TASK_DATE_FORMAT if is_same_year(start, end) else LONG_TASK_DATE_FORMAT
        )
        formatted_range = f"{start.format(start_format)} - {formatted_range}"

    prefix = f"Task {task_number}: " if task_number is not None else ""
    return prefix + formatted_range


def format_checkpoint_tasks[TStatus: Hashable](
    checkpoint: ScheduleCheckpoint[TStatus], single_on_timeline: bool
) -> list[str]:
    """List a checkpoint's tasks, completed first, numbered unless it holds the only task."""
    tasks = checkpoint["completed_tasks"] + checkpoint["active_tasks"]
    show_prefix = not single_on_timeline or len(tasks) > 1
    return [
        format_task_duration(
            task["start_date"], task["end_date"], task["index"] if show_prefix else None
        )
        for task in tasks
    ]


def is_single_active_task[TStatus: Hashable](action: ScheduleAction[TStatus]) -> bool:
    """Check whether a span is one task that has not completed yet."""
    checkpoints = action["checkpoints"]
    return (
        len(checkpoints) == 1
        and len(checkpoints[0]["active_tasks"]) == 1
        and len(checkpoints[0]["completed_tasks"]) == 0
    )
