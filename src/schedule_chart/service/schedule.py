# SPDX-License-Identifier: MIT

from collections.abc import Hashable

import pendulum

from schedule_chart.model.schedule import ScheduleAction, ScheduleCheckpoint
from schedule_chart.model.status import (
    GetMostRelevantStatusFunction,
    IsCompletedFunction,
)
from schedule_chart.model.task import Task, TaskExtended
from schedule_chart.time import difference_in_calendar_days


def calculate_schedule[TStatus: Hashable](
    tasks: list[Task[TStatus]],
    start: pendulum.DateTime,
    is_completed: IsCompletedFunction[TStatus],
    get_most_relevant_status: GetMostRelevantStatusFunction[TStatus],
) -> list[ScheduleAction[TStatus]]:
    """
    Lay out one activity's tasks as spans on a timeline starting at `start`.

    Tasks are ordered by relative start then relative end date and swept once.
    A task joins the current span when it starts on or before the span's
    furthest end day, so tasks sharing a boundary day are drawn as one bar.
    Inside a span, tasks are numbered from 1 in sweep order and grouped into
    checkpoints: completed tasks on the day they end, other tasks on the day
    they start.

    Args:
        tasks: Sanitized tasks of a single activity
        start: First day of the timeline, relative day 1
        is_completed: Tells whether a status counts as completed
        get_most_relevant_status: Picks the status a span is drawn with

    Returns:
        Spans ordered by relative start date, empty when there are no tasks
    """
    extended_tasks: list[TaskExtended[TStatus]] = [
        {
            "index": 0,
            "status": task["status"],
            "start_date": task["start_date"],
            "end_date": task["end_date"],
            "relative_start_date": difference_in_calendar_days(
                task["start_date"], start
            )
            + 1,
            "relative_end_date": difference_in_calendar_days(task["end_date"], start)
            + 1,
        }
        for task in tasks
    ]
    extended_tasks.sort(
        key=lambda task: (task["relative_start_date"], task["relative_end_date"])
    )

    task_spans: list[list[TaskExtended[TStatus]]] = []
    current_task_span: list[TaskExtended[TStatus]] = []
    current_task_span_relative_end_date = 0

    for task in extended_tasks:
        if (
            len(current_task_span) > 0
            and task["relative_start_date"] > current_task_span_relative_end_date
        ):
            task_spans.append(current_task_span)
            current_task_span = []
            current_task_span_relative_end_date = 0

        task["index"] = len(current_task_span) + 1
        current_task_span.append(task)
        current_task_span_relative_end_date = max(
            current_task_span_relative_end_date, task["relative_end_date"]
        )

    if len(current_task_span) > 0:
        task_spans.append(current_task_span)

    return [
        _build_schedule_action(task_span, is_completed, get_most_relevant_status)
        for task_span in task_spans
    ]


def _build_schedule_action[TStatus: Hashable](
    task_span: list[TaskExtended[TStatus]],
    is_completed: IsCompletedFunction[TStatus],
    get_most_relevant_status: GetMostRelevantStatusFunction[TStatus],
) -> ScheduleAction[TStatus]:
    checkpoints: dict[int, ScheduleCheckpoint[TStatus]] = {}

    for task in task_span:
        completed = is_completed(task["status"])
        relative_date = (
            task["relative_end_date"] if completed else task["relative_start_date"]
        )
        checkpoint = checkpoints.setdefault(
            relative_date,
            {"relative_date": relative_date, "active_tasks": [], "completed_tasks": []},
        )
        if completed:
            checkpoint["completed_tasks"].append(task)
        else:
            checkpoint["active_tasks"].append(task)

    return {
        "status": get_most_relevant_status([task["status"] for task in task_span]),
        "relative_start_date": min(task["relative_start_date"] for task in task_span),
        "relative_end_date": max(task["relative_end_date"] for task in task_span),
        "checkpoints": [checkpoints[day] for day in sorted(checkpoints)],
    }
