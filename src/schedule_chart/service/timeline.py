# SPDX-License-Identifier: MIT

from collections.abc import Hashable, Sequence
from typing import Optional

import pendulum
from loguru import logger

from schedule_chart.configuration import DAILY_GRANULARITY_MAX_LENGTH, WEEK_STARTS_ON
from schedule_chart.model.activity import Activity, ActivityExtended
from schedule_chart.model.timeline import TimelineGranularity, TimelineSettings
from schedule_chart.time import (
    difference_in_calendar_days,
    difference_in_calendar_weeks,
    end_of_week,
    max_datetime,
    min_datetime,
    start_of_day,
    start_of_week,
)


class EmptyScheduleError(ValueError):
    """Raised when timeline settings are requested for a schedule with no tasks."""


def calculate_timeline_settings[TStatus: Hashable](
    activities: Sequence[Activity[TStatus] | ActivityExtended[TStatus]],
    current_date: pendulum.DateTime,
) -> TimelineSettings:
    """
    Derive the shared timeline for a set of sanitized activities.

    The timeline spans from the earliest task start to the latest task end.
    Timelines longer than DAILY_GRANULARITY_MAX_LENGTH days switch to weekly
    granularity and are widened to whole weeks starting on WEEK_STARTS_ON.

    Args:
        activities: Sanitized activities, at least one task overall
        current_date: The day to locate on the timeline

    Returns:
        The timeline settings, with the current date's position when it falls
        within the timeline

    Raises:
        EmptyScheduleError: If no activity holds a task
    """
    tasks = [task for activity in activities for task in activity["tasks"]]
    if len(tasks) == 0:
        raise EmptyScheduleError("Cannot lay out a timeline without any task")

    start = min_datetime(task["start_date"] for task in tasks)
    end = max_datetime(task["end_date"] for task in tasks)

    granularity: TimelineGranularity = "daily"
    duration_in_days = difference_in_calendar_days(end, start) + 1
    duration_in_weeks = 1
    is_weekly_timeline = duration_in_days > DAILY_GRANULARITY_MAX_LENGTH

    if is_weekly_timeline:
        granularity = "weekly"
        start = start_of_week(start, WEEK_STARTS_ON)
        end = start_of_day(end_of_week(end, WEEK_STARTS_ON))
        duration_in_days = difference_in_calendar_days(end, start) + 1
        duration_in_weeks = (
            difference_in_calendar_weeks(end, start, WEEK_STARTS_ON) + 1
        )

    relative_current_date: Optional[int] = None
    relative_current_week: Optional[int] = None
    today = start_of_day(current_date)
    is_current_date_on_timeline = (
        difference_in_calendar_days(today, start) >= 0
        and difference_in_calendar_days(today, end) <= 0
    )

    if is_current_date_on_timeline:
        relative_current_week = 1
        relative_current_date = difference_in_calendar_days(today, start) + 1

        if is_weekly_timeline:
            relative_current_week = (
                difference_in_calendar_weeks(today, start, WEEK_STARTS_ON) + 1
            )

    logger.debug(
        f"Timeline {start.to_date_string()} to {end.to_date_string()}: "
        f"{granularity}, {duration_in_days} days, {duration_in_weeks} weeks"
    )

    return {
        "granularity": granularity,
        "start_date": start,
        "end_date": end,
        "duration_in_days": duration_in_days,
        "duration_in_weeks": duration_in_weeks,
        "relative_current_date": relative_current_date,
        "relative_current_week": relative_current_week,
    }
