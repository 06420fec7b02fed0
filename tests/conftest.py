"""Shared fixtures for the schedule chart tests."""

from collections.abc import Iterator
from enum import Enum
from typing import Optional

import pendulum
import pytest
from loguru import logger

from schedule_chart.model.activity import Activity
from schedule_chart.model.configuration import Configuration
from schedule_chart.model.task import Task


class TaskStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    CLOSED = "Closed"


TASK_STATUS_PRIORITY = {
    TaskStatus.CLOSED: 0,
    TaskStatus.OPEN: 1,
    TaskStatus.IN_PROGRESS: 2,
}


def day(year: int, month: int, day_of_month: int, *time: int) -> pendulum.DateTime:
    """A UTC datetime, optionally with hour, minute and second."""
    return pendulum.datetime(year, month, day_of_month, *time)


def make_task(
    status: TaskStatus, start: pendulum.DateTime, end: pendulum.DateTime
) -> Task[TaskStatus]:
    return {"status": status, "start_date": start, "end_date": end}


def make_activity(
    activity_id: int,
    tasks: list[Task[TaskStatus]],
    title: Optional[str] = None,
) -> Activity[TaskStatus]:
    return {
        "id": activity_id,
        "title": title if title is not None else str(activity_id),
        "tasks": tasks,
    }


@pytest.fixture
def configuration() -> Configuration[TaskStatus]:
    """Status strategy mirroring a typical Open / InProgress / Closed workflow."""
    return {
        "colors": {
            TaskStatus.IN_PROGRESS: {"primary": "gold1", "secondary": "dark_goldenrod"},
            TaskStatus.OPEN: {"primary": "green", "secondary": "dark_green"},
            TaskStatus.CLOSED: {"primary": "medium_violet_red", "secondary": "purple"},
        },
        "is_completed": lambda status: status == TaskStatus.CLOSED,
        "get_most_relevant_status": lambda statuses: max(
            statuses, key=lambda status: TASK_STATUS_PRIORITY[status]
        ),
    }


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Drop sinks added by CLI runs so they do not outlive the captured streams."""
    yield
    logger.remove()
    logger.disable("schedule_chart")
