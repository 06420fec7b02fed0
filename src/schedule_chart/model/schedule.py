# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import TypedDict

from schedule_chart.model.task import TaskExtended


class ScheduleCheckpoint[TStatus: Hashable](TypedDict):
    relative_date: int
    active_tasks: list[TaskExtended[TStatus]]
    completed_tasks: list[TaskExtended[TStatus]]


class ScheduleAction[TStatus: Hashable](TypedDict):
    """A span: a maximal run of overlapping tasks drawn as one bar."""

    status: TStatus
    relative_start_date: int
    relative_end_date: int
    checkpoints: list[ScheduleCheckpoint[TStatus]]
