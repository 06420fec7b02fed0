# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import Optional, TypedDict

import pendulum

from schedule_chart.model.task import Task


class Activity[TStatus: Hashable](TypedDict):
    id: int
    title: str
    tasks: list[Task[TStatus]]


class ActivityExtended[TStatus: Hashable](TypedDict):
    id: int
    title: str
    tasks: list[Task[TStatus]]
    latest_completion_date: Optional[pendulum.DateTime]
