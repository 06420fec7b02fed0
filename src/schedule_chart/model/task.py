# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import TypedDict

import pendulum


class Task[TStatus: Hashable](TypedDict):
    status: TStatus
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime


class TaskExtended[TStatus: Hashable](TypedDict):
    index: int
    status: TStatus
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime
    relative_start_date: int
    relative_end_date: int
