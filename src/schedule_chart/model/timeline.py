# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

TimelineGranularity = Literal["daily", "weekly"]


class TimelineSettings(TypedDict):
    granularity: TimelineGranularity
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime
    duration_in_days: int
    duration_in_weeks: int
    relative_current_date: Optional[int]
    relative_current_week: Optional[int]
