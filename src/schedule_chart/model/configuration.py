# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import TypedDict

from schedule_chart.model.status import (
    GetMostRelevantStatusFunction,
    IsCompletedFunction,
)


class StatusColors(TypedDict):
    primary: str
    secondary: str


type Colors[TStatus: Hashable] = dict[TStatus, StatusColors]


class Configuration[TStatus: Hashable](TypedDict):
    colors: Colors[TStatus]
    is_completed: IsCompletedFunction[TStatus]
    get_most_relevant_status: GetMostRelevantStatusFunction[TStatus]
