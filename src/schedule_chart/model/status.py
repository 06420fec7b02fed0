# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import Callable

type IsCompletedFunction[TStatus: Hashable] = Callable[[TStatus], bool]
type GetMostRelevantStatusFunction[TStatus: Hashable] = Callable[
    [list[TStatus]], TStatus
]
