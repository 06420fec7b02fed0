# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from schedule_chart.time import datetime_from_local_date_str, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a day given on the command line, as local midnight.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) or a day
    offset from today such as 1 or -3.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return datetime_from_local_date_str(date).start_of("day")
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")
