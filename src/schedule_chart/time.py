# SPDX-License-Identifier: MIT

import datetime
from typing import Iterable

import pendulum


def today_local() -> pendulum.DateTime:
    return pendulum.today("local")


def start_of_day(datetime: pendulum.DateTime) -> pendulum.DateTime:
    return datetime.start_of("day")


def difference_in_calendar_days(
    left: pendulum.DateTime, right: pendulum.DateTime
) -> int:
    """Number of calendar days from right to left, ignoring the time of day."""
    return right.date().diff(left.date(), False).in_days()


def start_of_week(
    datetime: pendulum.DateTime, week_starts_on: pendulum.WeekDay
) -> pendulum.DateTime:
    days_into_week = (datetime.weekday() - week_starts_on) % 7
    return datetime.start_of("day").subtract(days=days_into_week)


def end_of_week(
    datetime: pendulum.DateTime, week_starts_on: pendulum.WeekDay
) -> pendulum.DateTime:
    return start_of_week(datetime, week_starts_on).add(days=6).end_of("day")


def difference_in_calendar_weeks(
    left: pendulum.DateTime,
    right: pendulum.DateTime,
    week_starts_on: pendulum.WeekDay,
) -> int:
    """Number of week boundaries crossed from right to left."""
    days = difference_in_calendar_days(
        start_of_week(left, week_starts_on), start_of_week(right, week_starts_on)
    )
    return days // 7


def min_datetime(datetimes: Iterable[pendulum.DateTime]) -> pendulum.DateTime:
    return min(datetimes)


def max_datetime(datetimes: Iterable[pendulum.DateTime]) -> pendulum.DateTime:
    return max(datetimes)


def is_same_year(left: pendulum.DateTime, right: pendulum.DateTime) -> bool:
    return left.year == right.year


def python_to_pendulum_local(python_value: datetime.datetime) -> pendulum.DateTime:
    if python_value.tzinfo is None:
        return pendulum.instance(python_value, tz="local")
    return pendulum.instance(python_value)


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a 'YYYY-MM-DD' string (optionally with a time) as local time.

    Raises:
        ValueError: If the string is not a date, e.g. a duration or an interval
    """
    try:
        parsed = pendulum.parse(date_str, tz="local")
    except TypeError as e:
        raise ValueError(f"{date_str!r} is not a date") from e
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"{date_str!r} is not a date")
    return parsed


def datetime_from_value(value: object) -> pendulum.DateTime:
    """
    Convert a value read from YAML into a pendulum.DateTime.

    YAML resolves unquoted dates and timestamps to datetime.date and
    datetime.datetime, quoted ones stay strings. Naive values are read as local
    time.
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_local(value)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="local")
    if isinstance(value, str):
        return datetime_from_local_date_str(value)
    raise ValueError(f"Cannot convert {value!r} to a date")


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd")


def datetime_to_short_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("MMM D, YYYY")
