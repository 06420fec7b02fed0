# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from schedule_chart.model.activity import ActivityExtended
from schedule_chart.model.configuration import Configuration
from schedule_chart.model.timeline import TimelineSettings
from schedule_chart.service.schedule import calculate_schedule
from schedule_chart.time import datetime_to_short_date_str
from schedule_chart.view.util import is_single_active_task
from schedule_chart.view.views.header import header

# Width of a day column on daily timelines and of a week column on weekly ones
SLOT_WIDTH = 7
END_DATE_COLUMN_WIDTH = 14

BAR_SYMBOL = "━"
START_MARKER_SYMBOL = "●"
END_MARKER_SYMBOL = "✔"
CURRENT_DAY_SYMBOL = "┊"


def schedule_chart_view[TStatus: Hashable](
    source: str,
    activities: list[ActivityExtended[TStatus]],
    settings: Optional[TimelineSettings],
    configuration: Configuration[TStatus],
    left_column_width: int = 24,
) -> None:
    """
    Display activities as rows of span bars on a shared timeline.

    Each span is drawn in its status' primary color. Spans made of a single
    task that has not completed are plain bars; every other span gets a marker
    per checkpoint in the secondary color: a dot where tasks start, a check
    mark where only completions land.

    Args:
        source: Name of the activity file, shown in the header
        activities: Sanitized activities, one row each
        settings: Timeline settings, None when there is nothing to draw
        configuration: Status colors and strategy functions
        left_column_width: Width of the activity title column
    """
    header(source, "chart")

    console = Console()

    if settings is None:
        console.print("\n[dim]No activities to display[/dim]\n")
        return

    console.print(
        f"\n[bold]{settings['start_date'].format('YYYY-MM-DD')} to "
        f"{settings['end_date'].format('YYYY-MM-DD')}[/bold] "
        f"(granularity: {settings['granularity']})\n"
    )

    chart_elements: list[Text] = [
        _build_header_row(settings, left_column_width),
        Text(
            "─" * (left_column_width + _timeline_width(settings) + END_DATE_COLUMN_WIDTH),
            style="dim",
        ),
    ]

    for activity in activities:
        chart_elements.append(
            _build_activity_row(activity, settings, configuration, left_column_width)
        )

    chart_elements.append(Text())
    chart_elements.append(_build_legend(configuration, left_column_width))

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))


def _day_width(settings: TimelineSettings) -> int:
    return SLOT_WIDTH if settings["granularity"] == "daily" else 1


def _timeline_width(settings: TimelineSettings) -> int:
    return settings["duration_in_days"] * _day_width(settings)


def _fit(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 3] + "..."
    return text.ljust(width)


def _build_header_row(settings: TimelineSettings, left_column_width: int) -> Text:
    row = Text()
    row.append(_fit("Activities", left_column_width), style="bold")

    if settings["granularity"] == "daily":
        title = "Day"
        slot_count = settings["duration_in_days"]
        current_slot = settings["relative_current_date"]
    else:
        title = "Week"
        slot_count = settings["duration_in_weeks"]
        current_slot = settings["relative_current_week"]

    for sequential_number in range(1, slot_count + 1):
        label = f"{title} {sequential_number}"
        if len(label) > SLOT_WIDTH:
            label = f"W{sequential_number}"
        style = "bold"
        if sequential_number == current_slot:
            style = "bold reverse"
        row.append(label.center(SLOT_WIDTH), style=style)

    row.append("End Date".rjust(END_DATE_COLUMN_WIDTH), style="bold")
    return row


def _build_activity_row[TStatus: Hashable](
    activity: ActivityExtended[TStatus],
    settings: TimelineSettings,
    configuration: Configuration[TStatus],
    left_column_width: int,
) -> Text:
    duration_in_days = settings["duration_in_days"]
    symbols = [" "] * duration_in_days
    styles = [""] * duration_in_days
    bar_styles = [""] * duration_in_days

    schedule_actions = calculate_schedule(
        activity["tasks"],
        settings["start_date"],
        configuration["is_completed"],
        configuration["get_most_relevant_status"],
    )

    for action in schedule_actions:
        colors = configuration["colors"][action["status"]]
        for day in range(action["relative_start_date"], action["relative_end_date"] + 1):
            symbols[day - 1] = BAR_SYMBOL
            styles[day - 1] = colors["primary"]
            bar_styles[day - 1] = colors["primary"]

        if is_single_active_task(action):
            continue

        for checkpoint in action["checkpoints"]:
            index = checkpoint["relative_date"] - 1
            symbols[index] = (
                END_MARKER_SYMBOL
                if len(checkpoint["active_tasks"]) == 0
                else START_MARKER_SYMBOL
            )
            styles[index] = f"bold {colors['secondary']}"

    current_date = settings["relative_current_date"]
    if current_date is not None and symbols[current_date - 1] == " ":
        symbols[current_date - 1] = CURRENT_DAY_SYMBOL
        styles[current_date - 1] = "dim"

    row = Text()
    row.append(_fit(activity["title"], left_column_width))

    day_width = _day_width(settings)
    for index in range(duration_in_days):
        bg_style = ""
        if settings["granularity"] == "daily" and index % 2 == 1:
            bg_style = " on grey23"

        symbol = symbols[index]
        if day_width == 1:
            row.append(symbol, style=(styles[index] + bg_style).strip())
            continue

        # Wide day cells: bars fill the cell, markers sit in the middle of it
        fill = BAR_SYMBOL if bar_styles[index] else " "
        fill_style = bar_styles[index]
        left = day_width // 2
        right = day_width - left - 1
        row.append(fill * left, style=(fill_style + bg_style).strip())
        row.append(symbol, style=(styles[index] + bg_style).strip())
        row.append(fill * right, style=(fill_style + bg_style).strip())

    latest_completion_date = activity["latest_completion_date"]
    end_date = (
        datetime_to_short_date_str(latest_completion_date)
        if latest_completion_date is not None
        else ""
    )
    row.append(end_date.rjust(END_DATE_COLUMN_WIDTH))
    return row


def _build_legend[TStatus: Hashable](
    configuration: Configuration[TStatus], left_column_width: int
) -> Text:
    legend = Text(" " * left_column_width)
    for status, colors in configuration["colors"].items():
        legend.append(BAR_SYMBOL * 2, style=colors["primary"])
        legend.append(f" {status}  ")
    legend.append(f"{START_MARKER_SYMBOL} started  ", style="dim")
    legend.append(f"{END_MARKER_SYMBOL} completed  ", style="dim")
    legend.append(f"{CURRENT_DAY_SYMBOL} today", style="dim")
    return legend
