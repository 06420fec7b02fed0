# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from schedule_chart.model.activity import ActivityExtended
from schedule_chart.model.configuration import Configuration
from schedule_chart.model.timeline import TimelineSettings
from schedule_chart.service.schedule import calculate_schedule
from schedule_chart.view.util import format_checkpoint_tasks
from schedule_chart.view.views.header import header


def spans_view[TStatus: Hashable](
    source: str,
    activities: list[ActivityExtended[TStatus]],
    settings: Optional[TimelineSettings],
    configuration: Configuration[TStatus],
) -> None:
    """
    List every span of every activity with its checkpoints.

    Each checkpoint row shows the relative day, whether tasks start or complete
    there, and the dates of those tasks.
    """
    header(source, "spans")

    console = Console()

    if settings is None:
        console.print("\n[dim]No activities to display[/dim]\n")
        return

    spans_table = Table(box=box.SIMPLE)
    spans_table.add_column("activity")
    spans_table.add_column("span")
    spans_table.add_column("status")
    spans_table.add_column("day", justify="right")
    spans_table.add_column("event")
    spans_table.add_column("tasks")

    for activity in activities:
        schedule_actions = calculate_schedule(
            activity["tasks"],
            settings["start_date"],
            configuration["is_completed"],
            configuration["get_most_relevant_status"],
        )
        for span_number, action in enumerate(schedule_actions, start=1):
            color = configuration["colors"][action["status"]]["primary"]
            single_on_timeline = len(action["checkpoints"]) == 1
            for checkpoint_number, checkpoint in enumerate(action["checkpoints"]):
                events = []
                if len(checkpoint["completed_tasks"]) > 0:
                    events.append("completed")
                if len(checkpoint["active_tasks"]) > 0:
                    events.append("started")

                first_row = checkpoint_number == 0
                spans_table.add_row(
                    activity["title"] if span_number == 1 and first_row else "",
                    (
                        f"{span_number}: day {action['relative_start_date']}"
                        f"-{action['relative_end_date']}"
                        if first_row
                        else ""
                    ),
                    f"[{color}]{action['status']}[/{color}]" if first_row else "",
                    str(checkpoint["relative_date"]),
                    ", ".join(events),
                    "\n".join(format_checkpoint_tasks(checkpoint, single_on_timeline)),
                )

    console.print(spans_table)
