# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from schedule_chart.model.timeline import TimelineSettings
from schedule_chart.time import datetime_to_display_date_str
from schedule_chart.view.views.header import header


def _optional_int_str(value: Optional[int]) -> str:
    return str(value) if value is not None else "-"


def timeline_settings_view(source: str, settings: Optional[TimelineSettings]) -> None:
    header(source, "timeline settings")

    console = Console()

    if settings is None:
        console.print("\n[dim]No activities to display[/dim]\n")
        return

    settings_table = Table(box=box.SIMPLE)
    settings_table.add_column("property")
    settings_table.add_column("value")

    settings_table.add_row("granularity", settings["granularity"])
    settings_table.add_row(
        "start_date", datetime_to_display_date_str(settings["start_date"])
    )
    settings_table.add_row("end_date", datetime_to_display_date_str(settings["end_date"]))
    settings_table.add_row("duration_in_days", str(settings["duration_in_days"]))
    settings_table.add_row("duration_in_weeks", str(settings["duration_in_weeks"]))
    settings_table.add_row(
        "relative_current_date",
        _optional_int_str(settings["relative_current_date"]),
    )
    settings_table.add_row(
        "relative_current_week",
        _optional_int_str(settings["relative_current_week"]),
    )

    console.print(settings_table)
