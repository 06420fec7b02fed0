# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from schedule_chart.configuration import StatusConfiguration


def statuses_view(statuses: list[StatusConfiguration]) -> None:
    statuses_table = Table(box=box.SIMPLE)
    statuses_table.add_column("status")
    statuses_table.add_column("primary")
    statuses_table.add_column("secondary")
    statuses_table.add_column("completed")
    statuses_table.add_column("priority", justify="right")

    for status in sorted(statuses, key=lambda s: s["priority"], reverse=True):
        statuses_table.add_row(
            status["name"],
            f"[{status['primary']}]{status['primary']}[/{status['primary']}]",
            f"[{status['secondary']}]{status['secondary']}[/{status['secondary']}]",
            "✓" if status["completed"] else "✗",
            str(status["priority"]),
        )

    console = Console()
    console.print(statuses_table)
