# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from schedule_chart.state import get_show_header


def header(source: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the name of the rendered file.

    Args:
        source: Name of the activity file being rendered
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    print(Padding("[dark_orange]schedule-chart[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(f"[plum1]{source}[/plum1]", (0, 1)))
