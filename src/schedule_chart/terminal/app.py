# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from loguru import logger
from rich.console import Console

from schedule_chart import state as app_state
from schedule_chart.logger import setup_logger
from schedule_chart.model.activity import ActivityExtended
from schedule_chart.model.configuration import Configuration
from schedule_chart.model.timeline import TimelineSettings
from schedule_chart.repository.activity import ActivityFileError, ActivityRepository
from schedule_chart.repository.configuration import ConfigurationRepository
from schedule_chart.service.activity import is_schedule_empty, prepare_schedule
from schedule_chart.service.status import build_configuration, get_unknown_statuses
from schedule_chart.service.timeline import calculate_timeline_settings
from schedule_chart.terminal.custom_typer import AliasedTyperGroup
from schedule_chart.terminal.parse import parse_date
from schedule_chart.time import today_local
from schedule_chart.view.views.chart import schedule_chart_view
from schedule_chart.view.views.settings import timeline_settings_view
from schedule_chart.view.views.spans import spans_view
from schedule_chart.view.views.status import statuses_view

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Schedule Chart - Gantt style activity timelines in the CLI",
    no_args_is_help=True,
)

error_console = Console(stderr=True)

ActivityFileArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        help="YAML file with an 'activities' list",
    ),
]
TodayOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--today",
        "-t",
        parser=parse_date,
        help="Day to mark as today (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]


def _fail(message: str) -> typer.Exit:
    error_console.print(f"[red]{message}[/red]")
    return typer.Exit(1)


def _load_schedule(
    file: Path, today: Optional[pendulum.DateTime]
) -> tuple[
    list[ActivityExtended[str]], Optional[TimelineSettings], Configuration[str]
]:
    configuration = app_state.get_configuration()

    try:
        activities = ActivityRepository(file).get_all_activities()
    except ActivityFileError as e:
        raise _fail(str(e))

    schedule = prepare_schedule(activities)

    unknown_statuses = get_unknown_statuses(
        configuration,
        [task["status"] for activity in schedule for task in activity["tasks"]],
    )
    if len(unknown_statuses) > 0:
        raise _fail(f"Statuses not configured: {', '.join(unknown_statuses)}")

    if is_schedule_empty(schedule):
        logger.info(f"No drawable tasks in {file}")
        return schedule, None, configuration

    current_date = today if today is not None else today_local()
    settings = calculate_timeline_settings(schedule, current_date)
    return schedule, settings, configuration


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            dir_okay=False,
            help="Configuration file to use instead of the user configuration",
        ),
    ] = None,
) -> None:
    """
    Schedule Chart - Gantt style activity timelines in the CLI

    Global options that apply to all commands.
    """
    try:
        app_config = ConfigurationRepository(config).get_config()
        configuration = build_configuration(app_config)
        setup_logger("DEBUG" if verbose else app_config["log_level"])
    except ValueError as e:
        raise _fail(f"Invalid configuration: {e}")

    app_state.set_app_config(app_config, configuration)
    app_state.set_show_header(app_config["show_header"] and not no_header)


@app.command("chart, c")
def chart(
    file: ActivityFileArgument,
    today: TodayOption = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            "-w",
            min=8,
            help="Width of the activity title column",
        ),
    ] = None,
) -> None:
    """Display the activities of FILE as a schedule chart."""
    schedule, settings, configuration = _load_schedule(file, today)
    if left_column_width is None:
        left_column_width = app_state.get_app_config()["left_column_width"]
    schedule_chart_view(
        file.name, schedule, settings, configuration, left_column_width
    )


@app.command("spans, sp")
def spans(file: ActivityFileArgument, today: TodayOption = None) -> None:
    """List the spans and checkpoints of every activity in FILE."""
    schedule, settings, configuration = _load_schedule(file, today)
    spans_view(file.name, schedule, settings, configuration)


@app.command("settings, st")
def settings(file: ActivityFileArgument, today: TodayOption = None) -> None:
    """Display the timeline settings computed for FILE."""
    _, timeline_settings, _ = _load_schedule(file, today)
    timeline_settings_view(file.name, timeline_settings)


@app.command("statuses, ss")
def statuses() -> None:
    """Display the configured statuses."""
    statuses_view(app_state.get_app_config()["statuses"])


def run() -> None:
    app()
