# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast, get_args

import typer
from rich.console import Console
from rich.table import Table

from taskgantt import configuration
from taskgantt.repository.configuration import CONFIGURATION_REPO
from taskgantt.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    settings = [
        ("gantt_width", f"{config['gantt_width']}px"),
        ("min_bar_width", f"{config['min_bar_width']}px"),
        ("row_height", f"{config['row_height']}px"),
        ("left_column_width", f"{config['left_column_width']} columns"),
        ("show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"),
        ("log_level", config["log_level"]),
        ("config_path", str(configuration.APP_CONFIG_PATH)),
    ]

    table = Table(title="taskgantt settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    for setting, value in settings:
        table.add_row(setting, value)

    Console().print(table)


@app.command("set, s")
def set(
    gantt_width: Annotated[
        Optional[int],
        typer.Option("--gantt-width", min=1, help="Pixel width of the timeline"),
    ] = None,
    min_bar_width: Annotated[
        Optional[int],
        typer.Option(
            "--min-bar-width", min=0, help="Narrowest width in pixels of a drawn bar"
        ),
    ] = None,
    row_height: Annotated[
        Optional[int],
        typer.Option("--row-height", min=1, help="Pixel height of each row"),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width", min=4, help="Width of the task name column"
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above the chart",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in get_args(configuration.LogLevel):
            raise typer.BadParameter(
                f"Unknown log level '{log_level}'", param_hint="--log-level"
            )

    CONFIGURATION_REPO.update_config(
        gantt_width=gantt_width,
        min_bar_width=min_bar_width,
        row_height=row_height,
        left_column_width=left_column_width,
        show_header=show_header,
        log_level=cast(Optional[configuration.LogLevel], log_level),
    )

    Console().print("[green]Configuration updated successfully![/green]\n")
    view()
