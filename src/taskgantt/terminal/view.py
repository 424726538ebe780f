# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from yaml import YAMLError

from taskgantt.repository.configuration import CONFIGURATION_REPO
from taskgantt.repository.dag_run import DagRunRepository
from taskgantt.repository.task_fail import TaskFailRepository
from taskgantt.service.row import build_rows, get_group_ids
from taskgantt.service.selection import find_instance, select_task
from taskgantt.state import SelectionStore
from taskgantt.terminal.custom_typer import AliasedTyperGroup
from taskgantt.terminal.parse import parse_datetime, parse_task_id_list
from taskgantt.view.view.views.gantt import gantt_view
from taskgantt.view.view.views.tooltip import gantt_tooltip

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("gantt, g")
def gantt(
    path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="Run snapshot YAML file",
        ),
    ],
    run_id: Annotated[
        Optional[str],
        typer.Option(
            "--run-id", "-r", help="Run to display (defaults to the file's run_id)"
        ),
    ] = None,
    open_group: Annotated[
        Optional[list[str]],
        typer.Option(
            "--open",
            "-o",
            help="Task group to expand (repeatable, or comma-separated)",
        ),
    ] = None,
    open_all: Annotated[
        bool,
        typer.Option("--open-all", "-a", help="Expand every task group"),
    ] = False,
    select: Annotated[
        Optional[str],
        typer.Option("--select", "-s", help="Select a task's bar in the run"),
    ] = None,
    tooltip: Annotated[
        Optional[str],
        typer.Option("--tooltip", "-t", help="Show the detail panel of a task"),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option("--width", "-w", min=1, help="Pixel width of the timeline"),
    ] = None,
    columns: Annotated[
        Optional[int],
        typer.Option(
            "--columns",
            "-c",
            min=1,
            help="Terminal columns for the timeline (defaults to the console width)",
        ),
    ] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            parser=parse_datetime,
            help="Override the window start (YYYY-MM-DD[ HH:mm], HH:mm, today, now, or day offset)",
        ),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            parser=parse_datetime,
            help="Override the window end (YYYY-MM-DD[ HH:mm], HH:mm, today, now, or day offset)",
        ),
    ] = None,
    left_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-width", "-lw", min=4, help="Width of left column for task names"
        ),
    ] = None,
) -> None:
    """Display the tasks of a run on a gantt chart timeline."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    dag_run_repo = DagRunRepository(path)
    task_fail_repo = TaskFailRepository(path)

    try:
        dag_run = dag_run_repo.get_dag_run()
    except (OSError, ValueError, YAMLError) as e:
        console.print(f"[red]Error reading {path}: {e}[/red]")
        raise typer.Exit(1)

    tasks = dag_run["tasks"]
    active_run_id = run_id or dag_run["run_id"]
    gantt_start_date = start or dag_run["gantt_start_date"]
    gantt_end_date = end or dag_run["gantt_end_date"]

    store = SelectionStore({"run_id": active_run_id, "task_id": None})
    if select is not None:
        selected_task = dag_run_repo.get_task(select)
        if selected_task is None:
            console.print(f"[red]Error: no task '{select}' in {path}[/red]")
            raise typer.Exit(1)
        if select_task(store, selected_task, active_run_id) is None:
            console.print(
                f"[yellow]Task '{select}' did not run in {active_run_id}[/yellow]"
            )

    if open_all:
        open_group_ids = get_group_ids(tasks)
    else:
        open_group_ids = parse_task_id_list(open_group)
    logger.debug("Open groups: %s", open_group_ids)

    gantt_width = width or config["gantt_width"]
    try:
        rows = build_rows(
            tasks,
            gantt_start_date,
            gantt_end_date,
            set(open_group_ids),
            store.get(),
            task_fail_repo.fetch_task_fails,
            gantt_width=gantt_width,
            min_bar_width=config["min_bar_width"],
            row_height=config["row_height"],
        )
    except (ValueError, YAMLError) as e:
        console.print(f"[red]Error reading failure history from {path}: {e}[/red]")
        raise typer.Exit(1)

    gantt_view(
        console,
        active_run_id,
        rows,
        gantt_start_date,
        gantt_end_date,
        gantt_width=gantt_width,
        columns=columns,
        left_column_width=left_width or config["left_column_width"],
    )

    if tooltip is not None:
        tooltip_task = dag_run_repo.get_task(tooltip)
        if tooltip_task is None:
            console.print(f"[red]Error: no task '{tooltip}' in {path}[/red]")
            raise typer.Exit(1)
        instance = find_instance(tooltip_task, active_run_id)
        if instance is None:
            console.print(f"[dim]Task '{tooltip}' did not run in {active_run_id}[/dim]")
        else:
            console.print(gantt_tooltip(tooltip_task, instance))
