# SPDX-License-Identifier: MIT

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskgantt.color import get_state_color
from taskgantt.model.task import Task
from taskgantt.model.task_instance import TaskInstance
from taskgantt.service.duration import get_queued_duration, has_valid_queued_dttm
from taskgantt.time import (
    datetime_to_display_local_datetime_str,
    duration_ms_to_str,
    get_duration,
    now_utc,
)
from taskgantt.view.view.util import task_label


def gantt_tooltip(task: Task, instance: TaskInstance) -> Panel:
    """
    Build the detail panel shown for a task's bar.

    Running instances without an end date report their duration up to now.
    """
    is_group = bool(task["children"])

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()

    table.add_row("Task Group" if is_group else "Task", task_label(task))
    table.add_row(
        "Status",
        Text(instance["state"] or "no status", style=get_state_color(instance["state"])),
    )
    table.add_row("Try Number", str(instance["try_number"]))

    if instance["queued_dttm"] is not None:
        table.add_row(
            "Queued",
            datetime_to_display_local_datetime_str(instance["queued_dttm"]),
        )
        if has_valid_queued_dttm(instance) and instance["start_date"] is not None:
            table.add_row(
                "Queued Duration", duration_ms_to_str(get_queued_duration(instance))
            )

    start_date = instance["start_date"]
    end_date = instance["end_date"]
    if start_date is not None:
        table.add_row(
            "Overall Start" if is_group else "Start",
            datetime_to_display_local_datetime_str(start_date),
        )
        if end_date is not None:
            table.add_row(
                "Overall End" if is_group else "End",
                datetime_to_display_local_datetime_str(end_date),
            )
        table.add_row(
            "Overall Duration" if is_group else "Duration",
            duration_ms_to_str(get_duration(start_date, end_date or now_utc())),
        )

    return Panel(table, title=instance["run_id"], expand=False)
