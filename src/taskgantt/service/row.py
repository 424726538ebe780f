# SPDX-License-Identifier: MIT

import logging
from collections.abc import Collection
from typing import Optional

import pendulum

from taskgantt.model.gantt_row import GanttRow
from taskgantt.model.geometry import BarGeometry, TaskFailMarker
from taskgantt.model.selection import Selection
from taskgantt.model.task import Task
from taskgantt.service.duration import (
    DEFAULT_GANTT_WIDTH,
    MIN_BAR_WIDTH,
    get_bar_geometry,
    has_valid_queued_dttm,
)
from taskgantt.service.selection import find_instance, is_selected
from taskgantt.service.task_fail import (
    TaskFailFetcher,
    get_task_fail_markers,
    should_fetch_task_fails,
)

logger = logging.getLogger(__name__)

# Status box size plus padding
DEFAULT_ROW_HEIGHT = 19


def build_row(
    task: Task,
    gantt_start_date: Optional[pendulum.DateTime],
    gantt_end_date: Optional[pendulum.DateTime],
    open_group_ids: Collection[str],
    selection: Selection,
    fetch_task_fails: TaskFailFetcher,
    gantt_width: float = DEFAULT_GANTT_WIDTH,
    min_bar_width: float = MIN_BAR_WIDTH,
    row_height: int = DEFAULT_ROW_HEIGHT,
    depth: int = 0,
) -> GanttRow:
    """
    Lay out one task row of the gantt chart, and its children when the group is open.

    The instance shown is the one belonging to the selected run. Without one
    the row is only a frame: no bar, no tooltip and no failure markers.

    Args:
        task: The task to lay out
        gantt_start_date: Left edge of the chart window
        gantt_end_date: Right edge of the chart window
        open_group_ids: Ids of the task groups that are expanded
        selection: The active selection, whose run picks the instance
        fetch_task_fails: Failure history lookup
        gantt_width: Total pixel width of the timeline
        min_bar_width: Narrowest width a drawn bar is allowed to have
        row_height: Pixel height of the row frame
        depth: Nesting level of the task, 0 for root tasks

    Returns:
        The row with its geometry, flags and child rows
    """
    instance = find_instance(task, selection["run_id"])
    is_open = (task["id"] or "") in open_group_ids

    geometry: Optional[BarGeometry] = None
    show_queued_segment = False
    task_fails: list[TaskFailMarker] = []
    if instance is not None:
        geometry = get_bar_geometry(
            instance, gantt_start_date, gantt_end_date, gantt_width, min_bar_width
        )
        if geometry is None:
            logger.debug("No positive gantt window, skipping bar for %s", task["id"])

        # A queued instance is already drawn in the queued color
        show_queued_segment = (
            instance["state"] != "queued" and has_valid_queued_dttm(instance)
        )

        fetched = None
        if should_fetch_task_fails(task, instance):
            fetched = fetch_task_fails(task["id"], selection["run_id"], enabled=True)
        task_fails = get_task_fail_markers(
            fetched,
            instance,
            gantt_start_date,
            gantt_end_date,
            gantt_width,
            min_bar_width,
        )

    children: list[GanttRow] = []
    if is_open and task["children"]:
        children = [
            build_row(
                child,
                gantt_start_date,
                gantt_end_date,
                open_group_ids,
                selection,
                fetch_task_fails,
                gantt_width,
                min_bar_width,
                row_height,
                depth + 1,
            )
            for child in task["children"]
        ]

    return {
        "task": task,
        "instance": instance,
        "depth": depth,
        "height": row_height,
        "is_open": is_open,
        "is_selected": is_selected(selection, instance),
        "emphasize_border": task["children"] is not None and is_open,
        "geometry": geometry,
        "show_queued_segment": show_queued_segment,
        "task_fails": task_fails,
        "children": children,
    }


def build_rows(
    tasks: list[Task],
    gantt_start_date: Optional[pendulum.DateTime],
    gantt_end_date: Optional[pendulum.DateTime],
    open_group_ids: Collection[str],
    selection: Selection,
    fetch_task_fails: TaskFailFetcher,
    gantt_width: float = DEFAULT_GANTT_WIDTH,
    min_bar_width: float = MIN_BAR_WIDTH,
    row_height: int = DEFAULT_ROW_HEIGHT,
) -> list[GanttRow]:
    return [
        build_row(
            task,
            gantt_start_date,
            gantt_end_date,
            open_group_ids,
            selection,
            fetch_task_fails,
            gantt_width,
            min_bar_width,
            row_height,
        )
        for task in tasks
    ]


def flatten_rows(rows: list[GanttRow]) -> list[GanttRow]:
    """Depth-first list of rows in the order they stack on screen."""
    flat: list[GanttRow] = []
    for row in rows:
        flat.append(row)
        flat.extend(flatten_rows(row["children"]))
    return flat


def get_group_ids(tasks: list[Task]) -> list[str]:
    """Ids of every task in the tree that has children, in tree order."""
    group_ids: list[str] = []
    for task in tasks:
        if task["children"]:
            if task["id"] is not None:
                group_ids.append(task["id"])
            group_ids.extend(get_group_ids(task["children"]))
    return group_ids
