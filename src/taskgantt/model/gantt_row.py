# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskgantt.model.geometry import BarGeometry, TaskFailMarker
from taskgantt.model.task import Task
from taskgantt.model.task_instance import TaskInstance


class GanttRow(TypedDict):
    task: Task
    instance: Optional[TaskInstance]
    depth: int
    height: int
    is_open: bool
    is_selected: bool
    emphasize_border: bool
    geometry: Optional[BarGeometry]
    show_queued_segment: bool
    task_fails: list[TaskFailMarker]
    children: list["GanttRow"]
