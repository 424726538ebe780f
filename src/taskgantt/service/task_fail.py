# SPDX-License-Identifier: MIT

from typing import Optional, Protocol

import pendulum

from taskgantt.model.entity_id import RunId, TaskId
from taskgantt.model.geometry import TaskFailMarker
from taskgantt.model.task import Task
from taskgantt.model.task_fail import TaskFail
from taskgantt.model.task_instance import TaskInstance
from taskgantt.service.duration import (
    DEFAULT_GANTT_WIDTH,
    MIN_BAR_WIDTH,
    get_interval_geometry,
)
from taskgantt.time import datetime_to_iso_str_optional


class TaskFailFetcher(Protocol):
    """Looks up the failure history of one task in one run.

    Returns None while the history is unavailable. Implementations must not
    touch their data source when enabled is False.
    """

    def __call__(
        self, task_id: Optional[TaskId], run_id: Optional[RunId], enabled: bool
    ) -> Optional[list[TaskFail]]: ...


def should_fetch_task_fails(task: Task, instance: Optional[TaskInstance]) -> bool:
    """Only instances that were retried can have earlier failures."""
    if instance is None or task["id"] is None:
        return False
    return instance["try_number"] > 1


def get_visible_task_fails(
    task_fails: Optional[list[TaskFail]],
    instance: Optional[TaskInstance],
    gantt_start_date: Optional[pendulum.DateTime],
) -> list[TaskFail]:
    """
    Keep failures that precede the displayed attempt and start inside the window.

    The failure sharing the instance's start date is the current attempt and
    is already drawn as the main bar.
    """
    if not task_fails or gantt_start_date is None:
        return []

    instance_start = instance["start_date"] if instance is not None else None
    return [
        task_fail
        for task_fail in task_fails
        if task_fail["start_date"] is not None
        and task_fail["start_date"] != instance_start
        and task_fail["start_date"] > gantt_start_date
    ]


def get_task_fail_markers(
    task_fails: Optional[list[TaskFail]],
    instance: Optional[TaskInstance],
    gantt_start_date: Optional[pendulum.DateTime],
    gantt_end_date: Optional[pendulum.DateTime],
    gantt_width: float = DEFAULT_GANTT_WIDTH,
    min_bar_width: float = MIN_BAR_WIDTH,
) -> list[TaskFailMarker]:
    markers: list[TaskFailMarker] = []
    seen_keys: set[str] = set()

    for index, task_fail in enumerate(
        get_visible_task_fails(task_fails, instance, gantt_start_date)
    ):
        geometry = get_interval_geometry(
            task_fail["start_date"],
            task_fail["end_date"],
            gantt_start_date,
            gantt_end_date,
            gantt_width,
            min_bar_width,
        )
        if geometry is None:
            continue
        width, offset_margin = geometry

        # task id and start date are not guaranteed unique
        key = f"{task_fail['task_id']}-{datetime_to_iso_str_optional(task_fail['start_date'])}"
        if key in seen_keys:
            key = f"{key}-{index}"
        seen_keys.add(key)

        markers.append(
            {
                "key": key,
                "task_fail": task_fail,
                "width": width,
                "offset_margin": offset_margin,
            }
        )

    return markers
