# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskgantt.model.geometry import BarGeometry
from taskgantt.model.task_instance import TaskInstance
from taskgantt.time import get_duration

DEFAULT_GANTT_WIDTH = 500
MIN_BAR_WIDTH = 5


def get_run_duration(
    gantt_start_date: Optional[pendulum.DateTime],
    gantt_end_date: Optional[pendulum.DateTime],
) -> float:
    return get_duration(gantt_start_date, gantt_end_date)


def has_valid_queued_dttm(instance: TaskInstance) -> bool:
    """
    Check whether the instance's queued timestamp can be drawn.

    A queued timestamp only counts when it exists and precedes the start date.
    Instances that have not started yet keep any queued timestamp they have.
    """
    queued_dttm = instance["queued_dttm"]
    if queued_dttm is None:
        return False
    start_date = instance["start_date"]
    if start_date is None:
        return True
    return queued_dttm < start_date


def get_task_start_offset(
    instance: TaskInstance,
    gantt_start_date: Optional[pendulum.DateTime],
) -> float:
    if has_valid_queued_dttm(instance):
        return get_duration(
            gantt_start_date, instance["queued_dttm"] or instance["start_date"]
        )
    return get_duration(gantt_start_date, instance["start_date"])


def get_queued_duration(instance: TaskInstance) -> float:
    if not has_valid_queued_dttm(instance):
        return 0
    return get_duration(instance["queued_dttm"], instance["start_date"])


def get_bar_geometry(
    instance: TaskInstance,
    gantt_start_date: Optional[pendulum.DateTime],
    gantt_end_date: Optional[pendulum.DateTime],
    gantt_width: float = DEFAULT_GANTT_WIDTH,
    min_bar_width: float = MIN_BAR_WIDTH,
) -> Optional[BarGeometry]:
    """
    Map an instance's queued and running intervals onto the gantt window.

    Args:
        instance: The task instance to position
        gantt_start_date: Left edge of the chart window
        gantt_end_date: Right edge of the chart window
        gantt_width: Total pixel width of the timeline
        min_bar_width: Narrowest width a drawn bar is allowed to have

    Returns:
        The bar geometry in pixels, or None when the window has no positive
        length and no proportion can be computed
    """
    run_duration = get_run_duration(gantt_start_date, gantt_end_date)
    if run_duration <= 0:
        return None

    task_duration = get_duration(instance["start_date"], instance["end_date"])
    queued_duration = get_queued_duration(instance)
    task_start_offset = get_task_start_offset(instance, gantt_start_date)

    # Fractions of the whole run
    task_duration_percent = task_duration / run_duration
    queued_duration_percent = queued_duration / run_duration
    task_start_offset_percent = task_start_offset / run_duration

    width = max(gantt_width * task_duration_percent, min_bar_width)

    queued_width: float = 0
    if has_valid_queued_dttm(instance):
        queued_width = max(gantt_width * queued_duration_percent, min_bar_width)

    return {
        "width": width,
        "queued_width": queued_width,
        "offset_margin": task_start_offset_percent * gantt_width,
    }


def get_interval_geometry(
    start_date: Optional[pendulum.DateTime],
    end_date: Optional[pendulum.DateTime],
    gantt_start_date: Optional[pendulum.DateTime],
    gantt_end_date: Optional[pendulum.DateTime],
    gantt_width: float = DEFAULT_GANTT_WIDTH,
    min_bar_width: float = MIN_BAR_WIDTH,
) -> Optional[tuple[float, float]]:
    """Return (width, offset_margin) of a plain interval, or None for a degenerate window."""
    run_duration = get_run_duration(gantt_start_date, gantt_end_date)
    if run_duration <= 0:
        return None

    width = gantt_width * get_duration(start_date, end_date) / run_duration
    offset_margin = gantt_width * get_duration(gantt_start_date, start_date) / run_duration
    return max(width, min_bar_width), offset_margin
