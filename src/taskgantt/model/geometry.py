# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskgantt.model.task_fail import TaskFail


class BarGeometry(TypedDict):
    """Pixel geometry of an instance bar, measured from the window's left edge."""

    width: float
    queued_width: float
    offset_margin: float


class TaskFailMarker(TypedDict):
    key: str
    task_fail: TaskFail
    width: float
    offset_margin: float
