# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskgantt.model.entity_id import RunId, TaskId
from taskgantt.model.task_state import TaskState


class TaskInstance(TypedDict):
    run_id: RunId
    task_id: TaskId
    state: TaskState
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
    queued_dttm: Optional[pendulum.DateTime]
    try_number: int
