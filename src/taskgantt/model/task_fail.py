# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskgantt.model.entity_id import RunId, TaskId


class TaskFail(TypedDict):
    task_id: TaskId
    run_id: Optional[RunId]
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
