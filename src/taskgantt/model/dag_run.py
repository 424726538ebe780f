# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskgantt.model.entity_id import RunId
from taskgantt.model.task import Task


class DagRun(TypedDict):
    run_id: Optional[RunId]
    gantt_start_date: Optional[pendulum.DateTime]
    gantt_end_date: Optional[pendulum.DateTime]
    tasks: list[Task]
