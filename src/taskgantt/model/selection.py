# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskgantt.model.entity_id import RunId, TaskId


class Selection(TypedDict):
    run_id: Optional[RunId]
    task_id: Optional[TaskId]
