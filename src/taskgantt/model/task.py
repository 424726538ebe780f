# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskgantt.model.entity_id import TaskId
from taskgantt.model.task_instance import TaskInstance


class Task(TypedDict):
    id: Optional[TaskId]
    label: Optional[str]
    children: Optional[list["Task"]]
    instances: list[TaskInstance]
