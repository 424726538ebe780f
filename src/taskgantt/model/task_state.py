# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, get_args

TaskStateName = Literal[
    "success",
    "running",
    "failed",
    "upstream_failed",
    "skipped",
    "up_for_retry",
    "up_for_reschedule",
    "queued",
    "scheduled",
    "deferred",
    "removed",
    "restarting",
]

# None is an instance that has not been given a status yet
TaskState: TypeAlias = Optional[TaskStateName]

TASK_STATES: tuple[str, ...] = get_args(TaskStateName)
