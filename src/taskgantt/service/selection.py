# SPDX-License-Identifier: MIT

from typing import Optional

from taskgantt.model.entity_id import RunId
from taskgantt.model.selection import Selection
from taskgantt.model.task import Task
from taskgantt.model.task_instance import TaskInstance
from taskgantt.state import SelectionStoreProtocol


def find_instance(task: Task, run_id: Optional[RunId]) -> Optional[TaskInstance]:
    """Return the task's instance for the given run, if it has one."""
    if run_id is None:
        return None
    for instance in task["instances"]:
        if instance["run_id"] == run_id:
            return instance
    return None


def is_selected(selection: Selection, instance: Optional[TaskInstance]) -> bool:
    if instance is None or selection["task_id"] is None:
        return False
    return selection["task_id"] == instance["task_id"]


def on_select(store: SelectionStoreProtocol, instance: TaskInstance) -> None:
    store.set({"run_id": instance["run_id"], "task_id": instance["task_id"]})


def select_task(
    store: SelectionStoreProtocol, task: Task, run_id: Optional[RunId]
) -> Optional[TaskInstance]:
    """
    Select a task's bar for the given run, as a click on it would.

    Tasks without an instance in the run have no bar, so nothing is
    dispatched for them.

    Returns:
        The instance that was selected, or None
    """
    instance = find_instance(task, run_id)
    if instance is not None:
        on_select(store, instance)
    return instance
