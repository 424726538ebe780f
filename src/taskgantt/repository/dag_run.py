# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from taskgantt import time
from taskgantt.model.dag_run import DagRun
from taskgantt.model.entity_id import TaskId
from taskgantt.model.task import Task
from taskgantt.model.task_instance import TaskInstance
from taskgantt.model.task_state import TASK_STATES

logger = logging.getLogger(__name__)


class DagRunRepository:
    """
    Reads a run snapshot file: the task tree, its instances and the gantt window.

    The tree is validated while it is converted, so a snapshot that loads is
    guaranteed to be acyclic, to have unique task ids and to hold at most one
    instance per run for every task.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._dag_run: Optional[DagRun] = None

    @property
    def dag_run(self) -> DagRun:
        if self._dag_run is None:
            self.__load_data()
        if self._dag_run is None:
            raise ValueError()
        return self._dag_run

    def __load_data(self) -> None:
        logger.debug("Loading run snapshot from %s", self.path)
        raw_dag_run = load(self.path.read_text(), Loader=Loader)
        if not isinstance(raw_dag_run, dict):
            raise ValueError(f"{self.path} does not contain a run snapshot")
        self._dag_run = self.__convert_dag_run_for_deserialization(raw_dag_run)
        logger.debug("Loaded %d root tasks", len(self._dag_run["tasks"]))

    def __convert_dag_run_for_deserialization(self, dag_run: dict[str, Any]) -> DagRun:
        raw_tasks = dag_run.get("tasks") or []
        if not isinstance(raw_tasks, list):
            raise ValueError("tasks must be a list")

        seen_nodes: set[int] = set()
        seen_task_ids: set[TaskId] = set()
        tasks = [
            self.__convert_task_for_deserialization(raw_task, seen_nodes, seen_task_ids)
            for raw_task in raw_tasks
        ]

        run_id = dag_run.get("run_id")
        return {
            "run_id": str(run_id) if run_id is not None else None,
            "gantt_start_date": time.datetime_from_yaml_optional(
                dag_run.get("gantt_start_date")
            ),
            "gantt_end_date": time.datetime_from_yaml_optional(
                dag_run.get("gantt_end_date")
            ),
            "tasks": tasks,
        }

    def __convert_task_for_deserialization(
        self,
        task: Any,
        seen_nodes: set[int],
        seen_task_ids: set[TaskId],
    ) -> Task:
        if not isinstance(task, dict):
            raise ValueError(f"Task entries must be mappings, got {task!r}")

        # YAML aliases can make a node reachable twice, or from inside itself
        if id(task) in seen_nodes:
            raise ValueError(f"Task {task.get('id')!r} appears more than once in the tree")
        seen_nodes.add(id(task))

        task_id = task.get("id")
        if task_id is None:
            raise ValueError("Every task needs an id")
        task_id = str(task_id)
        if task_id in seen_task_ids:
            raise ValueError(f"Duplicate task id {task_id!r}")
        seen_task_ids.add(task_id)

        raw_children = task.get("children")
        children: Optional[list[Task]] = None
        if raw_children is not None:
            if not isinstance(raw_children, list):
                raise ValueError(f"Children of task {task_id!r} must be a list")
            children = [
                self.__convert_task_for_deserialization(
                    raw_child, seen_nodes, seen_task_ids
                )
                for raw_child in raw_children
            ]

        instances: list[TaskInstance] = []
        seen_run_ids: set[str] = set()
        for raw_instance in task.get("instances") or []:
            instance = self.__convert_instance_for_deserialization(raw_instance, task_id)
            if instance["run_id"] in seen_run_ids:
                raise ValueError(
                    f"Task {task_id!r} has more than one instance for run {instance['run_id']!r}"
                )
            seen_run_ids.add(instance["run_id"])
            instances.append(instance)

        label = task.get("label")
        return {
            "id": task_id,
            "label": str(label) if label is not None else None,
            "children": children,
            "instances": instances,
        }

    def __convert_instance_for_deserialization(
        self, instance: Any, task_id: TaskId
    ) -> TaskInstance:
        if not isinstance(instance, dict):
            raise ValueError(f"Instances of task {task_id!r} must be mappings")

        instance_task_id = str(instance.get("task_id", task_id))
        if instance_task_id != task_id:
            raise ValueError(
                f"Instance for task {instance_task_id!r} listed under task {task_id!r}"
            )

        run_id = instance.get("run_id")
        if run_id is None:
            raise ValueError(f"Instance of task {task_id!r} has no run_id")

        state = instance.get("state")
        if state is not None and state not in TASK_STATES:
            raise ValueError(f"Unknown state {state!r} for task {task_id!r}")

        try_number = int(instance.get("try_number") or 0)
        if try_number < 0:
            raise ValueError(f"Negative try_number for task {task_id!r}")

        return {
            "run_id": str(run_id),
            "task_id": instance_task_id,
            "state": state,
            "start_date": time.datetime_from_yaml_optional(instance.get("start_date")),
            "end_date": time.datetime_from_yaml_optional(instance.get("end_date")),
            "queued_dttm": time.datetime_from_yaml_optional(instance.get("queued_dttm")),
            "try_number": try_number,
        }

    def get_dag_run(self) -> DagRun:
        return self.dag_run

    def get_all_tasks(self) -> list[Task]:
        return self.dag_run["tasks"]

    def get_task(self, task_id: TaskId) -> Optional[Task]:
        """Find a task anywhere in the tree by id."""
        pending = list(self.get_all_tasks())
        while pending:
            task = pending.pop(0)
            if task["id"] == task_id:
                return task
            pending.extend(task["children"] or [])
        return None
