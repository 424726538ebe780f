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
from taskgantt.model.entity_id import RunId, TaskId
from taskgantt.model.task_fail import TaskFail

logger = logging.getLogger(__name__)


class TaskFailRepository:
    """Failure history stored in the task_fails section of a run snapshot file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._task_fails: Optional[list[TaskFail]] = None

    @property
    def task_fails(self) -> list[TaskFail]:
        if self._task_fails is None:
            self.__load_data()
        if self._task_fails is None:
            raise ValueError()
        return self._task_fails

    def __load_data(self) -> None:
        logger.debug("Loading failure history from %s", self.path)
        raw = load(self.path.read_text(), Loader=Loader) or {}
        raw_task_fails = raw.get("task_fails") or []
        if not isinstance(raw_task_fails, list):
            raise ValueError("task_fails must be a list")
        self._task_fails = [
            self.__convert_task_fail_for_deserialization(raw_task_fail)
            for raw_task_fail in raw_task_fails
        ]

    def __convert_task_fail_for_deserialization(self, task_fail: Any) -> TaskFail:
        if not isinstance(task_fail, dict) or task_fail.get("task_id") is None:
            raise ValueError(f"Invalid task fail entry {task_fail!r}")
        run_id = task_fail.get("run_id")
        return {
            "task_id": str(task_fail["task_id"]),
            "run_id": str(run_id) if run_id is not None else None,
            "start_date": time.datetime_from_yaml_optional(task_fail.get("start_date")),
            "end_date": time.datetime_from_yaml_optional(task_fail.get("end_date")),
        }

    def fetch_task_fails(
        self, task_id: Optional[TaskId], run_id: Optional[RunId], enabled: bool
    ) -> Optional[list[TaskFail]]:
        """
        Return the recorded failures of a task in a run.

        Nothing is read while the lookup is disabled, and None is returned so
        callers treat it like history that has not arrived yet.
        """
        if not enabled or task_id is None:
            return None
        return [
            task_fail
            for task_fail in self.task_fails
            if task_fail["task_id"] == task_id
            and (run_id is None or task_fail["run_id"] in (None, run_id))
        ]
