from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pendulum
import pytest

from taskgantt import configuration
from taskgantt.model.task import Task
from taskgantt.model.task_fail import TaskFail
from taskgantt.model.task_instance import TaskInstance
from taskgantt.repository.configuration import CONFIGURATION_REPO
from taskgantt.view import state as view_state

RUN_ID = "scheduled__2024-01-01"


def _at(t0: pendulum.DateTime, seconds: float) -> pendulum.DateTime:
    return t0.add(microseconds=round(seconds * 1_000_000))


@pytest.fixture
def t0() -> pendulum.DateTime:
    return pendulum.datetime(2024, 1, 1, tz="UTC")


@pytest.fixture
def window(t0: pendulum.DateTime) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """A 100 second gantt window starting at t0."""
    return t0, t0.add(seconds=100)


@pytest.fixture
def make_instance(t0: pendulum.DateTime) -> Callable[..., TaskInstance]:
    def _make_instance(
        task_id: str = "extract",
        run_id: str = RUN_ID,
        state: Optional[str] = "success",
        start: Optional[float] = 10,
        end: Optional[float] = 30,
        queued: Optional[float] = None,
        try_number: int = 1,
    ) -> TaskInstance:
        """Offsets are seconds after t0."""
        return {
            "run_id": run_id,
            "task_id": task_id,
            "state": state,  # type: ignore[typeddict-item]
            "start_date": _at(t0, start) if start is not None else None,
            "end_date": _at(t0, end) if end is not None else None,
            "queued_dttm": _at(t0, queued) if queued is not None else None,
            "try_number": try_number,
        }

    return _make_instance


@pytest.fixture
def make_task(
    make_instance: Callable[..., TaskInstance],
) -> Callable[..., Task]:
    def _make_task(
        task_id: str,
        children: Optional[list[Task]] = None,
        instances: Optional[list[TaskInstance]] = None,
        **instance_args: Any,
    ) -> Task:
        if instances is None:
            instances = [make_instance(task_id=task_id, **instance_args)]
        return {
            "id": task_id,
            "label": None,
            "children": children,
            "instances": instances,
        }

    return _make_task


@pytest.fixture
def make_task_fail(t0: pendulum.DateTime) -> Callable[..., TaskFail]:
    def _make_task_fail(
        task_id: str = "extract",
        start: Optional[float] = 1,
        end: Optional[float] = 4,
        run_id: Optional[str] = RUN_ID,
    ) -> TaskFail:
        return {
            "task_id": task_id,
            "run_id": run_id,
            "start_date": _at(t0, start) if start is not None else None,
            "end_date": _at(t0, end) if end is not None else None,
        }

    return _make_task_fail


class RecordingFetcher:
    """Failure history lookup that remembers how it was called."""

    def __init__(self, task_fails: Optional[list[TaskFail]] = None) -> None:
        self.task_fails = task_fails
        self.calls: list[tuple[Optional[str], Optional[str], bool]] = []

    def __call__(
        self, task_id: Optional[str], run_id: Optional[str], enabled: bool
    ) -> Optional[list[TaskFail]]:
        self.calls.append((task_id, run_id, enabled))
        if not enabled:
            return None
        return self.task_fails


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a temporary directory for every test."""
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    yield config_path
    CONFIGURATION_REPO.reset()


SNAPSHOT = """\
run_id: scheduled__2024-01-01
gantt_start_date: "2024-01-01T00:00:00+00:00"
gantt_end_date: "2024-01-01T00:01:40+00:00"
tasks:
  - id: extract
    instances:
      - run_id: scheduled__2024-01-01
        state: success
        try_number: 2
        queued_dttm: "2024-01-01T00:00:02+00:00"
        start_date: "2024-01-01T00:00:05+00:00"
        end_date: "2024-01-01T00:00:30+00:00"
  - id: transform
    label: Transform group
    instances:
      - run_id: scheduled__2024-01-01
        state: running
        try_number: 1
        start_date: "2024-01-01T00:00:30+00:00"
    children:
      - id: transform.clean
        instances:
          - run_id: scheduled__2024-01-01
            state: failed
            try_number: 1
            start_date: "2024-01-01T00:00:30+00:00"
            end_date: "2024-01-01T00:00:50+00:00"
      - id: transform.join
        instances: []
task_fails:
  - task_id: extract
    run_id: scheduled__2024-01-01
    start_date: "2024-01-01T00:00:01+00:00"
    end_date: "2024-01-01T00:00:04+00:00"
  - task_id: extract
    run_id: scheduled__2024-01-01
    start_date: "2024-01-01T00:00:05+00:00"
    end_date: "2024-01-01T00:00:30+00:00"
"""


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "run.yaml"
    path.write_text(SNAPSHOT)
    return path


@pytest.fixture
def make_fetcher() -> Callable[..., RecordingFetcher]:
    return RecordingFetcher
