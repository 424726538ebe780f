from pathlib import Path

import pytest
from typer.testing import CliRunner

from taskgantt.initialize import initialize
from taskgantt.repository.configuration import CONFIGURATION_REPO
from taskgantt.terminal.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def initialized(config_dir: Path) -> None:
    initialize()


def test_gantt_closed_groups(snapshot_path: Path) -> None:
    result = runner.invoke(app, ["view", "gantt", str(snapshot_path)])

    assert result.exit_code == 0, result.output
    assert "extract" in result.output
    assert "Transform group" in result.output
    assert "transform.clean" not in result.output
    assert "█" in result.output


def test_gantt_open_group(snapshot_path: Path) -> None:
    result = runner.invoke(
        app, ["view", "gantt", str(snapshot_path), "--open", "transform"]
    )

    assert result.exit_code == 0, result.output
    assert "transform.clean" in result.output
    assert "transform.join" in result.output


def test_gantt_aliases_and_open_all(snapshot_path: Path) -> None:
    result = runner.invoke(app, ["v", "g", str(snapshot_path), "--open-all"])

    assert result.exit_code == 0, result.output
    assert "transform.clean" in result.output


def test_gantt_other_run_has_no_bars(snapshot_path: Path) -> None:
    result = runner.invoke(
        app, ["view", "gantt", str(snapshot_path), "--run-id", "manual__other"]
    )

    assert result.exit_code == 0, result.output
    assert "manual__other" in result.output
    assert "█" not in result.output


def test_gantt_zero_length_window_has_no_bars(snapshot_path: Path) -> None:
    result = runner.invoke(
        app,
        [
            "view",
            "gantt",
            str(snapshot_path),
            "--start",
            "2030-01-01",
            "--end",
            "2030-01-01",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "█" not in result.output


def test_gantt_select_and_tooltip(snapshot_path: Path) -> None:
    result = runner.invoke(
        app,
        [
            "view",
            "gantt",
            str(snapshot_path),
            "--select",
            "extract",
            "--tooltip",
            "extract",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Try Number" in result.output
    assert "Queued Duration" in result.output


def test_gantt_select_without_instance(snapshot_path: Path) -> None:
    result = runner.invoke(
        app, ["view", "gantt", str(snapshot_path), "--select", "transform.join"]
    )

    assert result.exit_code == 0, result.output
    assert "did not run" in result.output


def test_gantt_unknown_selection(snapshot_path: Path) -> None:
    result = runner.invoke(
        app, ["view", "gantt", str(snapshot_path), "--select", "missing"]
    )

    assert result.exit_code == 1
    assert "no task 'missing'" in result.output


def test_gantt_invalid_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("tasks:\n  - id: a\n  - id: a\n")

    result = runner.invoke(app, ["view", "gantt", str(path)])

    assert result.exit_code == 1
    assert "Error reading" in result.output


def test_gantt_without_header(snapshot_path: Path) -> None:
    result = runner.invoke(app, ["--no-header", "view", "gantt", str(snapshot_path)])

    assert result.exit_code == 0, result.output
    assert "taskgantt" not in result.output


def test_config_set_updates_settings() -> None:
    result = runner.invoke(
        app, ["config", "set", "--gantt-width", "640", "--log-level", "debug"]
    )

    assert result.exit_code == 0, result.output
    assert "Configuration updated successfully" in result.output
    config = CONFIGURATION_REPO.get_config()
    assert config["gantt_width"] == 640
    assert config["log_level"] == "DEBUG"


def test_config_set_rejects_unknown_log_level() -> None:
    result = runner.invoke(app, ["config", "set", "--log-level", "loud"])

    assert result.exit_code != 0
    assert CONFIGURATION_REPO.get_config()["log_level"] == "WARNING"


def test_config_view() -> None:
    result = runner.invoke(app, ["c", "v"])

    assert result.exit_code == 0, result.output
    assert "gantt_width" in result.output
    assert "500px" in result.output
