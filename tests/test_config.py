# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from dayplan.config import Settings
from dayplan.tasks.task_models import RunMode


def test_defaults(monkeypatch) -> None:
    for name in (
        "DAYPLAN_APP_NAME",
        "DAYPLAN_LOG_LEVEL",
        "DAYPLAN_LOG_TO_FILE",
        "DAYPLAN_DATA_DIR",
        "DAYPLAN_TASKS_FILE",
        "DAYPLAN_QUIZ_FILE",
        "DAYPLAN_TASKS_MODE",
        "DAYPLAN_RUN_POLL_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "dayplan"
    assert s.log_level == "WARNING"
    assert s.log_to_file is False
    assert s.data_dir == Path(".local/dayplan")
    assert s.tasks_file is None
    assert s.tasks_mode == "list"
    assert s.run_poll_seconds == 30.0


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DAYPLAN_TASKS_FILE", str(tmp_path / "tasks.txt"))
    monkeypatch.setenv("DAYPLAN_TASKS_MODE", "RUN")
    monkeypatch.setenv("DAYPLAN_LOG_TO_FILE", "yes")
    monkeypatch.setenv("DAYPLAN_RUN_POLL_SECONDS", "0.1")

    s = Settings.from_env()
    assert s.tasks_file == tmp_path / "tasks.txt"
    assert RunMode.from_setting(s.tasks_mode) == RunMode.RUN
    assert s.log_to_file is True
    assert s.run_poll_seconds == 1.0


def test_invalid_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("DAYPLAN_TASKS_MODE", "sometimes")
    monkeypatch.setenv("DAYPLAN_RUN_POLL_SECONDS", "soon")

    s = Settings.from_env()
    assert s.tasks_mode == "list"
    assert s.run_poll_seconds == 30.0
