# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskkeeper.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKKEEPER_APP_NAME",
        "TASKKEEPER_LOG_LEVEL",
        "TASKKEEPER_LOG_DIR",
        "TASKKEEPER_DATA_DIR",
        "TASKKEEPER_USERS_PATH",
        "TASKKEEPER_TASKS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_use_working_directory_files() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskkeeper"
    assert s.log_level == "WARNING"
    assert s.users_path == Path("users.txt")
    assert s.tasks_path == Path("tasks.txt")
    assert s.log_dir == Path(".taskkeeper")


def test_data_dir_moves_default_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKKEEPER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKKEEPER_TASKS_PATH", str(tmp_path / "other" / "t.txt"))
    monkeypatch.setenv("TASKKEEPER_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.users_path == tmp_path / "users.txt"
    assert s.tasks_path == tmp_path / "other" / "t.txt"
    assert s.log_level == "DEBUG"
