# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrack.core.state import AppState
from tasktrack.navigation.navigator import Navigator

from .fakes import FakeTaskSource


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the screens.

    We use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasktrack-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_file=tmp_path / "data" / "tasktrack.log",
        api_base_url="http://tasks.test",
        tasks_path="/tasks",
        connect_timeout_seconds=1.0,
        read_timeout_seconds=1.0,
        offline_demo=False,
        header_title="To-do",
        primary_color="#2563EB",
    )


@pytest.fixture()
def source() -> FakeTaskSource:
    return FakeTaskSource()


@pytest.fixture()
def state(settings: SimpleNamespace, source: FakeTaskSource) -> AppState:
    """AppState wired with a fake task source and a real navigator."""
    return AppState(settings=settings, task_source=source, navigator=Navigator())
