# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from tasktrack.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in saved_handlers:
            h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_setup_logging_writes_to_log_dir(tmp_path, restore_root_logging) -> None:
    path = setup_logging(log_dir=tmp_path / "logs")

    assert path == tmp_path / "logs" / "tasktrack.log"
    assert path.parent.is_dir()

    root = restore_root_logging
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(path)
    assert len(root.handlers) == 2

    logging.getLogger("tasktrack.test").info("hello file")
    file_handlers[0].flush()
    assert "hello file" in path.read_text(encoding="utf-8")


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path)
    first = list(restore_root_logging.handlers)
    setup_logging(log_dir=tmp_path)

    assert len(restore_root_logging.handlers) == 2
    for h in first:
        h.close()


def test_console_filter_keeps_app_logs_and_drops_chatter() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("tasktrack.remote.client", logging.INFO)) is True
    assert f.filter(_record("httpx", logging.INFO)) is False
    assert f.filter(_record("httpcore.connection", logging.WARNING)) is False
    assert f.filter(_record("httpx", logging.ERROR)) is True
    assert f.filter(_record("py.warnings", logging.WARNING)) is False
    assert f.filter(_record("asyncio", logging.WARNING)) is False
    assert f.filter(_record("asyncio", logging.ERROR)) is True
