# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the concrete task source and the navigator into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import ClosableTaskSource
from ..core.state import AppState
from ..navigation.navigator import INITIAL_ROUTE, Navigator
from ..remote.client import HttpTaskSource
from ..remote.offline import OfflineTaskSource

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_task_source(settings) -> tuple[ClosableTaskSource, bool]:
    """Return (source, offline). Falls back to the demo source when no service is configured."""
    if getattr(settings, "offline_demo", False):
        logger.info("Offline demo mode requested; using built-in demo tasks.")
        return OfflineTaskSource(), True
    try:
        return HttpTaskSource(settings), False
    except RuntimeError as e:
        logger.warning("%s Using built-in demo tasks.", e)
        return OfflineTaskSource(), True


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    source, offline = create_task_source(settings)
    return AppState(
        settings=settings,
        task_source=source,
        navigator=Navigator(INITIAL_ROUTE),
        offline=offline,
    )
