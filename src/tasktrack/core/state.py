# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..navigation.navigator import Navigator
from .ports import ClosableTaskSource

if TYPE_CHECKING:
    from ..screens.host import ScreenHost


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    task_source: ClosableTaskSource
    navigator: Navigator
    offline: bool = False

    # Set by the console connector while it runs.
    host: ScreenHost | None = None
