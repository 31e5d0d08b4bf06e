# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the screens.

Screens depend on Protocols instead of concrete implementations.
This keeps the remote source and the navigator swappable and makes testing easier.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

from .models import FetchResult

Unsubscribe = Callable[[], None]


class TaskSource(Protocol):
    """
    Read side of the remote task service.

    list_tasks() never raises for transport or payload problems;
    it reports them as FetchFailed.
    """

    async def list_tasks(self) -> FetchResult: ...


class ClosableTaskSource(TaskSource, Protocol):
    async def aclose(self) -> None: ...


class FocusEvents(Protocol):
    """Level-triggered "route became focused" subscription."""

    def subscribe_focus(self, route: Any, callback: Callable[[Any], None]) -> Unsubscribe: ...


class NavigationPort(FocusEvents, Protocol):
    def navigate(self, route: Any, params: Mapping[str, str] | None = None) -> Any: ...
    def go_back(self) -> bool: ...
