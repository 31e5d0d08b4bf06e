# src/tasktrack/screens/host.py

"""
Screen host: keeps one mounted screen per navigator stack entry.

Entries pushed onto the stack get a freshly built screen (mount); entries
popped off it have their screen unmounted and dropped. Screen state therefore
lives exactly as long as its stack entry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from ..core.state import AppState
from ..navigation.navigator import Navigator, Route, RouteEntry
from .placeholders import AddTaskScreen, TaskDetailScreen
from .task_list.screen import TaskListScreen
from .theme import Theme

logger = logging.getLogger(__name__)


class Screen(Protocol):
    def mount(self, on_change: Callable[[], None]) -> None: ...
    def unmount(self) -> None: ...
    def lines(self, theme: Theme, width: int = 60) -> list[str]: ...
    def handle_input(self, text: str) -> str | None: ...


ScreenFactory = Callable[[RouteEntry], Screen]


def default_screen_factory(state: AppState) -> ScreenFactory:
    title = str(getattr(state.settings, "header_title", "To-do"))

    def _build(entry: RouteEntry) -> Screen:
        if entry.route == Route.LIST:
            return TaskListScreen(state.navigator, state.task_source, title=title)
        if entry.route == Route.ADD:
            return AddTaskScreen(entry, state.navigator.go_back)
        if entry.route == Route.DETAIL:
            return TaskDetailScreen(entry, state.navigator.go_back)
        raise ValueError(f"No screen for route {entry.route!r}")

    return _build


class ScreenHost:
    def __init__(self, navigator: Navigator, factory: ScreenFactory, on_change: Callable[[], None]) -> None:
        self._navigator = navigator
        self._factory = factory
        self._on_change = on_change
        self._screens: dict[int, Screen] = {}
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def current(self) -> Screen:
        return self._screens[self._navigator.current.key]

    def screen_for(self, entry: RouteEntry) -> Screen | None:
        return self._screens.get(entry.key)

    def start(self) -> None:
        """Mount the screens already on the stack, then follow stack changes."""
        self._unsubscribe = self._navigator.subscribe_change(self._sync)
        for entry in self._navigator.stack:
            self._mount(entry)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        for key in reversed(list(self._screens)):
            self._unmount(key)

    def _mount(self, entry: RouteEntry) -> None:
        screen = self._factory(entry)
        self._screens[entry.key] = screen
        logger.debug("mount %s (key=%s)", entry.route.value, entry.key)
        screen.mount(self._on_change)

    def _unmount(self, key: int) -> None:
        screen = self._screens.pop(key)
        logger.debug("unmount key=%s", key)
        screen.unmount()

    def _sync(self, stack: tuple[RouteEntry, ...]) -> None:
        live = {e.key for e in stack}
        for key in reversed([k for k in self._screens if k not in live]):
            self._unmount(key)
        for entry in stack:
            if entry.key not in self._screens:
                self._mount(entry)
        self._on_change()
