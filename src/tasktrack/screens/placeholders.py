# src/tasktrack/screens/placeholders.py

"""
Minimal add_task / task_detail screens.

Creating and inspecting tasks happens elsewhere; these screens only show the
route they were opened with and lead back to the list (whose next focus
refetches everything).
"""

from __future__ import annotations

from collections.abc import Callable

from ..navigation.navigator import Route, RouteEntry
from .theme import Theme

_BACK_HINT = "b or /back to return to the list"


class _PlaceholderScreen:
    route: Route
    title = ""

    def __init__(self, entry: RouteEntry, go_back: Callable[[], bool]) -> None:
        self.entry = entry
        self._go_back = go_back

    def mount(self, on_change: Callable[[], None]) -> None:
        return

    def unmount(self) -> None:
        return

    def body(self) -> list[str]:
        return []

    def lines(self, theme: Theme, width: int = 60) -> list[str]:
        out = [theme.header(self.title), theme.accent("─" * max(20, width)), ""]
        out.extend("  " + line for line in self.body())
        out.append("")
        out.append(theme.faint(_BACK_HINT))
        return out

    def handle_input(self, text: str) -> str | None:
        if text.strip().lower() in {"b", "back"}:
            self._go_back()
            return None
        return f"Nothing to do here yet; {_BACK_HINT}."


class AddTaskScreen(_PlaceholderScreen):
    route = Route.ADD
    title = "New task"

    def body(self) -> list[str]:
        return ["Task creation is handled by the task service."]


class TaskDetailScreen(_PlaceholderScreen):
    route = Route.DETAIL
    title = "Task"

    @property
    def task_id(self) -> str:
        return self.entry.params["id"]

    def body(self) -> list[str]:
        return [f"Task id: {self.task_id}"]
