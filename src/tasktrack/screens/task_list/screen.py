# src/tasktrack/screens/task_list/screen.py

from __future__ import annotations

from collections.abc import Callable

from ...core.ports import NavigationPort, TaskSource
from ...navigation.navigator import Route
from ..theme import Theme
from .renderer import TaskListView, activate_create, activate_row, format_task_list, render_task_list
from .view_model import TaskListViewModel


class TaskListScreen:
    """
    The list_tasks screen: view-model + renderer + the two navigation intents.

    Row activation -> task_detail {"id": <task id>}; create -> add_task.
    """

    route = Route.LIST

    def __init__(self, navigator: NavigationPort, source: TaskSource, *, title: str = "To-do") -> None:
        self._navigator = navigator
        self.title = title
        self.view_model = TaskListViewModel(source)

    # ---- lifecycle ----

    def mount(self, on_change: Callable[[], None]) -> None:
        # Listener first: attach() refreshes right away when the list is focused.
        self.view_model.subscribe(lambda _vm: on_change())
        self.view_model.attach(self._navigator, self.route)

    def unmount(self) -> None:
        self.view_model.detach()

    # ---- intents ----

    def open_task(self, task_id: str) -> None:
        self._navigator.navigate(Route.DETAIL, {"id": task_id})

    def create_task(self) -> None:
        self._navigator.navigate(Route.ADD)

    # ---- presentation ----

    @property
    def view(self) -> TaskListView:
        return render_task_list(self.view_model.tasks, self.view_model.is_loading)

    def lines(self, theme: Theme, width: int = 60) -> list[str]:
        out = format_task_list(self.view, title=self.title, theme=theme, width=width)
        out.append(theme.faint("<n> open task   + new task   /help commands   /exit quit"))
        return out

    def handle_input(self, text: str) -> str | None:
        """Map one typed line to an intent. Returns a message for the user, or None."""
        text = text.strip()
        if text == "+":
            activate_create(self)
            return None
        if text.isdecimal():
            number = int(text)
            if activate_row(self.view, number, self):
                return None
            return f"No task #{number} on screen."
        return "Type a task number to open it, or + to add a task."
