# src/tasktrack/screens/task_list/renderer.py

"""
Task list rendering.

render_task_list() is a pure function of (tasks, is_loading) that selects
exactly one of three states:
- LOADING: while a fetch is in flight, whatever the tasks are
- EMPTY:   not loading, no tasks
- ROWS:    not loading, one row per task in collection order

format_task_list() turns the selected state into terminal lines. Row and
create activations are forwarded to TaskListIntents; routing is not decided here.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from ...core.models import Task
from ..theme import Theme

GLYPH_COMPLETED = "✔"  # heavy check mark
GLYPH_OPEN = "○"  # white circle
CHEVRON = "›"
CREATE_CONTROL = "[+]"

LOADING_TEXT = "Loading tasks..."
EMPTY_TEXT = "No tasks added yet."
DUE_PREFIX = "Due:"


class ListState(StrEnum):
    LOADING = "loading"
    EMPTY = "empty"
    ROWS = "rows"


@dataclass(frozen=True, slots=True)
class TaskRow:
    number: int
    task_id: str
    glyph: str
    title: str
    struck: bool
    due_line: str


@dataclass(frozen=True, slots=True)
class TaskListView:
    state: ListState
    rows: tuple[TaskRow, ...] = ()


class TaskListIntents(Protocol):
    def open_task(self, task_id: str) -> None: ...
    def create_task(self) -> None: ...


def _row(number: int, task: Task) -> TaskRow:
    return TaskRow(
        number=number,
        task_id=task.id,
        glyph=GLYPH_COMPLETED if task.completed else GLYPH_OPEN,
        title=task.title,
        struck=task.completed,
        due_line=f"{DUE_PREFIX} {task.due_date_display}",
    )


def render_task_list(tasks: Sequence[Task], is_loading: bool) -> TaskListView:
    if is_loading:
        return TaskListView(ListState.LOADING)
    if not tasks:
        return TaskListView(ListState.EMPTY)
    return TaskListView(ListState.ROWS, tuple(_row(n, t) for n, t in enumerate(tasks, start=1)))


def activate_row(view: TaskListView, number: int, intents: TaskListIntents) -> bool:
    """Forward activation of row `number` (1-based). False if no such row is shown."""
    if view.state != ListState.ROWS:
        return False
    for row in view.rows:
        if row.number == number:
            intents.open_task(row.task_id)
            return True
    return False


def activate_create(intents: TaskListIntents) -> None:
    intents.create_task()


def format_task_list(view: TaskListView, *, title: str, theme: Theme, width: int = 60) -> list[str]:
    width = max(20, width)
    lines: list[str] = [theme.header(title), theme.accent("─" * width), ""]

    if view.state == ListState.LOADING:
        lines.append("  " + theme.accent(LOADING_TEXT))
    elif view.state == ListState.EMPTY:
        lines.append("  " + theme.muted(EMPTY_TEXT))
    else:
        separator = "  " + theme.faint("─" * (width - 4))
        for i, row in enumerate(view.rows):
            if i:
                lines.append(separator)
            glyph = theme.accent(row.glyph) if row.struck else theme.muted(row.glyph)
            text = theme.struck(row.title) if row.struck else row.title
            lines.append(f"{row.number:>3}. {glyph} {text} {theme.faint(CHEVRON)}")
            lines.append(f"       {theme.faint(row.due_line)}")

    lines.append("")
    lines.append(" " * max(0, width - len(CREATE_CONTROL)) + theme.header(CREATE_CONTROL))
    return lines
