# src/tasktrack/core/models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Server field name first, then accepted aliases.
_ID_KEYS = ("id",)
_TITLE_KEYS = ("taskTitle", "title")
_DUE_KEYS = ("subtitleField", "dueDateDisplay", "dueDate")
_COMPLETED_KEYS = ("isCompleted", "completed")


class TaskPayloadError(ValueError):
    """The response body does not decode into a task collection."""


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    due_date_display: str
    completed: bool


class FailureKind(StrEnum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class FetchOk:
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class FetchFailed:
    kind: FailureKind
    reason: str
    status_code: int | None = None


FetchResult = FetchOk | FetchFailed


def _pick(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    return None


def parse_task(raw: Any) -> Task:
    """
    Build a Task from one JSON record.

    Unknown fields are ignored. Integer ids are accepted and stringified;
    a missing due date reads as "" and a missing completion flag as False.
    """
    if not isinstance(raw, Mapping):
        raise TaskPayloadError(f"task record must be an object, got {type(raw).__name__}")

    tid = _pick(raw, _ID_KEYS)
    # bool is an int subclass; never accept it as an id.
    if isinstance(tid, bool) or not isinstance(tid, (str, int)):
        raise TaskPayloadError("task record has no usable id")
    tid = str(tid)
    if not tid.strip():
        raise TaskPayloadError("task record has an empty id")

    title = _pick(raw, _TITLE_KEYS)
    if not isinstance(title, str):
        raise TaskPayloadError(f"task {tid} has no title")

    due = _pick(raw, _DUE_KEYS)
    if due is None:
        due = ""
    elif not isinstance(due, str):
        due = str(due)

    completed = _pick(raw, _COMPLETED_KEYS)
    if completed is None:
        completed = False
    elif not isinstance(completed, bool):
        raise TaskPayloadError(f"task {tid} has a non-boolean completion flag")

    return Task(id=tid, title=title, due_date_display=due, completed=completed)


def parse_task_list(payload: Any) -> tuple[Task, ...]:
    """Decode a whole response body, keeping server order. Ids must be unique."""
    if not isinstance(payload, list):
        raise TaskPayloadError(f"expected a JSON array of tasks, got {type(payload).__name__}")

    tasks: list[Task] = []
    seen: set[str] = set()
    for raw in payload:
        task = parse_task(raw)
        if task.id in seen:
            raise TaskPayloadError(f"duplicate task id {task.id!r}")
        seen.add(task.id)
        tasks.append(task)
    return tuple(tasks)
