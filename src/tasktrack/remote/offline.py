# src/tasktrack/remote/offline.py

from __future__ import annotations

from ..core.models import FetchOk, FetchResult, Task

DEMO_TASKS: tuple[Task, ...] = (
    Task(id="demo-1", title="Buy milk", due_date_display="2024-01-01", completed=True),
    Task(id="demo-2", title="Book dentist appointment", due_date_display="2024-01-05", completed=False),
    Task(id="demo-3", title="Renew passport", due_date_display="2024-02-12", completed=False),
)


class OfflineTaskSource:
    """
    Deterministic task source used for demos when no task service is configured.

    Always succeeds with the same collection, so the screens can be explored
    without a server.
    """

    def __init__(self, tasks: tuple[Task, ...] = DEMO_TASKS) -> None:
        self._tasks = tuple(tasks)

    async def list_tasks(self) -> FetchResult:
        return FetchOk(self._tasks)

    async def aclose(self) -> None:
        return
