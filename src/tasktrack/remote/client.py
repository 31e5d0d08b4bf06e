# src/tasktrack/remote/client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.models import FailureKind, FetchFailed, FetchOk, FetchResult, TaskPayloadError, parse_task_list

logger = logging.getLogger(__name__)


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )


def friendly_fetch_error_message(failure: FetchFailed) -> str:
    """One-line, human readable description of a failed refresh."""
    reason = failure.reason.strip() or "unknown error"
    if failure.kind == FailureKind.TIMEOUT:
        return f"Task service did not answer in time ({reason})."
    if failure.kind == FailureKind.NETWORK:
        return f"Task service is unreachable ({reason})."
    if failure.kind == FailureKind.HTTP_STATUS:
        return f"Task service returned HTTP {failure.status_code} ({reason})."
    return f"Task service sent an unreadable task list ({reason})."


class HttpTaskSource:
    """
    TaskSource backed by the remote REST API.

    One operation: GET {base_url}{tasks_path}. Every failure mode is folded
    into FetchFailed; nothing but cancellation escapes list_tasks().
    """

    def __init__(self, settings: Any, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        base_url = str(getattr(settings, "api_base_url", "") or "").strip()
        if not base_url:
            raise RuntimeError("Task API base URL is not set. Set TASKTRACK_API_BASE_URL in your .env.")

        self._tasks_path = str(getattr(settings, "tasks_path", "/tasks") or "/tasks")
        app_name = str(getattr(settings, "app_name", "tasktrack"))

        timeout = _make_timeout(
            connect_s=float(getattr(settings, "connect_timeout_seconds", 5.0)),
            read_s=float(getattr(settings, "read_timeout_seconds", 15.0)),
        )
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json", "User-Agent": app_name},
        )
        logger.info("HttpTaskSource ready url=%s%s", base_url, self._tasks_path)

    @property
    def url(self) -> str:
        return f"{self._client.base_url}".rstrip("/") + self._tasks_path

    async def list_tasks(self) -> FetchResult:
        try:
            resp = await self._client.get(self._tasks_path)
        except httpx.TimeoutException as e:
            return FetchFailed(FailureKind.TIMEOUT, e.__class__.__name__)
        except httpx.HTTPError as e:
            return FetchFailed(FailureKind.NETWORK, str(e) or e.__class__.__name__)

        if not resp.is_success:
            return FetchFailed(FailureKind.HTTP_STATUS, resp.reason_phrase or "error", status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as e:
            return FetchFailed(FailureKind.MALFORMED, f"body is not JSON: {e}", status_code=resp.status_code)

        try:
            tasks = parse_task_list(payload)
        except TaskPayloadError as e:
            return FetchFailed(FailureKind.MALFORMED, str(e), status_code=resp.status_code)

        logger.debug("Fetched %d tasks from %s", len(tasks), self.url)
        return FetchOk(tasks)

    async def aclose(self) -> None:
        await self._client.aclose()
