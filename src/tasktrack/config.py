# src/tasktrack/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing remote is contacted at import time.
- An empty API base URL means "run against the offline demo source".
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKTRACK"

DEFAULT_API_BASE_URL = "http://127.0.0.1:3000"
DEFAULT_TASKS_PATH = "/tasks"
DEFAULT_PRIMARY_COLOR = "#2563EB"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _normalize_hex(raw: str, default: str) -> str:
    h = raw.strip().lstrip("#")
    if len(h) == 6 and all(c in "0123456789abcdefABCDEF" for c in h):
        return "#" + h.upper()
    return default


def _normalize_path(raw: str) -> str:
    p = raw.strip() or DEFAULT_TASKS_PATH
    return p if p.startswith("/") else "/" + p


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Remote task service ----
    api_base_url: str
    tasks_path: str
    connect_timeout_seconds: float
    read_timeout_seconds: float
    offline_demo: bool

    # ---- Presentation ----
    header_title: str
    primary_color: str

    @property
    def log_file(self) -> Path:
        return self.data_dir / "tasktrack.log"

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasktrack").strip() or "tasktrack"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasktrack"))

        api_base_url = _env(_k("API_BASE_URL"), DEFAULT_API_BASE_URL).strip().rstrip("/")
        tasks_path = _normalize_path(_env(_k("TASKS_PATH"), DEFAULT_TASKS_PATH))

        connect_timeout = max(0.1, _env_float(_k("CONNECT_TIMEOUT_SECONDS"), 5.0))
        read_timeout = max(0.1, _env_float(_k("READ_TIMEOUT_SECONDS"), 15.0))

        offline_demo = _env_bool(_k("OFFLINE_DEMO"), False)

        header_title = _env(_k("HEADER_TITLE"), "To-do").strip() or "To-do"
        primary_color = _normalize_hex(_env(_k("PRIMARY_COLOR"), DEFAULT_PRIMARY_COLOR), DEFAULT_PRIMARY_COLOR)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            api_base_url=api_base_url,
            tasks_path=tasks_path,
            connect_timeout_seconds=connect_timeout,
            read_timeout_seconds=read_timeout,
            offline_demo=offline_demo,
            header_title=header_title,
            primary_color=primary_color,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "API_BASE_URL"):
        object.__setattr__(SETTINGS, "api_base_url", str(_config_local.API_BASE_URL).strip().rstrip("/"))  # type: ignore[misc]
    if hasattr(_config_local, "OFFLINE_DEMO"):
        object.__setattr__(SETTINGS, "offline_demo", bool(_config_local.OFFLINE_DEMO))  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
