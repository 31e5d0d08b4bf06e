# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACK_APP_NAME": "App name, also sent as User-Agent (default: tasktrack).",
    "TASKTRACK_LOG_LEVEL": "File log level (default: INFO). The console only shows warnings.",
    "TASKTRACK_DATA_DIR": "Local data directory for logs (default: .local/tasktrack).",
    # Task service
    "TASKTRACK_API_BASE_URL": "Task service base URL (default: http://127.0.0.1:3000; empty => demo data).",
    "TASKTRACK_TASKS_PATH": "Resource path of the task list (default: /tasks).",
    "TASKTRACK_CONNECT_TIMEOUT_SECONDS": "Connect timeout (default: 5).",
    "TASKTRACK_READ_TIMEOUT_SECONDS": "Read timeout (default: 15).",
    "TASKTRACK_OFFLINE_DEMO": "Always use the built-in demo tasks (true/false).",
    # Presentation
    "TASKTRACK_HEADER_TITLE": "List screen header (default: To-do).",
    "TASKTRACK_PRIMARY_COLOR": "Accent colour as hex (default: #2563EB).",
    # Terminal
    "NO_COLOR": "Disable ANSI styling.",
    "FORCE_COLOR": "Style output even when stdout is not a TTY.",
}
