# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOOK_APP_NAME": "App display name (default: taskbook).",
    "TASKBOOK_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKBOOK_DATA_DIR": "Local data directory for the database and taskbook.log (default: .local/taskbook).",
    "TASKBOOK_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Storage
    "TASKBOOK_SQLITE_TIMEOUT": "Seconds SQLite waits on a locked database (default: 30).",
    # Console
    "TASKBOOK_CONFIRM_DELETE": "Ask before /del removes a task (true/false, default: true).",
}
