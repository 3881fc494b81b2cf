# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Screen title (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Console
    "TODO_COLOR": "ANSI colors and strike-through (true/false; default: on when stdout is a TTY).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo). Holds todo.log.",
    "TODO_PREFERENCES_PATH": "Preferences JSON path (default: <data_dir>/preferences.json).",
    # Persistence slot
    "TODO_TASKS_KEY": "Preferences key holding the task list (default: tasksKey).",
}
