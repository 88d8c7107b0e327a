# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "DAILY_TODO_APP_NAME": "App display name used in logs (default: daily-todo).",
    "DAILY_TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "DAILY_TODO_LOG_DIR": "Directory of daily_todo.log (default: <data_dir>).",
    # Data files
    "DAILY_TODO_DATA_DIR": "Directory of the JSON files (default: directory of the launched script).",
    "DAILY_TODO_TEMPLATE_PATH": "Weekday template path (default: <data_dir>/daily_occuring.json).",
    "DAILY_TODO_SNAPSHOT_PATH": "Today's snapshot path (default: <data_dir>/today.json).",
    # UI
    "DAILY_TODO_TICK_RATE_MS": "Redraw tick in milliseconds (default: 250).",
    "DAILY_TODO_ASCII_STATUS": "Use [ ]/[D] instead of box characters (default: true on Windows).",
}
