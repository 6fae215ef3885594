# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-mobile).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    # Task API
    "TODO_API_URL": "Task collection URL (default: https://my-todofull-app.onrender.com/tasks).",
    "TODO_REQUEST_TIMEOUT_SECONDS": "Per-request timeout; 0 or unset disables it (default: 0).",
    # UI defaults
    "TODO_DARK_MODE": "Start in dark mode (true/false, default: false).",
    "TODO_DEFAULT_FILTER": "Initial filter: all | completed | incomplete (default: all).",
    "TODO_FETCH_ON_START": "Load the task list when the console starts (default: true).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for logs (default: .local/todo-mobile).",
}
