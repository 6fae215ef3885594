# src/todo_mobile/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No network access or secrets required at import time.
- Every value has a sane default so the console runs out of the box.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"

DEFAULT_API_URL = "https://my-todofull-app.onrender.com/tasks"
FILTER_MODES = ("all", "completed", "incomplete")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
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


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Task API ----
    api_url: str
    request_timeout_seconds: float | None

    # ---- UI defaults ----
    dark_mode: bool
    default_filter: str
    fetch_on_start: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-mobile").strip() or "todo-mobile"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        # Trailing slash would produce "<url>//<id>" for item routes.
        api_url = (_env(_k("API_URL"), DEFAULT_API_URL).strip() or DEFAULT_API_URL).rstrip("/")

        # 0 (or negative) means "no timeout", same as the mobile client.
        timeout = _env_float(_k("REQUEST_TIMEOUT_SECONDS"), 0.0)
        request_timeout_seconds = timeout if timeout > 0 else None

        dark_mode = _env_bool(_k("DARK_MODE"), False)
        default_filter = _env_choice(_k("DEFAULT_FILTER"), "all", FILTER_MODES)
        fetch_on_start = _env_bool(_k("FETCH_ON_START"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo-mobile"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_url=api_url,
            request_timeout_seconds=request_timeout_seconds,
            dark_mode=dark_mode,
            default_filter=default_filter,
            fetch_on_start=fetch_on_start,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
