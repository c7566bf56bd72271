# src/dayplan/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every field has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DAYPLAN"

TASK_MODES = ("list", "run")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


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


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path

    # ---- Default inputs (None => stdin) ----
    tasks_file: Path | None
    quiz_file: Path | None

    # ---- Task runner ----
    tasks_mode: str
    run_poll_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "dayplan").strip() or "dayplan"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/dayplan"))

        tasks_file = _env_path(_k("TASKS_FILE"), None)
        quiz_file = _env_path(_k("QUIZ_FILE"), None)

        tasks_mode = _env(_k("TASKS_MODE"), "list").strip().lower()
        if tasks_mode not in TASK_MODES:
            tasks_mode = "list"

        # Below one second the run loop would just spin.
        run_poll_seconds = max(1.0, _env_float(_k("RUN_POLL_SECONDS"), 30.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_file=tasks_file,
            quiz_file=quiz_file,
            tasks_mode=tasks_mode,
            run_poll_seconds=run_poll_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
