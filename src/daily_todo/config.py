# src/daily_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default; a bad value falls back to it.
- Data files default to the directory of the launched script.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DAILY_TODO"

TEMPLATE_FILENAME = "daily_occuring.json"
SNAPSHOT_FILENAME = "today.json"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def executable_dir() -> Path:
    """Directory of the launched program (the console script or module path)."""
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not argv0 or argv0 == "-c":
        return Path.cwd()
    return Path(argv0).resolve().parent


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Data files ----
    data_dir: Path
    template_path: Path
    snapshot_path: Path

    # ---- UI ----
    tick_rate_ms: int
    ascii_status: bool

    @property
    def tick_rate(self) -> float:
        return self.tick_rate_ms / 1000.0

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "daily-todo") or "daily-todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), executable_dir())
        template_path = _env_path(_k("TEMPLATE_PATH"), data_dir / TEMPLATE_FILENAME)
        snapshot_path = _env_path(_k("SNAPSHOT_PATH"), data_dir / SNAPSHOT_FILENAME)
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        tick_rate_ms = _env_int(_k("TICK_RATE_MS"), 250)
        if tick_rate_ms <= 0:
            tick_rate_ms = 250

        ascii_status = _env_bool(_k("ASCII_STATUS"), os.name == "nt")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            data_dir=data_dir,
            template_path=template_path,
            snapshot_path=snapshot_path,
            tick_rate_ms=tick_rate_ms,
            ascii_status=ascii_status,
        )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()
