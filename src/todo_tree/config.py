# src/todo_tree/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

One Settings object for the whole app; nothing is read from the environment
outside this module.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file_enabled: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    @property
    def log_path(self) -> Path:
        return self.data_dir / f"{self.app_name}.log"

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo")
        # Console logs would interleave with the listing; keep them quiet by default.
        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_path = _env_path(_k("TASKS_FILE"), Path("tasks.json"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
