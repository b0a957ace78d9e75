"""Application settings loaded from environment variables.

Every variable carries the TODOLIST_ prefix; missing or malformed values
fall back to the defaults below.
"""

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODOLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


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


@dataclass(frozen=True)
class Settings:
    app_name: str = "To Do List"
    db_path: Path = Path("tasks.db")
    db_pool_size: int = 5
    log_level: str = "INFO"
    log_dir: Path = Path(".local/todolist")


def get_settings() -> Settings:
    pool_size = _env_int(_k("DB_POOL_SIZE"), 5)
    return Settings(
        db_path=_env_path(_k("DB_PATH"), Path("tasks.db")),
        db_pool_size=pool_size if pool_size > 0 else 5,
        log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
        log_dir=_env_path(_k("LOG_DIR"), Path(".local/todolist")),
    )
