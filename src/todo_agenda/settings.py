from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - SQLITE_DB_PATH: path to sqlite db file. Default './data/todoApplication.db'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - STORE_TIMEOUT_SECONDS: upper bound for a single store call (default: 5)
    - UPDATE_MISSING_IS_ERROR: 'false' to let PUT on an unknown id report success (default: true)
    - LOG_LEVEL: logging level name (default: INFO)
    """

    sqlite_db_path: str = "./data/todoApplication.db"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    store_timeout_seconds: float = 5.0
    update_missing_is_error: bool = True
    log_level: str = "INFO"


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_float(value: str, default: float) -> float:
    try:
        parsed = float(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    sqlite_path = _get_env("SQLITE_DB_PATH", "./data/todoApplication.db").strip()
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*"))
    timeout = _parse_float(_get_env("STORE_TIMEOUT_SECONDS", "5"), 5.0)
    strict_update = _parse_bool(_get_env("UPDATE_MISSING_IS_ERROR", "true"), True)
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        sqlite_db_path=sqlite_path,
        cors_allow_origins=origins,
        store_timeout_seconds=timeout,
        update_missing_is_error=strict_update,
        log_level=log_level,
    )
