"""Runtime settings, read from ``WATCHSTORE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///data/watchstore.db"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    sql_echo: bool = False
    low_stock_watch_threshold: int = 5
    low_stock_component_threshold: int = 10

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            database_url=os.environ.get("WATCHSTORE_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=os.environ.get("WATCHSTORE_LOG_LEVEL", "INFO").upper(),
            sql_echo=_env_bool("WATCHSTORE_SQL_ECHO"),
            low_stock_watch_threshold=_env_int("WATCHSTORE_LOW_STOCK_WATCH", 5),
            low_stock_component_threshold=_env_int("WATCHSTORE_LOW_STOCK_COMPONENT", 10),
        )
