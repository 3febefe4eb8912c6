"""Settings loaded from environment variables (+ .env)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from urllib.parse import quote

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

REQUIRED_VARS = ("DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME")


class ConfigError(Exception):
    """Raised when the service cannot be configured from the environment."""


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Database ----
    db_protocol: str
    db_host: str
    db_port: str
    db_user: str
    db_password: str
    db_name: str
    db_pool_size: int
    db_max_overflow: int
    db_pool_timeout: int
    db_init_schema: bool

    # ---- HTTP server ----
    app_host: str
    app_port: int

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @property
    def database_url(self) -> str:
        user = quote(self.db_user, safe="")
        password = quote(self.db_password, safe="")
        return (
            f"{self.db_protocol}://{user}:{password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @staticmethod
    def from_env(env_file: str | Path | None = ".env") -> "Settings":
        loaded = load_dotenv(env_file, override=False) if env_file else False

        missing = [n for n in REQUIRED_VARS if _env(n).strip() == ""]
        if missing:
            where = "environment" if loaded else f"environment (no {env_file} file found)"
            raise ConfigError(f"Missing required variables in {where}: {', '.join(missing)}")
        if env_file and not loaded:
            logger.warning("No %s file found, using process environment only", env_file)

        port = _env("DB_PORT").strip()
        if not port.isdigit():
            raise ConfigError(f"DB_PORT must be an integer, got {port!r}")

        return Settings(
            db_protocol=_env("DB_PROTOCOL", "postgresql+psycopg").strip(),
            db_host=_env("DB_HOST").strip(),
            db_port=port,
            db_user=_env("DB_USER"),
            db_password=_env("DB_PASSWORD"),
            db_name=_env("DB_NAME").strip(),
            db_pool_size=_env_int("DB_POOL_SIZE", 5),
            db_max_overflow=_env_int("DB_MAX_OVERFLOW", 10),
            db_pool_timeout=_env_int("DB_POOL_TIMEOUT", 30),
            db_init_schema=_env_bool("DB_INIT_SCHEMA", False),
            app_host=_env("APP_HOST", "localhost"),
            app_port=_env_int("APP_PORT", 8080),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            log_file=_env_path("LOG_FILE"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
