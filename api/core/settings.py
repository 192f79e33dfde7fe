"""
Environment-driven settings.

Values are read on demand so tests (and long-lived processes) always see the
current environment.
"""

from __future__ import annotations

import logging
import os

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    return _env_str("DATABASE_URL")


def host() -> str:
    return _env_str("HOST", DEFAULT_HOST)


def port() -> int:
    value = _env_int("PORT", DEFAULT_PORT)
    if not 0 < value < 65536:
        return DEFAULT_PORT
    return value


def log_level() -> int:
    name = _env_str("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it does not know.
    return level if isinstance(level, int) else logging.INFO


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
