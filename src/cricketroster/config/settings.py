"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_HOST_ENV = "CRICKETROSTER_HOST"
_PORT_ENV = "CRICKETROSTER_PORT"
_LOG_LEVEL_ENV = "CRICKETROSTER_LOG_LEVEL"

_HOST_DEFAULT = "127.0.0.1"
_PORT_DEFAULT = 8000
_PORT_MIN = 1
_PORT_MAX = 65535
_LOG_LEVEL_DEFAULT = "INFO"
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_port(name: str, default: int) -> int:
    text = _env_str(name, "")
    if not text:
        return default
    if not text.isdigit():
        logger.warning("Invalid port for %s: %s; using default %d", name, text, default)
        return default
    return min(_PORT_MAX, max(_PORT_MIN, int(text)))


def _env_log_level(name: str, default: str) -> str:
    value = _env_str(name, default).upper()
    if value not in _LOG_LEVELS:
        logger.warning("Invalid log level for %s: %s; using default %s", name, value, default)
        return default
    return value


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""

    return Settings(
        host=_env_str(_HOST_ENV, _HOST_DEFAULT),
        port=_env_port(_PORT_ENV, _PORT_DEFAULT),
        log_level=_env_log_level(_LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT),
    )
