from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TODO_FILE = ".todo.json"
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TODO_FILE: path of the task file. Default '.todo.json' in the working directory
    - TODO_LOG_LEVEL: DEBUG, INFO, WARNING (default), ERROR or CRITICAL
    - TODO_JSON_INDENT: indent for the stored JSON; unset means compact output
    - TODO_COLOR: 'false' to disable colored output (default: true)
    - NO_COLOR: any value disables colored output
    """

    todo_file: str
    log_level: str
    json_indent: Optional[int]
    color: bool

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)


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


def _parse_indent(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        indent = int(value.strip())
    except ValueError:
        return None
    return indent if indent >= 0 else None


# PUBLIC_INTERFACE
def normalize_log_level(value: Optional[str]) -> str:
    """Upper-case a level name, falling back to WARNING if unknown."""
    level = (value or "").strip().upper()
    return level if level in _LOG_LEVELS else DEFAULT_LOG_LEVEL


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    todo_file = _get_env("TODO_FILE", DEFAULT_TODO_FILE).strip()
    log_level = normalize_log_level(_get_env("TODO_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    json_indent = _parse_indent(os.getenv("TODO_JSON_INDENT"))

    color = _parse_bool(_get_env("TODO_COLOR", "true"), True)
    if os.getenv("NO_COLOR") is not None:
        color = False

    return Settings(
        todo_file=todo_file,
        log_level=log_level,
        json_indent=json_indent,
        color=color,
    )
