"""Leveled console output for the cleanup run.

Progress goes to stdout and problems to stderr, both through ``rich``. The
threshold comes from ``--log-level`` or ``FRESHSTART_LOG_LEVEL`` (default
``info``); ``--no-color``, ``NO_COLOR`` or ``FRESHSTART_NO_COLOR`` turn
styling off.
"""

from __future__ import annotations

import os
import sys
from enum import IntEnum

from rich.console import Console
from rich.text import Text


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40


LEVEL_NAMES = tuple(level.name.lower() for level in LogLevel)

_STYLES = {
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}

_configured_level: LogLevel | None = None
_no_color_override: bool | None = None


def _parse_level(value: str | None) -> LogLevel:
    name = (value or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configured_level() -> LogLevel:
    global _configured_level
    if _configured_level is None:
        _configured_level = _parse_level(os.environ.get("FRESHSTART_LOG_LEVEL"))
    return _configured_level


def set_level(value: str | None) -> None:
    """Override the threshold; unknown names mean ``info``."""
    global _configured_level
    _configured_level = _parse_level(value)


def set_no_color(value: bool) -> None:
    global _no_color_override
    _no_color_override = True if value else None


def is_enabled(level: LogLevel) -> bool:
    return level >= configured_level()


def _no_color() -> bool:
    if _no_color_override is not None:
        return _no_color_override
    return any(os.environ.get(name) for name in ("NO_COLOR", "FRESHSTART_NO_COLOR"))


def _write(level: LogLevel, message: str) -> None:
    if not is_enabled(level):
        return
    stream = sys.stderr if level >= LogLevel.WARNING else sys.stdout
    console = Console(file=stream, soft_wrap=True, highlight=False, no_color=_no_color())
    console.print(Text(message, style=_STYLES[level]))


def debug(message: str) -> None:
    _write(LogLevel.DEBUG, message)


def info(message: str) -> None:
    _write(LogLevel.INFO, message)


def success(message: str) -> None:
    _write(LogLevel.SUCCESS, message)


def warning(message: str) -> None:
    _write(LogLevel.WARNING, message)


def error(message: str) -> None:
    _write(LogLevel.ERROR, message)
