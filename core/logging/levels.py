from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def register_levels() -> None:
    for level in (LogLevel.TRACE, LogLevel.SUCCESS):
        if logging.getLevelName(int(level)) == f"Level {int(level)}":
            logging.addLevelName(int(level), level.name)


def to_level(value: int | str) -> int:
    """Resolve a level name or number; unknown names fall back to INFO."""
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    return logging.INFO
