"""Leveled console logging."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity of a log message, in increasing order."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


class Logger:
    """Writes messages at or above a threshold level as ``[LEVEL] message``."""

    def __init__(self, level: LogLevel = LogLevel.INFO, stream: TextIO | None = None):
        self.level = LogLevel(level)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def set_level(self, level: LogLevel) -> None:
        """Change the minimum level that gets written."""
        self.level = LogLevel(level)

    def write(self, level: LogLevel, message: str, *args: object) -> None:
        """Write *message*, %-formatted with *args*, if *level* is enabled."""
        level = LogLevel(level)
        if level < self.level:
            return
        text = message % args if args else message
        self.stream.write(f"[{level.name}] {text}\n")

    def debug(self, message: str, *args: object) -> None:
        self.write(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: object) -> None:
        self.write(LogLevel.INFO, message, *args)

    def warn(self, message: str, *args: object) -> None:
        self.write(LogLevel.WARN, message, *args)

    def error(self, message: str, *args: object) -> None:
        self.write(LogLevel.ERROR, message, *args)


_default_logger = Logger()


def get_logger() -> Logger:
    """Return the shared process-wide logger."""
    return _default_logger