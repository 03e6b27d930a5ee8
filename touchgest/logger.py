"""Process-wide logging with error, warning, info and debug levels."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class LogLevel(Enum):
    """Severity of a log message."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    DEBUG = "debug"


class Logger:
    """Writes messages of enabled levels; errors go to stderr, the rest to stdout.

    By default everything except debug is shown. ``quiet`` silences every
    level; otherwise ``debug`` also enables debug messages.
    """

    def __init__(self, debug: bool = False, quiet: bool = False) -> None:
        if quiet:
            self._enabled = {level: False for level in LogLevel}
        else:
            self._enabled = {
                LogLevel.ERROR: True,
                LogLevel.WARNING: True,
                LogLevel.INFO: True,
                LogLevel.DEBUG: debug,
            }

    def enabled(self, level: LogLevel) -> bool:
        """Return whether messages of ``level`` are written."""
        return self._enabled[level]

    def stream(self, level: LogLevel) -> TextIO:
        """Return the stream messages of ``level`` are written to."""
        return sys.stderr if level is LogLevel.ERROR else sys.stdout

    def log(self, level: LogLevel, message: str) -> None:
        """Write ``message`` and a newline if ``level`` is enabled."""
        if self.enabled(level):
            out = self.stream(level)
            out.write(f"{message}\n")
            out.flush()


_instance: Logger | None = None


def configure(debug: bool = False, quiet: bool = False) -> Logger:
    """Create the shared logger with these options.

    The options only take effect if the shared logger does not exist yet.
    """
    global _instance
    if _instance is None:
        _instance = Logger(debug, quiet)
    return _instance


def get_logger() -> Logger:
    """Return the shared logger, creating it with defaults if needed."""
    return configure()