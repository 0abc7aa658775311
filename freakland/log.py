"""Levelled console logging stamped with seconds since start-up."""

from __future__ import annotations

import sys
import threading
import time
from enum import IntEnum


class Level(IntEnum):
    """Severity of a log message, lowest first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        """Five-character tag written in each log line."""
        return _LABELS[self]


_LABELS = {
    Level.TRACE: "TRACE",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO ",
    Level.WARN: "WARN ",
    Level.ERROR: "ERROR",
    Level.FATAL: "FATAL",
}

_lock = threading.Lock()
_min_level = Level.TRACE
_start = time.monotonic()


def _elapsed() -> float:
    return time.monotonic() - _start


def init() -> None:
    """Restart the elapsed-time clock and reset the level filter."""
    global _start, _min_level
    _start = time.monotonic()
    _min_level = Level.TRACE
    log_message(Level.INFO, "Log", "Logging initialized")


def shutdown() -> None:
    """Log the shutdown and flush both output streams."""
    log_message(Level.INFO, "Log", "Logging shutdown")
    sys.stdout.flush()
    sys.stderr.flush()


def set_level(min_level: Level) -> None:
    """Discard messages below ``min_level`` from now on."""
    global _min_level
    _min_level = Level(min_level)


def log_message(level: Level, category: str, message: str) -> None:
    """Write one formatted line; errors and above go to stderr."""
    level = Level(level)
    if level < _min_level:
        return
    line = f"[{_elapsed():8.3f}] [{level.label}] [{category:<8}] {message}\n"
    with _lock:
        stream = sys.stderr if level >= Level.ERROR else sys.stdout
        stream.write(line)
        if level is Level.FATAL:
            stream.flush()


def trace(category: str, message: str) -> None:
    log_message(Level.TRACE, category, message)


def debug(category: str, message: str) -> None:
    log_message(Level.DEBUG, category, message)


def info(category: str, message: str) -> None:
    log_message(Level.INFO, category, message)


def warn(category: str, message: str) -> None:
    log_message(Level.WARN, category, message)


def error(category: str, message: str) -> None:
    log_message(Level.ERROR, category, message)


def fatal(category: str, message: str) -> None:
    log_message(Level.FATAL, category, message)