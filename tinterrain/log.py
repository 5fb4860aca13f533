"""Process-wide diagnostic logging with a level threshold and a selectable stream."""

from __future__ import annotations

import enum
import inspect
import os
import sys

__all__ = [
    "LogLevel",
    "LogStream",
    "set_log_stream",
    "set_log_level",
    "get_log_level",
    "decrease_log_level",
    "log_message",
    "log",
]


class LogLevel(enum.IntEnum):
    """Severity of a log message; higher is more severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


class LogStream(enum.Enum):
    """Where log messages are written."""

    NONE = "none"
    STDOUT = "stdout"
    STDERR = "stderr"


DEFAULT_LOG_LEVEL = LogLevel.INFO
DEFAULT_LOG_STREAM = LogStream.STDERR

_level: LogLevel = DEFAULT_LOG_LEVEL
_stream: LogStream = DEFAULT_LOG_STREAM


def set_log_stream(stream: LogStream) -> None:
    """Select the stream that log messages go to."""
    global _stream
    _stream = LogStream(stream)


def set_log_level(level: LogLevel) -> None:
    """Set the lowest level that is still written."""
    global _level
    _level = LogLevel(level)


def get_log_level() -> LogLevel:
    """Return the current threshold level."""
    return _level


def decrease_log_level() -> LogLevel:
    """Lower the threshold by one step (more verbose) and return the new level."""
    global _level
    if _level > LogLevel.TRACE:
        _level = LogLevel(_level - 1)
    return _level


def _target():
    if _stream is LogStream.STDOUT:
        return sys.stdout
    if _stream is LogStream.STDERR:
        return sys.stderr
    return None


def log_message(level: LogLevel, filename: str, line: int, message: str) -> None:
    """Write a message if its level passes the threshold.

    INFO messages are written bare; all other levels carry the level name
    and the source location.
    """
    level = LogLevel(level)
    target = _target()
    if target is None or not message or _level > level:
        return
    if level is LogLevel.INFO:
        target.write(f"{message}\n")
    else:
        name = filename.rsplit("/", 1)[-1]
        target.write(f"{level.name} {name}:{line} {message}\n")
    target.flush()


def log(level: LogLevel, message: str) -> None:
    """Log a message, recording the caller's file and line."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        filename = caller.f_code.co_filename.replace(os.sep, "/")
        line = caller.f_lineno
    else:
        filename, line = "", 0
    del frame, caller
    log_message(level, filename, line, message)