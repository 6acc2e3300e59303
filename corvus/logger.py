"""Severity-filtered logging channels that write to standard output."""

from __future__ import annotations

import logging
import queue
import sys
import threading
from dataclasses import dataclass
from enum import IntEnum
from logging.handlers import QueueHandler, QueueListener
from typing import Any

from corvus.names import Name
from corvus.strings import format_string


class LogSeverity(IntEnum):
    """How serious a message is; ``ALL`` lets every message through."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5
    OFF = 6
    ALL = 0


_LEVEL_NAMES = {
    LogSeverity.TRACE: "trace",
    LogSeverity.DEBUG: "debug",
    LogSeverity.INFO: "info",
    LogSeverity.WARN: "warning",
    LogSeverity.ERROR: "error",
    LogSeverity.CRITICAL: "critical",
    LogSeverity.OFF: "off",
}

_PATTERN = "[%(asctime)s] [%(thread)d] [%(severity)s] %(message)s"
_DATE_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class LogChannel:
    """A named log channel and the least severity it lets through."""

    name: Name
    severity: LogSeverity = LogSeverity.ALL

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            object.__setattr__(self, "name", Name(self.name))
        elif not isinstance(self.name, Name):
            raise TypeError(f"channel name must be a Name or str, not {type(self.name).__name__}")
        object.__setattr__(self, "severity", LogSeverity(self.severity))


class _StdoutHandler(logging.Handler):
    """Writes formatted records to whatever ``sys.stdout`` is at the time."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


_stdout_handler = _StdoutHandler()
_stdout_handler.setFormatter(logging.Formatter(_PATTERN, _DATE_FORMAT))

_lock = threading.Lock()
_channel_levels: dict[str, LogSeverity] = {}
_listener: QueueListener | None = None
_queue_handler: QueueHandler | None = None


def setup() -> None:
    """Start the background writer and let every known channel log everything."""
    global _listener, _queue_handler
    with _lock:
        if _listener is not None:
            _listener.stop()
        records: queue.Queue[Any] = queue.Queue()
        _queue_handler = QueueHandler(records)
        _listener = QueueListener(records, _stdout_handler)
        _listener.start()
        for name in _channel_levels:
            _channel_levels[name] = LogSeverity.ALL


def destroy() -> None:
    """Flush pending messages, stop the background writer and forget all channels."""
    global _listener, _queue_handler
    with _lock:
        listener, _listener, _queue_handler = _listener, None, None
        _channel_levels.clear()
    if listener is not None:
        listener.stop()


def _dispatch(record: logging.LogRecord) -> None:
    with _lock:
        handler = _queue_handler
    if handler is not None:
        handler.emit(record)
    else:
        _stdout_handler.handle(record)


def log(channel: LogChannel, severity: LogSeverity, message: str, *args: Any) -> None:
    """Write ``message`` on ``channel`` if ``severity`` passes its filter.

    With ``args`` the message is a brace format string; without, it is
    written as it is.
    """
    severity = LogSeverity(severity)
    if severity < channel.severity or severity is LogSeverity.OFF:
        return
    name = channel.name.string
    with _lock:
        level = _channel_levels.setdefault(name, channel.severity)
    if severity < level:
        return
    text = format_string(message, *args) if args else message
    record = logging.LogRecord(name, int(severity) + 1, "", 0, text, None, None)
    record.severity = _LEVEL_NAMES[severity]
    _dispatch(record)


LOG_TEMP = LogChannel(Name("Temp"), LogSeverity.ALL)