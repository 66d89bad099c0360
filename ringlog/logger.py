"""Asynchronous logger that formats lines and hands them to a background sink."""

from __future__ import annotations

import atexit
import os
import threading
import time
from enum import IntEnum
from typing import Any

from .ring_buffer import RingBuffer
from .sink import Sink
from .writer import WriterType

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


def level_to_string(level: Any) -> str:
    """Return the level's name, or ``UNKNOWN`` for a value that is not a level."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


def format_message(level: Any, message: str, timestamp: str) -> str:
    """Build one log line, newline included."""
    return f"[{timestamp}][{level_to_string(level)}] {message}\n"


def _stringify(value: Any) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _current_time() -> str:
    return time.strftime(_TIME_FORMAT, time.localtime())


class Logger:
    """Formats messages and queues them for a sink running on its own thread."""

    def __init__(self) -> None:
        self.min_log_level = LogLevel.INFO
        self.console_output = True
        self._buffer: RingBuffer[str] | None = None
        self._sink: Sink | None = None
        self._lock = threading.Lock()

    def init(
        self,
        filename: str | os.PathLike = "",
        level: LogLevel = LogLevel.INFO,
        console_output: bool = True,
        override: bool = False,
    ) -> None:
        """Configure level and destinations and start a fresh sink.

        ``override`` is accepted for interface compatibility and has no effect.
        """
        with self._lock:
            if self._sink is not None:
                self._sink.finish()
            self.min_log_level = LogLevel(level)
            self.console_output = console_output
            self._buffer = RingBuffer()
            writer_types: list[WriterType] = []
            if console_output:
                writer_types.append(WriterType.STDOUT)
            if filename:
                writer_types.append(WriterType.FILE)
            self._sink = Sink(self._buffer, writer_types, filename)

    def log(self, level: LogLevel, *args: Any) -> None:
        """Concatenate ``args`` and queue the line if ``level`` passes the filter.

        A line is dropped silently when the buffer is full.
        """
        level = LogLevel(level)
        if level < self.min_log_level:
            return
        if self._buffer is None:
            raise RuntimeError("Logger is not initialised; call init() first")
        message = "".join(_stringify(arg) for arg in args)
        self._buffer.push(format_message(level, message, _current_time()))

    def debug(self, *args: Any) -> None:
        self.log(LogLevel.DEBUG, *args)

    def info(self, *args: Any) -> None:
        self.log(LogLevel.INFO, *args)

    def warning(self, *args: Any) -> None:
        self.log(LogLevel.WARNING, *args)

    def error(self, *args: Any) -> None:
        self.log(LogLevel.ERROR, *args)

    def critical(self, *args: Any) -> None:
        self.log(LogLevel.CRITICAL, *args)

    def set_log_level(self, level: LogLevel) -> None:
        self.min_log_level = LogLevel(level)

    def finish(self) -> None:
        """Drain queued lines into the writers and stop the sink."""
        if self._sink is not None:
            self._sink.finish()


_instance: Logger | None = None
_instance_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the process-wide logger, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Logger()
            atexit.register(_instance.finish)
        return _instance


def log_debug(*args: Any) -> None:
    get_logger().debug(*args)


def log_info(*args: Any) -> None:
    get_logger().info(*args)


def log_warning(*args: Any) -> None:
    get_logger().warning(*args)


def log_error(*args: Any) -> None:
    get_logger().error(*args)


def log_critical(*args: Any) -> None:
    get_logger().critical(*args)