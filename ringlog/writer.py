"""Destinations for formatted log lines."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from enum import Enum

KB = 1024
MB = 1024 * KB
GB = 1024 * MB


class Writer(ABC):
    """A destination that accepts messages and can be flushed."""

    @abstractmethod
    def write(self, message: str) -> None:
        """Accept one message."""

    @abstractmethod
    def flush(self) -> None:
        """Push any pending output to its destination."""

    @abstractmethod
    def name(self) -> str:
        """Return the writer's name."""

    def __enter__(self) -> "Writer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()


class FileWriter(Writer):
    """Buffers messages in memory and writes them to a new file."""

    BUFFER_SIZE = 20 * MB

    def __init__(self, filename: str | os.PathLike) -> None:
        self.filename = os.fspath(filename)
        if os.path.exists(self.filename):
            raise FileExistsError(f"File {self.filename} exists")
        try:
            self._file = open(self.filename, "a", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Cannot open file: {self.filename}") from exc
        self._pending: list[str] = []
        self._pending_size = 0

    def _drain(self) -> None:
        self._file.write("".join(self._pending))
        self._pending.clear()
        self._pending_size = 0

    def write(self, message: str) -> None:
        if self._pending_size + len(message) >= self.BUFFER_SIZE:
            self._drain()
        self._pending.append(message)
        self._pending_size += len(message)

    def flush(self) -> None:
        """Write out the buffer and close the file; later calls do nothing."""
        if not self._file.closed:
            self._drain()
            self._file.flush()
            self._file.close()

    def name(self) -> str:
        return "FileWriter"


class ConsoleType(Enum):
    STD_OUT = "stdout"
    STD_ERROR = "stderr"


class ConsoleWriter(Writer):
    """Writes messages verbatim to standard output or standard error."""

    def __init__(self, console_type: ConsoleType) -> None:
        self.console_type = console_type

    def write(self, message: str) -> None:
        stream = sys.stdout if self.console_type is ConsoleType.STD_OUT else sys.stderr
        stream.write(message)

    def flush(self) -> None:
        pass

    def name(self) -> str:
        return "ConsoleWriter"


class NoneWriter(Writer):
    """Discards every message."""

    def write(self, message: str) -> None:
        pass

    def flush(self) -> None:
        pass

    def name(self) -> str:
        return "NoneWriter"


class WriterType(Enum):
    FILE = "FILE"
    STDOUT = "STDOUT"
    STDERR = "STDERR"
    NONE = "NONE"

    def __str__(self) -> str:
        return self.value


def create_writer(writer_type: WriterType, filename: str | os.PathLike = "") -> Writer:
    """Build the writer for ``writer_type``."""
    if writer_type is WriterType.FILE:
        if not filename:
            raise ValueError("Filename required for file writer")
        return FileWriter(filename)
    if writer_type is WriterType.STDOUT:
        return ConsoleWriter(ConsoleType.STD_OUT)
    if writer_type is WriterType.STDERR:
        return ConsoleWriter(ConsoleType.STD_ERROR)
    if writer_type is WriterType.NONE:
        return NoneWriter()
    raise ValueError(f"Unknown writer type: {writer_type}")