"""Background consumer that drains a ring buffer into writers."""

from __future__ import annotations

import os
import threading
from typing import Iterable

from .ring_buffer import RingBuffer, RingBufferEmpty
from .writer import Writer, WriterType, create_writer

_POLL_INTERVAL = 0.1


class Sink:
    """Moves messages from a ring buffer to every writer on its own thread."""

    def __init__(
        self,
        buffer: RingBuffer[str],
        writer_types: Iterable[WriterType],
        filename: str | os.PathLike = "",
    ) -> None:
        self._buffer = buffer
        self.writers: list[Writer] = [create_writer(kind, filename) for kind in writer_types]
        self._finished = threading.Event()
        self._thread = threading.Thread(target=self._process, name="ringlog-sink", daemon=True)
        self._thread.start()

    def _process(self) -> None:
        while True:
            finishing = self._finished.is_set()
            try:
                item = self._buffer.pop()
            except RingBufferEmpty:
                if finishing:
                    for writer in self.writers:
                        writer.flush()
                    return
                self._finished.wait(_POLL_INTERVAL)
                continue
            for writer in self.writers:
                writer.write(item)

    def finish(self) -> None:
        """Drain remaining messages, flush the writers and stop the thread."""
        self._finished.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()