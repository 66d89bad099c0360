"""Asynchronous logger: a bounded ring buffer, a background sink and pluggable writers."""

__version__ = "0.1.0"
__all__ = ["ring_buffer", "writer", "sink", "logger", "benchmark", "cli"]