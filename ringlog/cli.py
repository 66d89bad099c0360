"""Demonstration command that logs one message of every kind."""

from __future__ import annotations

import argparse
import sys

from .logger import LogLevel, get_logger, log_critical, log_debug, log_error, log_info, log_warning


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ringlog", description=__doc__)
    parser.add_argument("--log-file", default="app.log")
    args = parser.parse_args(argv)

    logger = get_logger()
    try:
        logger.init(args.log_file, LogLevel.INFO, True)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    log_info("This is an info message")
    log_debug("Debugging information")
    log_info("This", "is", "an", "info", "message", 1, 2, 3)
    log_warning("This is a warning message")
    log_warning("This", "is", "a", "warning", "message", 1, 2, 3)
    log_error("An error occurred")
    log_error("This", "is", "an", "error", "message", 1, 2, 3)
    log_critical("Critical error! Immediate attention required")
    log_critical("This", "is", "a", "critical", "message", 1, 2, 3)
    logger.finish()
    return 0


if __name__ == "__main__":
    sys.exit(main())