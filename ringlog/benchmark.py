"""Throughput benchmark: many threads logging fixed-size messages."""

from __future__ import annotations

import argparse
import sys
import threading
import time

from .logger import Logger, LogLevel, get_logger


class Benchmark:
    """Logs ``message_count`` messages of ``message_size`` bytes from each thread."""

    def __init__(
        self,
        thread_pool_size: int,
        message_size: int,
        message_count: int,
        logger: Logger | None = None,
    ) -> None:
        self.thread_pool_size = thread_pool_size
        self.message_size = message_size
        self.message_count = message_count
        self.logger = logger if logger is not None else get_logger()

    def _work(self) -> None:
        message = "a" * self.message_size
        for _ in range(self.message_count):
            self.logger.info(message)

    def run(self) -> float:
        """Run the workload, print the throughput and return it in MB/s."""
        log_size = self.message_size * self.message_count * self.thread_pool_size
        threads = [threading.Thread(target=self._work) for _ in range(self.thread_pool_size)]
        start = time.perf_counter()
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        elapsed = time.perf_counter() - start
        throughput = log_size / (elapsed * 1_000_000) if elapsed > 0 else float("inf")
        print(f"Throughput: {throughput} MB/s")
        return throughput


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ringlog-benchmark", description=__doc__)
    parser.add_argument("--threads", type=int, default=20)
    parser.add_argument("--message-size", type=int, default=1000)
    parser.add_argument("--message-count", type=int, default=100000)
    parser.add_argument("--log-file", default="app.log")
    args = parser.parse_args(argv)

    logger = get_logger()
    try:
        logger.init(args.log_file, LogLevel.INFO, False)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    Benchmark(args.threads, args.message_size, args.message_count, logger).run()
    logger.finish()
    return 0


if __name__ == "__main__":
    sys.exit(main())