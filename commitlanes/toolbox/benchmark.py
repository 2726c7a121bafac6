# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
import os
import time

logger = logging.getLogger(__name__)
BENCHMARK_LOGGING_LEVEL = 5

try:
    import psutil
except ModuleNotFoundError:
    logger.info("psutil isn't available. Memory usage won't be reported in benchmarks.")
    psutil = None


def getRSS():
    if psutil:
        return psutil.Process(os.getpid()).memory_info().rss
    else:
        return 0


class Benchmark:
    """
    Context manager that reports how long a piece of code takes to run,
    and how much the resident set grew meanwhile (if psutil is installed).

    The measurements of the last run are kept in `ms` and `kb`.
    """

    nesting = []

    def __init__(self, name):
        self.name = name
        self.startTime = 0
        self.startBytes = 0
        self.ms = 0.0
        self.kb = 0

    def __enter__(self):
        Benchmark.nesting.append(self.name)
        self.startBytes = getRSS()
        self.startTime = time.perf_counter()
        return self

    def __exit__(self, exc_type=None, exc_value=None, traceback=None):
        self.ms = 1000 * (time.perf_counter() - self.startTime)
        self.kb = (getRSS() - self.startBytes) // 1024

        description = "/".join(Benchmark.nesting)
        if exc_type is not None:
            description += f" (aborted: {exc_type.__name__})"
        logger.log(BENCHMARK_LOGGING_LEVEL, f"{self.ms:8.2f} ms {self.kb:6,d}K {description}")

        Benchmark.nesting.pop()
        self.startTime = 0


def benchmark(func):
    """ Function decorator that reports how long the function takes to run. """
    def wrapper(*args, **kwargs):
        with Benchmark(func.__qualname__):
            return func(*args, **kwargs)
    return wrapper
