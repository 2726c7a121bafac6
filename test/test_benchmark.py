# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import pytest

from commitlanes.toolbox import Benchmark, benchmark, BENCHMARK_LOGGING_LEVEL, excStrings


def testBenchmarkNesting(caplog):
    caplog.set_level(BENCHMARK_LOGGING_LEVEL)

    with Benchmark("outer") as outer:
        with Benchmark("inner"):
            assert Benchmark.nesting == ["outer", "inner"]

    assert Benchmark.nesting == []
    assert outer.ms >= 0
    assert "outer/inner" in caplog.text


def testBenchmarkDecorator(caplog):
    caplog.set_level(BENCHMARK_LOGGING_LEVEL)

    @benchmark
    def addUp(a, b):
        return a + b

    assert addUp(2, 3) == 5
    assert any(r.levelno == BENCHMARK_LOGGING_LEVEL and "addUp" in r.getMessage() for r in caplog.records)


def testBenchmarkReportsAbort(caplog):
    caplog.set_level(BENCHMARK_LOGGING_LEVEL)

    with pytest.raises(KeyError):
        with Benchmark("doomed"):
            raise KeyError("boom")

    assert Benchmark.nesting == []
    assert "aborted: KeyError" in caplog.text


def testExcStrings():
    try:
        raise ValueError("bad input")
    except ValueError as exc:
        summary, details = excStrings(exc)

    assert summary == "ValueError: bad input"
    assert details.startswith("Traceback")
