# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
from collections.abc import Callable, Iterator, Sequence

from commitlanes.graph.lanes import Commit, Row
from commitlanes.graph.laneweaver import LaneWeaver
from commitlanes.toolbox import Benchmark, benchmark

logger = logging.getLogger(__name__)


def _weave(weaver: LaneWeaver) -> Iterator[Row]:
    while not weaver.isDone():
        finished = weaver.newRow()
        if finished is not None:
            yield finished
    yield weaver.finish()


def iterRows(commits: Sequence[Commit], maxLanes: int) -> Iterator[Row]:
    """
    Lazily lay out the lanes of a commit sequence.

    The input is validated right away (before any row is produced).
    The returned iterator is forward-only: each row comes out sealed, once
    the row below it has been woven.
    """
    weaver = LaneWeaver(commits, maxLanes)
    return _weave(weaver)


@benchmark
def computeLanes(commits: Sequence[Commit], maxLanes: int) -> list[Row]:
    return list(iterRows(commits, maxLanes))


class LaneBuildLoop:
    onRow: Callable[[Row], None]

    def __init__(self, maxLanes: int):
        self.maxLanes = maxLanes
        self.rows = []
        self.weaver = None
        self.onRow = LaneBuildLoop.defaultOnRow

    @staticmethod
    def defaultOnRow(row: Row):
        pass

    def sendAll(self, commits: Sequence[Commit]):
        self.weaver = LaneWeaver(commits, self.maxLanes)
        self.rows = []

        with Benchmark("Lay out lanes"):
            for row in _weave(self.weaver):
                self.rows.append(row)
                self.onRow(row)

        logger.debug(f"Laid out {len(self.rows)} rows, peak live lanes: {self.weaver.peakLiveWidth}")
        return self
