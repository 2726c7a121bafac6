# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import collections
import logging
from typing import Sequence

from commitlanes.graph.lanes import Commit, Edge, EdgeState, Row, LaneLayoutError, LaneInvariantError
from commitlanes import settings

logger = logging.getLogger(__name__)


class LaneWeaver:
    """
    Assigns lanes to the edges of a commit sequence, one row at a time.

    Each row is woven from the row above it. The weaver only ever holds two
    rows: the row it's currently weaving, and the row above it, which may
    still receive edges that reappear in the current row. Once the next row
    gets woven, the row above is sealed and handed over.
    """

    commits: Sequence[Commit]
    maxLanes: int
    rowOf: dict[str, int]
    childrenOf: collections.defaultdict[int, list[int]]
    currentRow: Row | None

    def __init__(self, commits: Sequence[Commit], maxLanes: int):
        if not commits:
            raise LaneLayoutError("Commit sequence is empty")
        if maxLanes < 1:
            raise LaneLayoutError(f"Need at least 1 lane (got {maxLanes})")

        self.commits = commits
        self.maxLanes = maxLanes
        self.rowOf = {}
        self.childrenOf = collections.defaultdict(list)
        self.currentRow = None

        # Statistics
        self.peakLiveWidth = 0
        self.foldCount = 0
        self.spliceCount = 0

        for row, commit in enumerate(commits):
            if commit.hash in self.rowOf:
                raise LaneLayoutError(f"Commit {commit.hash} appears twice in sequence")
            self.rowOf[commit.hash] = row

        # Look up children for each row, so we can find every commit that
        # refers to a row as its parent (not just the commit right above it).
        for row, commit in enumerate(commits):
            for parent in self.parentRows(row):
                if parent <= row:
                    raise LaneLayoutError(
                        f"Parent {commits[parent].hash} of {commit.hash} must appear below it in the sequence")
                self.childrenOf[parent].append(row)

    @property
    def rowCount(self) -> int:
        return len(self.commits)

    def parentRows(self, row: int) -> list[int]:
        """ Rows of the commit's distinct parents. Parents outside the window are skipped. """
        rows = []
        for parentHash in self.commits[row].parentHashes:
            parent = self.rowOf.get(parentHash)
            if parent is not None and parent not in rows:
                rows.append(parent)
        return rows

    def isDone(self) -> bool:
        return self.currentRow is not None and self.currentRow.index == self.rowCount - 1

    def newRow(self) -> Row | None:
        """
        Weave the next row.

        Return the row above the new row, sealed, since nothing can touch it
        anymore. Return None after weaving the very first row.
        """

        assert not self.isDone(), "no rows left to weave"

        if self.currentRow is None:
            row = Row(0, [Edge(0, 0)])
        else:
            row = self.weaveRow(self.currentRow)
            self.foldOverflow(row)
            self.spliceReappearingEdges(self.currentRow, row)

        if settings.DEVDEBUG:
            self.checkRow(row)

        self.peakLiveWidth = max(self.peakLiveWidth, row.liveWidth())

        above = self.currentRow
        self.currentRow = row

        # Row above is final now that the current row can't splice into it anymore
        if above is not None:
            above.seal()
        return above

    def finish(self) -> Row:
        assert self.isDone(), "not all rows have been woven"
        logger.debug(f"Peak live lanes: {self.peakLiveWidth}; folds: {self.foldCount}; splices: {self.spliceCount}")
        return self.currentRow.seal()

    def weaveRow(self, above: Row) -> Row:
        i = above.index + 1
        row = Row(i)
        commitEdge = row.commitEdge()

        for edge in above:
            if edge.isFolded():
                # Line was cut short due to the lane budget
                continue

            if not edge.isCommit():
                if edge.parent == i:
                    # Line converges onto my commit
                    row.put(commitEdge)
                else:
                    # Line passes through my row
                    row.put(edge)
            else:
                # Commit in the row above: open up lines towards all its parents
                for parent in self.parentRows(above.index):
                    if parent == i:
                        row.put(commitEdge)
                    else:
                        row.put(Edge(above.index, parent))

        row.put(commitEdge)
        return row

    def foldOverflow(self, row: Row):
        """
        Fold lines until the row fits in the lane budget.

        Only the lines that were just opened by the commit in the row above
        are eligible, most recent first. They are moved to the end of the row
        in their folded state.
        """

        liveWidth = row.liveWidth()
        if liveWidth <= self.maxLanes:
            return

        for edge in reversed(row.edges()):
            if edge.child != row.index - 1:
                continue
            row.remove(edge)
            row.put(edge.folded())
            liveWidth -= 1
            self.foldCount += 1
            if liveWidth == self.maxLanes:
                break

        if liveWidth != self.maxLanes:
            raise LaneInvariantError(row.index, liveWidth, self.maxLanes)

    def spliceReappearingEdges(self, above: Row, row: Row):
        """
        Make lines that vanished higher up reappear in the row above, so that
        the end of the line can be drawn down to the current commit.
        """

        i = row.index
        reappearing = []
        for child in self.childrenOf.get(i, ()):
            if child == above.index:
                continue
            if above.containsLogical(child, i):
                continue
            reappearing.append(Edge(child, i, EdgeState.FOLDED))

        if not reappearing:
            return

        # Find a spot in the row above that keeps line crossings to a minimum:
        # after the rightmost line that continues to the left of my commit.
        commitLane = row.commitLane()
        edgesAbove = above.edges()
        for position in range(len(edgesAbove) - 1, -1, -1):
            lane = row.laneOf(edgesAbove[position])
            if position == 0 or (lane is not None and lane < commitLane):
                above.insertAfter(position, reappearing)
                break

        self.spliceCount += len(reappearing)

    def checkRow(self, row: Row):
        commitEdges = [e for e in row if e.isCommit()]
        assert commitEdges == [row.commitEdge()], f"row {row.index} must contain exactly its own commit"
        assert sorted(lane for _, lane in row.items()) == list(range(row.width()))
        assert row.liveWidth() <= self.maxLanes, f"row {row.index} exceeds lane budget"
