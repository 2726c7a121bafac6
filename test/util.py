# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from commitlanes.graph import *


def layout(definition: str, maxLanes: int) -> list[Row]:
    sequence = LaneDiagram.parseDefinition(definition)
    rows = computeLanes(sequence, maxLanes)
    print("\n" + LaneDiagram.diagram(rows, sequence, verbose=True))
    return rows


def lanes(row: Row) -> list[str]:
    """ Edges of a row in lane order, e.g. ["0,3", "2,2", "1,3~"] (~ = folded). """
    return [f"{e.child},{e.parent}{'~' if e.isFolded() else ''}" for e in row]


def checkRows(rows: list[Row], *expected: list[str]):
    assert len(rows) == len(expected)
    for row, expectedLanes in zip(rows, expected):
        assert lanes(row) == expectedLanes, f"row {row.index}"
