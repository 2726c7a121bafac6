# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


class LaneLayoutError(ValueError):
    """ The input given to the lane layout is unusable (empty history, bad lane budget...). """


class LaneInvariantError(RuntimeError):
    """
    The lane layout broke one of its own invariants.

    This is a bug in the layout, not a problem with the caller's input,
    so it must never be caught and papered over.
    """

    def __init__(self, row: int, liveWidth: int, maxLanes: int):
        super().__init__(f"Can't fold row {row} down to {maxLanes} lanes (stuck at {liveWidth})")
        self.row = row
        self.liveWidth = liveWidth
        self.maxLanes = maxLanes


@dataclass
class Commit:
    """ A commit in the history window, in display order (children before parents). """

    hash: str
    parentHashes: Sequence[str] = ()


class EdgeState(enum.IntEnum):
    OPEN = 0
    "The line is drawn through this row"

    FOLDED = 1
    "The line is logically alive but drawn as a stub (lane budget exceeded)"


@dataclass(frozen=True)
class Edge:
    """
    An edge represents a child->parent relationship. For instance Edge(1, 5)
    represents the line from the commit at row 1 (the child) to the commit at
    row 5 (the parent).

    When the child row equals the parent row, the edge stands for the commit
    node itself rather than a connecting line.

    Folding doesn't change an edge's identity: Edge(1, 5, OPEN) and
    Edge(1, 5, FOLDED) are the same logical edge, see `key`.
    """

    child: int
    parent: int
    state: EdgeState = EdgeState.OPEN

    def __repr__(self):
        fold = "~" if self.state == EdgeState.FOLDED else ""
        return f"Edge({self.child},{self.parent}{fold})"

    @property
    def key(self) -> tuple[int, int]:
        return self.child, self.parent

    def isCommit(self) -> bool:
        return self.child == self.parent

    def isFolded(self) -> bool:
        return self.state == EdgeState.FOLDED

    def folded(self) -> Edge:
        return Edge(self.child, self.parent, EdgeState.FOLDED)

    def opened(self) -> Edge:
        return Edge(self.child, self.parent, EdgeState.OPEN)


class Row:
    """
    Ordered association of edges to lanes for a single row in the graph.

    Insertion order is meaningful: lanes are handed out in the order edges
    are put into the row, and both folding and splicing scan the entries
    positionally. Each entry holds a distinct lane, and the lanes of a row
    are always 0..width-1 in entry order.

    Folded edges hold lanes too (after the live ones), so a row may be wider
    than the lane budget: the budget only bounds liveWidth().

    Once sealed, a row can't be modified anymore.
    """

    index: int
    _entries: list[Edge]
    _lookup: dict[Edge, int]
    _logical: dict[tuple[int, int], Edge]
    _sealed: bool

    def __init__(self, index: int, edges: Iterable[Edge] = ()):
        self.index = index
        self._entries = []
        self._lookup = {}
        self._logical = {}
        self._sealed = False
        for edge in edges:
            self.put(edge)

    def __repr__(self):
        body = ", ".join(f"{e.child},{e.parent}{'~' if e.isFolded() else ''}:{lane}"
                         for lane, e in enumerate(self._entries))
        return f"Row({self.index} {{{body}}})"

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._entries)

    def __contains__(self, edge: Edge):
        """ Exact look-up: the fold state is part of the identity here. """
        return edge in self._lookup

    def __eq__(self, other):
        if not isinstance(other, Row):
            return NotImplemented
        return self.index == other.index and self._entries == other._entries

    def containsLogical(self, child: int, parent: int) -> bool:
        """ Look up an edge regardless of its fold state. """
        return (child, parent) in self._logical

    def laneOf(self, edge: Edge) -> int | None:
        return self._lookup.get(edge)

    def edges(self) -> list[Edge]:
        return list(self._entries)

    def items(self) -> Iterator[tuple[Edge, int]]:
        for lane, edge in enumerate(self._entries):
            yield edge, lane

    def asDict(self) -> dict[Edge, int]:
        return dict(self._lookup)

    def commitEdge(self) -> Edge:
        return Edge(self.index, self.index)

    def commitLane(self) -> int:
        return self._lookup[self.commitEdge()]

    def width(self) -> int:
        return len(self._entries)

    def liveWidth(self) -> int:
        return sum(1 for e in self._entries if not e.isFolded())

    def isSealed(self) -> bool:
        return self._sealed

    def seal(self) -> Row:
        self._sealed = True
        return self

    # -------------------------------------------------------------------------
    # Mutators

    def put(self, edge: Edge) -> int:
        """ Append an edge on the next free lane and return that lane.
        If the edge is already in the row, its lane is returned as-is. """

        assert not self._sealed, "row is sealed"
        try:
            return self._lookup[edge]
        except KeyError:
            pass

        assert edge.key not in self._logical, f"{edge} is already in row {self.index} in another state"
        lane = len(self._entries)
        self._entries.append(edge)
        self._lookup[edge] = lane
        self._logical[edge.key] = edge
        return lane

    def remove(self, edge: Edge):
        assert not self._sealed, "row is sealed"
        self._entries.remove(edge)
        del self._logical[edge.key]
        self._renumber()

    def insertAfter(self, position: int, edges: Iterable[Edge]):
        """
        Insert edges right after the entry at `position`.
        All entries past the insertion point are renumbered contiguously.
        """
        assert not self._sealed, "row is sealed"
        assert 0 <= position < len(self._entries)

        edges = list(edges)
        for edge in edges:
            assert edge.key not in self._logical, f"{edge} is already in row {self.index}"
            self._logical[edge.key] = edge

        self._entries[position+1:position+1] = edges
        self._renumber()

    def _renumber(self):
        self._lookup = {edge: lane for lane, edge in enumerate(self._entries)}
