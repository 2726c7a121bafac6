# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import re
from collections.abc import Sequence
from itertools import zip_longest

from commitlanes.graph.lanes import Commit, Row

PADDING = 2


def padx(x, padding=PADDING):
    assert x >= 0
    return x * padding


class LaneDiagram:
    """
    Plain-text rendition of laid-out rows, one scanline per commit.

    Glyphs: a commit is drawn as one of ╳┷┯┿ depending on whether it has
    children and/or parents in the window; a line passing through a row is
    drawn as │, and a folded line as ┊.
    """

    @staticmethod
    def parseDefinition(text: str) -> list[Commit]:
        """
        Parse a one-liner history definition into a commit sequence.

        Whitespace separates chains. Within a chain, "a-b-c" means a's parent
        is b and b's parent is c. A colon introduces the parents of the last
        commit in the chain, separated by commas: "m:a,b" is a merge commit.
        """
        sequence = []
        seen = set()

        for token in re.split(r"\s+", text):
            token = token.strip()
            if not token:
                continue

            split = token.split(":")
            if not 1 <= len(split) <= 2 or not split[0] or "," in split[0]:
                raise ValueError(f"Malformed chain: {token}")

            try:
                if "-" in split[1]:
                    raise ValueError(f"Root parents can't be chained: {token}")
                rootParents = [p for p in split[1].split(",") if p]
            except IndexError:
                rootParents = []

            chain = split[0].split("-")
            parents = [[c] for c in chain[1:]] + [rootParents]

            for commit, commitParents in zip(chain, parents):
                if commit in seen:
                    raise ValueError(f"Commit hash appears twice in sequence! {commit}")
                seen.add(commit)
                sequence.append(Commit(commit, commitParents))

        return sequence

    @staticmethod
    def diagram(rows: Sequence[Row], commits: Sequence[Commit], verbose=False, padding=PADDING) -> str:
        assert len(rows) == len(commits)

        known = {c.hash for c in commits}
        referenced = {p for c in commits for p in c.parentHashes}

        diagram = LaneDiagram(padding)
        for row, commit in zip(rows, commits):
            hasParents = any(p in known for p in commit.parentHashes)
            hasChildren = commit.hash in referenced
            diagram.newRow(row, commit.hash, hasParents, hasChildren, verbose)
        return diagram.bake()

    # -----------------------------------------------------------------

    def __init__(self, padding=PADDING):
        self.padding = padding
        self.scanlines = []
        self.margins = []

    def reserve(self, x, y, fill=" "):
        assert len(fill) == 1
        for j in range(len(self.scanlines), y + 1):
            self.scanlines.append([])
            self.margins.append([])
        scanline = self.scanlines[y]
        for i in range(len(scanline), padx(x, self.padding) + 1):
            scanline.append(fill)
        return scanline

    def plot(self, x, y, c):
        assert len(c) == 1
        scanline = self.reserve(x, y)
        scanline[padx(x, self.padding)] = c

    def addMarginText(self, y, text):
        self.reserve(0, y)
        self.margins[y].append(text)

    def bake(self):
        if self.margins:
            numMargins = max(len(rowMargins) for rowMargins in self.margins)
        else:
            numMargins = 0
        marginWidths = [0] * numMargins
        for margins in self.margins:
            for i, mText in enumerate(margins):
                marginWidths[i] = max(marginWidths[i], len(mText))

        text = ""
        for margins, scanline in zip(self.margins, self.scanlines):
            for mWidth, mText in zip_longest(reversed(marginWidths), reversed(margins), fillvalue=""):
                text += mText.rjust(mWidth) + " "
            text += ''.join(scanline).rstrip()
            text += "\n"
        text = text.removesuffix("\n")
        return text

    def newRow(self, row: Row, commit: str, hasParents: bool, hasChildren: bool, verbose: bool):
        y = len(self.scanlines)
        self.reserve(0, y)

        for edge, lane in row.items():
            if edge.isCommit():
                glyph = "╳┷┯┿"[hasParents << 1 | hasChildren]
            elif edge.isFolded():
                glyph = "┊"
            else:
                glyph = "│"
            self.plot(lane, y, glyph)

        self.addMarginText(y, commit)
        if verbose:
            self.addMarginText(y, str(row.index))
