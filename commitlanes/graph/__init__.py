# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from commitlanes.graph.lanes import (
    Commit,
    Edge,
    EdgeState,
    LaneInvariantError,
    LaneLayoutError,
    Row,
)
from commitlanes.graph.laneweaver import LaneWeaver
from commitlanes.graph.lanebuilder import (
    LaneBuildLoop,
    computeLanes,
    iterRows,
)
from commitlanes.graph.lanediagram import LaneDiagram
