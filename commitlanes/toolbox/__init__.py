# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Utilities that aren't specifically tied to lane layout.
"""

from .benchmark import Benchmark, benchmark, BENCHMARK_LOGGING_LEVEL
from .excutils import excStrings
