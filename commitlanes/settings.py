# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import dataclasses
import enum
import logging
import sys

from commitlanes.prefsfile import PrefsFile
from commitlanes.toolbox.benchmark import BENCHMARK_LOGGING_LEVEL

logger = logging.getLogger(__name__)

TEST_MODE = "pytest" in sys.modules
"""
Unit testing mode (don't touch real user prefs, etc.).
"""

DEVDEBUG = TEST_MODE
"""
Enable expensive assertions and debugging features.
Can be forced with command-line switch "--debug".
"""


class LoggingLevel(enum.IntEnum):
    BENCHMARK = BENCHMARK_LOGGING_LEVEL
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING


@dataclasses.dataclass
class Prefs(PrefsFile):
    _filename = "prefs.json"

    maxLanes                    : int                   = 16
    diagramPadding              : int                   = 2
    verbosity                   : LoggingLevel          = LoggingLevel.WARNING

    def validate(self):
        """ Fall back to defaults for values that make no sense. """
        defaults = Prefs()
        if self.maxLanes < 1:
            logger.warning(f"Ignoring maxLanes={self.maxLanes}, must be at least 1")
            self.maxLanes = defaults.maxLanes
        if self.diagramPadding < 1:
            logger.warning(f"Ignoring diagramPadding={self.diagramPadding}, must be at least 1")
            self.diagramPadding = defaults.diagramPadding


# Initialize default prefs.
# The app should load the user's prefs with prefs.load().
prefs = Prefs()
