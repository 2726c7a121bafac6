# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from collections.abc import Sequence


class JobExecutor:
    """
    Extension point for backends that run build jobs.

    `run` starts the given commands in a container image and returns an
    identifier for the running instance, or None if nothing was started.
    """

    def run(self, image: str, commands: Sequence[str]) -> str | None:
        raise NotImplementedError()

    def isRunning(self, runningInstance: str) -> bool:
        raise NotImplementedError()

    def stop(self, runningInstance: str) -> None:
        raise NotImplementedError()


class LocalhostExecutor(JobExecutor):
    """ Runs nothing. """

    def run(self, image: str, commands: Sequence[str]) -> str | None:
        return None

    def isRunning(self, runningInstance: str) -> bool:
        return False

    def stop(self, runningInstance: str) -> None:
        pass
