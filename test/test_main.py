# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import json

import pytest

from commitlanes.__main__ import main
from commitlanes.prefsfile import CONFIG_DIR_ENV
from commitlanes import settings
from commitlanes.settings import Prefs


@pytest.fixture(autouse=True)
def configDir(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    yield tmp_path
    settings.prefs.reset()


def testDiagram(capsys):
    assert main(["a-b-c", "-m", "1"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["a ┯", "b ┿", "c ┷"]


def testJson(capsys):
    assert main(["--json", "a:x b:x c:x x", "-m", "2"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 4
    assert rows[2] == [[0, 3, "open", 0], [2, 2, "open", 1], [1, 3, "folded", 2]]


def testLaneBudgetFromPrefs(capsys):
    Prefs(maxLanes=3).write()
    assert main(["--json", "a:x b:x c:x x"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert all(edge[2] == "open" for row in rows for edge in row)


def testBadLaneBudget(capsys):
    assert main(["a", "-m", "0"]) == 1
    assert "LaneLayoutError" in capsys.readouterr().err


def testBadDefinition(capsys):
    assert main(["a:b-c"]) == 1
    assert "ValueError" in capsys.readouterr().err
