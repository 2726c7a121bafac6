# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import json
import os

import pytest

from commitlanes.prefsfile import CONFIG_DIR_ENV
from commitlanes.settings import Prefs, LoggingLevel, TEST_MODE


@pytest.fixture
def configDir(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    return tmp_path


def testTestModeDetected():
    assert TEST_MODE


def testDefaultsNotWritten(configDir):
    assert Prefs().write() == ""
    assert not os.listdir(configDir)


def testWriteOnlyNonDefaults(configDir):
    prefs = Prefs(maxLanes=4, verbosity=LoggingLevel.DEBUG)
    path = prefs.write()
    assert path == str(configDir / "prefs.json")

    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"maxLanes": 4, "verbosity": LoggingLevel.DEBUG.value}

    reloaded = Prefs()
    assert reloaded.load()
    assert reloaded == prefs
    assert type(reloaded.verbosity) is LoggingLevel


def testBackToDefaultsDeletesFile(configDir):
    prefs = Prefs(maxLanes=4)
    path = prefs.write()
    assert os.path.isfile(path)

    prefs.reset()
    assert prefs == Prefs()
    prefs.write()
    assert not os.path.exists(path)


def testLoadMissingFile(configDir):
    assert not Prefs().load()


def testLoadDropsBadValues(configDir, caplog):
    with open(configDir / "prefs.json", "wt", encoding="utf-8") as f:
        json.dump({"maxLanes": "lots", "diagramPadding": True, "verbosity": 12345, "bogus": 1, "_private": 2}, f)

    prefs = Prefs()
    assert prefs.load()
    assert prefs == Prefs()
    assert "dropping key: bogus" in caplog.text
    assert "dropping key: _private" in caplog.text


def testLoadCorruptFile(configDir):
    with open(configDir / "prefs.json", "wt", encoding="utf-8") as f:
        f.write("{this isn't json")
    assert not Prefs().load()


def testValidate():
    prefs = Prefs(maxLanes=0, diagramPadding=-3)
    prefs.validate()
    assert prefs.maxLanes == Prefs().maxLanes
    assert prefs.diagramPadding == Prefs().diagramPadding


def testDecodeAcceptsOnlyIntegers():
    assert Prefs.decode(7, int) == 7
    assert Prefs.decode(10, LoggingLevel) is LoggingLevel.DEBUG

    for bad in [True, 7.5, "7", [7]]:
        with pytest.raises(ValueError):
            Prefs.decode(bad, int)

    with pytest.raises(ValueError):
        Prefs.decode(12345, LoggingLevel)


def testEncodeEnums():
    assert Prefs.encode(LoggingLevel.BENCHMARK) == 5
    assert type(Prefs.encode(LoggingLevel.BENCHMARK)) is int
    assert Prefs.encode(3) == 3


def testWriteCreatesMissingConfigDir(tmp_path, monkeypatch):
    configDir = tmp_path / "nested" / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(configDir))
    path = Prefs(diagramPadding=4).write()
    assert path == str(configDir / "prefs.json")
    assert os.path.isfile(path)
