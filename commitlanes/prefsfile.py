# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import dataclasses
import enum
import json
import logging
import os
import tempfile
from typing import Any, Type

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "COMMITLANES_CONFIG_DIR"
"Environment variable that overrides the directory where prefs files are kept"


class PrefsFile:
    """
    Base class for dataclasses that persist themselves to a JSON file.

    Only fields that differ from their defaults are written out.
    Fields whose names start with an underscore are never persisted.
    """

    _filename = ""

    def getParentDir(self) -> str:
        override = os.environ.get(CONFIG_DIR_ENV, "")
        if override:
            return override

        from commitlanes.settings import TEST_MODE
        if TEST_MODE:
            return os.path.join(tempfile.gettempdir(), "commitlanes-testmode-config")

        configHome = os.environ.get("XDG_CONFIG_HOME", "") or os.path.join(os.path.expanduser("~"), ".config")
        return os.path.join(configHome, "commitlanes")

    def _getFullPath(self, forWriting: bool) -> str:
        assert self._filename != "", "you must override _filename"

        prefsDir = self.getParentDir()
        if not prefsDir:
            return ""

        if forWriting:
            os.makedirs(prefsDir, exist_ok=True)

        fullPath = os.path.join(prefsDir, self._filename)

        if not forWriting and not os.path.isfile(fullPath):
            return ""

        return fullPath

    def reset(self):
        assert dataclasses.is_dataclass(self)
        for f in dataclasses.fields(self):
            if f.default_factory != dataclasses.MISSING:
                obj = f.default_factory()
            else:
                obj = f.default
            self.__dict__[f.name] = obj

    def write(self) -> str:
        prefsPath = self._getFullPath(forWriting=True)
        if not prefsPath:
            logger.warning("Couldn't get path for writing")
            return ""

        assert dataclasses.is_dataclass(self)
        filtered = {}
        for f in dataclasses.fields(self):
            if f.name.startswith("_"):
                continue

            if f.default_factory != dataclasses.MISSING:
                default = f.default_factory()
            else:
                default = f.default

            value = self.__dict__[f.name]
            if value == default:
                continue

            filtered[f.name] = self.encode(value)

        # All defaults: don't clutter the config directory
        if not filtered:
            if self._getFullPath(forWriting=False):
                logger.debug("Deleting prefs file because we want defaults")
                os.unlink(prefsPath)
            return ""

        with open(prefsPath, 'wt', encoding='utf-8') as jsonFile:
            json.dump(obj=filtered, fp=jsonFile, indent='\t')

        logger.info(f"Wrote {prefsPath}")
        return prefsPath

    def load(self) -> bool:
        prefsPath = self._getFullPath(forWriting=False)
        if not prefsPath:  # couldn't be found
            return False

        with open(prefsPath, 'rt', encoding='utf-8') as file:
            try:
                jsonObject = json.load(file)
            except ValueError as loadError:
                logger.warning(f"{prefsPath}: {loadError}", exc_info=True)
                return False

        if not isinstance(jsonObject, dict):
            logger.warning(f"{prefsPath}: expected a JSON object")
            return False

        assert dataclasses.is_dataclass(self)
        fields = {f.name: f for f in dataclasses.fields(self)}

        for key, value in jsonObject.items():
            if key.startswith('_') or key not in fields:
                logger.warning(f"{prefsPath}: dropping key: {key}")
                continue
            if value is None:
                continue

            try:
                value = self.decode(value, fields[key].type)
            except ValueError as error:
                logger.warning(f"{prefsPath}: {key}: {error}")
                continue

            self.__dict__[key] = value

        return True

    @staticmethod
    def encode(o: Any) -> Any:
        """ Encode a value to make it JSON-friendly """
        if isinstance(o, enum.IntEnum):
            return o.value
        return o

    @staticmethod
    def decode(o: Any, dstType: Type) -> Any:
        """ Convert a value coming from a JSON blob to a target type (int or IntEnum) """

        # bool is a subclass of int, don't let it through
        if type(o) is not int:
            raise ValueError("unexpected JSON field type")

        if issubclass(dstType, enum.IntEnum):
            return dstType(o)

        assert dstType is int, f"unsupported prefs field type {dstType}"
        return o
