# -*- coding: utf-8 -*-
"""ui/common/state.py

Per-user preference persistence backed by QSettings.

Same contract as the other preference stores: string values, and write
errors reported as StorageFailure (QSettings reports them via status()).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import QSettings

from services.errors import StorageFailure

log = logging.getLogger(__name__)

ORG_NAME = "Portfolio"
APP_NAME = "Portfolio"


class QSettingsPreferenceStore:
    """Native settings by default; an INI file when ``path`` is given."""

    def __init__(self, path: Optional[Path] = None, *, group: str = "prefs") -> None:
        if path is not None:
            self._settings = QSettings(str(path), QSettings.IniFormat)
        else:
            self._settings = QSettings(ORG_NAME, APP_NAME)
        self._group = group

    def _key(self, key: str) -> str:
        return f"{self._group}/{key}" if self._group else key

    def _sync(self, key: str) -> None:
        self._settings.sync()
        if self._settings.status() != QSettings.NoError:
            raise StorageFailure(f"QSettings write failed (status {self._settings.status()})", key=key)

    def get(self, key: str) -> Optional[str]:
        val = self._settings.value(self._key(key))
        if val is None:
            return None
        return str(val)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(self._key(key), str(value))
        self._sync(key)

    def delete(self, key: str) -> None:
        self._settings.remove(self._key(key))
        self._sync(key)
