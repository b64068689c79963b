# -*- coding: utf-8 -*-
"""
Preference stores (string key -> string value), browser-storage style.

- MemoryPreferenceStore: session only (tests, --store memory)
- JsonFilePreferenceStore: per-user JSON file, rewritten on every change

Write errors surface as StorageFailure; ConfigStore decides what to do.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from infra.paths import preferences_file
from services.errors import StorageFailure

log = logging.getLogger(__name__)


class MemoryPreferenceStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = str(value)

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFilePreferenceStore:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else preferences_file()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except Exception:
            # Recover from corruption gracefully
            log.warning("Preferences file %s is unreadable; starting empty", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _write(self, data: Dict[str, str], key: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StorageFailure(f"cannot write {self.path}: {exc}", key=key) from exc

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self._write(data, key)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._write(data, key)
