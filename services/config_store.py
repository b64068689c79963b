# -*- coding: utf-8 -*-
"""Persistent preference set (language, theme, catalog filters).

Reads are forgiving: missing or unparseable values fall back to defaults.
Writes are best-effort: a failing store is logged and ignored, and the
in-memory state of each component stays authoritative for the session.
"""

from __future__ import annotations

import json
import logging
from typing import Mapping, Optional

from app.ports import PreferenceStore
from core.keys import PreferenceKeys
from core.models.preferences import Preferences
from core.types import Locale, ThemeMode
from domain.catalog_filter import normalize_filters

log = logging.getLogger(__name__)


class ConfigStore:
    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    def _read(self, key: str) -> Optional[str]:
        try:
            return self._store.get(key)
        except Exception:
            log.warning("Could not read preference %s; using default", key, exc_info=True)
            return None

    def load(self) -> Preferences:
        language = Locale.coerce(self._read(PreferenceKeys.LANGUAGE))
        theme = ThemeMode.coerce(self._read(PreferenceKeys.THEME))

        raw_filters = self._read(PreferenceKeys.FILTERS)
        filters = {}
        if raw_filters:
            try:
                filters = normalize_filters(json.loads(raw_filters))
            except (TypeError, ValueError):
                log.warning("Ignoring unparseable %s value", PreferenceKeys.FILTERS)
        return Preferences(language=language, theme=theme, filters=filters)

    def save(
        self,
        *,
        language: Optional[Locale] = None,
        theme: Optional[ThemeMode] = None,
        filters: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        """Write only the given fields; never raises.

        ``theme`` is written only when concrete (``auto`` is resolved at
        read time and never stored).
        """
        writes = []
        if language is not None:
            writes.append((PreferenceKeys.LANGUAGE, Locale.coerce(language).value))
        if theme is not None and ThemeMode.coerce(theme).is_concrete:
            writes.append((PreferenceKeys.THEME, ThemeMode.coerce(theme).value))
        if filters is not None:
            writes.append((PreferenceKeys.FILTERS, json.dumps(dict(filters), ensure_ascii=False)))
        # one failing key must not drop the others
        for key, value in writes:
            try:
                self._store.set(key, value)
            except Exception:
                log.warning("Error saving preferences (%s)", key, exc_info=True)

    def clear(self) -> None:
        for key in PreferenceKeys.CORE:
            try:
                self._store.delete(key)
            except Exception:
                log.warning("Could not remove preference %s", key, exc_info=True)
