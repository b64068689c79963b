# -*- coding: utf-8 -*-
"""Single source of truth for persisted preference keys.

These are *storage keys* in the preference store (browser-style key/value).
Keep them stable: existing users already have values under these names.
"""

from __future__ import annotations


class PreferenceKeys:
    LANGUAGE = "preferredLanguage"
    THEME = "theme"
    FILTERS = "projectFilters"

    # owned by the accessibility panel, never written by the core
    ACCESSIBILITY = "accessibilitySettings"

    # keys removed by ConfigStore.clear()
    CORE = (LANGUAGE, THEME, FILTERS)
