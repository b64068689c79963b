# -*- coding: utf-8 -*-
"""System color-scheme probe.

Used only when no concrete theme is stored. Order:
- PORTFOLIO_COLOR_SCHEME env var ('dark' / 'light')
- the running Qt application's window palette, if any
- light
"""
from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)

# palette lightness below this counts as a dark desktop theme
DARK_LIGHTNESS = 128


def _qt_prefers_dark() -> bool:
    from PyQt5.QtGui import QGuiApplication, QPalette

    app = QGuiApplication.instance()
    if app is None:
        return False
    return app.palette().color(QPalette.Window).lightness() < DARK_LIGHTNESS


def system_prefers_dark() -> bool:
    env = os.environ.get("PORTFOLIO_COLOR_SCHEME", "").strip().lower()
    if env in ("dark", "light"):
        return env == "dark"
    try:
        return _qt_prefers_dark()
    except Exception:
        log.debug("Qt palette probe unavailable", exc_info=True)
        return False
