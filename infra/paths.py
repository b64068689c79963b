# -*- coding: utf-8 -*-
"""
Where things live on disk.

Read-only site resources (``i18n/*.json``, ``site_config.json``) ship with
the code, or with a PyInstaller bundle. Writable per-user state (the
preference file, logs) goes under ``PORTFOLIO_HOME`` when set, otherwise
the platform's per-user data folder.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "Portfolio"
HOME_ENV = "PORTFOLIO_HOME"


def app_root() -> Path:
    """Bundle extraction dir when frozen, else the repository root."""
    bundle = getattr(sys, "_MEIPASS", None)
    if getattr(sys, "frozen", False) and bundle:
        return Path(bundle)
    return Path(__file__).resolve().parents[1]


def resources_dir() -> Path:
    root = app_root()
    bundled = root / "resources"
    return bundled if bundled.is_dir() else root


def resource_path(rel: str) -> Path:
    return resources_dir() / rel


def ensure_dir(p: Path) -> Path:
    p.mkdir(parents=True, exist_ok=True)
    return p


def user_data_dir() -> Path:
    override = os.getenv(HOME_ENV)
    if override:
        return ensure_dir(Path(override))
    if sys.platform.startswith("win"):
        base = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA") or str(Path.home())
    else:
        base = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return ensure_dir(Path(base) / APP_NAME)


def logs_dir() -> Path:
    return ensure_dir(user_data_dir() / "logs")


def preferences_file() -> Path:
    return user_data_dir() / "preferences.json"
