# -*- coding: utf-8 -*-
"""Runtime configuration.

This module is intentionally tiny and *import-safe*.

Defaults match the published site. A ``site_config.json`` resource may
override any field (same names); a broken override file is ignored.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from infra.paths import resource_path

log = logging.getLogger(__name__)

CONFIG_FILE = "site_config.json"


@dataclass(frozen=True)
class AppSettings:
    translations_path: str = "i18n/{lang}.json"
    projects_path: str = "i18n/projects_{lang}.json"
    # Form endpoint (HTTPS). Empty disables network submission.
    contact_endpoint: str = ""
    request_timeout_s: float = 10.0
    status_clear_s: float = 5.0
    lazy_root_margin_px: float = 50.0
    lazy_threshold: float = 0.1
    card_height_px: float = 360.0
    card_columns: int = 3


def _coerce(overrides: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    defaults = AppSettings()
    for f in fields(AppSettings):
        if f.name not in overrides:
            continue
        current = getattr(defaults, f.name)
        out[f.name] = type(current)(overrides[f.name])
    return out


def load_app_settings(path: Optional[Path] = None) -> AppSettings:
    cfg_path = Path(path) if path is not None else resource_path(CONFIG_FILE)
    settings = AppSettings()
    if not cfg_path.exists():
        return settings
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError("site config must be a JSON object")
        return replace(settings, **_coerce(data))
    except Exception:
        # Never crash on config overrides.
        log.warning("Ignoring invalid %s", cfg_path, exc_info=True)
        return settings
