# -*- coding: utf-8 -*-
"""Version lookup.

Source checkout: ``version.json`` at the repository root.
Installed wheel: the distribution metadata written from pyproject.toml.
"""

from __future__ import annotations

import json
from importlib import metadata
from pathlib import Path

DIST_NAME = "portfolio"
_UNKNOWN = "0.0.0"


def _from_version_json(root: Path) -> str:
    path = root / "version.json"
    if not path.is_file():
        return ""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError:
        return ""
    return str(data.get("semver") or "") if isinstance(data, dict) else ""


def _from_metadata() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return ""


def resolve_version(root: Path = Path(__file__).resolve().parents[1]) -> str:
    return _from_version_json(root) or _from_metadata() or _UNKNOWN


__version__ = resolve_version()
