# -*- coding: utf-8 -*-
"""Runtime dependency checks, run by main() before anything is imported."""
from __future__ import annotations

from importlib import import_module
from typing import Iterable, List, Tuple

# (pip name, import name)
Check = Tuple[str, str]

REQUIRED: Tuple[Check, ...] = (("requests", "requests"),)
# only the QSettings preference store needs Qt
QT: Tuple[Check, ...] = (("PyQt5", "PyQt5"),)


def missing_runtime_packages(checks: Iterable[Check] = REQUIRED) -> List[str]:
    return [pip_name for pip_name, module in checks if not _importable(module)]


def _importable(module: str) -> bool:
    try:
        import_module(module)
    except ModuleNotFoundError:
        return False
    return True


def ensure_runtime_deps(*, qt: bool = False) -> None:
    """Raise RuntimeError naming what is missing and how to get it."""
    missing = missing_runtime_packages(REQUIRED + (QT if qt else ()))
    if missing:
        raise RuntimeError(
            f"Missing required Python packages: {', '.join(missing)}.\n\n"
            "Install the project with its dependencies:\n"
            "  pip install -e ."
        )
