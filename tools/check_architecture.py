"""Layer boundary checks.

Static import scan that keeps the pure layers free of adapters:

- core, domain: no app/services/infra/ui, no Qt, no network
- services: no ui, no Qt (ports are injected by the coordinator)
- infra: no ui, no Qt

Usage:
    python tools/check_architecture.py

Exit code:
    0 = OK
    1 = violations found
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

ROOT = Path(__file__).resolve().parents[1]

LAYER_RULES: Dict[str, Set[str]] = {
    "core": {"app", "services", "infra", "ui", "PyQt5", "requests"},
    "domain": {"app", "services", "infra", "ui", "PyQt5", "requests"},
    "services": {"ui", "PyQt5"},
    "infra": {"ui", "PyQt5"},
}


def top_package(modname: str) -> Optional[str]:
    if not modname:
        return None
    return modname.split(".")[0]


def scan_file(path: Path) -> List[Tuple[str, str]]:
    """Return list of (imported_top_pkg, detail)"""
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: List[Tuple[str, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                pkg = top_package(alias.name)
                if pkg:
                    imports.append((pkg, alias.name))
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            pkg = top_package(node.module)
            if pkg:
                imports.append((pkg, node.module))
    return imports


def find_violations(root: Path = ROOT) -> List[str]:
    violations: List[str] = []
    for layer, forbidden in LAYER_RULES.items():
        base = root / layer
        if not base.is_dir():
            continue
        for f in sorted(base.rglob("*.py")):
            if "__pycache__" in f.parts:
                continue
            for pkg, detail in scan_file(f):
                if pkg in forbidden:
                    violations.append(f"{f.relative_to(root)} imports forbidden '{detail}' (layer={layer})")
    return violations


def main() -> int:
    violations = find_violations()
    if violations:
        print("Architecture violations found:\n")
        for v in violations:
            print(" -", v)
        print("\nFix: move the adapter behind a port in app/ports.py and inject it from the coordinator.")
        return 1

    print("OK: no architecture boundary violations.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
