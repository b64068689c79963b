# -*- coding: utf-8 -*-
"""Catalog filtering (pure).

A filter set maps a facet name to the single value constraining it, or
``None`` when the facet is unconstrained. ``None`` and a missing key mean
the same thing.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from core.models.preferences import FilterSet
from domain.models.project import Project


def normalize_filters(raw: Any) -> FilterSet:
    """Coerce a stored filter object into ``{str: str | None}``.

    Anything that is not a mapping yields an empty set. Empty strings count
    as cleared.
    """
    if not isinstance(raw, Mapping):
        return {}
    out: FilterSet = {}
    for key, value in raw.items():
        if value is None or isinstance(value, (dict, list)):
            out[str(key)] = None
            continue
        text = str(value)
        out[str(key)] = text if text else None
    return out


def active_filters(filters: Mapping[str, Optional[str]]) -> Dict[str, str]:
    return {k: v for k, v in filters.items() if v}


def _field_matches(field_value: Any, wanted: str) -> bool:
    if field_value is None:
        return False
    if isinstance(field_value, (list, tuple, set, frozenset)):
        return any(str(item) == wanted for item in field_value)
    return str(field_value) == wanted


def matches(project: Project, filters: Mapping[str, Optional[str]]) -> bool:
    return all(
        _field_matches(project.value_of(key), value)
        for key, value in active_filters(filters).items()
    )


def filter_projects(projects: Iterable[Project], filters: Mapping[str, Optional[str]]) -> List[Project]:
    """Conjunction over every active (key, value); order is preserved."""
    return [p for p in projects if matches(p, filters)]


def toggle_filter(filters: Mapping[str, Optional[str]], key: str, value: str) -> FilterSet:
    """Return a new filter set after a click on ``(key, value)``.

    Clicking the value already active clears the key; any other value
    replaces it.
    """
    updated: FilterSet = dict(filters)
    updated[key] = None if filters.get(key) == value else value
    return updated
