# -*- coding: utf-8 -*-
"""Project record as served by ``projects_{lang}.json``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

# link fields use this value for "absent"
ABSENT = "#"

_LINK_FIELDS = ("media", "demo", "code", "site", "contribution")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def is_present(value: Optional[str]) -> bool:
    return bool(value) and value != ABSENT


@dataclass(frozen=True)
class Project:
    title: str
    description: str = ""
    tech: Tuple[str, ...] = ()
    category: str = ""
    mode: str = ""
    media: str = ABSENT
    demo: str = ABSENT
    code: str = ABSENT
    site: str = ABSENT
    contribution: str = ABSENT
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        if not isinstance(data, Mapping):
            raise ValueError(f"project entry must be an object, got {type(data).__name__}")
        tech = data.get("tech") or ()
        if isinstance(tech, str):
            tech = (tech,)
        known = {"title", "description", "tech", "category", "mode", *_LINK_FIELDS}
        links = {k: (_text(data.get(k)) or ABSENT) for k in _LINK_FIELDS}
        return cls(
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            tech=tuple(str(t) for t in tech),
            category=_text(data.get("category")),
            mode=_text(data.get("mode")),
            extra={k: v for k, v in data.items() if k not in known},
            **links,
        )

    def value_of(self, key: str) -> Any:
        """Field lookup used by filters; unknown keys read from ``extra``."""
        if key == "extra":
            return None
        if key in self.__dataclass_fields__:
            return getattr(self, key)
        return self.extra.get(key)

    @property
    def has_image(self) -> bool:
        return is_present(self.media)

    @property
    def has_contribution(self) -> bool:
        return is_present(self.contribution)


def parse_projects(payload: Any) -> Tuple[Project, ...]:
    """Parse a project resource. Raises ValueError unless it is a JSON array."""
    if not isinstance(payload, list):
        raise ValueError("project resource must be a JSON array")
    return tuple(Project.from_dict(item) for item in payload)
