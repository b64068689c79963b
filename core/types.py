# -*- coding: utf-8 -*-
"""Shared domain types (pure, test-friendly)."""

from __future__ import annotations

from enum import Enum
from typing import Any


def _token(value: Any) -> str:
    # str() of a str-mixin member is "Locale.EN"; use its value instead
    raw = value.value if isinstance(value, Enum) else value
    return str(raw or "").strip().lower()


class Locale(str, Enum):
    ES = "es"
    EN = "en"

    @classmethod
    def coerce(cls, value: Any, default: "Locale | None" = None) -> "Locale":
        """Return the matching locale, or ``default`` (Spanish) for anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(_token(value))
        except ValueError:
            return default if default is not None else cls.ES

    def other(self) -> "Locale":
        return Locale.EN if self is Locale.ES else Locale.ES


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"

    @classmethod
    def coerce(cls, value: Any) -> "ThemeMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(_token(value))
        except ValueError:
            return cls.AUTO

    @property
    def is_concrete(self) -> bool:
        return self is not ThemeMode.AUTO


class MessageKind(str, Enum):
    """Catalog container states other than a list of cards."""

    NO_PROJECTS = "no_projects"
    LOAD_ERROR = "load_error"


class SubmitResult(str, Enum):
    OK = "ok"
    REJECTED = "rejected"
    NETWORK_ERROR = "network_error"


class Tone(str, Enum):
    SUCCESS = "green"
    ERROR = "red"
