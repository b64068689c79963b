# -*- coding: utf-8 -*-
"""Simple event bus for cross-component notifications (no UI dependency)."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from core.types import Locale, ThemeMode


@dataclass(frozen=True)
class TranslationsPublished:
    language: Locale
    degraded: bool = False


@dataclass(frozen=True)
class LanguageChanged:
    language: Locale
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class ThemeChanged:
    theme: ThemeMode


@dataclass(frozen=True)
class FiltersChanged:
    filters: Mapping[str, Optional[str]]


@dataclass(frozen=True)
class AppReady:
    language: Locale
    timestamp: float = field(default_factory=time.time)


class EventBus:
    """Minimal in-process event bus (best-effort)."""

    def __init__(self) -> None:
        self._subs: Dict[Type[Any], List[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: Type[Any], callback: Callable[[Any], None]) -> Callable[[], None]:
        self._subs.setdefault(event_type, []).append(callback)

        def _unsubscribe() -> None:
            try:
                self._subs.get(event_type, []).remove(callback)
            except ValueError:
                pass

        return _unsubscribe

    def emit(self, event: Any) -> None:
        for cb in list(self._subs.get(type(event), []) or []):
            try:
                cb(event)
            except Exception:
                # Best-effort: a failing listener must not break the emitter
                logging.getLogger(__name__).debug("Event handler failed.", exc_info=True)
