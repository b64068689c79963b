# -*- coding: utf-8 -*-
"""Light/dark presentation state."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from app.events import EventBus, ThemeChanged, TranslationsPublished
from app.ports import RenderPort
from core.types import ThemeMode
from services.config_store import ConfigStore

log = logging.getLogger(__name__)

ICON_DARK = "☀️"
ICON_LIGHT = "🌙"


def resolve_dark(stored: ThemeMode, prefers_dark: Callable[[], bool]) -> bool:
    """A stored concrete theme wins; ``auto`` defers to the system."""
    if stored.is_concrete:
        return stored is ThemeMode.DARK
    try:
        return bool(prefers_dark())
    except Exception:
        log.debug("System theme probe failed; assuming light", exc_info=True)
        return False


class ThemeController:
    def __init__(
        self,
        config: ConfigStore,
        renderer: RenderPort,
        *,
        stored: ThemeMode,
        prefers_dark: Callable[[], bool],
        translate: Callable[[str], str],
        bus: Optional[EventBus] = None,
    ) -> None:
        self._config = config
        self._renderer = renderer
        self._translate = translate
        self._bus = bus
        self._dark = resolve_dark(ThemeMode.coerce(stored), prefers_dark)
        self._unsubscribe = None
        if bus is not None:
            self._unsubscribe = bus.subscribe(TranslationsPublished, lambda _e: self.update_icon())

        # resolution is applied but not persisted
        self._renderer.apply_theme(self._dark)
        self.update_icon()

    @property
    def current(self) -> ThemeMode:
        return ThemeMode.DARK if self._dark else ThemeMode.LIGHT

    def toggle(self) -> ThemeMode:
        self._dark = not self._dark
        self._renderer.apply_theme(self._dark)
        self._config.save(theme=self.current)
        self.update_icon()
        if self._bus is not None:
            self._bus.emit(ThemeChanged(self.current))
        return self.current

    def update_icon(self) -> None:
        key = "theme_light" if self._dark else "theme_dark"
        label = self._translate(key)
        self._renderer.set_theme_toggle(
            ICON_DARK if self._dark else ICON_LIGHT,
            key,
            label if label != key else None,
        )

    def destroy(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
