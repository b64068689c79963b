# -*- coding: utf-8 -*-
"""Translations for text-bound page nodes.

``idle -> loading -> ready`` on success, ``idle -> loading -> degraded`` on
failure. A degraded translator has an empty map and every node keeps its
original text.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from app.events import EventBus, TranslationsPublished
from app.ports import RenderPort, ResourceFetcher
from core.types import Locale
from domain.labels import language_toggle_label
from services.config_store import ConfigStore
from services.errors import FetchFailure
from services.generation import GenerationCounter

log = logging.getLogger(__name__)

TRANSLATIONS_PATH = "i18n/{lang}.json"


class TranslatorState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    DEGRADED = "degraded"


def _parse_translations(payload: Any) -> Dict[str, str]:
    if not isinstance(payload, dict):
        raise ValueError("translation resource must be a JSON object")
    return {str(k): str(v) for k, v in payload.items() if v is not None}


class Translator:
    def __init__(
        self,
        config: ConfigStore,
        fetcher: ResourceFetcher,
        renderer: RenderPort,
        *,
        language: Locale = Locale.ES,
        bus: Optional[EventBus] = None,
        path_template: str = TRANSLATIONS_PATH,
    ) -> None:
        self._config = config
        self._fetcher = fetcher
        self._renderer = renderer
        self._bus = bus
        self._path_template = path_template
        self._generation = GenerationCounter()

        self.lang: Locale = Locale.coerce(language)
        self.state = TranslatorState.IDLE
        self._translations: Dict[str, str] = {}

    @property
    def translations(self) -> Mapping[str, str]:
        return MappingProxyType(self._translations)

    async def load_translations(self, lang: Locale) -> bool:
        """Fetch and publish ``lang``. Returns False on failure or when superseded."""
        lang = Locale.coerce(lang)
        generation = self._generation.next()
        self.state = TranslatorState.LOADING
        path = self._path_template.format(lang=lang.value)
        try:
            payload = await self._fetcher.fetch_json(path)
            translations = _parse_translations(payload)
        except (FetchFailure, ValueError) as exc:
            if not self._generation.is_current(generation):
                return False
            log.error("Error loading translations %s: %s", path, exc)
            self._translations = {}
            self.lang = lang
            self.state = TranslatorState.DEGRADED
            self._publish_language_label()
            self._emit(degraded=True)
            return False

        if not self._generation.is_current(generation):
            log.debug("Discarding stale translations for %s", lang.value)
            return False

        self._translations = translations
        self.lang = lang
        self.state = TranslatorState.READY
        self.update_text_content()
        self._emit(degraded=False)
        return True

    def update_text_content(self) -> None:
        self._renderer.update_texts(self.translations)
        self._publish_language_label()

    def _publish_language_label(self) -> None:
        text, aria = language_toggle_label(self.lang)
        self._renderer.set_language_label(text, aria)

    def _emit(self, *, degraded: bool) -> None:
        if self._bus is not None:
            self._bus.emit(TranslationsPublished(language=self.lang, degraded=degraded))

    async def switch_language(self, lang: Locale) -> bool:
        lang = Locale.coerce(lang)
        self._config.save(language=lang)
        return await self.load_translations(lang)

    def translate(self, key: str) -> str:
        return self._translations.get(key) or key
