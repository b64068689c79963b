# -*- coding: utf-8 -*-
"""Composition root: startup sequencing and cross-component wiring.

Startup order is strict:
1. load preferences
2. apply theme and language label before anything else is shown
3. build Translator, ThemeController, CatalogLoader, ContactForm (in order)
4. wire the language toggle (fans out to Translator + CatalogLoader)
5. mark the page ready

Any exception on that path ends in the single full-page error state.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Set

from app.config import AppSettings
from app.events import AppReady, EventBus, FiltersChanged, LanguageChanged
from app.ports import ContactTransport, PreferenceStore, RenderPort, ResourceFetcher, Unbind, VisibilityWatcher
from core.models.preferences import Preferences
from core.types import Locale
from domain.labels import FATAL_ERROR, language_toggle_label
from services.catalog_loader import CatalogLoader
from services.config_store import ConfigStore
from services.contact_channel import ContactForm
from services.theme_controller import ThemeController, resolve_dark
from services.translator import Translator

log = logging.getLogger(__name__)

LANG_SELECTOR = "#lang-switch"
THEME_SELECTOR = "#theme-toggle"


class App:
    def __init__(
        self,
        *,
        store: PreferenceStore,
        fetcher: ResourceFetcher,
        renderer: RenderPort,
        watcher: VisibilityWatcher,
        transport: ContactTransport,
        prefers_dark: Callable[[], bool],
        settings: Optional[AppSettings] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.bus = bus or EventBus()
        self.config = ConfigStore(store)
        self._fetcher = fetcher
        self._renderer = renderer
        self._watcher = watcher
        self._transport = transport
        self._prefers_dark = prefers_dark

        self.preferences: Optional[Preferences] = None
        self.i18n: Optional[Translator] = None
        self.theme: Optional[ThemeController] = None
        self.catalog: Optional[CatalogLoader] = None
        self.contact: Optional[ContactForm] = None
        self.ready = False

        self._requested_language: Optional[Locale] = None
        self._bindings: List[Unbind] = []
        self._tasks: Set[asyncio.Task] = set()

    @property
    def current_language(self) -> Locale:
        if self._requested_language is not None:
            return self._requested_language
        if self.preferences is not None:
            return self.preferences.language
        return Locale.ES

    # --- startup ------------------------------------------------------------

    async def start(self) -> bool:
        try:
            self.preferences = self.config.load()
            self.apply_initial_config()
            await self.init_components()
            self.setup_event_listeners()
            self.mark_as_loaded()
            return True
        except Exception:
            log.exception("Error initializing application")
            self.show_error_state()
            return False

    def apply_initial_config(self) -> None:
        prefs = self.preferences
        self._renderer.apply_theme(resolve_dark(prefs.theme, self._prefers_dark))
        self._renderer.set_language_label(*language_toggle_label(prefs.language))

    async def init_components(self) -> None:
        prefs = self.preferences
        s = self.settings
        self.i18n = Translator(
            self.config, self._fetcher, self._renderer,
            language=prefs.language, bus=self.bus, path_template=s.translations_path,
        )
        self.theme = ThemeController(
            self.config, self._renderer,
            stored=prefs.theme, prefers_dark=self._prefers_dark,
            translate=self.i18n.translate, bus=self.bus,
        )
        self.catalog = CatalogLoader(
            self.config, self._fetcher, self._renderer, self._watcher,
            language=prefs.language, initial_filters=prefs.filters,
            bus=self.bus, path_template=s.projects_path,
        )
        self.contact = ContactForm(
            self._transport, self._renderer,
            translate=self.i18n.translate,
            language=lambda: self.current_language,
            clear_after=s.status_clear_s,
        )
        self._bindings.append(self.contact.bind(lambda fields: self._spawn(self.contact.handle_submit(fields))))

        await asyncio.gather(
            self.i18n.load_translations(prefs.language),
            self.catalog.initialize(),
        )

    def setup_event_listeners(self) -> None:
        self._bindings.append(self._renderer.bind_click(LANG_SELECTOR, self._on_language_click))
        self._bindings.append(self._renderer.bind_click(THEME_SELECTOR, self._on_theme_click))
        self._bindings.append(self.bus.subscribe(FiltersChanged, self._on_filters_changed))

    def mark_as_loaded(self) -> None:
        self.ready = True
        self._renderer.mark_ready()
        self.bus.emit(AppReady(self.current_language))

    def show_error_state(self) -> None:
        self.ready = False
        try:
            self._renderer.show_fatal_error(FATAL_ERROR, self.retry)
        except Exception:
            log.exception("Could not render the error state")

    # --- interactions -------------------------------------------------------

    def _on_language_click(self, _data: Mapping[str, str]) -> "asyncio.Task":
        # next language comes from the last *requested* one, fixed at click time
        target = self.current_language.other()
        self._requested_language = target
        return self._spawn(self.switch_language(target))

    def _on_theme_click(self, _data: Mapping[str, str]) -> None:
        theme = self.theme.toggle()
        if self.preferences is not None:
            self.preferences.theme = theme

    def _on_filters_changed(self, event: FiltersChanged) -> None:
        if self.preferences is not None:
            self.preferences.filters = dict(event.filters)

    async def switch_language(self, lang: Optional[Locale] = None) -> Locale:
        target = Locale.coerce(lang) if lang is not None else self.current_language.other()
        self._requested_language = target
        if self.preferences is not None:
            self.preferences.language = target
        await asyncio.gather(
            self.i18n.switch_language(target),
            self.catalog.change_language(target),
        )
        if self._requested_language is target:
            self.bus.emit(LanguageChanged(target))
        return target

    # --- tasks / teardown ---------------------------------------------------

    def _spawn(self, coro: Awaitable[Any]) -> "asyncio.Task":
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: "asyncio.Task") -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log.error("Background task failed", exc_info=(type(exc), exc, exc.__traceback__))

    async def drain(self) -> None:
        """Wait until every scheduled interaction has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def retry(self) -> "asyncio.Task":
        self.destroy()
        return self._spawn(self.start())

    def destroy(self) -> None:
        for task in list(self._tasks):
            if task is not asyncio.current_task():
                task.cancel()
        for unbind in self._bindings:
            unbind()
        self._bindings.clear()
        if self.catalog is not None:
            self.catalog.destroy()
        if self.theme is not None:
            self.theme.destroy()
        if self.contact is not None:
            self.contact.destroy()
        self.ready = False
