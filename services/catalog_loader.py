# -*- coding: utf-8 -*-
"""Project catalog: dataset per language, filters, rendering, lazy images.

The dataset is replaced wholesale on every successful load and left
untouched on failure. Loads are generation-tagged so a slow response for an
earlier language can never overwrite a later one.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple

from app.events import EventBus, FiltersChanged
from app.ports import RenderPort, ResourceFetcher, Unbind, VisibilityWatcher
from core.models.preferences import FilterSet
from core.types import Locale, MessageKind
from domain.cards import CatalogView, LazyImage, catalog_view
from domain.catalog_filter import active_filters, filter_projects, normalize_filters, toggle_filter
from domain.labels import CatalogLabels
from domain.models.project import Project, parse_projects
from infra.perf import span
from services.config_store import ConfigStore
from services.errors import FetchFailure
from services.generation import GenerationCounter

log = logging.getLogger(__name__)

PROJECTS_PATH = "i18n/projects_{lang}.json"

FILTER_SELECTOR = "#project-filters [data-filter]"
CLEAR_SELECTOR = "#clear-filters"


class CatalogLoader:
    def __init__(
        self,
        config: ConfigStore,
        fetcher: ResourceFetcher,
        renderer: RenderPort,
        watcher: VisibilityWatcher,
        *,
        language: Locale = Locale.ES,
        initial_filters: Optional[Mapping[str, Optional[str]]] = None,
        bus: Optional[EventBus] = None,
        path_template: str = PROJECTS_PATH,
    ) -> None:
        self._config = config
        self._fetcher = fetcher
        self._renderer = renderer
        self._watcher = watcher
        self._bus = bus
        self._path_template = path_template
        self._generation = GenerationCounter()

        self.language = Locale.coerce(language)
        self.labels = CatalogLabels.for_locale(self.language)
        self._projects: Tuple[Project, ...] = ()
        self._filters: FilterSet = normalize_filters(initial_filters or {})
        self._observed: Set[LazyImage] = set()
        self._bindings: List[Unbind] = []
        self.last_view: Optional[CatalogView] = None

        self._watcher.on_visible(self.load_image)
        self._setup_filter_listeners()

    # --- state ----------------------------------------------------------

    @property
    def projects(self) -> Tuple[Project, ...]:
        return self._projects

    @property
    def filters(self) -> Dict[str, Optional[str]]:
        return dict(self._filters)

    @property
    def observed_images(self) -> Set[LazyImage]:
        return set(self._observed)

    # --- events ---------------------------------------------------------

    def _setup_filter_listeners(self) -> None:
        self._bindings.append(self._renderer.bind_click(FILTER_SELECTOR, self._on_filter_click))
        self._bindings.append(self._renderer.bind_click(CLEAR_SELECTOR, lambda _data: self.clear_filters()))

    def _on_filter_click(self, data: Mapping[str, str]) -> None:
        key = data.get("filter")
        value = data.get("value")
        if not key or value is None:
            log.debug("Ignoring filter click without filter/value: %r", dict(data))
            return
        self.handle_filter_click(key, value)

    def handle_filter_click(self, key: str, value: str) -> None:
        self._filters = toggle_filter(self._filters, key, value)
        self._renderer.set_filter_active(key, self._filters[key])
        self.apply_filters()

    def clear_filters(self) -> None:
        self._filters = {}
        self._config.save(filters={})
        self._renderer.clear_active_filters()
        self._emit_filters()
        self.render(self._projects)

    # --- loading --------------------------------------------------------

    async def load_projects(self, lang: Locale, *, render: bool = True) -> bool:
        """Fetch the dataset for ``lang``; render it against the current filters.

        With ``render=False`` the caller renders (a failure still shows the
        error message).
        """
        lang = Locale.coerce(lang)
        generation = self._generation.next()
        path = self._path_template.format(lang=lang.value)
        try:
            payload = await self._fetcher.fetch_json(path)
            projects = parse_projects(payload)
        except (FetchFailure, ValueError) as exc:
            if not self._generation.is_current(generation):
                return False
            log.error("Error loading projects %s: %s", path, exc)
            self.show_error_message()
            return False

        if not self._generation.is_current(generation):
            log.debug("Discarding stale projects for %s", lang.value)
            return False

        self._projects = projects
        if render:
            self.render(self.filter_projects())
        return True

    async def initialize(self) -> bool:
        ok = await self.load_projects(self.language, render=False)
        if ok:
            self.apply_saved_filters()
        return ok

    def apply_saved_filters(self) -> None:
        for key, value in active_filters(self._filters).items():
            self._renderer.set_filter_active(key, value)
        self.apply_filters()

    async def change_language(self, lang: Locale) -> bool:
        """Reload for ``lang`` keeping the current filters."""
        self.language = Locale.coerce(lang)
        self.labels = CatalogLabels.for_locale(self.language)
        ok = await self.load_projects(self.language, render=False)
        if ok:
            self.apply_filters()
        return ok

    # --- filtering / rendering -----------------------------------------

    def filter_projects(self) -> List[Project]:
        return filter_projects(self._projects, self._filters)

    def apply_filters(self) -> None:
        self._config.save(filters=self._filters)
        self._emit_filters()
        self.render(self.filter_projects())

    def _emit_filters(self) -> None:
        if self._bus is not None:
            self._bus.emit(FiltersChanged(self.filters))

    def render(self, projects: Sequence[Project]) -> CatalogView:
        with span("catalog.render"):
            view = catalog_view(projects, self.labels)
            self._release_images()
            self.last_view = view
            if view.is_empty:
                self._renderer.show_message(MessageKind.NO_PROJECTS, self.labels.message(MessageKind.NO_PROJECTS))
                return view
            self._renderer.render_list(view.cards)
            for card in view.cards:
                if card.image is not None:
                    self._observed.add(card.image)
                    self._watcher.observe(card.image)
        return view

    def show_error_message(self) -> None:
        self._release_images()
        self._renderer.show_message(MessageKind.LOAD_ERROR, self.labels.message(MessageKind.LOAD_ERROR))

    # --- lazy images ----------------------------------------------------

    def load_image(self, image: LazyImage) -> None:
        """Swap in the real source once; the image is never watched again."""
        if image not in self._observed:
            return
        self._observed.discard(image)
        self._watcher.unobserve(image)
        image.loaded = True
        self._renderer.load_image(image)

    def _release_images(self) -> None:
        for image in list(self._observed):
            self._watcher.unobserve(image)
        self._observed.clear()

    def destroy(self) -> None:
        self._watcher.disconnect()
        self._observed.clear()
        for unbind in self._bindings:
            unbind()
        self._bindings.clear()
