# -*- coding: utf-8 -*-
"""Viewport visibility watcher for lazily loaded images.

Vertical geometry only. The viewport is grown by ``root_margin`` on both
edges, and an item counts as visible once at least ``threshold`` of its
height falls inside it. The watcher reports; unobserving is up to the
callback (the catalog does it on first reveal).
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from domain.cards import LazyImage

log = logging.getLogger(__name__)

ROOT_MARGIN_PX = 50.0
THRESHOLD = 0.1

Geometry = Callable[[LazyImage], Tuple[float, float]]


def grid_geometry(card_height: float = 360.0, *, columns: int = 1, top_offset: float = 0.0) -> Geometry:
    """Cards laid out in rows of ``columns``; returns ``(top, height)``."""
    columns = max(1, int(columns))

    def _geometry(item: LazyImage) -> Tuple[float, float]:
        row = item.card_index // columns
        return top_offset + row * card_height, card_height

    return _geometry


class ViewportVisibilityWatcher:
    def __init__(
        self,
        geometry: Optional[Geometry] = None,
        *,
        root_margin: float = ROOT_MARGIN_PX,
        threshold: float = THRESHOLD,
    ) -> None:
        self._geometry = geometry or grid_geometry()
        self.root_margin = float(root_margin)
        self.threshold = float(threshold)
        self._items: List[LazyImage] = []
        self._callbacks: List[Callable[[LazyImage], None]] = []
        self._viewport: Optional[Tuple[float, float]] = None

    @property
    def observed(self) -> List[LazyImage]:
        return list(self._items)

    def observe(self, item: LazyImage) -> None:
        if any(i is item for i in self._items):
            return
        self._items.append(item)
        # a newly observed item gets an initial check, like the browser observer
        if self._viewport is not None and self._is_visible(item):
            self._notify([item])

    def unobserve(self, item: LazyImage) -> None:
        self._items = [i for i in self._items if i is not item]

    def on_visible(self, callback: Callable[[LazyImage], None]) -> None:
        self._callbacks.append(callback)

    def disconnect(self) -> None:
        self._items.clear()
        self._callbacks.clear()

    def visible_fraction(self, item: LazyImage) -> float:
        if self._viewport is None:
            return 0.0
        view_top, view_height = self._viewport
        root_top = view_top - self.root_margin
        root_bottom = view_top + view_height + self.root_margin
        top, height = self._geometry(item)
        bottom = top + height
        if height <= 0:
            return 1.0 if root_top <= top <= root_bottom else 0.0
        overlap = min(bottom, root_bottom) - max(top, root_top)
        return max(0.0, overlap) / height

    def _is_visible(self, item: LazyImage) -> bool:
        fraction = self.visible_fraction(item)
        return fraction > 0.0 and fraction >= self.threshold

    def scroll_to(self, top: float, height: float) -> List[LazyImage]:
        """Move the viewport and notify every observed item now visible."""
        self._viewport = (float(top), float(height))
        visible = [i for i in self._items if self._is_visible(i)]
        self._notify(visible)
        return visible

    def _notify(self, items: List[LazyImage]) -> None:
        for item in items:
            for cb in list(self._callbacks):
                try:
                    cb(item)
                except Exception:
                    log.debug("Visibility callback failed", exc_info=True)
