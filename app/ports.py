# -*- coding: utf-8 -*-
"""Capabilities the coordination layer needs from its host.

Components receive these at construction; nothing reaches for a global
page, storage or network object.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from core.types import MessageKind, SubmitResult, Tone
from domain.cards import LazyImage, ProjectCard

ClickHandler = Callable[[Mapping[str, str]], Any]
Unbind = Callable[[], None]


class PreferenceStore(Protocol):
    """String key/value store. Adapters raise StorageFailure on write errors."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class ResourceFetcher(Protocol):
    async def fetch_json(self, path: str) -> Any:
        """Return the decoded JSON at ``path`` or raise FetchFailure."""
        ...


class ContactTransport(Protocol):
    async def submit(self, fields: Mapping[str, str]) -> SubmitResult: ...


class VisibilityWatcher(Protocol):
    def observe(self, item: LazyImage) -> None: ...

    def unobserve(self, item: LazyImage) -> None: ...

    def on_visible(self, callback: Callable[[LazyImage], None]) -> None: ...

    def disconnect(self) -> None: ...


class RenderPort(Protocol):
    # catalog container
    def render_list(self, cards: Sequence[ProjectCard]) -> None: ...

    def show_message(self, kind: MessageKind, text: str) -> None: ...

    def load_image(self, image: LazyImage) -> None: ...

    def set_filter_active(self, key: str, value: Optional[str]) -> None: ...

    def clear_active_filters(self) -> None: ...

    # delegated events; the returned callable removes the binding
    def bind_click(self, selector: str, handler: ClickHandler) -> Unbind: ...

    # text-bound nodes
    def update_texts(self, translations: Mapping[str, str]) -> None: ...

    def set_language_label(self, text: str, aria_label: str) -> None: ...

    # presentation
    def apply_theme(self, dark: bool) -> None: ...

    def set_theme_toggle(self, icon: str, i18n_key: str, aria_label: Optional[str]) -> None: ...

    # contact form
    def show_status(self, text: str, tone: Tone) -> None: ...

    def clear_status(self) -> None: ...

    def set_submit_busy(self, busy: bool, label: str) -> None: ...

    def reset_form(self) -> None: ...

    # page lifecycle
    def mark_ready(self) -> None: ...

    def show_fatal_error(self, content: Mapping[str, str], on_retry: Callable[[], Any]) -> None: ...
