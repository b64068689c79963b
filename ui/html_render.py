# -*- coding: utf-8 -*-
"""HTML rendering adapter.

Keeps the page state the coordination layer drives (catalog container,
text-bound nodes, toggles, status line) and serializes it to markup.
Clicks are dispatched by selector through ``click()``; every handler runs
guarded so one failure does not stop the others.
"""

from __future__ import annotations

import html
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from core.types import MessageKind, Tone
from domain.cards import LazyImage, ProjectCard
from ui.common.error_handler import run_guarded

# data-i18n key -> original text shown before (or without) translations
DEFAULT_TEXTS: Dict[str, str] = {
    "title": "Portafolio",
    "nav_projects": "Proyectos",
    "nav_contact": "Contacto",
    "projects_title": "Proyectos",
    "filter_web": "Web",
    "filter_mobile": "Móvil",
    "filter_particular": "Particular",
    "filter_independent": "Independiente",
    "filter_collaboration": "Colaboración",
    "filter_clear": "Limpiar filtros",
    "contact_title": "Contacto",
    "contact_send": "Enviar",
}

# (filter key, value, data-i18n key)
FILTER_BUTTONS: Tuple[Tuple[str, str, str], ...] = (
    ("category", "1", "filter_web"),
    ("category", "2", "filter_mobile"),
    ("category", "3", "filter_particular"),
    ("mode", "1", "filter_independent"),
    ("mode", "2", "filter_collaboration"),
)

_MESSAGE_ICONS = {
    MessageKind.NO_PROJECTS: ("no-projects-message", "fa-search"),
    MessageKind.LOAD_ERROR: ("error-message", "fa-exclamation-triangle"),
}


def _e(value: Any) -> str:
    return html.escape(str(value), quote=True)


def card_html(card: ProjectCard, *, image_loaded: bool = False) -> str:
    parts: List[str] = []
    if card.image is not None:
        if image_loaded:
            parts.append(f'<img src="{_e(card.image.src)}" alt="{_e(card.image.alt)}" class="project-img loaded">')
        else:
            parts.append(
                f'<img data-src="{_e(card.image.src)}" alt="{_e(card.image.alt)}" class="project-img lazy" loading="lazy">'
            )
    else:
        parts.append('<div class="project-placeholder"><i class="fas fa-image"></i></div>')
    parts.append(f"<h3>{_e(card.title)}</h3>")
    parts.append(f"<p>{_e(card.description)}</p>")
    if card.contribution is not None:
        parts.append(f"<p><strong>{_e(card.captions['contribution'])}</strong> {_e(card.contribution)}</p>")
    parts.append(f"<p><strong>{_e(card.captions['technologies'])}</strong> {_e(card.tech_text)}</p>")
    parts.append(f"<p><strong>{_e(card.captions['category'])}</strong> {_e(card.category_text)}</p>")
    parts.append(f"<p><strong>{_e(card.captions['mode'])}</strong> {_e(card.mode_text)}</p>")
    links = "".join(
        f'<a href="{_e(link.href)}" target="_blank" aria-label="{_e(link.aria_label)}">{_e(link.label)}</a>'
        for link in card.links
    )
    parts.append(f'<div class="project-links">{links}</div>')
    body = "\n  ".join(parts)
    return (
        f'<article class="project-card" data-index="{card.index}" '
        f'style="animation-delay: {card.animation_delay}s">\n  {body}\n</article>'
    )


class HtmlRenderPort:
    def __init__(self, texts: Optional[Mapping[str, str]] = None) -> None:
        self.texts: Dict[str, str] = dict(DEFAULT_TEXTS if texts is None else texts)
        self.aria: Dict[str, str] = {}
        self.title = self.texts.get("title", "")
        self.cards: Tuple[ProjectCard, ...] = ()
        self.message: Optional[Tuple[MessageKind, str]] = None
        self.loaded_images: List[LazyImage] = []
        self.active_filters: Dict[str, str] = {}
        self.language_label: Tuple[str, str] = ("", "")
        self.theme_toggle: Tuple[str, str, Optional[str]] = ("", "", None)
        self.dark = False
        self.status: Optional[Tuple[str, Tone]] = None
        self.submit_busy = False
        self.submit_label = self.texts.get("contact_send", "")
        self.form_resets = 0
        self.ready = False
        self.fatal: Optional[Dict[str, str]] = None
        self._retry: Optional[Callable[[], Any]] = None
        self._handlers: Dict[str, List[Callable[[Mapping[str, str]], Any]]] = {}

    # --- catalog container -------------------------------------------------

    def render_list(self, cards: Sequence[ProjectCard]) -> None:
        self.cards = tuple(cards)
        self.message = None

    def show_message(self, kind: MessageKind, text: str) -> None:
        self.cards = ()
        self.message = (kind, text)

    def load_image(self, image: LazyImage) -> None:
        self.loaded_images.append(image)

    def set_filter_active(self, key: str, value: Optional[str]) -> None:
        if value:
            self.active_filters[key] = value
        else:
            self.active_filters.pop(key, None)

    def clear_active_filters(self) -> None:
        self.active_filters.clear()

    # --- events ------------------------------------------------------------

    def bind_click(self, selector: str, handler: Callable[[Mapping[str, str]], Any]) -> Callable[[], None]:
        self._handlers.setdefault(selector, []).append(handler)

        def _unbind() -> None:
            handlers = self._handlers.get(selector, [])
            if handler in handlers:
                handlers.remove(handler)
            if not handlers:
                self._handlers.pop(selector, None)

        return _unbind

    def bound_selectors(self) -> List[str]:
        return sorted(self._handlers)

    def click(self, selector: str, **data: str) -> List[Any]:
        """Dispatch a click (or form submit) to every handler bound to ``selector``."""
        results = []
        for handler in list(self._handlers.get(selector, [])):
            results.append(run_guarded(lambda h=handler: h(dict(data)), logger_name=__name__))
        return results

    def retry(self) -> Any:
        if self._retry is None:
            return None
        return self._retry()

    # --- text-bound nodes --------------------------------------------------

    def update_texts(self, translations: Mapping[str, str]) -> None:
        for key in list(self.texts):
            text = translations.get(key)
            if not text:
                continue
            if key == "title":
                self.title = text
            else:
                self.texts[key] = text
                self.aria[key] = text
        label = translations.get("contact_send")
        if label and not self.submit_busy:
            self.submit_label = label

    def set_language_label(self, text: str, aria_label: str) -> None:
        self.language_label = (text, aria_label)

    # --- presentation ------------------------------------------------------

    def apply_theme(self, dark: bool) -> None:
        self.dark = bool(dark)

    def set_theme_toggle(self, icon: str, i18n_key: str, aria_label: Optional[str]) -> None:
        self.theme_toggle = (icon, i18n_key, aria_label)

    # --- contact form ------------------------------------------------------

    def show_status(self, text: str, tone: Tone) -> None:
        self.status = (text, tone)

    def clear_status(self) -> None:
        self.status = None

    def set_submit_busy(self, busy: bool, label: str) -> None:
        self.submit_busy = bool(busy)
        self.submit_label = label

    def reset_form(self) -> None:
        self.form_resets += 1

    # --- page lifecycle ----------------------------------------------------

    def mark_ready(self) -> None:
        self.ready = True
        self.fatal = None
        self._retry = None

    def show_fatal_error(self, content: Mapping[str, str], on_retry: Callable[[], Any]) -> None:
        self.fatal = dict(content)
        self._retry = on_retry
        self.ready = False

    # --- serialization -----------------------------------------------------

    def container_html(self) -> str:
        if self.message is not None:
            kind, text = self.message
            css, icon = _MESSAGE_ICONS[kind]
            i18n = ' data-i18n="no_projects"' if kind is MessageKind.NO_PROJECTS else ""
            return f'<div class="{css}">\n  <i class="fas {icon}"></i>\n  <p{i18n}>{_e(text)}</p>\n</div>'
        loaded = {id(image) for image in self.loaded_images}
        return "\n".join(
            card_html(card, image_loaded=card.image is not None and id(card.image) in loaded)
            for card in self.cards
        )

    def _text_node(self, tag: str, key: str, extra: str = "") -> str:
        text = self.texts.get(key, "")
        aria = f' aria-label="{_e(self.aria[key])}"' if key in self.aria else ""
        return f'<{tag} data-i18n="{key}"{extra}{aria}>{_e(text)}</{tag}>'

    def _filter_buttons(self) -> str:
        buttons = []
        for key, value, i18n in FILTER_BUTTONS:
            active = ' class="active"' if self.active_filters.get(key) == value else ""
            label = self.texts.get(i18n, value)
            buttons.append(f'<button data-filter="{key}" data-value="{value}"{active}>{_e(label)}</button>')
        return "\n      ".join(buttons)

    def to_html(self) -> str:
        if self.fatal is not None:
            f = self.fatal
            return (
                '<!DOCTYPE html>\n<html><body>\n<div class="error-state">\n'
                f"  <h1>{_e(f.get('icon', ''))}</h1>\n  <h2>{_e(f.get('title', ''))}</h2>\n"
                f"  <p>{_e(f.get('message', ''))}</p>\n  <button>{_e(f.get('retry', ''))}</button>\n"
                "</div>\n</body></html>\n"
            )
        lang_text, lang_aria = self.language_label
        icon, theme_key, theme_aria = self.theme_toggle
        theme_aria_attr = f' aria-label="{_e(theme_aria)}"' if theme_aria else ""
        html_class = "dark" if self.dark else ""
        body_class = ' class="app-loaded"' if self.ready else ""
        status = ""
        if self.status is not None:
            status = f' class="{self.status[1].value}"'
        status_text = _e(self.status[0]) if self.status else ""
        disabled = " disabled" if self.submit_busy else ""
        return f"""<!DOCTYPE html>
<html class="{html_class}">
<head><meta charset="utf-8"><title>{_e(self.title)}</title></head>
<body{body_class}>
  <header>
    <nav id="nav-menu">
      <a href="#projects">{_e(self.texts.get('nav_projects', ''))}</a>
      <a href="#contact">{_e(self.texts.get('nav_contact', ''))}</a>
    </nav>
    <button id="lang-switch" aria-label="{_e(lang_aria)}">{_e(lang_text)}</button>
    <button id="theme-toggle" data-i18n="{_e(theme_key)}"{theme_aria_attr}>{_e(icon)}</button>
  </header>
  <section id="projects">
    {self._text_node('h2', 'projects_title')}
    <div id="project-filters">
      {self._filter_buttons()}
    </div>
    <button id="clear-filters">{_e(self.texts.get('filter_clear', ''))}</button>
    <div id="projects-container">
{self.container_html()}
    </div>
  </section>
  <section id="contact">
    {self._text_node('h2', 'contact_title')}
    <form id="contact-form" method="POST">
      <input name="name"><input name="email" type="email"><textarea name="message"></textarea>
      <button type="submit"{disabled}>{_e(self.submit_label)}</button>
    </form>
    <p id="form-status"{status}>{status_text}</p>
  </section>
</body>
</html>
"""
