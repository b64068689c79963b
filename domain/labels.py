# -*- coding: utf-8 -*-
"""Locale-specific fixed text used by the catalog and the toggles.

Pure data. Translatable page text lives in ``i18n/{lang}.json``; these are
the strings the catalog renders itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from core.types import Locale, MessageKind

_CATEGORY_TABLES: Dict[Locale, Dict[str, str]] = {
    Locale.ES: {"1": "Web", "2": "Móvil", "3": "Particular"},
    Locale.EN: {"1": "Web", "2": "Mobile", "3": "Particular"},
}

_MODE_TABLES: Dict[Locale, Dict[str, str]] = {
    Locale.ES: {"1": "Independiente", "2": "Colaboración"},
    Locale.EN: {"1": "Independent", "2": "Collaboration"},
}

_CAPTIONS: Dict[Locale, Dict[str, str]] = {
    Locale.ES: {
        "contribution": "Contribución:",
        "technologies": "Tecnologías:",
        "category": "Categoría:",
        "mode": "Modalidad:",
        "site": "Sitio",
        "site_aria": "Visitar sitio web",
        "demo": "Demo",
        "demo_aria": "Ver demo",
        "code": "Código",
        "code_aria": "Ver código fuente",
        "sending": "Enviando...",
    },
    Locale.EN: {
        "contribution": "Contribution:",
        "technologies": "Technologies:",
        "category": "Category:",
        "mode": "Mode:",
        "site": "Website",
        "site_aria": "Visit website",
        "demo": "Demo",
        "demo_aria": "View demo",
        "code": "Code",
        "code_aria": "View source code",
        "sending": "Sending...",
    },
}

_MESSAGES: Dict[Locale, Dict[MessageKind, str]] = {
    Locale.ES: {
        MessageKind.NO_PROJECTS: "No hay proyectos que coincidan con los filtros.",
        MessageKind.LOAD_ERROR: "Error al cargar proyectos. Por favor, intenta recargar la página.",
    },
    Locale.EN: {
        MessageKind.NO_PROJECTS: "No projects match the selected filters.",
        MessageKind.LOAD_ERROR: "Error loading projects. Please try reloading the page.",
    },
}

# (button text, aria-label): the button offers the *other* language
_LANGUAGE_TOGGLE: Dict[Locale, Tuple[str, str]] = {
    Locale.ES: ("EN", "Switch to English"),
    Locale.EN: ("ES", "Cambiar a Español"),
}

FATAL_ERROR = {
    "icon": "😕",
    "title": "Algo salió mal",
    "message": "No se pudo cargar la aplicación. Por favor, recarga la página.",
    "retry": "Reintentar",
}


@dataclass(frozen=True)
class CatalogLabels:
    """Display tables for one locale; rebuilt on every language change."""

    locale: Locale
    categories: Mapping[str, str]
    modes: Mapping[str, str]
    captions: Mapping[str, str]
    messages: Mapping[MessageKind, str]

    @classmethod
    def for_locale(cls, locale: Locale) -> "CatalogLabels":
        return cls(
            locale=locale,
            categories=dict(_CATEGORY_TABLES[locale]),
            modes=dict(_MODE_TABLES[locale]),
            captions=dict(_CAPTIONS[locale]),
            messages=dict(_MESSAGES[locale]),
        )

    def category(self, raw: Any) -> str:
        return self.categories.get(str(raw), str(raw))

    def mode(self, raw: Any) -> str:
        return self.modes.get(str(raw), str(raw))

    def caption(self, key: str) -> str:
        return self.captions.get(key, key)

    def message(self, kind: MessageKind) -> str:
        return self.messages[kind]


def language_toggle_label(locale: Locale) -> Tuple[str, str]:
    return _LANGUAGE_TOGGLE[locale]
