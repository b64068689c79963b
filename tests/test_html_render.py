# -*- coding: utf-8 -*-
"""HTML adapter: text nodes, guarded clicks, markup."""

from __future__ import annotations

from core.types import Locale, MessageKind, Tone
from domain.cards import catalog_view
from domain.labels import CatalogLabels
from domain.models.project import parse_projects
from ui.html_render import DEFAULT_TEXTS, HtmlRenderPort


def test_untranslated_nodes_keep_original_text() -> None:
    r = HtmlRenderPort()
    r.update_texts({"projects_title": "Projects", "title": "Portfolio"})
    assert r.texts["projects_title"] == "Projects"
    assert r.aria["projects_title"] == "Projects"
    assert r.texts["contact_title"] == DEFAULT_TEXTS["contact_title"]
    assert r.title == "Portfolio"


def test_click_runs_every_handler_even_if_one_fails() -> None:
    r = HtmlRenderPort()
    seen = []

    def broken(_data):
        raise RuntimeError("boom")

    r.bind_click("#x", broken)
    r.bind_click("#x", lambda data: seen.append(data) or "ok")
    results = r.click("#x", value="1")
    assert seen == [{"value": "1"}]
    assert results[-1] == "ok"


def test_unbind_removes_selector() -> None:
    r = HtmlRenderPort()
    unbind = r.bind_click("#x", lambda _d: None)
    assert r.bound_selectors() == ["#x"]
    unbind()
    unbind()
    assert r.bound_selectors() == []


def test_markup_reflects_state() -> None:
    r = HtmlRenderPort()
    projects = parse_projects([
        {"title": "<Shop>", "category": "1", "mode": "1", "media": "img/a.webp"},
    ])
    view = catalog_view(projects, CatalogLabels.for_locale(Locale.EN))
    r.render_list(view.cards)
    r.set_filter_active("category", "1")
    r.apply_theme(True)
    r.show_status("Message sent.", Tone.SUCCESS)
    r.mark_ready()

    page = r.to_html()
    assert '<html class="dark">' in page
    assert "&lt;Shop&gt;" in page
    assert 'data-src="img/a.webp"' in page
    assert '<button data-filter="category" data-value="1" class="active">' in page
    assert '<p id="form-status" class="green">Message sent.</p>' in page
    assert '<body class="app-loaded">' in page

    r.load_image(view.cards[0].image)
    assert '<img src="img/a.webp" alt="&lt;Shop&gt;" class="project-img loaded">' in r.container_html()


def test_message_replaces_cards() -> None:
    r = HtmlRenderPort()
    r.show_message(MessageKind.NO_PROJECTS, "Nada")
    assert r.cards == ()
    assert 'class="no-projects-message"' in r.container_html()
    assert 'data-i18n="no_projects"' in r.container_html()


def test_fatal_error_page_and_retry() -> None:
    r = HtmlRenderPort()
    calls = []
    r.show_fatal_error({"icon": "!", "title": "T", "message": "M", "retry": "R"}, lambda: calls.append(1))
    assert '<div class="error-state">' in r.to_html()
    r.retry()
    assert calls == [1]
