# -*- coding: utf-8 -*-
"""Portfolio site entrypoint.

Builds the page headlessly:
- bootstrap (logging, crash handlers)
- pick the preference store, resource fetcher and contact transport
- run startup, replay the requested interactions through the click surface
- write the resulting HTML
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from portfolio import __version__

log = logging.getLogger("portfolio")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="portfolio", description="Render the portfolio page.")
    p.add_argument("--site-root", type=Path, default=None, help="folder holding i18n/*.json (default: bundled resources)")
    p.add_argument("--base-url", default="", help="fetch resources over HTTP from this URL instead of --site-root")
    p.add_argument("--store", choices=("json", "qsettings", "memory"), default="json")
    p.add_argument("--prefs-file", type=Path, default=None, help="preference file for the json/qsettings stores")
    p.add_argument("--lang", choices=("es", "en"), default=None, help="switch to this language after startup")
    p.add_argument("--toggle-theme", action="store_true")
    p.add_argument("--filter", action="append", default=[], metavar="KEY=VALUE", help="click a filter button (repeatable)")
    p.add_argument("--clear-filters", action="store_true")
    p.add_argument("--clear-prefs", action="store_true", help="remove stored preferences before startup")
    p.add_argument("--reveal-all", action="store_true", help="scroll every lazy image into view")
    p.add_argument("--out", type=Path, default=None, help="write HTML here (default: stdout)")
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def _make_store(args: argparse.Namespace):
    if args.store == "memory":
        from infra.preference_store import MemoryPreferenceStore
        return MemoryPreferenceStore()
    if args.store == "qsettings":
        from ui.common.state import QSettingsPreferenceStore
        return QSettingsPreferenceStore(args.prefs_file)
    from infra.preference_store import JsonFilePreferenceStore
    return JsonFilePreferenceStore(args.prefs_file)


def _make_fetcher(args: argparse.Namespace, settings):
    if args.base_url:
        from infra.resource_fetcher import HttpResourceFetcher
        return HttpResourceFetcher(args.base_url, timeout=settings.request_timeout_s)
    from infra.resource_fetcher import FileResourceFetcher
    return FileResourceFetcher(args.site_root)


class _OfflineTransport:
    """Used when no contact endpoint is configured."""

    async def submit(self, fields):
        from core.types import SubmitResult
        log.warning("No contact endpoint configured; submission not sent")
        return SubmitResult.NETWORK_ERROR


async def _run(args: argparse.Namespace) -> int:
    from app.config import load_app_settings
    from app.coordinator import App, LANG_SELECTOR, THEME_SELECTOR
    from infra.crash_handler import install_loop_exception_handler
    from services.catalog_loader import CLEAR_SELECTOR, FILTER_SELECTOR
    from services.config_store import ConfigStore
    from services.contact_channel import RequestsContactTransport
    from ui.html_render import HtmlRenderPort
    from ui.theme import system_prefers_dark
    from ui.visibility import ViewportVisibilityWatcher, grid_geometry

    install_loop_exception_handler()
    settings = load_app_settings(args.site_root / "site_config.json" if args.site_root else None)

    store = _make_store(args)
    if args.clear_prefs:
        ConfigStore(store).clear()

    renderer = HtmlRenderPort()
    watcher = ViewportVisibilityWatcher(
        grid_geometry(settings.card_height_px, columns=settings.card_columns),
        root_margin=settings.lazy_root_margin_px,
        threshold=settings.lazy_threshold,
    )
    if settings.contact_endpoint:
        transport = RequestsContactTransport(settings.contact_endpoint, timeout=settings.request_timeout_s)
    else:
        transport = _OfflineTransport()

    app = App(
        store=store,
        fetcher=_make_fetcher(args, settings),
        renderer=renderer,
        watcher=watcher,
        transport=transport,
        prefers_dark=system_prefers_dark,
        settings=settings,
    )
    ok = await app.start()
    if ok:
        # first screen: the top of the page
        watcher.scroll_to(0.0, settings.card_height_px * 2)
        if args.lang and args.lang != app.current_language.value:
            renderer.click(LANG_SELECTOR)
            await app.drain()
        if args.toggle_theme:
            renderer.click(THEME_SELECTOR)
        if args.clear_filters:
            renderer.click(CLEAR_SELECTOR)
        for item in args.filter:
            key, _, value = item.partition("=")
            if not key or not value:
                log.warning("Ignoring malformed --filter %r (expected KEY=VALUE)", item)
                continue
            renderer.click(FILTER_SELECTOR, filter=key, value=value)
        if args.reveal_all:
            watcher.scroll_to(0.0, float("inf"))
        await app.drain()

    html_text = renderer.to_html()
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(html_text, encoding="utf-8")
        log.info("Wrote %s", args.out)
    else:
        sys.stdout.write(html_text)
    app.destroy()
    return 0 if ok else 1


def main(argv: Optional[List[str]] = None) -> None:
    from app.deps import ensure_runtime_deps

    args = _parse_args(argv)
    try:
        ensure_runtime_deps(qt=args.store == "qsettings")
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    from app.bootstrap import bootstrap

    bootstrap(verbose=args.verbose)
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
