# -*- coding: utf-8 -*-

"""Pytest configuration.

This project is a simple app folder layout. For local testing we add the
repository root to sys.path so that imports like `from services...` work
reliably, and provide in-memory stand-ins for the network and storage ports.
"""

from __future__ import annotations

import asyncio
import os
import sys
from typing import Any, Dict, List

import pytest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.types import SubmitResult  # noqa: E402
from infra.preference_store import MemoryPreferenceStore  # noqa: E402
from services.errors import FetchFailure, StorageFailure  # noqa: E402
from ui.html_render import HtmlRenderPort  # noqa: E402


ES_TEXTS = {"title": "Portafolio", "projects_title": "Proyectos", "contact_send": "Enviar",
            "theme_light": "Tema claro", "theme_dark": "Tema oscuro",
            "contact_required": "Completa todos los campos.",
            "contact_email_invalid": "Email no válido.",
            "contact_success": "Mensaje enviado.", "contact_error": "No se pudo enviar.",
            "contact_network_error": "Error de red."}
EN_TEXTS = {"title": "Portfolio", "projects_title": "Projects", "contact_send": "Send",
            "theme_light": "Light theme", "theme_dark": "Dark theme",
            "contact_required": "Fill in all fields.",
            "contact_email_invalid": "Invalid email.",
            "contact_success": "Message sent.", "contact_error": "Could not send.",
            "contact_network_error": "Network error."}

ES_PROJECTS = [
    {"title": "Tienda", "description": "Comercio", "tech": ["JavaScript", "Node.js"], "category": "1",
     "mode": "1", "media": "img/shop.webp", "demo": "#", "code": "https://git/shop", "site": "#", "contribution": "#"},
    {"title": "Hábitos", "description": "App móvil", "tech": ["Flutter"], "category": "2",
     "mode": "2", "media": "#", "demo": "#", "code": "#", "site": "#", "contribution": "Interfaz"},
]
EN_PROJECTS = [
    {"title": "Shop", "description": "Commerce", "tech": ["JavaScript", "Node.js"], "category": "1",
     "mode": "1", "media": "img/shop.webp", "demo": "#", "code": "https://git/shop", "site": "#", "contribution": "#"},
    {"title": "Habits", "description": "Mobile app", "tech": ["Flutter"], "category": "2",
     "mode": "2", "media": "#", "demo": "#", "code": "#", "site": "#", "contribution": "UI"},
]


class FakeFetcher:
    """Serves canned payloads by path; ``hold(path)`` delays one until released."""

    def __init__(self, resources: Dict[str, Any]) -> None:
        self.resources = dict(resources)
        self.requests: List[str] = []
        self._gates: Dict[str, asyncio.Event] = {}

    def hold(self, path: str) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates[path] = gate
        return gate

    async def fetch_json(self, path: str) -> Any:
        self.requests.append(path)
        gate = self._gates.pop(path, None)
        if gate is not None:
            await gate.wait()
        await asyncio.sleep(0)
        payload = self.resources.get(path)
        if payload is None:
            raise FetchFailure(f"HTTP 404 for {path}", path=path, status=404)
        if isinstance(payload, Exception):
            raise payload
        return payload


class RecordingWatcher:
    """Visibility watcher stand-in; ``reveal()`` plays the browser's role."""

    def __init__(self) -> None:
        self.observed: List[Any] = []
        self.callbacks: List[Any] = []
        self.disconnected = False

    def observe(self, item) -> None:
        self.observed.append(item)

    def unobserve(self, item) -> None:
        self.observed = [i for i in self.observed if i is not item]

    def on_visible(self, callback) -> None:
        self.callbacks.append(callback)

    def disconnect(self) -> None:
        self.observed.clear()
        self.callbacks.clear()
        self.disconnected = True

    def reveal(self, item) -> None:
        for cb in list(self.callbacks):
            cb(item)


class FailingStore(MemoryPreferenceStore):
    def set(self, key: str, value: str) -> None:
        raise StorageFailure("quota exceeded", key=key)

    def delete(self, key: str) -> None:
        raise StorageFailure("storage disabled", key=key)


class FakeTransport:
    def __init__(self, result: SubmitResult = SubmitResult.OK) -> None:
        self.result = result
        self.sent: List[Dict[str, str]] = []

    async def submit(self, fields):
        self.sent.append(dict(fields))
        return self.result


def site_resources() -> Dict[str, Any]:
    return {
        "i18n/es.json": ES_TEXTS,
        "i18n/en.json": EN_TEXTS,
        "i18n/projects_es.json": ES_PROJECTS,
        "i18n/projects_en.json": EN_PROJECTS,
    }


@pytest.fixture
def store() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(site_resources())


@pytest.fixture
def renderer() -> HtmlRenderPort:
    return HtmlRenderPort()


@pytest.fixture
def watcher() -> RecordingWatcher:
    return RecordingWatcher()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def make_fetcher():
    return FakeFetcher


@pytest.fixture
def make_transport():
    return FakeTransport
