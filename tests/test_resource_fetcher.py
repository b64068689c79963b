# -*- coding: utf-8 -*-
"""Resource fetchers: disk and HTTP."""

from __future__ import annotations

import json

import pytest
import requests

from infra.resource_fetcher import FileResourceFetcher, HttpResourceFetcher
from infra.paths import resources_dir
from services.errors import FetchFailure


@pytest.mark.asyncio
async def test_file_fetcher_reads_json(tmp_path) -> None:
    (tmp_path / "i18n").mkdir()
    (tmp_path / "i18n" / "es.json").write_text(json.dumps({"title": "Hola"}), encoding="utf-8")
    (tmp_path / "i18n" / "en.json").write_text("{", encoding="utf-8")
    fetcher = FileResourceFetcher(tmp_path)

    assert await fetcher.fetch_json("i18n/es.json") == {"title": "Hola"}
    with pytest.raises(FetchFailure):
        await fetcher.fetch_json("i18n/en.json")
    with pytest.raises(FetchFailure) as info:
        await fetcher.fetch_json("i18n/fr.json")
    assert info.value.path == "i18n/fr.json"


@pytest.mark.asyncio
async def test_bundled_resources_are_complete() -> None:
    fetcher = FileResourceFetcher()
    for lang in ("es", "en"):
        texts = await fetcher.fetch_json(f"i18n/{lang}.json")
        projects = await fetcher.fetch_json(f"i18n/projects_{lang}.json")
        assert texts["contact_send"]
        assert isinstance(projects, list) and projects
    assert resources_dir().is_dir()


class _Response:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


class _Session:
    def __init__(self, response=None, exc=None) -> None:
        self.response = response
        self.exc = exc
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.mark.asyncio
async def test_http_fetcher() -> None:
    session = _Session(_Response(200, {"title": "Hi"}))
    fetcher = HttpResourceFetcher("https://site.example/", session=session)
    assert await fetcher.fetch_json("i18n/en.json") == {"title": "Hi"}
    assert session.urls == ["https://site.example/i18n/en.json"]


@pytest.mark.asyncio
@pytest.mark.parametrize("session, status", [
    (_Session(_Response(404)), 404),
    (_Session(_Response(200)), 200),
    (_Session(exc=requests.Timeout("slow")), None),
])
async def test_http_fetcher_failures(session, status) -> None:
    fetcher = HttpResourceFetcher("https://site.example", session=session)
    with pytest.raises(FetchFailure) as info:
        await fetcher.fetch_json("i18n/es.json")
    assert info.value.status == status
