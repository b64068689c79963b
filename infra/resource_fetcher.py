# -*- coding: utf-8 -*-
"""JSON resource fetchers (translations, project datasets).

Both run their blocking I/O in a worker thread so the event loop keeps
handling clicks while a language switch is in flight.
"""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests

from infra.paths import resources_dir
from services.errors import FetchFailure

log = logging.getLogger(__name__)


class FileResourceFetcher:
    """Reads ``<root>/<path>`` from disk."""

    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = Path(root) if root is not None else resources_dir()

    def _read(self, path: str) -> Any:
        target = (self.root / path).resolve()
        try:
            text = target.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchFailure(f"cannot read {target}: {exc}", path=path) from exc
        try:
            return json.loads(text)
        except ValueError as exc:
            raise FetchFailure(f"invalid JSON in {target}: {exc}", path=path) from exc

    async def fetch_json(self, path: str) -> Any:
        return await asyncio.to_thread(self._read, path)


class HttpResourceFetcher:
    """GETs ``<base_url>/<path>``; any non-2xx status is a failure."""

    def __init__(self, base_url: str, *, timeout: float = 10.0, session: Optional[requests.Session] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self._session = session or requests.Session()

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self._session.get(url, timeout=self.timeout, headers={"Accept": "application/json"})
        except requests.RequestException as exc:
            raise FetchFailure(f"GET {url} failed: {exc}", path=path) from exc
        if not response.ok:
            raise FetchFailure(f"HTTP {response.status_code}", path=path, status=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise FetchFailure(f"invalid JSON from {url}: {exc}", path=path, status=response.status_code) from exc

    async def fetch_json(self, path: str) -> Any:
        return await asyncio.to_thread(self._get, path)
