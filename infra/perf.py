# -*- coding: utf-8 -*-
"""Render timing.

Off unless ``PORTFOLIO_PERF`` is truthy. When on, blocks wrapped in
``span()`` that take at least ``threshold_ms`` are logged to
``portfolio.perf`` (init_perf_logging gives them a file of their own).
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator

log = logging.getLogger("portfolio.perf")

_TRUTHY = frozenset(("1", "true", "yes", "on"))


def is_enabled() -> bool:
    return os.environ.get("PORTFOLIO_PERF", "").strip().lower() in _TRUTHY


@contextmanager
def span(label: str, *, threshold_ms: float = 5.0) -> Iterator[None]:
    if not is_enabled():
        yield
        return
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        if elapsed_ms >= threshold_ms:
            log.info("PERF %s %.1fms", label, elapsed_ms)
