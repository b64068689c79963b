# -*- coding: utf-8 -*-
"""
Process bootstrap (runs before the coordinator):
- Init logging
- Capture unexpected exceptions in the log
"""
from __future__ import annotations

import logging

from infra.crash_handler import install_global_exception_handlers
from infra.logging_setup import init_logging, init_perf_logging
from infra.perf import is_enabled as perf_enabled

def bootstrap(*, verbose: bool = False) -> None:
    init_logging(level=logging.DEBUG if verbose else logging.INFO)
    if perf_enabled():
        init_perf_logging()
    install_global_exception_handlers()
