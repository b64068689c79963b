# -*- coding: utf-8 -*-
"""Guard for click and submit handlers.

A raising handler is logged with its traceback and reported as ``None``;
the dispatcher carries on with the next handler.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def run_guarded(
    fn: Callable[[], T],
    *,
    logger_name: str = "portfolio",
    on_error: Optional[Callable[[BaseException], None]] = None,
) -> Optional[T]:
    try:
        return fn()
    except Exception as exc:
        logging.getLogger(logger_name).exception("Handler failed: %s", exc)
        if on_error is not None:
            on_error(exc)
        return None
