# -*- coding: utf-8 -*-
"""Last-resort exception reporting.

Installs hooks so nothing dies silently: uncaught exceptions on the main
thread, in worker threads (fetchers and the contact transport run there)
and in event-loop tasks nobody awaited all end up in the app log.
Per-handler guards live in ui/common/error_handler.py.
"""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
import traceback
from types import TracebackType
from typing import Any, Dict, Optional, Type

log = logging.getLogger(__name__)

_reporting = threading.local()


def _write_stderr(text: str) -> None:
    stream = sys.__stderr__
    if stream is not None:
        stream.write(text)


def _report(exc_type: Type[BaseException], exc: BaseException, tb: Optional[TracebackType]) -> None:
    # a failure while logging must not recurse back in here
    if getattr(_reporting, "active", False):
        _write_stderr(f"Unhandled {exc_type.__name__} while reporting another exception\n")
        return
    _reporting.active = True
    try:
        log.critical("Unhandled exception", exc_info=(exc_type, exc, tb))
    except Exception:
        _write_stderr("".join(traceback.format_exception(exc_type, exc, tb)))
    finally:
        _reporting.active = False


def _thread_hook(args: "threading.ExceptHookArgs") -> None:
    if args.exc_value is None:
        return
    _report(args.exc_type, args.exc_value, args.exc_traceback)


def _loop_exception(loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
    exc = context.get("exception")
    if exc is None:
        log.error("Event loop error: %s", context.get("message", "unknown"))
        return
    _report(type(exc), exc, exc.__traceback__)


def install_global_exception_handlers() -> None:
    """Route sys and thread exception hooks to the log."""
    logging.raiseExceptions = False
    sys.excepthook = _report
    threading.excepthook = _thread_hook


def install_loop_exception_handler(loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
    """Route unretrieved task exceptions of ``loop`` (default: the running one) to the log."""
    (loop or asyncio.get_running_loop()).set_exception_handler(_loop_exception)
