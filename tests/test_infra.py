# -*- coding: utf-8 -*-
"""Ambient infrastructure: paths, perf timings, crash reporting, logging."""

from __future__ import annotations

import asyncio
import logging

import pytest

from infra import crash_handler, paths, perf
from infra.logging_setup import init_logging, init_perf_logging


def test_user_data_dir_honours_override(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(paths.HOME_ENV, str(tmp_path / "home"))
    assert paths.user_data_dir() == tmp_path / "home"
    assert paths.preferences_file() == tmp_path / "home" / "preferences.json"
    assert paths.logs_dir().is_dir()


def test_resources_are_bundled() -> None:
    assert paths.resource_path("i18n/es.json").is_file()


def test_perf_span_logs_only_when_enabled(monkeypatch, caplog) -> None:
    caplog.set_level(logging.INFO, logger="portfolio.perf")
    monkeypatch.delenv("PORTFOLIO_PERF", raising=False)
    with perf.span("quiet", threshold_ms=0.0):
        pass
    assert not caplog.records

    monkeypatch.setenv("PORTFOLIO_PERF", "1")
    with perf.span("catalog.render", threshold_ms=0.0):
        pass
    assert "PERF catalog.render" in caplog.text


def test_loop_exceptions_are_logged(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="infra.crash_handler")
    loop = asyncio.new_event_loop()
    try:
        crash_handler.install_loop_exception_handler(loop)
        loop.call_exception_handler({"message": "Task exception was never retrieved",
                                     "exception": RuntimeError("lost")})
        loop.call_exception_handler({"message": "plain failure"})
    finally:
        loop.close()
    assert "Unhandled exception" in caplog.text
    assert "Event loop error: plain failure" in caplog.text


def test_logging_setup_is_idempotent(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(paths.HOME_ENV, str(tmp_path))
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        first = init_logging("test.log")
        count = len(root.handlers)
        assert init_logging("test.log") == first
        assert len(root.handlers) == count
        perf_path = init_perf_logging("test-perf.log")
        assert perf_path.parent == tmp_path / "logs"
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)
        perf_logger = logging.getLogger("portfolio.perf")
        for handler in list(perf_logger.handlers):
            perf_logger.removeHandler(handler)
            handler.close()


@pytest.mark.parametrize("value, enabled", [("1", True), ("on", True), ("0", False), ("", False)])
def test_perf_switch(monkeypatch, value, enabled) -> None:
    monkeypatch.setenv("PORTFOLIO_PERF", value)
    assert perf.is_enabled() is enabled
