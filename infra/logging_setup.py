# -*- coding: utf-8 -*-
"""
Logging: one rotating app log in user space plus the console, and an
optional separate file for perf timings.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.paths import logs_dir

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
MAX_BYTES = 1_000_000
BACKUPS = 3


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(getattr(h, "baseFilename", None) == str(path) for h in logger.handlers)


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUPS, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def init_logging(filename: str = "portfolio.log", level: int = logging.INFO) -> Path:
    """Configure the root logger once; later calls only adjust the level."""
    log_path = logs_dir() / filename
    root = logging.getLogger()
    root.setLevel(level)
    if _has_file_handler(root, log_path):
        return log_path
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_file_handler(log_path, level))
    root.addHandler(console)
    return log_path


def init_perf_logging(filename: str = "perf.log") -> Path:
    """Send ``portfolio.perf`` timings (see infra.perf) to their own file."""
    log_path = logs_dir() / filename
    logger = logging.getLogger("portfolio.perf")
    logger.setLevel(logging.INFO)
    if not _has_file_handler(logger, log_path):
        logger.addHandler(_file_handler(log_path, logging.INFO))
    return log_path
