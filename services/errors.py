# -*- coding: utf-8 -*-
"""services/errors.py

Tipos compartidos para reportar fallos a la UI (sin depender de PyQt).

None of these is fatal for the core: each one degrades to a visible
message or a safe default.
"""

from __future__ import annotations

from typing import Optional


class PortfolioError(Exception):
    """Base class for every failure the coordination layer knows about."""


class StorageFailure(PortfolioError):
    """The preference store could not be read or written (quota, disabled)."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class FetchFailure(PortfolioError):
    """A translation or project resource could not be fetched or parsed."""

    def __init__(self, message: str, path: str = "", status: Optional[int] = None) -> None:
        super().__init__(message)
        self.path = path
        self.status = status


class ValidationFailure(PortfolioError):
    """Contact form input rejected before submission.

    ``key`` is the translation id of the user-facing message.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


class SubmissionFailure(PortfolioError):
    """Contact submission was rejected by the endpoint or never reached it."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status

    @property
    def is_network(self) -> bool:
        return self.status is None
