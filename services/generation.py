# -*- coding: utf-8 -*-
"""Generation tags for async loads (no UI dependencies).

Every load request takes a new generation; its completion is applied only
if no newer request was issued meanwhile.
"""
from __future__ import annotations


class GenerationCounter:
    """Monotonic request counter for one kind of async load."""

    def __init__(self) -> None:
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def next(self) -> int:
        self._current += 1
        return self._current

    def is_current(self, generation: int) -> bool:
        return not is_stale_result(self._current, generation)


def is_stale_result(current_id: int, result_id: int) -> bool:
    """Return True if a load result should be discarded."""
    try:
        return int(result_id) != int(current_id)
    except Exception:
        return True
