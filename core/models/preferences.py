# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from core.types import Locale, ThemeMode

FilterSet = Dict[str, Optional[str]]


@dataclass
class Preferences:
    """User preference set. Mutated in place and written through on change."""

    language: Locale = Locale.ES
    theme: ThemeMode = ThemeMode.AUTO
    filters: FilterSet = field(default_factory=dict)
