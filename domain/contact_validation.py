# -*- coding: utf-8 -*-
"""Contact form checks run before anything is submitted."""

from __future__ import annotations

import re
from typing import Mapping, Optional

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

REQUIRED_FIELDS = ("name", "email", "message")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(str(email or "")))


def validation_error(fields: Mapping[str, object]) -> Optional[str]:
    """Return the translation key of the first problem, or None when valid."""
    values = {name: str(fields.get(name) or "") for name in REQUIRED_FIELDS}
    if any(not v.strip() for v in values.values()):
        return "contact_required"
    if not is_valid_email(values["email"]):
        return "contact_email_invalid"
    return None
