# -*- coding: utf-8 -*-
"""Locale / ThemeMode coercion."""

from __future__ import annotations

import pytest

from core.types import Locale, ThemeMode


@pytest.mark.parametrize("value, expected", [
    (Locale.EN, Locale.EN),
    (Locale.ES, Locale.ES),
    ("en", Locale.EN),
    (" EN ", Locale.EN),
    ("fr", Locale.ES),
    (None, Locale.ES),
    (ThemeMode.DARK, Locale.ES),
])
def test_locale_coerce(value, expected) -> None:
    assert Locale.coerce(value) is expected


def test_locale_coerce_default() -> None:
    assert Locale.coerce("fr", Locale.EN) is Locale.EN
    assert Locale.coerce(Locale.ES, Locale.EN) is Locale.ES


@pytest.mark.parametrize("value, expected", [
    (ThemeMode.DARK, ThemeMode.DARK),
    (ThemeMode.LIGHT, ThemeMode.LIGHT),
    (ThemeMode.AUTO, ThemeMode.AUTO),
    ("Dark", ThemeMode.DARK),
    ("sepia", ThemeMode.AUTO),
    ("", ThemeMode.AUTO),
])
def test_theme_coerce(value, expected) -> None:
    assert ThemeMode.coerce(value) is expected


def test_other_alternates() -> None:
    assert Locale.coerce(Locale.EN).other() is Locale.ES
    assert Locale.ES.other().other() is Locale.ES
