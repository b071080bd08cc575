"""Locale utilities for the Lares site.

This module centralizes the languages the site is published in. Keeping it
in the domain layer lets i18n tables, the CMS client and the CLI share a
single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Locale(str, Enum):
    """Supported site languages; every URL path is prefixed with one of them."""

    ITALIAN = "it"
    ENGLISH = "en"
    GERMAN = "de"
    FRENCH = "fr"

    @classmethod
    def default(cls) -> "Locale":
        """Return the default (and fallback) locale of the site."""

        return cls.ITALIAN

    @classmethod
    def normalize(cls, value: Any, fallback: "Locale | None" = None) -> "Locale":
        """Map any input to a supported locale.

        Unknown codes, `None` and non-string values silently become `fallback`
        (or the default), so lookups keyed by locale never fail.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        return fallback if fallback is not None else cls.default()

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return _LABELS[self]


_LABELS = {
    Locale.ITALIAN: "Italiano",
    Locale.ENGLISH: "English",
    Locale.GERMAN: "Deutsch",
    Locale.FRENCH: "Français",
}

SUPPORTED_LOCALES: tuple[str, ...] = tuple(member.value for member in Locale)
DEFAULT_LOCALE = Locale.default()
