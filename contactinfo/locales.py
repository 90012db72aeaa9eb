"""Supported locale codes and LocaleMap helpers.

Responsibilities:
- Define the closed locale set and its fixed fallback priority.
- Build fully keyed locale maps and answer emptiness checks.

Key names:
- `LANGUAGE_CODES`: every locale a localized value must carry, in key order.
- `PRIMARY_LANGUAGE`: locale that receives plain (non-structured) text.
- `FALLBACK_PRIORITY`: scan order used for backfill and resolution.
"""

from __future__ import annotations

from typing import Mapping

LocaleMap = dict[str, str]

LANGUAGE_CODES: tuple[str, ...] = ("az", "ru", "en", "ar")
PRIMARY_LANGUAGE = "az"
FALLBACK_PRIORITY: tuple[str, ...] = ("az", "en", "ru", "ar")


def create_localized_map(value: str) -> LocaleMap:
    """Return a locale map carrying the same value for every locale."""

    return {code: value for code in LANGUAGE_CODES}


def create_empty_localized_map() -> LocaleMap:
    """Return a locale map with an empty string for every locale."""

    return create_localized_map("")


def has_localized_value(values: Mapping[str, str]) -> bool:
    """Return whether any supported locale holds non-blank text."""

    for code in LANGUAGE_CODES:
        value = values.get(code)
        if isinstance(value, str) and value.strip():
            return True
    return False
