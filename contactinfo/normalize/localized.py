"""Localized string normalization and resolution.

Responsibilities:
- Interpret loosely typed raw values as fully keyed locale maps.
- Backfill missing locales with the single best available value.
- Resolve one display string for a target locale.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..locales import (
    FALLBACK_PRIORITY,
    LANGUAGE_CODES,
    PRIMARY_LANGUAGE,
    LocaleMap,
    create_empty_localized_map,
)
from ..parsing import parse_structured_text, trimmed_text


def _localized_source(value: Any) -> Mapping[str, Any]:
    """Return the mapping that locale values are read from."""

    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed:
            return {}
        if trimmed.startswith("{"):
            parsed = parse_structured_text(trimmed)
            if isinstance(parsed, Mapping):
                return parsed
        return {PRIMARY_LANGUAGE: trimmed}
    if isinstance(value, Mapping):
        return value
    return {}


def _best_available(values: Mapping[str, str]) -> str:
    for code in FALLBACK_PRIORITY:
        if values.get(code):
            return values[code]
    return ""


def normalize_localized_strings(value: Any, fallback: Mapping[str, str]) -> LocaleMap:
    """Normalize a raw value into a locale map with every locale keyed.

    Plain text is assigned to the primary locale, text starting with `{` is
    decoded as JSON when possible, and mappings are read per locale code. When
    no locale carries text the result is a copy of `fallback`; otherwise every
    empty locale is filled with the first populated value in priority order.

    Args:
        value: Raw field value of any shape.
        fallback: Locale map returned when the raw value holds no text.

    Returns:
        New locale map keyed by every supported locale.
    """

    source = _localized_source(value)
    result = create_empty_localized_map()
    for code in LANGUAGE_CODES:
        result[code] = trimmed_text(source.get(code))

    best = _best_available(result)
    if not best:
        copied = create_empty_localized_map()
        for code in LANGUAGE_CODES:
            copied[code] = fallback.get(code, "")
        return copied

    for code in LANGUAGE_CODES:
        if not result[code]:
            result[code] = best
    return result


def resolve_localized_value(values: Mapping[str, str], language: str) -> str:
    """Return the text for `language`, falling back through the priority order."""

    preferred = values.get(language)
    if preferred:
        return preferred
    return _best_available(values)
