"""Shared parsing helpers for loosely typed record and configuration values."""

from __future__ import annotations

import json
from typing import Any, Mapping


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def trimmed_text(value: object) -> str:
    """Return stripped text for string values and an empty string for anything else."""

    if isinstance(value, str):
        return value.strip()
    return ""


def parse_structured_text(text: str) -> Any | None:
    """Decode JSON text, returning `None` when the text is not valid JSON."""

    try:
        return json.loads(text)
    except ValueError:
        return None


def first_present(payload: Mapping[str, Any], *keys: str) -> Any:
    """Return the first value among `keys` that is present and not `None`."""

    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None
