"""Scalar list and link-map normalization."""

from __future__ import annotations

from typing import Any, Mapping

from ..parsing import trimmed_text


def normalize_string_list(value: Any) -> list[str]:
    """Return trimmed, non-empty, first-seen-unique strings from a raw value.

    Lists and tuples are cleaned element by element (non-strings dropped), a
    single string becomes a one-element list, and any other shape is empty.
    """

    if not value:
        return []
    if isinstance(value, (list, tuple)):
        seen: set[str] = set()
        deduped: list[str] = []
        for item in value:
            text = trimmed_text(item)
            if text and text not in seen:
                seen.add(text)
                deduped.append(text)
        return deduped
    if isinstance(value, str):
        text = value.strip()
        return [text] if text else []
    return []


def normalize_social_links(value: Any) -> dict[str, str]:
    """Return social network keys mapped to non-blank profile URLs."""

    if not isinstance(value, Mapping):
        return {}
    links: dict[str, str] = {}
    for raw_key, raw_url in value.items():
        key = trimmed_text(raw_key)
        url = trimmed_text(raw_url)
        if key and url:
            links[key] = url
    return links
