"""Office-hours normalization."""

from __future__ import annotations

from typing import Any, Mapping

from ..models.datatypes import OfficeHour
from ..parsing import parse_structured_text, trimmed_text


def normalize_office_hours(value: Any) -> list[OfficeHour]:
    """Return complete (label, value) rows parsed from a raw value.

    A string must decode to a JSON list, a single mapping counts as a
    one-row list, and rows missing either label or value are dropped.
    """

    if isinstance(value, str):
        parsed = parse_structured_text(value)
        if isinstance(parsed, list):
            return normalize_office_hours(parsed)
        return []
    if isinstance(value, Mapping):
        return normalize_office_hours([value])
    if not isinstance(value, (list, tuple)):
        return []

    rows: list[OfficeHour] = []
    for entry in value:
        if not isinstance(entry, Mapping):
            continue
        label = trimmed_text(entry.get("label"))
        hours = trimmed_text(entry.get("value"))
        if label and hours:
            rows.append(OfficeHour(label=label, value=hours))
    return rows
