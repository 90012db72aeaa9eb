"""Office listing normalization.

Responsibilities:
- Coerce raw office payloads into a candidate list.
- Validate each candidate (address is required) and assign stable identifiers.
- Guarantee at least one office in the result.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Mapping
import uuid

from ..defaults import DEFAULT_OFFICES
from ..locales import create_empty_localized_map, has_localized_value
from ..models.datatypes import Office
from ..parsing import first_present, parse_structured_text, trimmed_text
from .localized import normalize_localized_strings

OfficeIdFactory = Callable[[], str]

_MAP_URL_KEYS = ("map_embed_url", "mapEmbedUrl", "map")


def generate_office_id() -> str:
    """Return a new random office identifier."""

    return str(uuid.uuid4())


def _office_candidates(value: Any) -> list[Any]:
    """Coerce a raw offices value into a list of candidate entries."""

    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed:
            return []
        parsed = parse_structured_text(trimmed)
        if isinstance(parsed, list):
            return parsed
        return []
    if isinstance(value, Mapping):
        return [value]
    return []


def _office_map_url(entry: Mapping[str, Any]) -> str | None:
    for key in _MAP_URL_KEYS:
        url = trimmed_text(entry.get(key))
        if url:
            return url
    return None


def normalize_office_entry(
    entry: Any, id_factory: OfficeIdFactory = generate_office_id
) -> Office | None:
    """Normalize one raw office, returning `None` when it has no usable address."""

    if not isinstance(entry, Mapping):
        return None

    address = normalize_localized_strings(entry.get("address"), create_empty_localized_map())
    if not has_localized_value(address):
        return None
    label = normalize_localized_strings(
        first_present(entry, "label", "name", "title"), create_empty_localized_map()
    )

    office_id = trimmed_text(entry.get("id")) or id_factory()
    return Office(
        id=office_id,
        label=label,
        address=address,
        map_embed_url=_office_map_url(entry),
    )


def copy_office(office: Office) -> Office:
    """Return an office whose locale maps are independent copies."""

    return Office(
        id=office.id,
        label=dict(office.label),
        address=dict(office.address),
        map_embed_url=office.map_embed_url,
    )


def normalize_offices(
    value: Any,
    fallback_offices: Sequence[Office] = DEFAULT_OFFICES,
    id_factory: OfficeIdFactory = generate_office_id,
) -> list[Office]:
    """Return validated offices from a raw value, never an empty list.

    Args:
        value: Raw offices payload (list, JSON text, single mapping, or other).
        fallback_offices: Offices returned when no candidate survives validation.
        id_factory: Identifier source for offices that arrive without an id.

    Returns:
        Offices in input order, or copies of `fallback_offices` when none are valid.
    """

    offices: list[Office] = []
    for entry in _office_candidates(value):
        office = normalize_office_entry(entry, id_factory=id_factory)
        if office is not None:
            offices.append(office)

    if not offices:
        return [copy_office(office) for office in fallback_offices]
    return offices

