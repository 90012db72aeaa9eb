"""Update payload construction for the contact-record write endpoint.

Responsibilities:
- Sanitize a canonical record into the sparse shape the write endpoint stores.
- Enforce the minimum content an update must carry.

The write itself is performed by an external collaborator.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Mapping

from .errors import ContactPayloadError
from .locales import LANGUAGE_CODES, has_localized_value
from .models.datatypes import LOCALIZED_FIELDS, ContactRecord, Office, OfficeHour
from .normalize.offices import OfficeIdFactory, generate_office_id
from .parsing import trimmed_text


def sanitize_localized(values: Mapping[str, str]) -> dict[str, str]:
    """Keep only the locales that hold non-blank text, trimmed."""

    cleaned: dict[str, str] = {}
    for code in LANGUAGE_CODES:
        text = trimmed_text(values.get(code))
        if text:
            cleaned[code] = text
    return cleaned


def _sanitize_strings(values: Iterable[str]) -> list[str]:
    return [text for text in (trimmed_text(value) for value in values) if text]


def _sanitize_hours(hours: Iterable[OfficeHour]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for hour in hours:
        label = trimmed_text(hour.label)
        value = trimmed_text(hour.value)
        if label and value:
            rows.append({"label": label, "value": value})
    return rows


def _sanitize_links(links: Mapping[str, str]) -> dict[str, str]:
    cleaned: dict[str, str] = {}
    for key, url in links.items():
        text = trimmed_text(url)
        if text:
            cleaned[key] = text
    return cleaned


def _sanitize_offices(
    offices: Iterable[Office], id_factory: OfficeIdFactory
) -> list[dict[str, Any]]:
    sanitized: list[dict[str, Any]] = []
    for office in offices:
        address = sanitize_localized(office.address)
        if not has_localized_value(address):
            continue
        sanitized.append(
            {
                "id": trimmed_text(office.id) or id_factory(),
                "label": sanitize_localized(office.label),
                "address": address,
                "map_embed_url": trimmed_text(office.map_embed_url) or None,
            }
        )
    return sanitized


def build_update_payload(
    record: ContactRecord, id_factory: OfficeIdFactory = generate_office_id
) -> dict[str, Any]:
    """Return the sanitized update payload for a record.

    Args:
        record: Canonical record, typically edited from a normalized one.
        id_factory: Identifier source for offices that lost their id.

    Returns:
        JSON-compatible mapping ready to submit to the write endpoint.

    Raises:
        ContactPayloadError: If the record has no phone, no e-mail, or no office
            with an address.
    """

    phones = _sanitize_strings(record.phones)
    if not phones:
        raise ContactPayloadError(field="phones", detail="At least one phone number is required.")

    emails = _sanitize_strings(record.emails)
    if not emails:
        raise ContactPayloadError(field="emails", detail="At least one e-mail address is required.")

    offices = _sanitize_offices(record.offices, id_factory)
    if not offices:
        raise ContactPayloadError(
            field="offices", detail="At least one office with an address is required."
        )

    payload: dict[str, Any] = {
        field_name: sanitize_localized(getattr(record, field_name))
        for field_name in LOCALIZED_FIELDS
    }
    payload.update(
        {
            "map_embed_url": trimmed_text(record.map_embed_url) or None,
            "phones": phones,
            "emails": emails,
            "whatsapp_numbers": _sanitize_strings(record.whatsapp_numbers),
            "office_hours": _sanitize_hours(record.office_hours),
            "social_links": _sanitize_links(record.social_links),
            "offices": offices,
        }
    )
    return payload
