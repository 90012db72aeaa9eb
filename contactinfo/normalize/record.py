"""Whole-record normalization and default merging.

Responsibilities:
- Normalize each raw record field with its dedicated normalizer.
- Replace fields that normalized to empty values with the default record's values.

Key public functions:
- `normalize_contact_info`: raw record to canonical `ContactRecord`.
- `merge_with_defaults`: field-granular default substitution.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..defaults import DEFAULT_CONTACT_INFO
from ..locales import create_empty_localized_map, has_localized_value
from ..models.datatypes import ContactRecord
from ..parsing import first_present, trimmed_text
from .hours import normalize_office_hours
from .lists import normalize_social_links, normalize_string_list
from .localized import normalize_localized_strings
from .offices import OfficeIdFactory, copy_office, generate_office_id, normalize_offices


def normalize_contact_info(
    data: Any,
    defaults: ContactRecord = DEFAULT_CONTACT_INFO,
    id_factory: OfficeIdFactory = generate_office_id,
) -> ContactRecord:
    """Build a canonical contact record from a loosely typed raw record.

    Args:
        data: Raw record as read from storage; non-mapping values mean "absent".
        defaults: Complete record supplying values for empty fields.
        id_factory: Identifier source for offices that arrive without an id.

    Returns:
        A new record with every localized field fully keyed and every field populated
        from either the raw record or `defaults`.
    """

    if not isinstance(data, Mapping):
        return merge_with_defaults(ContactRecord(), defaults)

    partial = ContactRecord(
        id=data.get("id") if isinstance(data.get("id"), str) else None,
        company_name=_localized(data.get("company_name")),
        tagline=_localized(data.get("tagline")),
        description=_localized(data.get("description")),
        address=_localized(data.get("address")),
        address_secondary=_localized(first_present(data, "address_secondary", "addressSecondary")),
        map_embed_url=trimmed_text(first_present(data, "map_embed_url", "mapEmbedUrl")) or None,
        phones=tuple(normalize_string_list(data.get("phones"))),
        emails=tuple(normalize_string_list(data.get("emails"))),
        whatsapp_numbers=tuple(
            normalize_string_list(first_present(data, "whatsapp_numbers", "whatsappNumbers"))
        ),
        office_hours=tuple(
            normalize_office_hours(first_present(data, "office_hours", "officeHours"))
        ),
        social_links=normalize_social_links(first_present(data, "social_links", "socialLinks")),
        offices=tuple(
            normalize_offices(
                data.get("offices"),
                fallback_offices=defaults.offices,
                id_factory=id_factory,
            )
        ),
    )
    return merge_with_defaults(partial, defaults)


def merge_with_defaults(partial: ContactRecord, defaults: ContactRecord) -> ContactRecord:
    """Return a record where each empty field of `partial` takes the default value.

    Emptiness is judged per field: an all-blank locale map, an empty list or
    mapping, or a missing map URL. Populated fields are kept whole.
    """

    return ContactRecord(
        id=partial.id,
        company_name=_pick_localized(partial.company_name, defaults.company_name),
        tagline=_pick_localized(partial.tagline, defaults.tagline),
        description=_pick_localized(partial.description, defaults.description),
        address=_pick_localized(partial.address, defaults.address),
        address_secondary=_pick_localized(partial.address_secondary, defaults.address_secondary),
        map_embed_url=partial.map_embed_url or defaults.map_embed_url,
        phones=tuple(partial.phones or defaults.phones),
        emails=tuple(partial.emails or defaults.emails),
        whatsapp_numbers=tuple(partial.whatsapp_numbers or defaults.whatsapp_numbers),
        office_hours=tuple(partial.office_hours or defaults.office_hours),
        social_links=dict(partial.social_links or defaults.social_links),
        offices=tuple(copy_office(office) for office in partial.offices or defaults.offices),
    )


def _localized(value: Any) -> dict[str, str]:
    return normalize_localized_strings(value, create_empty_localized_map())


def _pick_localized(value: Mapping[str, str], default: Mapping[str, str]) -> dict[str, str]:
    if has_localized_value(value):
        return dict(value)
    return dict(default)

