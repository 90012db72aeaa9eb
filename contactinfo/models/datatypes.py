"""Core datatypes for canonical contact records.

Responsibilities:
- Represent immutable canonical records produced by normalization.
- Provide plain JSON-compatible serialization for presentation and update flows.

Key types:
- `OfficeHour`, `Office`, and `ContactRecord`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..locales import LocaleMap, create_empty_localized_map


@dataclass(frozen=True, slots=True)
class OfficeHour:
    """One labelled opening-hours row.

    Attributes:
        label: Day or day-range label.
        value: Opening-hours text for the label.
    """

    label: str
    value: str

    def as_dict(self) -> dict[str, str]:
        """Return the plain mapping shape of this row."""

        return {"label": self.label, "value": self.value}


@dataclass(frozen=True, slots=True)
class Office:
    """A validated office listing.

    Attributes:
        id: Stable non-empty office identifier.
        label: Localized office name.
        address: Localized office address; at least one locale is non-empty.
        map_embed_url: Optional map embed URL for this office.
    """

    id: str
    label: LocaleMap
    address: LocaleMap
    map_embed_url: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the plain mapping shape of this office."""

        return {
            "id": self.id,
            "label": dict(self.label),
            "address": dict(self.address),
            "map_embed_url": self.map_embed_url,
        }


@dataclass(frozen=True, slots=True)
class ContactRecord:
    """Contact details for the business, one locale map per localized field.

    Attributes:
        id: Persistence identifier of the source record, or `None`.
        company_name: Localized company name.
        tagline: Localized tagline.
        description: Localized description.
        address: Localized primary address.
        address_secondary: Localized secondary address.
        map_embed_url: Optional map embed URL for the primary address.
        phones: Ordered unique phone numbers.
        emails: Ordered unique e-mail addresses.
        whatsapp_numbers: Ordered unique WhatsApp numbers.
        office_hours: Opening-hours rows.
        social_links: Social network key to profile URL.
        offices: Office listings.
    """

    id: str | None = None
    company_name: LocaleMap = field(default_factory=create_empty_localized_map)
    tagline: LocaleMap = field(default_factory=create_empty_localized_map)
    description: LocaleMap = field(default_factory=create_empty_localized_map)
    address: LocaleMap = field(default_factory=create_empty_localized_map)
    address_secondary: LocaleMap = field(default_factory=create_empty_localized_map)
    map_embed_url: str | None = None
    phones: tuple[str, ...] = field(default_factory=tuple)
    emails: tuple[str, ...] = field(default_factory=tuple)
    whatsapp_numbers: tuple[str, ...] = field(default_factory=tuple)
    office_hours: tuple[OfficeHour, ...] = field(default_factory=tuple)
    social_links: dict[str, str] = field(default_factory=dict)
    offices: tuple[Office, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, Any]:
        """Return the plain JSON-compatible mapping shape of this record."""

        return {
            "id": self.id,
            "company_name": dict(self.company_name),
            "tagline": dict(self.tagline),
            "description": dict(self.description),
            "address": dict(self.address),
            "address_secondary": dict(self.address_secondary),
            "map_embed_url": self.map_embed_url,
            "phones": list(self.phones),
            "emails": list(self.emails),
            "whatsapp_numbers": list(self.whatsapp_numbers),
            "office_hours": [hour.as_dict() for hour in self.office_hours],
            "social_links": dict(self.social_links),
            "offices": [office.as_dict() for office in self.offices],
        }


LOCALIZED_FIELDS: tuple[str, ...] = (
    "company_name",
    "tagline",
    "description",
    "address",
    "address_secondary",
)
