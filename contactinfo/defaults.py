"""Built-in default contact record.

The default record is the fallback source for every field that normalizes to
an empty value. It is complete by construction and never treated as live data.
"""

from __future__ import annotations

from .locales import create_empty_localized_map, create_localized_map
from .models.datatypes import ContactRecord, Office, OfficeHour

DEFAULT_OFFICE_ID = "default-office"

DEFAULT_OFFICES: tuple[Office, ...] = (
    Office(
        id=DEFAULT_OFFICE_ID,
        label=create_localized_map("Baş ofis"),
        address=create_localized_map("Bakı, Azərbaycan"),
        map_embed_url="https://maps.google.com",
    ),
)

DEFAULT_CONTACT_INFO = ContactRecord(
    id=None,
    company_name=create_localized_map("CARRENTBAKU"),
    tagline=create_empty_localized_map(),
    description=create_empty_localized_map(),
    address=create_localized_map("Bakı, Azərbaycan"),
    address_secondary=create_localized_map("Nəsimi rayonu, 28 May küç."),
    map_embed_url="https://maps.google.com",
    phones=("+994 (50) 123 45 67", "+994 (51) 234 56 78"),
    emails=("info@carrentbaku.az", "support@carrentbaku.az"),
    whatsapp_numbers=("+994501234567",),
    office_hours=(
        OfficeHour(label="Bazar ertəsi - Şənbə", value="09:00 - 21:00"),
        OfficeHour(label="Bazar", value="10:00 - 18:00"),
    ),
    social_links={
        "facebook": "https://facebook.com",
        "instagram": "https://instagram.com",
        "whatsapp": "https://wa.me/994501234567",
    },
    offices=DEFAULT_OFFICES,
)
