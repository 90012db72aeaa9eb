"""Normalization components for raw contact records.

This package turns loosely typed stored values into canonical locale maps,
lists, office-hours rows, and offices, and merges them with defaults.
"""

from .hours import normalize_office_hours
from .lists import normalize_social_links, normalize_string_list
from .localized import normalize_localized_strings, resolve_localized_value
from .offices import OfficeIdFactory, generate_office_id, normalize_office_entry, normalize_offices
from .record import merge_with_defaults, normalize_contact_info

__all__ = [
    "OfficeIdFactory",
    "generate_office_id",
    "merge_with_defaults",
    "normalize_contact_info",
    "normalize_localized_strings",
    "normalize_office_entry",
    "normalize_office_hours",
    "normalize_offices",
    "normalize_social_links",
    "normalize_string_list",
    "resolve_localized_value",
]
