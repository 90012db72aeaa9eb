"""Top-level package for contactinfo.

This package normalizes loosely typed contact records into canonical,
fully localized records. The main entry points are `normalize_contact_info`
and `resolve_localized_value`.
"""

from .defaults import DEFAULT_CONTACT_INFO
from .models.datatypes import ContactRecord, Office, OfficeHour
from .normalize import (
    merge_with_defaults,
    normalize_contact_info,
    resolve_localized_value,
)

__all__ = [
    "ContactRecord",
    "DEFAULT_CONTACT_INFO",
    "Office",
    "OfficeHour",
    "__version__",
    "merge_with_defaults",
    "normalize_contact_info",
    "resolve_localized_value",
]

__version__ = "0.1.0"
