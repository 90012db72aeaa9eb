"""Shared typed data models for contactinfo.

This package contains the canonical record dataclasses used by normalization,
payload building, and presentation helpers.
"""

from .datatypes import LOCALIZED_FIELDS, ContactRecord, Office, OfficeHour

__all__ = [
    "ContactRecord",
    "LOCALIZED_FIELDS",
    "Office",
    "OfficeHour",
]
