"""Unit tests for update payload construction and validation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

import pytest

from contactinfo.defaults import DEFAULT_CONTACT_INFO
from contactinfo.errors import ContactPayloadError
from contactinfo.models.datatypes import Office, OfficeHour
from contactinfo.payload import build_update_payload, sanitize_localized


def test_sanitize_localized_keeps_only_non_blank_locales() -> None:
    """Blank locales should be omitted and present ones trimmed."""

    assert sanitize_localized({"az": " Salam ", "ru": "", "en": "  ", "ar": "مرحبا"}) == {
        "az": "Salam",
        "ar": "مرحبا",
    }


def test_payload_from_default_record_has_expected_shape() -> None:
    """Default record payload should keep populated fields and drop empty locales."""

    payload = build_update_payload(DEFAULT_CONTACT_INFO)

    assert payload["company_name"] == {
        "az": "CARRENTBAKU",
        "ru": "CARRENTBAKU",
        "en": "CARRENTBAKU",
        "ar": "CARRENTBAKU",
    }
    assert payload["tagline"] == {}
    assert payload["phones"] == list(DEFAULT_CONTACT_INFO.phones)
    assert payload["office_hours"] == [hour.as_dict() for hour in DEFAULT_CONTACT_INFO.office_hours]
    assert payload["offices"][0]["id"] == "default-office"
    assert "id" not in payload


def test_payload_trims_lists_and_drops_incomplete_rows(
    sequential_ids: Callable[[], str],
) -> None:
    """Edited records should be sanitized before submission."""

    record = replace(
        DEFAULT_CONTACT_INFO,
        phones=(" +1 ", "  "),
        whatsapp_numbers=("",),
        office_hours=(OfficeHour(label=" Mon ", value=" 9-5 "), OfficeHour(label="Tue", value=" ")),
        social_links={"facebook": " https://fb ", "x": "  "},
        map_embed_url="   ",
        offices=(
            Office(id="", label={"az": "HQ"}, address={"az": " Baku "}, map_embed_url=" "),
            Office(id="gone", label={"az": "Empty"}, address={"az": " "}),
        ),
    )

    payload = build_update_payload(record, id_factory=sequential_ids)

    assert payload["phones"] == ["+1"]
    assert payload["whatsapp_numbers"] == []
    assert payload["office_hours"] == [{"label": "Mon", "value": "9-5"}]
    assert payload["social_links"] == {"facebook": "https://fb"}
    assert payload["map_embed_url"] is None
    assert payload["offices"] == [
        {"id": "office-1", "label": {"az": "HQ"}, "address": {"az": "Baku"}, "map_embed_url": None}
    ]


@pytest.mark.parametrize(
    ("changes", "field"),
    [
        ({"phones": (" ",)}, "phones"),
        ({"emails": ()}, "emails"),
        ({"offices": (Office(id="x", label={}, address={"az": ""}),)}, "offices"),
    ],
)
def test_payload_requires_phone_email_and_office(
    changes: dict[str, object], field: str
) -> None:
    """Missing required content should raise a field-scoped payload error."""

    record = replace(DEFAULT_CONTACT_INFO, **changes)

    with pytest.raises(ContactPayloadError) as exc_info:
        build_update_payload(record)

    assert exc_info.value.field == field
