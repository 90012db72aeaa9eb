"""Integration-test fixtures for CLI record files."""

from __future__ import annotations

from collections.abc import Callable
import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def record_file(tmp_path: Path) -> Path:
    """Write a realistic raw record with mixed field shapes and return its path."""

    path = tmp_path / "contact.json"
    path.write_text(
        json.dumps(
            {
                "id": "contact-1",
                "company_name": '{"en": "Acme EN"}',
                "tagline": "Yolunuz açıq olsun",
                "phones": ["+994 50 000 00 00", "+994 50 000 00 00"],
                "emails": "hello@acme.test",
                "office_hours": '[{"label": "Daily", "value": "24/7"}]',
                "offices": [
                    {"id": "hq", "label": "HQ", "address": {"en": "Baku"}},
                    {"label": "Ghost", "address": ""},
                ],
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _clear_contactinfo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI runs independent of ambient `CONTACTINFO_*` variables."""

    for key in ("CONTACTINFO_DEFAULTS_PATH", "CONTACTINFO_JSON_INDENT", "CONTACTINFO_SORT_KEYS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def command_json() -> Callable[[str], Any]:
    """Provide a parser for command JSON output that skips stage log lines."""

    def _parse(output: str) -> Any:
        """Parse JSON text left after removing `[phase]` log lines."""

        lines = [line for line in output.splitlines() if not line.startswith("[phase]")]
        return json.loads("\n".join(lines))

    return _parse
