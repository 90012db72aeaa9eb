"""Raw record file loading and JSON rendering.

Responsibilities:
- Read raw contact records from JSON or YAML files.
- Render canonical records and payloads as deterministic JSON text.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

_YAML_SUFFIXES = frozenset({".yml", ".yaml"})


def load_raw_record(path: Path) -> Any:
    """Load a raw record from `path`, returning `None` for an empty file.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ValueError: If the file content is not valid JSON/YAML.
    """

    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return None
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Record file `{path}` is not valid YAML.") from exc
    try:
        return json.loads(text)
    except ValueError as exc:
        raise ValueError(f"Record file `{path}` is not valid JSON.") from exc


def dump_json(payload: Any, indent: int = 2, sort_keys: bool = False) -> str:
    """Return JSON text for a JSON-compatible payload, keeping non-ASCII text."""

    return json.dumps(payload, ensure_ascii=False, indent=indent, sort_keys=sort_keys)
