"""Configuration model and loaders for contactinfo.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ContactInfoConfig`: normalized runtime settings for CLI and service runs.
- `ConfigLoader`: static construction helpers for `ContactInfoConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean


_DEFAULT_JSON_INDENT = 2


@dataclass(slots=True)
class ContactInfoConfig:
    """Runtime configuration for normalization commands.

    Attributes:
        defaults_path: Optional file with a raw record overriding built-in defaults.
        json_indent: Indentation used when rendering JSON output.
        sort_keys: Whether rendered JSON objects are key-sorted.
    """

    defaults_path: Path | None = None
    json_indent: int = _DEFAULT_JSON_INDENT
    sort_keys: bool = False

    def validate(self) -> None:
        """Validate configuration values before use."""

        if isinstance(self.json_indent, bool) or self.json_indent <= 0:
            raise ValueError("`json_indent` must be a positive integer.")


class ConfigLoader:
    """Factory methods for creating `ContactInfoConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"defaults_path", "json_indent", "sort_keys"})

    @staticmethod
    def from_yaml(path: Path) -> ContactInfoConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ContactInfoConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        defaults_text = ConfigLoader._optional_env_string(env_map, "CONTACTINFO_DEFAULTS_PATH")
        json_indent = ConfigLoader._optional_env_positive_int(
            env_map, "CONTACTINFO_JSON_INDENT"
        ) or _DEFAULT_JSON_INDENT
        sort_keys = ConfigLoader._optional_env_boolean(env_map, "CONTACTINFO_SORT_KEYS") or False

        config = ContactInfoConfig(
            defaults_path=Path(defaults_text) if defaults_text is not None else None,
            json_indent=json_indent,
            sort_keys=sort_keys,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML.") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ContactInfoConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults_text = None
        if "defaults_path" in payload:
            defaults_text = normalize_optional_string(payload["defaults_path"])
        json_indent = ConfigLoader._optional_positive_int(
            payload, "json_indent", source_label, default=_DEFAULT_JSON_INDENT
        )
        sort_keys = ConfigLoader._optional_boolean(
            payload, "sort_keys", source_label, default=False
        )

        config = ContactInfoConfig(
            defaults_path=Path(defaults_text) if defaults_text is not None else None,
            json_indent=json_indent,
            sort_keys=sort_keys,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc
        if parsed <= 0:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
