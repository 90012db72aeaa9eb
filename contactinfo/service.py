"""Service facade for file-based contact record normalization.

Responsibilities:
- Define the stage order for loading, normalizing, and payload building.
- Map file and parsing failures to stage-aware errors.
- Emit stage telemetry around each step.

Key types:
- `ContactInfoService`: orchestration facade used by the CLI.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from .config import ContactInfoConfig
from .defaults import DEFAULT_CONTACT_INFO
from .errors import ContactPayloadError, StageError
from .io.storage import load_raw_record
from .locales import LANGUAGE_CODES
from .models.datatypes import LOCALIZED_FIELDS, ContactRecord
from .normalize.localized import resolve_localized_value
from .normalize.offices import OfficeIdFactory, generate_office_id
from .normalize.record import normalize_contact_info
from .payload import build_update_payload
from .telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


class ContactInfoService:
    """Coordinate record loading, normalization, and payload building."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        id_factory: OfficeIdFactory = generate_office_id,
    ) -> None:
        """Initialize optional runtime logging and the office id source."""

        self._run_logger = run_logger
        self._id_factory = id_factory

    def load_defaults(self, config: ContactInfoConfig) -> ContactRecord:
        """Return the default record, overridden by the configured defaults file."""

        if config.defaults_path is None:
            return DEFAULT_CONTACT_INFO
        raw_defaults = self._run_stage(
            "defaults", lambda: self._load_file(config.defaults_path, "defaults")
        )
        return normalize_contact_info(
            raw_defaults, defaults=DEFAULT_CONTACT_INFO, id_factory=self._id_factory
        )

    def normalize_file(self, record_path: Path, config: ContactInfoConfig) -> ContactRecord:
        """Load a raw record file and return its canonical record."""

        defaults = self.load_defaults(config)
        raw = self._run_stage("load", lambda: self._load_file(record_path, "load"))
        return self._run_stage(
            "normalize",
            lambda: normalize_contact_info(raw, defaults=defaults, id_factory=self._id_factory),
            describe=_record_context,
        )

    def resolve_field(
        self,
        record: ContactRecord,
        field_name: str,
        language: str,
    ) -> str:
        """Return the display text of one localized field for a locale."""

        if field_name not in LOCALIZED_FIELDS:
            raise StageError(
                stage="resolve",
                detail=f"Unknown localized field `{field_name}`.",
                hint=f"Use one of: {', '.join(LOCALIZED_FIELDS)}.",
            )
        if language not in LANGUAGE_CODES:
            raise StageError(
                stage="resolve",
                detail=f"Unsupported locale `{language}`.",
                hint=f"Use one of: {', '.join(LANGUAGE_CODES)}.",
            )
        return resolve_localized_value(getattr(record, field_name), language)

    def build_payload(self, record: ContactRecord) -> dict[str, Any]:
        """Return the update payload for a record, mapping validation errors to stages."""

        def _build() -> dict[str, Any]:
            try:
                return build_update_payload(record, id_factory=self._id_factory)
            except ContactPayloadError as exc:
                raise StageError(
                    stage="payload",
                    detail=exc.detail,
                    hint=f"Populate `{exc.field}` in the record and retry.",
                ) from exc

        return self._run_stage(
            "payload", _build, describe=lambda payload: {"offices": len(payload["offices"])}
        )

    @staticmethod
    def _load_file(path: Path, stage: str) -> Any:
        """Read one raw record file and map failures to stage errors."""

        try:
            return load_raw_record(path)
        except FileNotFoundError as exc:
            raise StageError(
                stage=stage,
                detail=f"Record file not found: `{path}`.",
                hint="Provide an existing JSON or YAML file path.",
            ) from exc
        except ValueError as exc:
            raise StageError(
                stage=stage,
                detail=str(exc),
                hint="Fix the file syntax and rerun.",
            ) from exc

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        describe: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events.

        `describe` maps the stage result to context fields for the complete event.
        """

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            context = describe(result) if describe is not None else {}
            self._run_logger.log_stage_complete(stage_name, **context)
        return result


def _record_context(record: ContactRecord) -> dict[str, object]:
    return {
        "offices": len(record.offices),
        "phones": len(record.phones),
        "emails": len(record.emails),
    }
