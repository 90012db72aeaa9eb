"""CLI error-handling tests for concise diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from contactinfo.cli import app
from contactinfo.errors import StageError


def test_normalize_reports_missing_record_file(tmp_path: Path) -> None:
    """Normalize should fail with stage-aware diagnostics for a missing record file."""

    runner = CliRunner()
    result = runner.invoke(app, ["normalize", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "normalize failed at stage `load`" in result.output
    assert "Hint: Provide an existing JSON or YAML file path." in result.output
    assert "stage=load event=failure error_type=StageError" in result.output


def test_normalize_reports_invalid_record_syntax(tmp_path: Path) -> None:
    """Malformed record files should be reported at the load stage."""

    broken = tmp_path / "broken.json"
    broken.write_text("{broken", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["normalize", str(broken)])

    assert result.exit_code == 1
    assert "normalize failed at stage `load`" in result.output
    assert "is not valid JSON" in result.output


def test_normalize_reports_missing_config_file(record_file: Path) -> None:
    """A missing `--config` path should fail at the config stage."""

    runner = CliRunner()
    result = runner.invoke(
        app, ["normalize", str(record_file), "--config", "missing-contactinfo.yaml"]
    )

    assert result.exit_code == 1
    assert "normalize failed at stage `config`" in result.output
    assert "Config file not found: `missing-contactinfo.yaml`." in result.output


def test_normalize_reports_invalid_env_config(
    monkeypatch: MonkeyPatch, record_file: Path
) -> None:
    """Invalid environment configuration should fail at the config stage."""

    monkeypatch.setenv("CONTACTINFO_JSON_INDENT", "wide")

    runner = CliRunner()
    result = runner.invoke(app, ["normalize", str(record_file)])

    assert result.exit_code == 1
    assert "normalize failed at stage `config`" in result.output


def test_normalize_reports_missing_defaults_file(record_file: Path, tmp_path: Path) -> None:
    """A missing defaults file should fail at the defaults stage."""

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["normalize", str(record_file), "--defaults", str(tmp_path / "nope.yaml")],
    )

    assert result.exit_code == 1
    assert "normalize failed at stage `defaults`" in result.output


def test_resolve_reports_unknown_field_and_locale(record_file: Path) -> None:
    """Resolve should reject unknown fields and unsupported locales."""

    runner = CliRunner()
    unknown_field = runner.invoke(app, ["resolve", str(record_file), "phones"])
    unknown_locale = runner.invoke(
        app, ["resolve", str(record_file), "company_name", "--locale", "fr"]
    )

    assert unknown_field.exit_code == 1
    assert "resolve failed at stage `resolve`: Unknown localized field `phones`." in unknown_field.output
    assert unknown_locale.exit_code == 1
    assert "Unsupported locale `fr`." in unknown_locale.output


def test_payload_reports_validation_failure(monkeypatch: MonkeyPatch, record_file: Path) -> None:
    """Payload validation failures should be reported at the payload stage."""

    def _failing_build(*_: object, **__: object) -> None:
        """Raise a payload stage error to simulate validation failure."""

        raise StageError(
            stage="payload",
            detail="At least one phone number is required.",
            hint="Populate `phones` in the record and retry.",
        )

    monkeypatch.setattr("contactinfo.cli.ContactInfoService.build_payload", _failing_build)
    runner = CliRunner()

    result = runner.invoke(app, ["payload", str(record_file)])

    assert result.exit_code == 1
    assert "payload failed at stage `payload`: At least one phone number is required." in result.output
    assert "Hint: Populate `phones` in the record and retry." in result.output
