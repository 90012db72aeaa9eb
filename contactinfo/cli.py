"""Command-line interface for contactinfo.

Responsibilities:
- Expose user-facing commands for record normalization and inspection.
- Convert CLI arguments into `ContactInfoConfig` and run the service.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_json, exit_with_command_error
from .config import ConfigLoader, ContactInfoConfig
from .errors import StageError
from .locales import PRIMARY_LANGUAGE
from .service import ContactInfoService
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="contactinfo",
    no_args_is_help=True,
    help="Normalize localized contact records.",
)

RecordArgument = Annotated[
    Path,
    typer.Argument(help="Path to a raw contact record (JSON, or YAML by suffix)."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to a YAML config file."),
]
DefaultsOption = Annotated[
    Path | None,
    typer.Option("--defaults", help="Raw record file overriding the built-in defaults."),
]


def _load_config(config_path: Path | None, defaults_path: Path | None) -> ContactInfoConfig:
    """Resolve effective config from YAML or environment plus CLI overrides."""

    try:
        config = (
            ConfigLoader.from_yaml(config_path)
            if config_path is not None
            else ConfigLoader.from_env()
        )
    except FileNotFoundError as exc:
        raise StageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise StageError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config values and rerun.",
        ) from exc

    if defaults_path is not None:
        config.defaults_path = defaults_path
    return config


@app.command("normalize")
def normalize_command(
    record: RecordArgument,
    config_file: ConfigOption = None,
    defaults: DefaultsOption = None,
) -> None:
    """Print the canonical record as JSON."""

    try:
        config = _load_config(config_file, defaults)
        service = ContactInfoService(run_logger=RunLogger())
        canonical = service.normalize_file(record, config)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    echo_json(canonical.as_dict(), config)


@app.command("resolve")
def resolve_command(
    record: RecordArgument,
    field_name: Annotated[str, typer.Argument(help="Localized field name, e.g. `company_name`.")],
    locale: Annotated[
        str, typer.Option("--locale", "-l", help="Target locale code.")
    ] = PRIMARY_LANGUAGE,
    config_file: ConfigOption = None,
    defaults: DefaultsOption = None,
) -> None:
    """Print one localized field of the canonical record for a locale."""

    try:
        config = _load_config(config_file, defaults)
        service = ContactInfoService(run_logger=RunLogger())
        canonical = service.normalize_file(record, config)
        text = service.resolve_field(canonical, field_name.strip(), locale.strip().lower())
    except Exception as exc:
        exit_with_command_error("resolve", exc)

    typer.echo(text)


@app.command("payload")
def payload_command(
    record: RecordArgument,
    config_file: ConfigOption = None,
    defaults: DefaultsOption = None,
) -> None:
    """Print the update payload built from the canonical record."""

    try:
        config = _load_config(config_file, defaults)
        service = ContactInfoService(run_logger=RunLogger())
        canonical = service.normalize_file(record, config)
        payload = service.build_payload(canonical)
    except Exception as exc:
        exit_with_command_error("payload", exc)

    echo_json(payload, config)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
