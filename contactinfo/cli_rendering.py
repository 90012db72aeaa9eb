"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and JSON output.
"""

from __future__ import annotations

from typing import Any, NoReturn

import typer

from .config import ContactInfoConfig
from .errors import StageError
from .io.storage import dump_json


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, StageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_json(payload: Any, config: ContactInfoConfig) -> None:
    """Print a JSON-compatible payload using configured formatting."""

    typer.echo(dump_json(payload, indent=config.json_indent, sort_keys=config.sort_keys))
