"""Validate command for checking cut job files.

Loads a JSON configuration file and runs every input check without
optimizing, listing all failures instead of stopping at the first one.
"""

from pathlib import Path
from typing import Annotated

import typer

from framecut.application.config import (
    ConfigError,
    config_to_frames,
    config_to_profile,
    load_config,
)
from framecut.application.services import InputValidatorService
from framecut.domain.errors import ValidationError


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cut job file to validate"),
    ],
) -> None:
    """Validate a cut job configuration file.

    Checks the file for:
    - JSON syntax errors
    - Schema errors (missing fields, wrong types, unknown keys)
    - Frame, sub-component and profile values, including pieces longer
      than the stock profile

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors

    Example:
        framecut validate job.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    errors = InputValidatorService().validate_all(
        config_to_frames(config), config_to_profile(config)
    )
    if errors:
        _display_validation_errors(errors)
        raise typer.Exit(code=1)

    typer.echo(
        f"Validation passed. {len(config.frames)} frame(s) fit "
        f"{config.profile.length:g}{config.profile.unit.value} profiles."
    )


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_errors(errors: list[ValidationError]) -> None:
    typer.echo("Errors:", err=True)
    for error in errors:
        typer.echo(f"  [{error.kind.value}] {error.message}", err=True)
    typer.echo()
    typer.echo(f"Validation failed: {len(errors)} error(s)", err=True)
