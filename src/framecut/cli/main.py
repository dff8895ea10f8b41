"""Typer CLI for frame cut optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from framecut.application import OptimizeCutListCommand
from framecut.application.config import (
    ConfigError,
    config_to_frames,
    config_to_profile,
    load_config,
    merge_config_with_cli,
)
from framecut.cli.commands import display_load_error, validate_command
from framecut.domain import Unit
from framecut.infrastructure import CutListFormatter, JsonExporter, PackingInvariantError

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="framecut",
    help="Plan window frame cuts on standard-length profiles.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def optimize(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cut job file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to this file"),
    ] = None,
    stock_length: Annotated[
        float | None,
        typer.Option("--stock-length", "-l", help="Override the profile length"),
    ] = None,
    unit: Annotated[
        Unit | None,
        typer.Option("--unit", "-u", help="Override the profile unit"),
    ] = None,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Blade width; enables kerf accounting"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing details"),
    ] = False,
) -> None:
    """Compute the cut plan for a cut job file.

    CLI options override the profile settings from the file.

    Examples:
        framecut optimize job.json
        framecut optimize job.json --kerf 3 --format json -o plan.json
        framecut optimize job.json --stock-length 20 --unit ft
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. "
            f"Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    try:
        config = merge_config_with_cli(
            config, stock_length=stock_length, unit=unit, kerf=kerf
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    command = OptimizeCutListCommand()
    try:
        result = command.execute(config_to_frames(config), config_to_profile(config))
    except PackingInvariantError as e:
        typer.echo(f"Internal error: {e}", err=True)
        raise typer.Exit(code=2)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error.message}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        report = JsonExporter().export(result)
    else:
        report = CutListFormatter().format(result)

    if output_file is not None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(report + "\n", encoding="utf-8")
        typer.echo(f"Cut plan written to {output_file}")
    else:
        typer.echo(report)


if __name__ == "__main__":
    app()
