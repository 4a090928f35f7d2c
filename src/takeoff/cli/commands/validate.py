"""Validate command for checking takeoff files.

This module provides the `validate` command that checks a JSON takeoff file
for errors and reports whether it carries enough dimensions to calculate.
"""

from pathlib import Path
from typing import Annotated

import typer

from takeoff.application import calculate, missing_dimensions
from takeoff.application.config import ConfigError, TakeoffFile, load_config


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
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
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)


def display_insufficient_input(takeoff: TakeoffFile) -> None:
    missing = missing_dimensions(takeoff.calculator, takeoff.config)
    if missing:
        typer.echo(
            f"Insufficient input: enter {', '.join(missing)} to calculate.", err=True
        )
    else:
        typer.echo(
            f"Insufficient input: this shape is not supported by the "
            f"{takeoff.calculator} calculator.",
            err=True,
        )


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON takeoff file to validate"),
    ],
) -> None:
    """Validate a takeoff file.

    Checks the file for:
    - JSON syntax errors
    - Schema errors (unknown calculator, unsupported version, bad structure)
    - Missing dimensions

    Exit codes:
        0 - File is valid and can be calculated
        1 - File has errors (cannot be used)
        2 - File is valid but does not have enough input to calculate

    Example:
        takeoff validate deck.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        takeoff = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    if calculate(takeoff.calculator, takeoff.config) is None:
        display_insufficient_input(takeoff)
        raise typer.Exit(code=2)

    typer.echo(f"Validation passed. {takeoff.calculator.capitalize()} takeoff is ready.")
