"""Typer CLI for landscape takeoffs."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from takeoff.application import calculate as run_calculator
from takeoff.application.config import (
    ConfigError,
    load_config,
    merge_config_with_cli,
)
from takeoff.cli.commands import tiers_command, validate_command
from takeoff.cli.commands.output_handlers import (
    handle_multi_format_export,
    handle_single_format,
)
from takeoff.cli.commands.validate import (
    display_insufficient_input,
    display_load_error,
)
from takeoff.domain.value_objects import BudgetTier, SkillTier

app = typer.Typer(
    name="takeoff",
    help="Quantity takeoffs for decks, paving, retaining walls and concrete footings.",
)

app.command(name="validate")(validate_command)
app.command(name="tiers")(tiers_command)


@app.command()
def calculate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON takeoff file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json or csv"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to this file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: text,json,csv (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = None,
    waste: Annotated[
        float | None,
        typer.Option("--waste", "-w", help="Waste allowance in percent"),
    ] = None,
    skill_tier: Annotated[
        SkillTier | None,
        typer.Option("--tier", "-t", help="Skill tier (overrides the file)"),
    ] = None,
    budget_tier: Annotated[
        BudgetTier | None,
        typer.Option("--budget", "-b", help="Budget tier (overrides the file)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log calculation details"),
    ] = False,
) -> None:
    """Calculate the bill of materials for a takeoff file.

    Command-line options override values in the file.

    Exit codes:
        0 - BOM produced
        1 - File or option errors
        2 - Not enough input to calculate (e.g. a blank dimension)

    Example:
        takeoff calculate deck.json --tier diy --budget budget --format csv
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        takeoff = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    takeoff = merge_config_with_cli(
        takeoff, waste=waste, skill_tier=skill_tier, budget_tier=budget_tier
    )

    try:
        result = run_calculator(takeoff.calculator, takeoff.config)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)

    if result is None:
        display_insufficient_input(takeoff)
        raise typer.Exit(code=2)

    if output_formats:
        handle_multi_format_export(output_formats, output_dir, project_name, result)
        return

    handle_single_format(output_format, output_file, result)


if __name__ == "__main__":
    app()
