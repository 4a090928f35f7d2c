"""Output handling for the calculate command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from takeoff.infrastructure.exporters import ExporterRegistry, ExportManager

if TYPE_CHECKING:
    from takeoff.domain.calculators import BomResult

__all__ = [
    "handle_multi_format_export",
    "handle_single_format",
]


def handle_single_format(
    output_format: str, output_file: Path | None, result: BomResult
) -> None:
    """Print the result in one format, or write it to ``output_file``."""
    try:
        exporter = ExporterRegistry.get(output_format.strip().lower())()
    except KeyError:
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    if output_file is None:
        typer.echo(exporter.export_string(result), nl=False)
        return

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        exporter.export(result, output_file)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {exporter.format_name} output to {output_file}")


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str | None,
    result: BomResult,
) -> None:
    """Handle multi-format export via --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Base name for exported files.
        result: The takeoff result to export.
    """
    available = ExporterRegistry.available_formats()
    if output_formats_str.strip().lower() == "all":
        formats = available
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
