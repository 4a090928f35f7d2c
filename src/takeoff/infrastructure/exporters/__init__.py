"""Exporter framework for takeoff results.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- text: Printable materials list with summary and grand totals
- json: Full result including geometry, layouts and mixes
- csv: One row per BOM line for spreadsheets

Usage:
    from takeoff.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("csv")()
    print(exporter.export_string(result))
"""

from takeoff.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from takeoff.infrastructure.exporters.csv_export import CsvBomExporter
from takeoff.infrastructure.exporters.json_export import JsonBomExporter
from takeoff.infrastructure.exporters.text import TextBomExporter

__all__ = [
    "CsvBomExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonBomExporter",
    "TextBomExporter",
]
