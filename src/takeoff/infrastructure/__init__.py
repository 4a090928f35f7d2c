"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    CsvBomExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonBomExporter,
    TextBomExporter,
)
from .formatters import BomTableFormatter, TierReportFormatter

__all__ = [
    "BomTableFormatter",
    "CsvBomExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonBomExporter",
    "TextBomExporter",
    "TierReportFormatter",
]
