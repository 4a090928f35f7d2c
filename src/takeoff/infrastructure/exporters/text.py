"""Plain-text BOM exporter."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from takeoff.infrastructure.exporters.base import Exporter, ExporterRegistry
from takeoff.infrastructure.formatters import BomTableFormatter

if TYPE_CHECKING:
    from takeoff.domain.calculators import BomResult


@ExporterRegistry.register("text")
class TextBomExporter(Exporter):
    """Printable materials list: summary, section tables and grand totals.

    Attributes:
        format_name: "text"
        file_extension: "txt"
    """

    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"

    def __init__(self, width: int = 78) -> None:
        self._formatter = BomTableFormatter(width=width)

    def export_string(self, result: BomResult) -> str:
        return self._formatter.format(result)
