"""CSV BOM exporter."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, ClassVar

from takeoff.infrastructure.exporters.base import Exporter, ExporterRegistry

if TYPE_CHECKING:
    from takeoff.domain.calculators import BomResult

HEADER = ["Section", "Item", "Quantity", "Unit", "Length (mm)", "Note"]


@ExporterRegistry.register("csv")
class CsvBomExporter(Exporter):
    """One CSV row per BOM row; grand totals follow under a TOTALS section.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export_string(self, result: BomResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(HEADER)
        for section in result.sections:
            for row in section.rows:
                writer.writerow(
                    [
                        section.title,
                        row.item,
                        f"{row.quantity:g}",
                        row.unit,
                        "" if row.length_mm is None else f"{row.length_mm:g}",
                        row.note,
                    ]
                )
        for row in result.totals:
            writer.writerow(["TOTALS", row.item, f"{row.quantity:g}", row.unit, "", ""])
        return output.getvalue()
