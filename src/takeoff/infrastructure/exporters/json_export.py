"""JSON BOM exporter."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, ClassVar

from takeoff.infrastructure.exporters.base import Exporter, ExporterRegistry

if TYPE_CHECKING:
    from takeoff.domain.calculators import BomResult

# Version of the exported document layout
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonBomExporter(Exporter):
    """Full result as JSON, including geometry, layouts and mixes.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2, include_layouts: bool = True) -> None:
        self.indent = indent
        self.include_layouts = include_layouts

    def export_string(self, result: BomResult) -> str:
        data = {"schema_version": SCHEMA_VERSION, **result.to_dict()}
        if not self.include_layouts:
            data.pop("layouts", None)
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
