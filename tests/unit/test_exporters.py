"""Unit tests for BOM formatters and exporters.

These tests verify:
- Registry lookup and error reporting
- Text tables, JSON documents and CSV rows for real takeoffs
- Multi-format export through ExportManager
"""

import csv
import io
import json
from pathlib import Path

import pytest

from takeoff.application import calculate_deck, calculate_wall
from takeoff.domain.services import resolve_tier_defaults
from takeoff.domain.value_objects import TierSpec
from takeoff.infrastructure import (
    BomTableFormatter,
    CsvBomExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonBomExporter,
    TextBomExporter,
    TierReportFormatter,
)


@pytest.fixture
def deck_result(deck_form):
    return calculate_deck(deck_form)


@pytest.fixture
def wall_result(wall_form):
    return calculate_wall(wall_form)


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["csv", "json", "text"]
        assert ExporterRegistry.get("csv") is CsvBomExporter
        assert ExporterRegistry.is_registered("json")

    def test_unknown_format_lists_available(self) -> None:
        with pytest.raises(KeyError, match="Available formats: csv, json, text"):
            ExporterRegistry.get("pdf")

    def test_exporters_satisfy_protocol(self) -> None:
        for exporter in (TextBomExporter(), JsonBomExporter(), CsvBomExporter()):
            assert isinstance(exporter, Exporter)


class TestBomTableFormatter:
    """Tests for the text table output."""

    def test_header_and_sections(self, deck_result) -> None:
        text = BomTableFormatter().format(deck_result)

        assert "DECK TAKEOFF  (PRO / full)" in text
        assert "DECKING BOARDS" in text
        assert "FIXINGS & HARDWARE" in text
        assert "Board length (mm)" in text
        assert "GRAND TOTALS" not in text

    def test_grand_totals(self, wall_result) -> None:
        text = TextBomExporter().export_string(wall_result)

        assert "GRAND TOTALS" in text
        totals = text.split("GRAND TOTALS", 1)[1]
        assert "Total Cement" in totals
        assert "Total Gravel" in totals

    def test_notes_are_indented(self, deck_result) -> None:
        lines = BomTableFormatter().format(deck_result).splitlines()

        assert "    126.0m total lineal" in lines

    def test_width(self, deck_result) -> None:
        lines = BomTableFormatter(width=60).format(deck_result).splitlines()

        assert lines[0] == "=" * 60


class TestTierReportFormatter:
    """Tests for the tier report."""

    def test_diy_report_shows_locks_and_hints(self) -> None:
        resolution = resolve_tier_defaults("paving", TierSpec.diy(), 0)

        text = TierReportFormatter().format("paving", resolution)

        assert text.startswith("PAVING TIER DEFAULTS")
        assert "mix_ratio" in text
        assert "[locked]" in text
        assert "Auto: 1:4 (full)" in text

    def test_pro_report(self) -> None:
        resolution = resolve_tier_defaults("wall", TierSpec.pro(), 600)

        text = TierReportFormatter().format("wall", resolution)

        assert "[default]" in text
        assert "[locked]" not in text

    def test_empty_resolution(self) -> None:
        resolution = resolve_tier_defaults(
            "paving",
            TierSpec.pro(),
            0,
            supplied={"mix_ratio", "bed_depth", "subbase_depth"},
        )

        assert "(no derived fields)" in TierReportFormatter().format("paving", resolution)


class TestJsonBomExporter:
    """Tests for JSON export."""

    def test_document(self, deck_result) -> None:
        data = json.loads(JsonBomExporter().export_string(deck_result))

        assert data["schema_version"] == "1.0"
        assert data["calculator"] == "deck"
        assert data["area_m2"] == 17.28
        assert data["tier"] == {"skill_tier": "pro", "budget_tier": "full"}
        assert data["sections"][0]["title"] == "DECKING BOARDS"
        assert data["sections"][0]["rows"][0]["quantity"] == 35
        assert data["layouts"]["joists"]["count"] == 10
        assert data["geometry"]["kind"] == "rectangle"

    def test_without_layouts(self, deck_result) -> None:
        data = json.loads(JsonBomExporter(include_layouts=False).export_string(deck_result))

        assert "layouts" not in data

    def test_wall_mixes(self, wall_result) -> None:
        data = json.loads(JsonBomExporter(indent=None).export_string(wall_result))

        assert set(data["mixes"]) == {"mortar", "foundation"}
        assert set(data["mixes"]["foundation"]["constituents"]) == {
            "cement",
            "sand",
            "gravel",
        }


class TestCsvBomExporter:
    """Tests for CSV export."""

    def test_rows(self, deck_result) -> None:
        rows = list(csv.reader(io.StringIO(CsvBomExporter().export_string(deck_result))))

        assert rows[0] == ["Section", "Item", "Quantity", "Unit", "Length (mm)", "Note"]
        assert rows[1] == [
            "DECKING BOARDS",
            "Decking board 150×28mm",
            "35",
            "no.",
            "3600",
            "126.0m total lineal",
        ]
        assert len(rows) == 1 + sum(len(s.rows) for s in deck_result.sections)

    def test_totals_follow_sections(self, wall_result) -> None:
        rows = list(csv.reader(io.StringIO(CsvBomExporter().export_string(wall_result))))

        totals = [row for row in rows if row[0] == "TOTALS"]
        assert [row[1:3] for row in totals] == [
            ["Total Cement", "6"],
            ["Total Sand", "12"],
            ["Total Gravel", "28"],
        ]
        assert rows[-1][0] == "TOTALS"


class TestExportManager:
    """Tests for multi-format export."""

    def test_export_all(self, tmp_path: Path, deck_result) -> None:
        manager = ExportManager(tmp_path / "out")

        paths = manager.export_all(["text", "csv"], deck_result)

        assert paths == {
            "text": tmp_path / "out" / "deck_takeoff.txt",
            "csv": tmp_path / "out" / "deck_takeoff.csv",
        }
        assert paths["csv"].read_text(encoding="utf-8").startswith("Section,Item")

    def test_project_name(self, tmp_path: Path, deck_result) -> None:
        paths = ExportManager(tmp_path).export_all(["json"], deck_result, "garden")

        assert paths["json"].name == "garden_takeoff.json"
        assert json.loads(paths["json"].read_text(encoding="utf-8"))["calculator"] == "deck"

    def test_unknown_format(self, tmp_path: Path, deck_result) -> None:
        with pytest.raises(KeyError):
            ExportManager(tmp_path).export_all(["pdf"], deck_result)
