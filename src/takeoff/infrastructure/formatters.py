"""Plain-text formatters for takeoff results and tier resolutions."""

from __future__ import annotations

from typing import Any

from takeoff.domain.calculators import BomResult
from takeoff.domain.value_objects import BomRow, BomSection, TierResolution


def _quantity(value: float) -> str:
    return f"{value:g}"


def _length(row: BomRow) -> str:
    if row.length_mm is None:
        return ""
    return f"{row.length_mm:g}mm"


def _label(key: str) -> str:
    """``board_length_mm`` -> ``Board length (mm)``."""
    for suffix, unit in (("_mm", "mm"), ("_m2", "m²"), ("_m3", "m³"), ("_m", "m")):
        if key.endswith(suffix):
            return f"{key[: -len(suffix)].replace('_', ' ').capitalize()} ({unit})"
    return key.replace("_", " ").capitalize()


class BomTableFormatter:
    """Formats a BOM result as fixed-width tables.

    One table per section (component, quantity, unit, length, note), with
    the headline summary above and the grand totals below.
    """

    def __init__(self, width: int = 78) -> None:
        self._width = width

    def format(self, result: BomResult) -> str:
        tier = result.tier
        lines = [
            "=" * self._width,
            f"{result.calculator.upper()} TAKEOFF  "
            f"({tier.skill_tier.value.upper()} / {tier.budget_tier.value})",
            "=" * self._width,
        ]
        lines.extend(self.format_summary(result.summary))
        lines.append("")
        for section in result.sections:
            lines.extend(self.format_section(section))
            lines.append("")
        if result.totals:
            lines.extend(self.format_totals(result.totals))
        return "\n".join(lines).rstrip() + "\n"

    def format_summary(self, summary: dict[str, Any]) -> list[str]:
        return [f"  {_label(key):<28} {value}" for key, value in summary.items()]

    def format_section(self, section: BomSection) -> list[str]:
        lines = [
            section.title,
            "-" * self._width,
            f"{'Component':<34} {'Qty':>8} {'Unit':<18} {'Length':>8}",
            "-" * self._width,
        ]
        for row in section.rows:
            lines.append(
                f"{row.item:<34} {_quantity(row.quantity):>8} {row.unit:<18} {_length(row):>8}"
            )
            if row.note:
                lines.append(f"    {row.note}")
        return lines

    def format_totals(self, totals: tuple[BomRow, ...]) -> list[str]:
        lines = ["GRAND TOTALS", "=" * self._width]
        for row in totals:
            lines.append(f"{row.item:<34} {_quantity(row.quantity):>8} {row.unit}")
        return lines


class TierReportFormatter:
    """Formats a tier resolution: derived values, locks and hints."""

    def format(self, calculator: str, resolution: TierResolution) -> str:
        lines = [f"{calculator.upper()} TIER DEFAULTS", "=" * 60]
        if not resolution.derived_fields:
            lines.append("  (no derived fields)")
        for name, value in resolution.derived_fields.items():
            lock = "locked" if resolution.is_locked(name) else "default"
            shown = f"{value:g}" if isinstance(value, float) else str(value)
            lines.append(f"  {name:<20} {shown:<10} [{lock}]")
            hint = resolution.hints.get(name)
            if hint:
                lines.append(f"      {hint}")
        return "\n".join(lines) + "\n"
