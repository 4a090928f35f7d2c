"""Calculation result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from ..value_objects import (
    BomRow,
    BomSection,
    LayoutResult,
    MixResult,
    ShapeGeometry,
    StaggerLayout,
    TierResolution,
    TierSpec,
)

Layout = Union[LayoutResult, StaggerLayout]


def _geometry_dict(geometry: ShapeGeometry) -> dict[str, Any]:
    return {
        "kind": geometry.kind.value,
        "area_mm2": geometry.area_mm2,
        "area_m2": round(geometry.area_m2, 2),
        "principal_span": geometry.principal_span,
        "principal_run": geometry.principal_run,
        "bounding_width": geometry.bounding_width,
        "bounding_length": geometry.bounding_length,
        "perimeter": round(geometry.perimeter, 1),
        "edges": [
            {"side": edge.side.value, "length": edge.length} for edge in geometry.edges
        ],
    }


def _layout_dict(layout: Layout) -> dict[str, Any]:
    if isinstance(layout, StaggerLayout):
        return {
            "pitch": layout.pitch,
            "secondary_run": layout.secondary_run,
            "count": layout.count,
            "rows": [
                {
                    "bay_index": row.bay_index,
                    "bay_start": row.bay_start,
                    "bay_end": row.bay_end,
                    "positions": list(row.positions),
                }
                for row in layout.rows
            ],
        }
    return {
        "run_length": layout.run_length,
        "nominal_spacing": layout.nominal_spacing,
        "actual_spacing": layout.actual_spacing,
        "count": layout.count,
        "positions": list(layout.positions),
    }


def _mix_dict(mix: MixResult) -> dict[str, Any]:
    return {
        "target_volume": mix.target_volume,
        "dry_volume": mix.dry_volume,
        "constituents": {name: volume for name, volume in mix.constituents},
    }


@dataclass(frozen=True)
class BomResult:
    """Complete takeoff for one calculator run.

    Field names and section ordering are the same for every shape and tier,
    so renderers and document generators can consume the result directly.

    Attributes:
        calculator: Calculator identifier (``deck``, ``paving``, ``wall``,
            ``concrete``).
        area_m2: Plan or wall face area in m², rounded to 0.01.
        sections: BOM sections in display order, empty ones omitted.
        totals: Grand totals for materials shared between sections.
        summary: Headline figures keyed by name.
        geometry: Resolved geometry the quantities were derived from.
        layouts: Structural layouts keyed by member name.
        mixes: Resolved mortar and concrete mixes keyed by use.
        tier: Tier the calculation ran under.
        resolution: Derived and locked fields for that tier.
    """

    calculator: str
    area_m2: float
    sections: tuple[BomSection, ...]
    geometry: ShapeGeometry
    tier: TierSpec
    totals: tuple[BomRow, ...] = field(default_factory=tuple)
    summary: Mapping[str, Any] = field(default_factory=dict)
    layouts: Mapping[str, Layout] = field(default_factory=dict)
    mixes: Mapping[str, MixResult] = field(default_factory=dict)
    resolution: TierResolution = field(default_factory=TierResolution)

    def section(self, title: str) -> BomSection | None:
        """Find a section by title."""
        for section in self.sections:
            if section.title == title:
                return section
        return None

    @property
    def section_titles(self) -> list[str]:
        return [section.title for section in self.sections]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "calculator": self.calculator,
            "area_m2": self.area_m2,
            "tier": {
                "skill_tier": self.tier.skill_tier.value,
                "budget_tier": self.tier.budget_tier.value,
            },
            "summary": dict(self.summary),
            "sections": [section.to_dict() for section in self.sections],
            "totals": [row.to_dict() for row in self.totals],
            "geometry": _geometry_dict(self.geometry),
            "layouts": {name: _layout_dict(layout) for name, layout in self.layouts.items()},
            "mixes": {name: _mix_dict(mix) for name, mix in self.mixes.items()},
            "resolution": self.resolution.to_dict(),
        }


# Names used by the per-calculator entry points
DeckBom = BomResult
PavingBom = BomResult
WallBom = BomResult
ConcreteBom = BomResult
