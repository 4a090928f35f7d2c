"""Retaining wall calculator descriptor.

The wall is worked from its face (length × height). Blocks and bricks come
from per-m² coverage, mortar from a per-m² volume, and the strip foundation,
drainage and hardware from the wall length.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from typing import Any

from ..services import (
    BAG_UNIT,
    BomAggregator,
    MixRatio,
    ceil_guarded,
    course_layout,
    resolve_tier_defaults,
)
from ..services.constants import (
    AGGREGATE_DENSITY,
    BLOCK_PROFILES,
    BLOCKWORK_MORTAR_M3_PER_M2,
    BRICKWORK_MORTAR_M3_PER_M2,
    CEMENT_DENSITY,
    COPING_STONE_LENGTH_MM,
    DPC_OVERLAP_M,
    FOUNDATION_MIX,
    FOUNDATION_MIX_NAMES,
    MORTAR_JOINT_MM,
    WALL_TIES_PER_M2,
    wall_thickness,
)
from ..value_objects import (
    BomRow,
    BomSection,
    ElevationShape,
    LayoutResult,
    MixResult,
    ShapeGeometry,
    ShapeKind,
    TierResolution,
    TierSpec,
    WallAssembly,
    WallType,
)
from .context import CalculationContext
from .registry import calculator_registry
from .results import Layout

logger = logging.getLogger(__name__)

# Walls built as two leaves tied across the cavity
_TIED_WALLS = (WallType.SOLID_DOUBLE, WallType.BRICK_BLOCK)

_TOTAL_LABELS = {
    "cement": "Total Cement",
    "sand": "Total Sand",
    "gravel": "Total Gravel",
}


def mortar_volume(area_m2: float, wall_type: WallType) -> float:
    """Wet mortar volume in m³ for a wall face."""
    volume = area_m2 * BLOCKWORK_MORTAR_M3_PER_M2
    if BLOCK_PROFILES[wall_type].has_brick_face:
        volume += area_m2 * BRICKWORK_MORTAR_M3_PER_M2
    return volume


@calculator_registry.register("wall")
class WallDescriptor:
    """Blocks, bricks, mortar, foundation, drainage and hardware."""

    def resolve_geometry(self, shape: ElevationShape) -> ShapeGeometry | None:
        missing = shape.missing_dimensions()
        if missing:
            logger.debug(f"Insufficient input for wall: {', '.join(missing)}")
            return None
        return ShapeGeometry(
            kind=ShapeKind.RECTANGLE,
            area_mm2=shape.length * shape.height,
            principal_span=shape.length,
            principal_run=shape.height,
            bounding_width=shape.length,
            bounding_length=shape.height,
        )

    def resolve_tier(
        self,
        assembly: WallAssembly,
        geometry: ShapeGeometry,
        tier: TierSpec,
        supplied: Collection[str],
    ) -> TierResolution:
        return resolve_tier_defaults(
            "wall",
            tier,
            geometry.principal_run,
            supplied=supplied,
            context={"wall_type": assembly.wall_type},
        )

    def layouts(self, context: CalculationContext[WallAssembly]) -> dict[str, Layout]:
        profile = BLOCK_PROFILES[context.assembly.wall_type]
        return {
            "courses": course_layout(
                context.geometry.principal_run, profile.height + MORTAR_JOINT_MM
            )
        }

    def mixes(self, context: CalculationContext[WallAssembly]) -> dict[str, MixResult]:
        wall = context.assembly
        geometry = context.geometry
        foundation_m3 = (
            geometry.principal_span * wall.foundation_width * wall.foundation_depth / 1e9
        )
        return {
            "mortar": MixRatio.parse(wall.mortar_ratio, ("cement", "sand")).resolve(
                mortar_volume(geometry.area_m2, wall.wall_type)
            ),
            "foundation": MixRatio.parse(FOUNDATION_MIX, FOUNDATION_MIX_NAMES).resolve(
                foundation_m3
            ),
        }

    def blocks_per_course(self, context: CalculationContext[WallAssembly]) -> int:
        profile = BLOCK_PROFILES[context.assembly.wall_type]
        return ceil_guarded(
            context.geometry.principal_span / (profile.length + MORTAR_JOINT_MM)
        )

    def sections(
        self,
        context: CalculationContext[WallAssembly],
        layouts: Mapping[str, Layout],
        mixes: Mapping[str, MixResult],
    ) -> list[BomSection | None]:
        wall = context.assembly
        agg: BomAggregator = context.aggregator
        profile = BLOCK_PROFILES[wall.wall_type]
        length = context.geometry.principal_span
        area_m2 = context.geometry.area_m2
        courses = layouts["courses"]
        assert isinstance(courses, LayoutResult)

        block_rows = [
            BomRow(
                item=profile.name,
                quantity=agg.count(area_m2 * profile.blocks_per_m2),
                unit="blocks",
                note=f"{courses.count} courses × {self.blocks_per_course(context)} per course",
            )
        ]
        brick_rows = [
            BomRow(
                item=profile.brick_name,
                quantity=agg.count(area_m2 * profile.bricks_per_m2),
                unit="bricks",
                note=f"{profile.bricks_per_m2:g} per m² facing skin",
            )
            if profile.has_brick_face
            else None
        ]

        mortar = mixes["mortar"]
        ratio = MixRatio.parse(wall.mortar_ratio, ("cement", "sand"))
        sand_qty, sand_unit = agg.sand(mortar.volume_of("sand"))
        mortar_rows = [
            BomRow(
                item=f"Cement ({ratio.label} mix)",
                quantity=agg.bags(mortar.volume_of("cement"), CEMENT_DENSITY),
                unit=BAG_UNIT,
                note=f"{mortar.target_volume:.2f}m³ mortar vol",
                category="cement",
            ),
            BomRow(
                item="Building sand",
                quantity=sand_qty,
                unit=sand_unit,
                note=f"{mortar.volume_of('sand'):.3f}m³ dry",
                category="sand",
                volume_m3=mortar.volume_of("sand"),
            ),
        ]

        foundation = mixes["foundation"]
        f_sand_qty, f_sand_unit = agg.sand(foundation.volume_of("sand"))
        foundation_rows = [
            BomRow(
                item="Cement",
                quantity=agg.bags(foundation.volume_of("cement"), CEMENT_DENSITY),
                unit=BAG_UNIT,
                note=f"{foundation.target_volume:.2f}m³ concrete",
                category="cement",
            ),
            BomRow(
                item="Sharp sand",
                quantity=f_sand_qty,
                unit=f_sand_unit,
                note=f"{wall.foundation_width:g}×{wall.foundation_depth:g}mm strip",
                category="sand",
                volume_m3=foundation.volume_of("sand"),
            ),
            BomRow(
                item="Gravel/aggregate",
                quantity=agg.bags(foundation.volume_of("gravel"), AGGREGATE_DENSITY),
                unit=BAG_UNIT,
                note=f"{agg.kg(foundation.volume_of('gravel'), AGGREGATE_DENSITY):.0f}kg",
                category="gravel",
            ),
        ]

        drainage_m3 = length * wall.gravel_width * wall.gravel_depth / 1e9
        drainage_rows = [
            BomRow(
                item="Drainage gravel (20mm)",
                quantity=agg.bags(drainage_m3, AGGREGATE_DENSITY),
                unit=BAG_UNIT,
                note=f"{drainage_m3:.2f}m³ behind wall",
                category="gravel",
            )
        ]

        coping_width = wall_thickness(wall.wall_type) + 2 * wall.coping_overhang
        hardware_rows = [
            BomRow(
                item="DPC (damp proof course)",
                quantity=ceil_guarded(length / 1000) + DPC_OVERLAP_M,
                unit="m (roll)",
            ),
            BomRow(
                item="Wall ties",
                quantity=agg.count(area_m2 * WALL_TIES_PER_M2, waste=False),
                unit="no.",
            )
            if wall.wall_type in _TIED_WALLS
            else None,
            BomRow(
                item=f"Coping stones ({COPING_STONE_LENGTH_MM:.0f}mm)",
                quantity=ceil_guarded(length / COPING_STONE_LENGTH_MM),
                unit="no.",
                note=f"{coping_width:g}mm wide",
            )
            if wall.add_coping
            else None,
        ]

        return [
            agg.section("BLOCKS", "blocks", block_rows),
            agg.section("BRICKS", "bricks", brick_rows),
            agg.section("MORTAR (WALL)", "mortar", mortar_rows),
            agg.section(f"FOUNDATION ({FOUNDATION_MIX} MIX)", "foundation", foundation_rows),
            agg.section("DRAINAGE", "drainage", drainage_rows),
            agg.section("HARDWARE", "hardware", hardware_rows),
        ]

    def totals(
        self, context: CalculationContext[WallAssembly], sections: list[BomSection]
    ) -> tuple[BomRow, ...]:
        # Mortar and foundation sand may be packaged differently; total by volume
        return BomAggregator.grand_totals(
            sections,
            _TOTAL_LABELS,
            always=tuple(_TOTAL_LABELS),
            packaging={"sand": context.aggregator.sand},
        )

    def summary(
        self,
        context: CalculationContext[WallAssembly],
        layouts: Mapping[str, Layout],
        sections: list[BomSection],
    ) -> dict[str, Any]:
        wall = context.assembly
        geometry = context.geometry
        profile = BLOCK_PROFILES[wall.wall_type]
        courses = layouts["courses"]
        assert isinstance(courses, LayoutResult)
        return {
            "wall_area_m2": round(geometry.area_m2, 2),
            "wall_thickness_mm": wall_thickness(wall.wall_type),
            "courses": courses.count,
            "course_height_mm": profile.height,
            "blocks_per_course": self.blocks_per_course(context),
            "blocks": context.aggregator.count(geometry.area_m2 * profile.blocks_per_m2),
            "bricks": context.aggregator.count(geometry.area_m2 * profile.bricks_per_m2),
            "mortar_volume_m3": round(mortar_volume(geometry.area_m2, wall.wall_type), 3),
            "foundation_volume_m3": round(
                geometry.principal_span
                * wall.foundation_width
                * wall.foundation_depth
                / 1e9,
                3,
            ),
        }
