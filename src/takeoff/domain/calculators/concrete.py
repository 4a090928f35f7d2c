"""Concrete footing calculator descriptor.

Pad, strip and post-hole footings share one takeoff. The concrete volume
gives the cement from the strength class and the aggregate from a fixed
share of the volume, split into ballast or sand and gravel. Pro users can
add reinforcing mesh and shuttering to pad and strip footings.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Collection, Mapping
from typing import Any

from ..services import (
    BAG_UNIT,
    BomAggregator,
    MixRatio,
    ceil_guarded,
    ceil_to_step,
    pitch_layout,
    resolve_tier_defaults,
)
from ..services.constants import (
    AGGREGATE_DENSITY,
    AGGREGATE_PER_M3_CONCRETE,
    AGGREGATE_SPLITS,
    COARSE_GRAVEL_DENSITY,
    CONCRETE_MIXES,
    DEFAULT_CONCRETE_MIX,
    DEFAULT_REBAR_SIZE_MM,
    FORMWORK_NARROW_BOARD_MM,
    FORMWORK_STAKE_SPACING_MM,
    FORMWORK_WIDE_BOARD_MM,
    REBAR_END_COVER_MM,
    REBAR_KG_PER_M,
    TIE_WIRE_KG_PER_CROSSING,
    WATER_CEMENT_RATIO,
)
from ..value_objects import (
    AggregateType,
    BomRow,
    BomSection,
    CompassSide,
    ConcreteAssembly,
    ConcreteMix,
    FootingGeometry,
    FootingShape,
    FootingType,
    LayoutResult,
    MixResult,
    PerimeterEdge,
    TierResolution,
    TierSpec,
)
from .context import CalculationContext
from .registry import calculator_registry
from .results import Layout

logger = logging.getLogger(__name__)


def concrete_mix(name: str) -> ConcreteMix:
    """Look up a strength class by key (``"c25"``) or ratio (``"5:1"``).

    Unknown names give the general-purpose mix.
    """
    key = str(name).strip().lower()
    if key in CONCRETE_MIXES:
        return CONCRETE_MIXES[key]
    for mix in CONCRETE_MIXES.values():
        if key == mix.label:
            return mix
    return CONCRETE_MIXES[DEFAULT_CONCRETE_MIX]


def aggregate_ratio(aggregate_type: AggregateType) -> MixRatio:
    split, names = AGGREGATE_SPLITS[aggregate_type]
    return MixRatio.parse(split, names)


@calculator_registry.register("concrete")
class ConcreteDescriptor:
    """Cement, aggregate and water, plus Pro reinforcement and formwork."""

    def resolve_geometry(self, shape: FootingShape) -> FootingGeometry | None:
        missing = shape.missing_dimensions()
        if missing:
            logger.debug(f"Insufficient input for concrete: {', '.join(missing)}")
            return None
        quantity = max(int(shape.quantity), 1)
        if shape.is_round:
            span = run = shape.diameter
            edges: tuple[PerimeterEdge, ...] = ()
            arc_length = math.pi * shape.diameter
        else:
            span, run = shape.width, shape.length
            edges = (
                PerimeterEdge(CompassSide.NORTH, span),
                PerimeterEdge(CompassSide.EAST, run),
                PerimeterEdge(CompassSide.SOUTH, span),
                PerimeterEdge(CompassSide.WEST, run),
            )
            arc_length = 0.0
        return FootingGeometry(
            kind=shape.kind,
            area_mm2=shape.footprint_mm2 * quantity,
            principal_span=span,
            principal_run=run,
            bounding_width=span,
            bounding_length=run,
            edges=edges,
            arc_length=arc_length,
            footing_type=shape.footing_type,
            depth=shape.depth,
            quantity=quantity,
        )

    def resolve_tier(
        self,
        assembly: ConcreteAssembly,
        geometry: FootingGeometry,
        tier: TierSpec,
        supplied: Collection[str],
    ) -> TierResolution:
        return resolve_tier_defaults("concrete", tier, geometry.depth, supplied=supplied)

    def _pro_extra(
        self, context: CalculationContext[ConcreteAssembly], wanted: bool
    ) -> bool:
        """Rebar and formwork: Pro only, and never in a post hole."""
        geometry = context.geometry
        assert isinstance(geometry, FootingGeometry)
        is_post_hole = geometry.footing_type == FootingType.POSTHOLE
        return wanted and not context.is_diy and not is_post_hole

    def _reinforced(self, context: CalculationContext[ConcreteAssembly]) -> bool:
        return self._pro_extra(context, context.assembly.include_rebar)

    def _formed(self, context: CalculationContext[ConcreteAssembly]) -> bool:
        return self._pro_extra(context, context.assembly.include_formwork)

    def layouts(self, context: CalculationContext[ConcreteAssembly]) -> dict[str, Layout]:
        if not self._reinforced(context):
            return {}
        spacing = context.assembly.rebar_spacing
        geometry = context.geometry
        # Bars across the width are spaced along the length, and vice versa
        return {
            "width_bars": pitch_layout(geometry.principal_run, spacing),
            "length_bars": pitch_layout(geometry.principal_span, spacing),
        }

    def mixes(self, context: CalculationContext[ConcreteAssembly]) -> dict[str, MixResult]:
        geometry = context.geometry
        assert isinstance(geometry, FootingGeometry)
        aggregate_m3 = geometry.volume_m3 * AGGREGATE_PER_M3_CONCRETE
        return {
            "aggregate": aggregate_ratio(context.assembly.aggregate_type).resolve(
                aggregate_m3, bulking_factor=1.0
            )
        }

    def sections(
        self,
        context: CalculationContext[ConcreteAssembly],
        layouts: Mapping[str, Layout],
        mixes: Mapping[str, MixResult],
    ) -> list[BomSection | None]:
        concrete = context.assembly
        agg: BomAggregator = context.aggregator
        geometry = context.geometry
        assert isinstance(geometry, FootingGeometry)
        mix = concrete_mix(concrete.mix)
        volume = geometry.volume_m3

        aggregate = mixes["aggregate"]
        if concrete.aggregate_type == AggregateType.ALL_IN:
            ballast = aggregate.volume_of("ballast")
            aggregate_rows = [
                BomRow(
                    item="All-in ballast",
                    quantity=agg.bags(ballast, AGGREGATE_DENSITY),
                    unit=BAG_UNIT,
                    note=f"{agg.tonnes(ballast, AGGREGATE_DENSITY / 1000):.2f}t",
                    category="gravel",
                )
            ]
        else:
            gravel = aggregate.volume_of("gravel")
            sand = aggregate.volume_of("sand")
            sand_qty, sand_unit = agg.sand(sand)
            aggregate_rows = [
                BomRow(
                    item="Sharp sand",
                    quantity=sand_qty,
                    unit=sand_unit,
                    note=f"{sand:.3f}m³",
                    category="sand",
                    volume_m3=sand,
                ),
                BomRow(
                    item="Gravel (20mm)",
                    quantity=agg.bags(gravel, COARSE_GRAVEL_DENSITY),
                    unit=BAG_UNIT,
                    note=f"{agg.tonnes(gravel, COARSE_GRAVEL_DENSITY / 1000):.2f}t",
                    category="gravel",
                ),
            ]

        concrete_rows = [
            BomRow(
                item=f"Cement ({mix.label} mix)",
                quantity=agg.bags(volume, mix.cement_kg_per_m3),
                unit=BAG_UNIT,
                note=f"{agg.kg(volume, mix.cement_kg_per_m3):.0f}kg",
                category="cement",
            ),
            *aggregate_rows,
            BomRow(
                item="Water",
                quantity=agg.count(volume * mix.cement_kg_per_m3 * WATER_CEMENT_RATIO),
                unit="litres",
                note=f"w/c {WATER_CEMENT_RATIO:g}",
            ),
        ]

        return [
            agg.section(f"CONCRETE ({mix.strength})", "concrete", concrete_rows),
            self._rebar_section(context, layouts),
            self._formwork_section(context),
        ]

    def _rebar_section(
        self,
        context: CalculationContext[ConcreteAssembly],
        layouts: Mapping[str, Layout],
    ) -> BomSection | None:
        if not self._reinforced(context):
            return None
        concrete = context.assembly
        geometry = context.geometry
        assert isinstance(geometry, FootingGeometry)
        width_bars = layouts["width_bars"]
        length_bars = layouts["length_bars"]
        assert isinstance(width_bars, LayoutResult)
        assert isinstance(length_bars, LayoutResult)

        cover = 2 * REBAR_END_COVER_MM
        width_bar = max(geometry.principal_span - cover, 0.0)
        length_bar = max(geometry.principal_run - cover, 0.0)
        per_footing_mm = width_bars.count * width_bar + length_bars.count * length_bar
        total_m = per_footing_mm * geometry.quantity / 1000
        kg_per_m = REBAR_KG_PER_M.get(
            concrete.rebar_size, REBAR_KG_PER_M[DEFAULT_REBAR_SIZE_MM]
        )
        bars = (width_bars.count + length_bars.count) * geometry.quantity
        crossings = width_bars.count * length_bars.count * geometry.quantity

        rows = [
            BomRow(
                item=f"Rebar Ø{concrete.rebar_size:g}mm",
                quantity=ceil_to_step(total_m, 0.01),
                unit="m",
                note=(
                    f"{total_m * kg_per_m:.2f}kg, {bars} bars "
                    f"@ {concrete.rebar_spacing:g}mm"
                ),
            ),
            BomRow(
                item="Tie wire",
                quantity=ceil_to_step(crossings * TIE_WIRE_KG_PER_CROSSING, 0.01),
                unit="kg",
                note=f"{crossings} crossings",
            ),
        ]
        return context.aggregator.section("REINFORCEMENT", "rebar", rows)

    def _formwork_section(
        self, context: CalculationContext[ConcreteAssembly]
    ) -> BomSection | None:
        if not self._formed(context):
            return None
        geometry = context.geometry
        assert isinstance(geometry, FootingGeometry)
        depth = geometry.depth
        if depth <= FORMWORK_NARROW_BOARD_MM:
            board_width = FORMWORK_NARROW_BOARD_MM
        else:
            board_width = FORMWORK_WIDE_BOARD_MM
        boards_high = ceil_guarded(depth / board_width)
        perimeter_m = geometry.perimeter / 1000
        face_m2 = perimeter_m * depth / 1000 * geometry.quantity

        rows = [
            BomRow(
                item=f"Shuttering board {board_width:g}mm",
                quantity=ceil_to_step(perimeter_m * boards_high * geometry.quantity, 0.01),
                unit="m",
                note=f"{boards_high} high, {face_m2:.2f}m² face",
            ),
            BomRow(
                item="Timber stakes",
                quantity=ceil_guarded(geometry.perimeter / FORMWORK_STAKE_SPACING_MM)
                * geometry.quantity,
                unit="no.",
                note=f"@ {FORMWORK_STAKE_SPACING_MM:g}mm",
            ),
        ]
        return context.aggregator.section("FORMWORK", "formwork", rows)

    def totals(
        self, context: CalculationContext[ConcreteAssembly], sections: list[BomSection]
    ) -> tuple[BomRow, ...]:
        return BomAggregator.grand_totals(sections)

    def summary(
        self,
        context: CalculationContext[ConcreteAssembly],
        layouts: Mapping[str, Layout],
        sections: list[BomSection],
    ) -> dict[str, Any]:
        geometry = context.geometry
        assert isinstance(geometry, FootingGeometry)
        agg = context.aggregator
        mix = concrete_mix(context.assembly.mix)
        volume = geometry.volume_m3
        return {
            "footing_type": geometry.footing_type.value,
            "quantity": geometry.quantity,
            "depth_mm": geometry.depth,
            "volume_per_footing_m3": round(geometry.volume_per_footing_m3, 3),
            "volume_net_m3": round(volume, 3),
            "volume_with_waste_m3": round(agg.with_waste(volume), 3),
            "strength": mix.strength,
            "mix_ratio": mix.label,
            "cement_kg": agg.kg(volume, mix.cement_kg_per_m3),
            "cement_bags": agg.bags(volume, mix.cement_kg_per_m3),
        }
