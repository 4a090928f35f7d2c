"""Paving calculator descriptor."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from ..services import (
    BAG_UNIT,
    BomAggregator,
    MixRatio,
    resolve_shape,
    resolve_tier_defaults,
)
from ..services.constants import (
    CEMENT_DENSITY,
    MEMBRANE_OVERLAP,
    PAVING_MIX_PRESETS,
    SAND_DENSITY,
    SUBBASE_MATERIALS,
)
from ..value_objects import (
    BomRow,
    BomSection,
    MixResult,
    PavingAssembly,
    PavingType,
    ShapeGeometry,
    ShapeSpec,
    TierResolution,
    TierSpec,
)
from .context import CalculationContext
from .registry import calculator_registry
from .results import Layout

_UNIT_NAMES = {
    PavingType.SLABS: "Paving slab",
    PavingType.BLOCKS: "Block paver",
    PavingType.NATURAL: "Natural stone",
}


def bedding_ratio(mix_ratio: str) -> MixRatio:
    """Cement:sand ratio for a bedding mix.

    Trade presets are quoted sand first (``"4:1"``); anything else is read
    as cement:sand.
    """
    ratio = PAVING_MIX_PRESETS.get(mix_ratio.strip(), mix_ratio)
    return MixRatio.parse(ratio, ("cement", "sand"))


@calculator_registry.register("paving")
class PavingDescriptor:
    """Paving units, mortar bed, sub-base and sundries."""

    def resolve_geometry(self, shape: ShapeSpec) -> ShapeGeometry | None:
        return resolve_shape(shape)

    def resolve_tier(
        self,
        assembly: PavingAssembly,
        geometry: ShapeGeometry,
        tier: TierSpec,
        supplied: Collection[str],
    ) -> TierResolution:
        return resolve_tier_defaults("paving", tier, 0.0, supplied=supplied)

    def layouts(self, context: CalculationContext[PavingAssembly]) -> dict[str, Layout]:
        return {}

    def mixes(self, context: CalculationContext[PavingAssembly]) -> dict[str, MixResult]:
        paving = context.assembly
        bed_m3 = context.geometry.area_m2 * paving.bed_depth / 1000
        return {"bedding": bedding_ratio(paving.mix_ratio).resolve(bed_m3)}

    def unit_count(self, context: CalculationContext[PavingAssembly]) -> int:
        """Paving units to order, including joints and waste."""
        paving = context.assembly
        module = (paving.slab_width + paving.joint_width) * (
            paving.slab_length + paving.joint_width
        )
        if paving.slab_width <= 0 or paving.slab_length <= 0 or module <= 0:
            return 0
        return context.aggregator.count(context.geometry.area_mm2 / module)

    def sections(
        self,
        context: CalculationContext[PavingAssembly],
        layouts: Mapping[str, Layout],
        mixes: Mapping[str, MixResult],
    ) -> list[BomSection | None]:
        paving = context.assembly
        agg: BomAggregator = context.aggregator
        area_m2 = context.geometry.area_m2

        units = self.unit_count(context)
        coverage = round(units * paving.slab_width * paving.slab_length / 1e6, 2)
        unit_size = (
            f"{paving.slab_width:g}×{paving.slab_length:g}×{paving.slab_thickness:g}mm"
        )
        paving_rows = [
            BomRow(
                item=f"{_UNIT_NAMES[paving.paving_type]} {unit_size}",
                quantity=units,
                unit="no.",
                note=f"{coverage}m² coverage",
            )
        ]

        bedding = mixes["bedding"]
        ratio = bedding_ratio(paving.mix_ratio)
        sand_qty, sand_unit = agg.sand(bedding.volume_of("sand"))
        bed_rows = [
            BomRow(
                item=f"Cement ({ratio.label} mix)",
                quantity=agg.bags(bedding.volume_of("cement"), CEMENT_DENSITY),
                unit=BAG_UNIT,
                note=f"{bedding.target_volume:.3f}m³ bed at {paving.bed_depth:g}mm",
                category="cement",
            ),
            BomRow(
                item="Sharp sand",
                quantity=sand_qty,
                unit=sand_unit,
                note=f"{paving.mix_ratio} mix",
                category="sand",
            ),
        ]

        material = SUBBASE_MATERIALS[paving.subbase_type]
        subbase_m3 = area_m2 * paving.subbase_depth / 1000
        subbase_rows = [
            BomRow(
                item=material.label,
                quantity=agg.tonnes(subbase_m3, material.density_t_per_m3),
                unit="t",
                note=f"{paving.subbase_depth:g}mm compacted, {material.description}",
            )
        ]

        joint_m3 = (
            units
            * (paving.slab_width + paving.slab_length)
            * paving.joint_width
            * paving.slab_thickness
            / 1e9
        )
        sundry_rows = [
            BomRow(
                item="Jointing sand",
                quantity=agg.bags(joint_m3, SAND_DENSITY, waste=False),
                unit=BAG_UNIT,
                note=f"{agg.kg(joint_m3, SAND_DENSITY, waste=False):.0f}kg for joints",
            ),
            BomRow(
                item="Weed membrane",
                quantity=agg.count(area_m2 * MEMBRANE_OVERLAP, waste=False),
                unit="m²",
                note="10% overlap inc.",
            ),
        ]

        return [
            agg.section("PAVING", "paving", paving_rows),
            agg.section("MORTAR BED", "mortar", bed_rows),
            agg.section("SUB-BASE", "subbase", subbase_rows),
            agg.section("SUNDRIES", "sundries", sundry_rows),
        ]

    def totals(
        self, context: CalculationContext[PavingAssembly], sections: list[BomSection]
    ) -> tuple[BomRow, ...]:
        return BomAggregator.grand_totals(sections)

    def summary(
        self,
        context: CalculationContext[PavingAssembly],
        layouts: Mapping[str, Layout],
        sections: list[BomSection],
    ) -> dict[str, Any]:
        paving = context.assembly
        area_m2 = context.geometry.area_m2
        material = SUBBASE_MATERIALS[paving.subbase_type]
        return {
            "area_m2": round(area_m2, 2),
            "area_with_waste_m2": round(context.aggregator.with_waste(area_m2), 2),
            "units": self.unit_count(context),
            "bed_volume_m3": round(area_m2 * paving.bed_depth / 1000, 3),
            "subbase_tonnes": context.aggregator.tonnes(
                area_m2 * paving.subbase_depth / 1000, material.density_t_per_m3
            ),
            "mix_ratio": bedding_ratio(paving.mix_ratio).label,
        }
