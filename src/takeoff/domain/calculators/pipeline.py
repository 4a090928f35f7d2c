"""Generic takeoff pipeline shared by every calculator.

Each run resolves the shape, applies the tier, lays out members, resolves
mixes and aggregates the BOM. The calculator-specific parts come from the
assembly descriptor registered under the calculator name.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Any

from ..services import BomAggregator
from ..services.constants import DEFAULT_WASTE_PCT
from ..value_objects import TierSpec
from .context import CalculationContext
from .registry import calculator_registry
from .results import BomResult

logger = logging.getLogger(__name__)


def run_takeoff(
    calculator: str,
    shape: Any,
    assembly: Any,
    tier: TierSpec | None = None,
    waste_pct: float = DEFAULT_WASTE_PCT,
    supplied: Collection[str] = (),
) -> BomResult | None:
    """Run one calculator over a shape and assembly.

    Args:
        calculator: Registered calculator name.
        shape: Shape the calculator works on (plan shape or wall elevation).
        assembly: Assembly specification as entered by the user.
        tier: Skill and budget tier; Pro when omitted.
        waste_pct: Waste allowance in percent.
        supplied: Assembly fields the user entered a value for.

    Returns:
        The BOM result, or None when the shape is missing a dimension.

    Raises:
        KeyError: If the calculator is not registered.
    """
    descriptor = calculator_registry.get(calculator)()
    tier = tier or TierSpec()

    geometry = descriptor.resolve_geometry(shape)
    if geometry is None:
        return None

    resolution = descriptor.resolve_tier(assembly, geometry, tier, supplied)
    logger.debug(
        f"{calculator}: tier {tier.skill_tier.value}/{tier.budget_tier.value}, "
        f"locked {sorted(resolution.locked_fields)}"
    )

    context = CalculationContext(
        geometry=geometry,
        assembly=resolution.apply(assembly),
        tier=tier,
        resolution=resolution,
        aggregator=BomAggregator(waste_pct),
    )
    layouts = descriptor.layouts(context)
    mixes = descriptor.mixes(context)
    sections = [
        section
        for section in descriptor.sections(context, layouts, mixes)
        if section is not None
    ]

    result = BomResult(
        calculator=calculator,
        area_m2=round(geometry.area_m2, 2),
        sections=tuple(sections),
        geometry=geometry,
        tier=tier,
        totals=descriptor.totals(context, sections),
        summary=descriptor.summary(context, layouts, sections),
        layouts=layouts,
        mixes=mixes,
        resolution=resolution,
    )
    logger.debug(
        f"{calculator}: {result.area_m2} m², {len(result.sections)} sections, "
        f"{sum(len(s.rows) for s in result.sections)} rows"
    )
    return result
