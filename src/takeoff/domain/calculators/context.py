"""Calculation context handed to assembly descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from ..services import BomAggregator
from ..value_objects import ShapeGeometry, TierResolution, TierSpec

A = TypeVar("A")


@dataclass(frozen=True)
class CalculationContext(Generic[A]):
    """Immutable inputs for one calculation, after tier resolution.

    Attributes:
        geometry: Resolved plan or elevation geometry.
        assembly: Assembly with tier-derived values already applied.
        tier: Skill and budget tier the calculation runs under.
        resolution: What the tier derived and locked.
        aggregator: Waste and packaging rules for this calculation.
    """

    geometry: ShapeGeometry
    assembly: A
    tier: TierSpec
    resolution: TierResolution
    aggregator: BomAggregator

    @property
    def is_diy(self) -> bool:
        return self.tier.is_diy
