"""Protocol definition for calculator assembly descriptors."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any, Protocol

from ..value_objects import (
    BomRow,
    BomSection,
    MixResult,
    ShapeGeometry,
    TierResolution,
    TierSpec,
)
from .context import CalculationContext
from .results import Layout


class AssemblyDescriptor(Protocol):
    """Protocol for per-calculator assembly descriptors.

    A descriptor supplies the calculator-specific steps of the shared
    takeoff pipeline: which geometry it works on, how the tier derives its
    structural fields, which members it lays out, which mixes it needs and
    how the results read as BOM sections. The pipeline owns the order the
    steps run in and everything shared between calculators.

    Descriptors are registered with the CalculatorRegistry under the
    calculator name.

    Example:
        @calculator_registry.register("paving")
        class PavingDescriptor:
            def resolve_geometry(self, shape):
                ...
    """

    def resolve_geometry(self, shape: Any) -> ShapeGeometry | None:
        """Resolve the shape the calculator works on.

        Returns:
            The geometry, or None when a required dimension is missing.
        """
        ...

    def resolve_tier(
        self,
        assembly: Any,
        geometry: ShapeGeometry,
        tier: TierSpec,
        supplied: Collection[str],
    ) -> TierResolution:
        """Derive and lock structural fields for the tier.

        The tier rules key off one height: the post height for decks and
        the wall height for walls.
        """
        ...

    def layouts(self, context: CalculationContext[Any]) -> dict[str, Layout]:
        """Lay out structural members, keyed by member name."""
        ...

    def mixes(self, context: CalculationContext[Any]) -> dict[str, MixResult]:
        """Resolve mortar and concrete mixes, keyed by use."""
        ...

    def sections(
        self,
        context: CalculationContext[Any],
        layouts: Mapping[str, Layout],
        mixes: Mapping[str, MixResult],
    ) -> list[BomSection | None]:
        """Build BOM sections in display order. None entries are dropped."""
        ...

    def totals(
        self, context: CalculationContext[Any], sections: list[BomSection]
    ) -> tuple[BomRow, ...]:
        """Grand totals across sections."""
        ...

    def summary(
        self,
        context: CalculationContext[Any],
        layouts: Mapping[str, Layout],
        sections: list[BomSection],
    ) -> dict[str, Any]:
        """Headline figures for the result."""
        ...
