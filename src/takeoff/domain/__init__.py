"""Domain layer - geometry, layout, mixes, BOM and the calculators."""

from .calculators import (
    BomResult,
    ConcreteBom,
    DeckBom,
    PavingBom,
    WallBom,
    calculator_registry,
    run_takeoff,
)
from .services import (
    BomAggregator,
    MixRatio,
    course_layout,
    equal_bay_spacing,
    layout_positions,
    resolve_mix,
    resolve_shape,
    resolve_tier_defaults,
    stagger_layout,
)
from .value_objects import (
    BomRow,
    BomSection,
    BudgetTier,
    ConcreteAssembly,
    DeckAssembly,
    ElevationShape,
    FootingShape,
    LayoutResult,
    MixResult,
    PavingAssembly,
    ShapeGeometry,
    ShapeKind,
    SkillTier,
    TierResolution,
    TierSpec,
    WallAssembly,
)

__all__ = [
    "BomAggregator",
    "BomResult",
    "BomRow",
    "BomSection",
    "BudgetTier",
    "ConcreteAssembly",
    "ConcreteBom",
    "DeckAssembly",
    "DeckBom",
    "ElevationShape",
    "FootingShape",
    "LayoutResult",
    "MixRatio",
    "MixResult",
    "PavingAssembly",
    "PavingBom",
    "ShapeGeometry",
    "ShapeKind",
    "SkillTier",
    "TierResolution",
    "TierSpec",
    "WallAssembly",
    "WallBom",
    "calculator_registry",
    "course_layout",
    "equal_bay_spacing",
    "layout_positions",
    "resolve_mix",
    "resolve_shape",
    "resolve_tier_defaults",
    "run_takeoff",
    "stagger_layout",
]
