"""Value objects for the takeoff domain.

This module provides the immutable data types used throughout the engine.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Plan shapes and resolved geometry
from ._shapes import (
    CircleShape,
    CompassSide,
    ElevationShape,
    FootingGeometry,
    FootingShape,
    FootingType,
    LShape,
    NotchedShape,
    PerimeterEdge,
    QuarterCircleShape,
    RectangleShape,
    SemicircleShape,
    ShapeGeometry,
    ShapeKind,
    ShapeSpec,
    Side,
    TShape,
    UShape,
)

# Calculator assemblies
from ._assemblies import (
    AggregateType,
    BlockProfile,
    BoardDirection,
    ConcreteAssembly,
    ConcreteMix,
    DeckAssembly,
    PavingAssembly,
    PavingType,
    SubBaseMaterial,
    SubBaseType,
    WallAssembly,
    WallType,
)

# Structural layout
from ._layout import (
    LayoutResult,
    StaggeredRow,
    StaggerLayout,
)

# Mixes and bill of materials
from ._bom import (
    BomRow,
    BomSection,
    MixResult,
)

# Skill and budget tiers
from ._tiers import (
    BudgetTier,
    SkillTier,
    TierResolution,
    TierSpec,
)

__all__ = [
    "AggregateType",
    "BlockProfile",
    "BoardDirection",
    "BomRow",
    "BomSection",
    "BudgetTier",
    "CircleShape",
    "CompassSide",
    "ConcreteAssembly",
    "ConcreteMix",
    "DeckAssembly",
    "ElevationShape",
    "FootingGeometry",
    "FootingShape",
    "FootingType",
    "LShape",
    "LayoutResult",
    "MixResult",
    "NotchedShape",
    "PavingAssembly",
    "PavingType",
    "PerimeterEdge",
    "QuarterCircleShape",
    "RectangleShape",
    "SemicircleShape",
    "ShapeGeometry",
    "ShapeKind",
    "ShapeSpec",
    "Side",
    "SkillTier",
    "StaggerLayout",
    "StaggeredRow",
    "SubBaseMaterial",
    "SubBaseType",
    "TShape",
    "TierResolution",
    "TierSpec",
    "UShape",
    "WallAssembly",
    "WallType",
]
