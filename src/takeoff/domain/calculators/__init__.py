"""Calculator descriptors and the shared takeoff pipeline.

This package provides:
- AssemblyDescriptor: Protocol for per-calculator pipeline steps
- CalculatorRegistry / calculator_registry: decorator-based registry
- CalculationContext: inputs handed to descriptors after tier resolution
- BomResult: the takeoff result (DeckBom, PavingBom, WallBom, ConcreteBom)
- run_takeoff: the generic pipeline

Importing the package registers the deck, paving, wall and concrete
calculators.
"""

from .context import CalculationContext
from .protocol import AssemblyDescriptor
from .registry import CalculatorRegistry, calculator_registry
from .results import BomResult, ConcreteBom, DeckBom, Layout, PavingBom, WallBom

# Descriptor modules register themselves on import
from .deck import DeckAxes, DeckDescriptor, deck_axes, raw_board_count
from .paving import PavingDescriptor, bedding_ratio
from .wall import WallDescriptor, mortar_volume
from .concrete import ConcreteDescriptor, aggregate_ratio, concrete_mix
from .pipeline import run_takeoff

__all__ = [
    "AssemblyDescriptor",
    "BomResult",
    "CalculationContext",
    "CalculatorRegistry",
    "ConcreteBom",
    "ConcreteDescriptor",
    "DeckAxes",
    "DeckBom",
    "DeckDescriptor",
    "Layout",
    "PavingBom",
    "PavingDescriptor",
    "WallBom",
    "WallDescriptor",
    "aggregate_ratio",
    "bedding_ratio",
    "calculator_registry",
    "concrete_mix",
    "deck_axes",
    "mortar_volume",
    "raw_board_count",
    "run_takeoff",
]
