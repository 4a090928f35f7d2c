"""Application layer - configuration and calculator entry points."""

from .engine import (
    available_calculators,
    calculate,
    calculate_concrete,
    calculate_deck,
    calculate_paving,
    calculate_wall,
    missing_dimensions,
)

__all__ = [
    "available_calculators",
    "calculate",
    "calculate_concrete",
    "calculate_deck",
    "calculate_paving",
    "calculate_wall",
    "missing_dimensions",
]
