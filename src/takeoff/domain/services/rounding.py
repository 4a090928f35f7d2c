"""Rounding helpers shared by the layout and BOM services."""

from __future__ import annotations

import math

# Decimal places to snap to before rounding up, so 10 × 1.1 is 11 not 12
_GUARD_PLACES = 9


def ceil_guarded(value: float) -> int:
    """Round up to a whole number, ignoring float noise below 1e-9."""
    return math.ceil(round(value, _GUARD_PLACES))


def ceil_to_step(value: float, step: float) -> float:
    """Round ``value`` up to the next multiple of ``step``.

    Used for loose tonnage (step 0.01 t). Applying it twice gives the same
    result.
    """
    if step <= 0:
        return value
    steps = ceil_guarded(value / step)
    # Re-rounding the product keeps 0.07 from becoming 0.07000000000000001
    places = max(0, -math.floor(math.log10(step))) + 2
    return round(steps * step, places)


def floor_guarded(value: float) -> int:
    """Round down to a whole number, ignoring float noise below 1e-9."""
    return math.floor(round(value, _GUARD_PLACES))
