"""Domain services for quantity takeoff.

This package provides the engine components shared by every calculator:
- Shape geometry (area, span, run, perimeter edges)
- Spacing layout (equal bays, DIY beam spacing, staggered noggins, courses, rebar)
- Mix ratio resolution with bulking
- Bill of materials aggregation (waste, packaging, sections, grand totals)
- Skill/budget tier resolution
"""

from .bom_aggregator import BAG_UNIT, BULK_BAG_UNIT, BomAggregator
from .mix_ratio import MixRatio, resolve_mix
from .rounding import ceil_guarded, ceil_to_step, floor_guarded
from .shape_geometry import diagonal_run, resolve_shape
from .spacing_layout import (
    course_layout,
    equal_bay_spacing,
    layout_positions,
    pitch_layout,
    stagger_layout,
)
from .tier_resolver import (
    STRUCTURAL_FIELDS,
    post_width_for_height,
    resolve_tier_defaults,
)

__all__ = [
    "BAG_UNIT",
    "BULK_BAG_UNIT",
    "BomAggregator",
    "MixRatio",
    "STRUCTURAL_FIELDS",
    "ceil_guarded",
    "ceil_to_step",
    "course_layout",
    "diagonal_run",
    "equal_bay_spacing",
    "floor_guarded",
    "layout_positions",
    "pitch_layout",
    "post_width_for_height",
    "resolve_mix",
    "resolve_shape",
    "resolve_tier_defaults",
    "stagger_layout",
]
