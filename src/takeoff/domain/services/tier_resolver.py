"""Skill and budget tier resolution.

DIY users get structural fields derived from a small decision table and
locked against editing; professionals keep every field editable and only
fall back to calculator defaults for fields they left blank.

The post section width is a separate height rule: posts taller than 500 mm
use the wider section. It is evaluated on its own and is not part of the
tier table; the Full tier then applies its 100 mm floor.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Collection, Mapping
from typing import Any, Callable

from takeoff.domain.value_objects import (
    AggregateType,
    BudgetTier,
    ConcreteAssembly,
    DeckAssembly,
    PavingAssembly,
    TierResolution,
    TierSpec,
    WallAssembly,
    WallType,
)

from .constants import (
    DIY_BEAM_SPACING_CEILING_MM,
    DIY_BOARD_GAP_MM,
    NARROW_POST_SECTION_MM,
    POST_HEIGHT_THRESHOLD_MM,
    WIDE_POST_SECTION_MM,
    wall_thickness,
)
from .spacing_layout import equal_bay_spacing

__all__ = [
    "STRUCTURAL_FIELDS",
    "post_width_for_height",
    "resolve_tier_defaults",
]

logger = logging.getLogger(__name__)

# Fields a tier may derive, per calculator
STRUCTURAL_FIELDS: dict[str, tuple[str, ...]] = {
    "deck": (
        "board_gap",
        "joist_depth",
        "joist_thickness",
        "joist_spacing",
        "beam_depth",
        "beam_thickness",
        "post_width",
        "post_spacing",
        "noggin_spacing",
    ),
    "paving": ("mix_ratio", "bed_depth", "subbase_depth"),
    "wall": (
        "foundation_depth",
        "foundation_width",
        "gravel_depth",
        "gravel_width",
        "mortar_ratio",
        "coping_overhang",
    ),
    "concrete": ("mix", "aggregate_type", "rebar_size", "rebar_spacing"),
}

_ASSEMBLIES: dict[str, type] = {
    "deck": DeckAssembly,
    "paving": PavingAssembly,
    "wall": WallAssembly,
    "concrete": ConcreteAssembly,
}

# Primary height used when a DIY wall has none yet
_DEFAULT_WALL_HEIGHT_MM = 600.0


def post_width_for_height(post_height: float) -> float:
    """Post section width from the post height alone."""
    if post_height > POST_HEIGHT_THRESHOLD_MM:
        return WIDE_POST_SECTION_MM
    return NARROW_POST_SECTION_MM


def _mm(value: float) -> str:
    return f"{value:g}mm"


def _defaults(calculator: str) -> dict[str, Any]:
    return {
        f.name: f.default
        for f in dataclasses.fields(_ASSEMBLIES[calculator])
        if f.default is not dataclasses.MISSING
    }


def _deck_diy(
    budget: BudgetTier, height: float, context: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, str]]:
    if budget == BudgetTier.BUDGET:
        member_depth, joist_spacing = 100.0, 600.0
    else:
        member_depth, joist_spacing = 150.0, 400.0

    post_width = post_width_for_height(height)
    if budget == BudgetTier.FULL:
        post_width = max(post_width, WIDE_POST_SECTION_MM)

    joist_run = float(context.get("joist_run", 0) or 0)
    post_spacing = equal_bay_spacing(joist_run, DIY_BEAM_SPACING_CEILING_MM)

    derived = {
        "board_gap": DIY_BOARD_GAP_MM,
        "joist_depth": member_depth,
        "joist_thickness": 50.0,
        "joist_spacing": joist_spacing,
        "beam_depth": member_depth,
        "beam_thickness": 50.0,
        "post_width": post_width,
        "post_spacing": post_spacing,
    }
    if height > POST_HEIGHT_THRESHOLD_MM:
        post_hint = f"Auto: {_mm(post_width)} (h>{_mm(POST_HEIGHT_THRESHOLD_MM)})"
    else:
        post_hint = f"Auto: {_mm(post_width)}"
    hints = {
        "board_gap": f"Auto: {_mm(DIY_BOARD_GAP_MM)}",
        "joist_depth": f"Auto: {_mm(member_depth)}",
        "joist_thickness": "Auto: 50mm",
        "joist_spacing": f"Auto: {_mm(joist_spacing)} ({budget.value})",
        "beam_depth": f"Auto: {_mm(member_depth)}",
        "beam_thickness": "Auto: 50mm",
        "post_width": post_hint,
        "post_spacing": (
            f"Auto: {post_spacing:.0f}mm (equal bays ≤{_mm(DIY_BEAM_SPACING_CEILING_MM)})"
        ),
    }
    return derived, hints


def _paving_diy(
    budget: BudgetTier, height: float, context: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, str]]:
    if budget == BudgetTier.BUDGET:
        derived = {"mix_ratio": "1:6", "bed_depth": 30.0, "subbase_depth": 100.0}
    else:
        derived = {"mix_ratio": "1:4", "bed_depth": 40.0, "subbase_depth": 150.0}
    hints = {
        "mix_ratio": f"Auto: {derived['mix_ratio']} ({budget.value})",
        "bed_depth": f"Auto: {_mm(derived['bed_depth'])}",
        "subbase_depth": f"Auto: {_mm(derived['subbase_depth'])}",
    }
    return derived, hints


def _wall_diy(
    budget: BudgetTier, height: float, context: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, str]]:
    height = height if height > 0 else _DEFAULT_WALL_HEIGHT_MM
    wall_type = WallType(context.get("wall_type", WallType.SOLID_FLAT))
    depth = max(150.0, round(height * 0.25 / 50) * 50.0)
    width = wall_thickness(wall_type) + 200

    if budget == BudgetTier.BUDGET:
        derived = {
            "foundation_depth": depth,
            "foundation_width": width,
            "gravel_depth": 150.0,
            "gravel_width": 300.0,
            "mortar_ratio": "1:6",
            "coping_overhang": 25.0,
        }
    else:
        derived = {
            "foundation_depth": max(depth, 200.0),
            "foundation_width": width + 100,
            "gravel_depth": 200.0,
            "gravel_width": 400.0,
            "mortar_ratio": "1:4",
            "coping_overhang": 40.0,
        }
    hints = {
        "foundation_depth": f"Auto: {_mm(derived['foundation_depth'])} (25% of height, min 150mm)",
        "foundation_width": f"Auto: {_mm(derived['foundation_width'])} (wall + margin)",
        "gravel_depth": f"Auto: {_mm(derived['gravel_depth'])}",
        "gravel_width": f"Auto: {_mm(derived['gravel_width'])}",
        "mortar_ratio": f"Auto: {derived['mortar_ratio']} ({budget.value})",
        "coping_overhang": f"Auto: {_mm(derived['coping_overhang'])}",
    }
    return derived, hints


def _concrete_diy(
    budget: BudgetTier, height: float, context: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, str]]:
    # Reinforcement and shuttering stay Pro-only whatever the budget
    if budget == BudgetTier.BUDGET:
        mix, rebar_size, rebar_spacing = "c20", 10.0, 200.0
    else:
        mix, rebar_size, rebar_spacing = "c25", 12.0, 150.0
    derived = {
        "mix": mix,
        "aggregate_type": AggregateType.ALL_IN,
        "include_rebar": False,
        "rebar_size": rebar_size,
        "rebar_spacing": rebar_spacing,
        "include_formwork": False,
    }
    hints = {
        "mix": f"Auto: {mix.upper()} ({budget.value})",
        "aggregate_type": "Auto: all-in ballast",
        "include_rebar": "Pro only",
        "rebar_size": f"Auto: {_mm(rebar_size)}",
        "rebar_spacing": f"Auto: {_mm(rebar_spacing)}",
        "include_formwork": "Pro only",
    }
    return derived, hints


_DIY_TABLE: dict[
    str,
    Callable[
        [BudgetTier, float, Mapping[str, Any]],
        tuple[dict[str, Any], dict[str, str]],
    ],
] = {
    "deck": _deck_diy,
    "paving": _paving_diy,
    "wall": _wall_diy,
    "concrete": _concrete_diy,
}


def resolve_tier_defaults(
    calculator: str,
    tier: TierSpec,
    primary_height: float,
    *,
    supplied: Collection[str] = (),
    context: Mapping[str, Any] | None = None,
) -> TierResolution:
    """Derive structural defaults for a calculator under a tier.

    Args:
        calculator: ``"deck"``, ``"paving"``, ``"wall"`` or ``"concrete"``.
        tier: Skill and budget tier.
        primary_height: Post height for decks, wall height for walls.
        supplied: Field names the user entered a value for. Only used in
            Pro mode, where those fields are left alone.
        context: Extra inputs some rules need: ``joist_run`` (deck, mm) and
            ``wall_type`` (wall).

    Returns:
        The derived values, the locked field names and a hint per locked
        field.

    Raises:
        KeyError: If the calculator is unknown.
    """
    fields = STRUCTURAL_FIELDS[calculator]
    context = context or {}

    if tier.is_diy:
        derived, hints = _DIY_TABLE[calculator](tier.budget_tier, primary_height, context)
        logger.debug(
            f"{calculator}: DIY/{tier.budget_tier.value} derived {sorted(derived)}"
        )
        return TierResolution(
            derived_fields=derived,
            locked_fields=frozenset(derived),
            hints=hints,
        )

    defaults = _defaults(calculator)
    derived = {name: defaults[name] for name in fields if name not in supplied}
    if calculator == "deck" and "post_width" in derived:
        derived["post_width"] = post_width_for_height(primary_height)
    return TierResolution(derived_fields=derived)
