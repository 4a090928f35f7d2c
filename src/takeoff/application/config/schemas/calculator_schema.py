"""Per-calculator configuration schemas.

Defaults match the values a fresh calculator form starts with. Every model
accepts both snake_case and camelCase keys plus the short names older form
states used (``boardThick``, ``boardDir``, ``slabThick``...).
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from takeoff.application.config.schemas.base import (
    FormModel,
    Lenient,
    ShapeConfig,
    TierConfig,
    normalise_choice,
)
from takeoff.domain.services.constants import DEFAULT_WASTE_PCT
from takeoff.domain.value_objects import (
    AggregateType,
    BoardDirection,
    CompassSide,
    ConcreteAssembly,
    DeckAssembly,
    FootingType,
    PavingAssembly,
    PavingType,
    SubBaseType,
    WallAssembly,
    WallType,
)

_DECK = DeckAssembly()
_PAVING = PavingAssembly()
_WALL = WallAssembly()
_CONCRETE = ConcreteAssembly()

_BUILDING_SIDES = frozenset(
    side.value
    for side in (CompassSide.NORTH, CompassSide.EAST, CompassSide.SOUTH, CompassSide.WEST)
)

# Single-letter spellings used by older form states
_SIDE_LETTERS = {"n": "north", "e": "east", "s": "south", "w": "west"}


class CalculatorConfig(FormModel):
    """Fields every calculator shares: waste allowance and tier."""

    waste: Lenient = Field(
        default=DEFAULT_WASTE_PCT,
        validation_alias=AliasChoices("waste", "waste_pct", "wastePct"),
    )
    tier: TierConfig = Field(default_factory=TierConfig)

    @model_validator(mode="before")
    @classmethod
    def lift_tier_fields(cls, data: Any) -> Any:
        """Accept ``userMode``/``specTier`` at the top level of a form state."""
        if not isinstance(data, dict) or "tier" in data:
            return data
        tier = {
            key: data[key]
            for key in ("userMode", "specTier", "skill_tier", "budget_tier")
            if key in data
        }
        if tier:
            data = {**data, "tier": tier}
        return data


class DeckConfig(CalculatorConfig, ShapeConfig):
    """Deck calculator configuration.

    Attributes:
        board_width: Decking board width in mm.
        board_thickness: Decking board thickness in mm.
        board_gap: Gap between boards in mm.
        joist_depth: Joist depth in mm.
        joist_thickness: Joist thickness in mm.
        joist_spacing: Maximum joist centres in mm.
        beam_depth: Beam depth in mm.
        beam_thickness: Beam thickness in mm.
        post_width: Square post section in mm.
        post_height: Post height above ground in mm.
        post_spacing: Beam/post centres in mm.
        noggin_spacing: Noggin pitch in mm.
        board_direction: horizontal, vertical or diagonal.
        border_board: Picture-frame border (Pro only).
        building_sides: Sides of the deck against a building.
        exclude_border_at_building: Leave the border off building sides.
    """

    board_width: Lenient = _DECK.board_width
    board_thickness: Lenient = Field(
        default=_DECK.board_thickness,
        validation_alias=AliasChoices("board_thickness", "boardThickness", "boardThick"),
    )
    board_gap: Lenient = _DECK.board_gap
    joist_depth: Lenient = _DECK.joist_depth
    joist_thickness: Lenient = Field(
        default=_DECK.joist_thickness,
        validation_alias=AliasChoices("joist_thickness", "joistThickness", "joistThick"),
    )
    joist_spacing: Lenient = _DECK.joist_spacing
    beam_depth: Lenient = _DECK.beam_depth
    beam_thickness: Lenient = Field(
        default=_DECK.beam_thickness,
        validation_alias=AliasChoices("beam_thickness", "beamThickness", "beamThick"),
    )
    post_width: Lenient = _DECK.post_width
    post_height: Lenient = _DECK.post_height
    post_spacing: Lenient = _DECK.post_spacing
    noggin_spacing: Lenient = _DECK.noggin_spacing
    board_direction: BoardDirection = Field(
        default=_DECK.board_direction,
        validation_alias=AliasChoices("board_direction", "boardDirection", "boardDir"),
    )
    border_board: bool = _DECK.border_board
    building_sides: tuple[str, ...] = ()
    exclude_border_at_building: bool = _DECK.exclude_border_at_building

    @model_validator(mode="before")
    @classmethod
    def flatten_extras(cls, data: Any) -> Any:
        """Lift an ``extras`` block (border and building options) to the top level."""
        if isinstance(data, dict) and isinstance(data.get("extras"), dict):
            data = {**data["extras"], **{k: v for k, v in data.items() if k != "extras"}}
        return data

    @field_validator("building_sides", mode="before")
    @classmethod
    def parse_building_sides(cls, value: Any) -> tuple[str, ...]:
        """Keep the recognised compass sides, in order, without repeats."""
        if value is None:
            return ()
        if isinstance(value, str):
            items = value.split(",")
        elif isinstance(value, (list, tuple, set, frozenset)):
            items = list(value)
        else:
            raise ValueError("building sides must be a list or comma-separated text")
        sides: list[str] = []
        for item in items:
            side = normalise_choice(item)
            side = _SIDE_LETTERS.get(side, side)
            if side in _BUILDING_SIDES and side not in sides:
                sides.append(side)
        return tuple(sides)


class PavingConfig(CalculatorConfig, ShapeConfig):
    """Paving calculator configuration.

    Attributes:
        paving_type: slabs, blocks or natural.
        slab_width: Unit width in mm.
        slab_length: Unit length in mm.
        slab_thickness: Unit thickness in mm.
        joint_width: Joint width in mm.
        bed_depth: Mortar bed depth in mm.
        mix_ratio: Bedding mix preset (``4:1``) or cement:sand ratio.
        subbase_depth: Sub-base depth in mm.
        subbase_type: type1, scalpings or hardcore.
    """

    paving_type: PavingType = _PAVING.paving_type
    slab_width: Lenient = _PAVING.slab_width
    slab_length: Lenient = _PAVING.slab_length
    slab_thickness: Lenient = Field(
        default=_PAVING.slab_thickness,
        validation_alias=AliasChoices("slab_thickness", "slabThickness", "slabThick"),
    )
    joint_width: Lenient = Field(
        default=_PAVING.joint_width,
        validation_alias=AliasChoices("joint_width", "jointWidth", "jointW"),
    )
    bed_depth: Lenient = _PAVING.bed_depth
    mix_ratio: str = _PAVING.mix_ratio
    subbase_depth: Lenient = _PAVING.subbase_depth
    subbase_type: SubBaseType = _PAVING.subbase_type


class WallConfig(CalculatorConfig):
    """Retaining wall calculator configuration.

    Attributes:
        wall_type: Block construction.
        wall_length: Wall length in mm.
        wall_height: Wall height in mm.
        foundation_depth: Strip foundation depth in mm.
        foundation_width: Strip foundation width in mm.
        gravel_depth: Drainage gravel depth in mm.
        gravel_width: Drainage gravel width in mm.
        mortar_ratio: Cement:sand ratio, e.g. ``1:4``.
        add_coping: Fit coping stones.
        coping_overhang: Coping overhang each side in mm.
    """

    wall_type: WallType = _WALL.wall_type
    wall_length: Lenient = Field(
        default=0.0, validation_alias=AliasChoices("wall_length", "wallLength", "length")
    )
    wall_height: Lenient = Field(
        default=0.0, validation_alias=AliasChoices("wall_height", "wallHeight", "height")
    )
    foundation_depth: Lenient = _WALL.foundation_depth
    foundation_width: Lenient = _WALL.foundation_width
    gravel_depth: Lenient = _WALL.gravel_depth
    gravel_width: Lenient = _WALL.gravel_width
    mortar_ratio: str = _WALL.mortar_ratio
    add_coping: bool = _WALL.add_coping
    coping_overhang: Lenient = _WALL.coping_overhang


class ConcreteConfig(CalculatorConfig):
    """Concrete footing calculator configuration.

    Attributes:
        footing_type: pad, strip or posthole.
        quantity: Number of identical footings; blank or 0 counts as 1.
        width: Footing width in mm (pad and strip).
        length: Footing length in mm (pad and strip).
        depth: Concrete depth in mm.
        diameter: Hole diameter in mm (post hole).
        mix: Strength class (``c20``) or ballast:cement ratio (``6:1``).
        aggregate_type: all-in ballast or separate sand and gravel.
        include_rebar: Reinforcing mesh (Pro only).
        rebar_size: Bar diameter in mm.
        rebar_spacing: Bar centres in mm.
        include_formwork: Timber shuttering (Pro only).
    """

    footing_type: FootingType = FootingType.PAD
    quantity: Lenient = 1.0
    width: Lenient = 0.0
    length: Lenient = 0.0
    depth: Lenient = 0.0
    diameter: Lenient = 0.0
    mix: str = Field(
        default=_CONCRETE.mix,
        validation_alias=AliasChoices("mix", "mix_ratio", "mixRatio"),
    )
    aggregate_type: AggregateType = _CONCRETE.aggregate_type
    include_rebar: bool = _CONCRETE.include_rebar
    rebar_size: Lenient = _CONCRETE.rebar_size
    rebar_spacing: Lenient = _CONCRETE.rebar_spacing
    include_formwork: bool = _CONCRETE.include_formwork


CONFIG_MODELS: dict[str, type[CalculatorConfig]] = {
    "deck": DeckConfig,
    "paving": PavingConfig,
    "wall": WallConfig,
    "concrete": ConcreteConfig,
}
