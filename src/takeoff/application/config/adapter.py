"""Adapter to convert calculator configuration to domain objects.

The configuration models speak form input; the domain speaks frozen
dataclasses in millimetres. These functions translate one to the other and
work out which structural fields the user actually entered, which the Pro
tier needs to decide what to fill with defaults.
"""

from __future__ import annotations

from takeoff.application.config.schemas import (
    CalculatorConfig,
    ConcreteConfig,
    DeckConfig,
    PavingConfig,
    ShapeConfig,
    WallConfig,
)
from takeoff.domain.services.tier_resolver import STRUCTURAL_FIELDS
from takeoff.domain.value_objects import (
    CircleShape,
    ConcreteAssembly,
    DeckAssembly,
    ElevationShape,
    FootingShape,
    LShape,
    PavingAssembly,
    QuarterCircleShape,
    RectangleShape,
    SemicircleShape,
    ShapeKind,
    ShapeSpec,
    TierSpec,
    TShape,
    UShape,
    WallAssembly,
)


def config_to_shape(config: ShapeConfig) -> ShapeSpec:
    """Build the plan shape named by ``config.shape``.

    Only the fields relevant to the shape family are read; cutout values on
    a rectangle, for instance, are ignored.

    Example:
        >>> config = DeckConfig(shape="l-shape", width=5000, length=4000, cutW=2000, cutL=1500)
        >>> config_to_shape(config)
        LShape(width=5000.0, length=4000.0, cutout_width=2000.0, ...)
    """
    kind = config.shape
    if kind.is_circular:
        circular = {
            ShapeKind.CIRCLE: CircleShape,
            ShapeKind.SEMICIRCLE: SemicircleShape,
            ShapeKind.QUARTER_CIRCLE: QuarterCircleShape,
        }[kind]
        return circular(radius=config.radius)

    if kind in (ShapeKind.L_SHAPE, ShapeKind.U_SHAPE):
        notched = LShape if kind == ShapeKind.L_SHAPE else UShape
        return notched(
            width=config.width,
            length=config.length,
            cutout_width=config.cutout_width,
            cutout_length=config.cutout_length,
            cutout_side=config.cutout_side,
            cutout_offset=config.cutout_offset,
        )

    if kind == ShapeKind.T_SHAPE:
        return TShape(
            width=config.width,
            length=config.length,
            extension_width=config.extension_width,
            extension_length=config.extension_length,
            extension_side=config.extension_side,
            extension_offset=config.extension_offset,
        )

    return RectangleShape(width=config.width, length=config.length)


def config_to_elevation(config: WallConfig) -> ElevationShape:
    return ElevationShape(length=config.wall_length, height=config.wall_height)


def config_to_footing(config: ConcreteConfig) -> FootingShape:
    return FootingShape(
        footing_type=config.footing_type,
        width=config.width,
        length=config.length,
        depth=config.depth,
        diameter=config.diameter,
        quantity=max(int(config.quantity), 1),
    )


def config_to_deck_assembly(config: DeckConfig) -> DeckAssembly:
    return DeckAssembly(
        board_width=config.board_width,
        board_thickness=config.board_thickness,
        board_gap=config.board_gap,
        joist_depth=config.joist_depth,
        joist_thickness=config.joist_thickness,
        joist_spacing=config.joist_spacing,
        beam_depth=config.beam_depth,
        beam_thickness=config.beam_thickness,
        post_width=config.post_width,
        post_height=config.post_height,
        post_spacing=config.post_spacing,
        noggin_spacing=config.noggin_spacing,
        board_direction=config.board_direction,
        border_board=config.border_board,
        exclude_border_at_building=config.exclude_border_at_building,
        building_sides=config.building_sides,
    )


def config_to_paving_assembly(config: PavingConfig) -> PavingAssembly:
    return PavingAssembly(
        paving_type=config.paving_type,
        slab_width=config.slab_width,
        slab_length=config.slab_length,
        slab_thickness=config.slab_thickness,
        joint_width=config.joint_width,
        bed_depth=config.bed_depth,
        mix_ratio=config.mix_ratio,
        subbase_depth=config.subbase_depth,
        subbase_type=config.subbase_type,
    )


def config_to_wall_assembly(config: WallConfig) -> WallAssembly:
    return WallAssembly(
        wall_type=config.wall_type,
        foundation_depth=config.foundation_depth,
        foundation_width=config.foundation_width,
        gravel_depth=config.gravel_depth,
        gravel_width=config.gravel_width,
        mortar_ratio=config.mortar_ratio,
        add_coping=config.add_coping,
        coping_overhang=config.coping_overhang,
    )


def config_to_concrete_assembly(config: ConcreteConfig) -> ConcreteAssembly:
    return ConcreteAssembly(
        mix=config.mix,
        aggregate_type=config.aggregate_type,
        include_rebar=config.include_rebar,
        rebar_size=config.rebar_size,
        rebar_spacing=config.rebar_spacing,
        include_formwork=config.include_formwork,
    )


def config_to_tier(config: CalculatorConfig) -> TierSpec:
    return config.tier.to_spec()


def supplied_fields(config: CalculatorConfig, calculator: str) -> frozenset[str]:
    """Structural fields the user entered a usable value for.

    A field counts as supplied when it was present in the input and is
    neither blank nor zero. Blank numeric input parses to 0, so a cleared
    field is treated the same as one never typed.

    Args:
        config: Validated calculator configuration.
        calculator: Calculator name, selecting the structural field list.

    Returns:
        Names of the supplied structural fields.
    """
    supplied: set[str] = set()
    for name in STRUCTURAL_FIELDS.get(calculator, ()):
        if name not in config.model_fields_set:
            continue
        value = getattr(config, name)
        if isinstance(value, str):
            if value.strip():
                supplied.add(name)
        elif value:
            supplied.add(name)
    return frozenset(supplied)
