"""Per-calculator assembly specifications.

Every numeric field is in millimetres unless its name says otherwise. The
defaults are the values a fresh calculator form starts with; they are also
what the Pro tier falls back to for fields the user left blank.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BoardDirection(str, Enum):
    """How decking boards are laid relative to the plan."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class PavingType(str, Enum):
    SLABS = "slabs"
    BLOCKS = "blocks"
    NATURAL = "natural"


class SubBaseType(str, Enum):
    TYPE1 = "type1"
    SCALPINGS = "scalpings"
    HARDCORE = "hardcore"


class WallType(str, Enum):
    """Retaining wall construction."""

    SOLID_FLAT = "solid-flat"
    SOLID_EDGE = "solid-edge"
    SOLID_DOUBLE = "solid-double"
    HOLLOW = "hollow"
    BRICK_BLOCK = "brick-block"


class AggregateType(str, Enum):
    """How the concrete aggregate is bought."""

    ALL_IN = "all-in"
    SEPARATE = "separate"


@dataclass(frozen=True)
class BlockProfile:
    """Block dimensions and coverage for one wall type.

    Attributes:
        name: Description printed on the materials list.
        length: Block length in mm.
        height: Course height of the block in mm (without the joint).
        width: Block thickness through the wall in mm.
        blocks_per_m2: Blocks needed per m² of wall face.
        bricks_per_m2: Facing bricks per m², 0 when there is no brick skin.
        brick_name: Description of the facing brick.
    """

    name: str
    length: float
    height: float
    width: float
    blocks_per_m2: float
    bricks_per_m2: float = 0.0
    brick_name: str = ""

    @property
    def has_brick_face(self) -> bool:
        return self.bricks_per_m2 > 0


@dataclass(frozen=True)
class SubBaseMaterial:
    """Compacted sub-base material."""

    label: str
    density_t_per_m3: float
    description: str = ""


@dataclass(frozen=True)
class DeckAssembly:
    """Decking structure.

    Attributes:
        board_width: Decking board face width.
        board_thickness: Decking board thickness.
        board_gap: Gap between boards.
        joist_depth: Joist depth.
        joist_thickness: Joist thickness.
        joist_spacing: Maximum joist centres.
        beam_depth: Beam depth.
        beam_thickness: Beam thickness.
        post_width: Square post section.
        post_height: Post height above ground.
        post_spacing: Beam/post centres (Pro input; DIY derives it).
        noggin_spacing: Noggin pitch within a joist bay.
        board_direction: Board orientation.
        border_board: Picture-frame border around the deck (Pro only).
        exclude_border_at_building: Drop border runs on building sides.
        building_sides: Sides of the deck that abut a building.
    """

    board_width: float = 150.0
    board_thickness: float = 28.0
    board_gap: float = 5.0
    joist_depth: float = 200.0
    joist_thickness: float = 50.0
    joist_spacing: float = 400.0
    beam_depth: float = 200.0
    beam_thickness: float = 75.0
    post_width: float = 100.0
    post_height: float = 200.0
    post_spacing: float = 1800.0
    noggin_spacing: float = 1200.0
    board_direction: BoardDirection = BoardDirection.HORIZONTAL
    border_board: bool = False
    exclude_border_at_building: bool = False
    building_sides: tuple[str, ...] = ()

    @property
    def board_pitch(self) -> float:
        """Centre-to-centre distance between boards."""
        return self.board_width + self.board_gap


@dataclass(frozen=True)
class PavingAssembly:
    """Paving build-up.

    Attributes:
        paving_type: Slabs, block paving or natural stone.
        slab_width: Unit width.
        slab_length: Unit length.
        slab_thickness: Unit thickness.
        joint_width: Joint between units.
        bed_depth: Mortar bed depth.
        mix_ratio: Bedding mix, e.g. ``"4:1"`` (sand:cement preset) or
            ``"1:5"`` (cement:sand).
        subbase_depth: Compacted sub-base depth.
        subbase_type: Sub-base material.
    """

    paving_type: PavingType = PavingType.SLABS
    slab_width: float = 600.0
    slab_length: float = 600.0
    slab_thickness: float = 35.0
    joint_width: float = 10.0
    bed_depth: float = 30.0
    mix_ratio: str = "4:1"
    subbase_depth: float = 100.0
    subbase_type: SubBaseType = SubBaseType.TYPE1


@dataclass(frozen=True)
class WallAssembly:
    """Retaining wall cross-section.

    Attributes:
        wall_type: Block construction.
        foundation_depth: Strip foundation depth.
        foundation_width: Strip foundation width.
        gravel_depth: Drainage gravel depth behind the wall.
        gravel_width: Drainage gravel width behind the wall.
        mortar_ratio: Cement:sand, e.g. ``"1:4"``.
        add_coping: Whether coping stones are fitted.
        coping_overhang: Coping overhang on each face.
    """

    wall_type: WallType = WallType.SOLID_FLAT
    foundation_depth: float = 200.0
    foundation_width: float = 400.0
    gravel_depth: float = 150.0
    gravel_width: float = 300.0
    mortar_ratio: str = "1:4"
    add_coping: bool = True
    coping_overhang: float = 40.0


@dataclass(frozen=True)
class ConcreteMix:
    """A concrete strength class and what it takes per m³.

    Attributes:
        strength: Strength class, e.g. ``"C20"``.
        ballast_parts: Parts of aggregate per part of cement.
        cement_kg_per_m3: Cement content of one m³ of concrete.
        description: Typical use.
    """

    strength: str
    ballast_parts: float
    cement_kg_per_m3: float
    description: str = ""

    @property
    def label(self) -> str:
        """Ballast:cement ratio, e.g. ``"6:1"``."""
        return f"{self.ballast_parts:g}:1"


@dataclass(frozen=True)
class ConcreteAssembly:
    """Concrete footing specification.

    Attributes:
        mix: Strength class key (``"c20"``) or its ``"6:1"`` ratio.
        aggregate_type: All-in ballast or separate sand and gravel.
        include_rebar: Reinforcing mesh in pad and strip footings (Pro only).
        rebar_size: Bar diameter.
        rebar_spacing: Bar centres in both directions.
        include_formwork: Timber shuttering round pad and strip footings
            (Pro only).
    """

    mix: str = "c20"
    aggregate_type: AggregateType = AggregateType.ALL_IN
    include_rebar: bool = False
    rebar_size: float = 12.0
    rebar_spacing: float = 150.0
    include_formwork: bool = False
