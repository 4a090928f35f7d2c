"""Engineering constants for the takeoff engine.

This module provides:
- Material densities and packaging sizes
- Block profiles per wall type and sub-base materials
- Mix ratio presets
- Concrete strength classes, reinforcement and formwork rules
- Layout and hardware multipliers
"""

from __future__ import annotations

from takeoff.domain.value_objects import (
    AggregateType,
    BlockProfile,
    ConcreteMix,
    SubBaseMaterial,
    SubBaseType,
    WallType,
)


# --- Densities (kg/m³) ---

SAND_DENSITY = 1600.0  # sharp / building sand
CEMENT_DENSITY = 1440.0
AGGREGATE_DENSITY = 1800.0  # 20mm gravel / ballast

# --- Packaging ---

BAG_KG = 25.0
BULK_BAG_M3 = 0.85
POST_CONCRETE_BAG_YIELD_M3 = 0.012  # one 20kg bag of post mix
SCREWS_PER_BOX = 200

# Loose dry aggregate occupies more volume than the compacted wet mix
DEFAULT_BULKING_FACTOR = 1.5

DEFAULT_WASTE_PCT = 10.0

# --- Layout ---

# Positions closer than this collapse into one member
POSITION_TOLERANCE_MM = 0.5

# Bays narrower than this get no secondary members
MIN_STAGGER_BAY_MM = 10.0

# DIY beam spacing ceiling and the fallback for an empty span
DIY_BEAM_SPACING_CEILING_MM = 1800.0
DIY_DEFAULT_BEAM_SPACING_MM = 1500.0

DIY_BOARD_GAP_MM = 5.0

# Extra boards to cover trim loss when laying on the diagonal
DIAGONAL_BOARD_ALLOWANCE = 1.15

# Post height above which DIY posts step up to the wider section
POST_HEIGHT_THRESHOLD_MM = 500.0
WIDE_POST_SECTION_MM = 100.0
NARROW_POST_SECTION_MM = 75.0

# --- Deck hardware ---

JOIST_HANGERS_PER_JOIST = 2
SCREWS_PER_JOIST_CROSSING = 2
POST_FOOTING_RADIUS_M = 0.2
POST_FOOTING_DEPTH_M = 0.6  # minimum footing depth below ground

# --- Masonry ---

MORTAR_JOINT_MM = 10.0
BLOCKWORK_MORTAR_M3_PER_M2 = 0.03
BRICKWORK_MORTAR_M3_PER_M2 = 0.04
BRICK_SKIN_MM = 102.5
CAVITY_MM = 10.0
WALL_TIES_PER_M2 = 4.4
COPING_STONE_LENGTH_MM = 600.0
DPC_OVERLAP_M = 1

FOUNDATION_MIX = "1:2:4"
FOUNDATION_MIX_NAMES = ("cement", "sand", "gravel")

# --- Paving ---

MEMBRANE_OVERLAP = 1.1

# --- Concrete footings ---

# Aggregate volume per m³ of placed concrete
AGGREGATE_PER_M3_CONCRETE = 0.95
COARSE_GRAVEL_DENSITY = 1850.0
WATER_CEMENT_RATIO = 0.5  # litres per kg of cement

DEFAULT_CONCRETE_MIX = "c20"

CONCRETE_MIXES: dict[str, ConcreteMix] = {
    "c10": ConcreteMix("C10", 10, 160, "Light duty / blinding"),
    "c15": ConcreteMix("C15", 8, 200, "Floor blinding / bedding"),
    "c20": ConcreteMix("C20", 6, 260, "General purpose / footings"),
    "c25": ConcreteMix("C25", 5, 320, "Structural / driveways"),
    "c30": ConcreteMix("C30", 4, 380, "Heavy structural"),
    "c35": ConcreteMix("C35", 3.5, 420, "Reinforced foundations"),
}

# Aggregate split as a ratio over named parts
AGGREGATE_SPLITS: dict[AggregateType, tuple[str, tuple[str, ...]]] = {
    AggregateType.ALL_IN: ("1", ("ballast",)),
    AggregateType.SEPARATE: ("2:1", ("gravel", "sand")),
}

# Rebar mass per metre by bar diameter (mm)
REBAR_KG_PER_M: dict[float, float] = {
    8: 0.395,
    10: 0.617,
    12: 0.888,
    16: 1.58,
    20: 2.47,
}
DEFAULT_REBAR_SIZE_MM = 12
REBAR_END_COVER_MM = 50.0  # each end of every bar
TIE_WIRE_KG_PER_CROSSING = 0.005

# Shuttering boards: the narrow board up to its own width, otherwise the wide one
FORMWORK_NARROW_BOARD_MM = 150.0
FORMWORK_WIDE_BOARD_MM = 225.0
FORMWORK_STAKE_SPACING_MM = 600.0

BLOCK_PROFILES: dict[WallType, BlockProfile] = {
    WallType.SOLID_FLAT: BlockProfile(
        name="Solid Dense Block 440×215×100mm (laid flat)",
        length=440,
        height=100,
        width=215,
        blocks_per_m2=10,
    ),
    WallType.SOLID_EDGE: BlockProfile(
        name="Solid Dense Block 440×215×100mm (on edge)",
        length=440,
        height=215,
        width=100,
        blocks_per_m2=10,
    ),
    WallType.SOLID_DOUBLE: BlockProfile(
        name="Solid Dense Block 440×215×100mm ×2 (on edge)",
        length=440,
        height=215,
        width=100,
        blocks_per_m2=20,
    ),
    WallType.HOLLOW: BlockProfile(
        name="Hollow Block 440×215×215mm",
        length=440,
        height=215,
        width=215,
        blocks_per_m2=10,
    ),
    WallType.BRICK_BLOCK: BlockProfile(
        name="Block 440×215×100mm (on edge) + Brick face",
        length=440,
        height=215,
        width=100,
        blocks_per_m2=10,
        bricks_per_m2=60,
        brick_name="Facing Brick 215×102.5×65mm",
    ),
}

SUBBASE_MATERIALS: dict[SubBaseType, SubBaseMaterial] = {
    SubBaseType.TYPE1: SubBaseMaterial("MOT Type 1", 2.1, "Crushed limestone/granite"),
    SubBaseType.SCALPINGS: SubBaseMaterial("Scalpings", 1.8, "Quarry waste material"),
    SubBaseType.HARDCORE: SubBaseMaterial("Hardcore", 1.9, "Recycled crushed rubble"),
}

# Trade bedding presets are quoted sand:cement; stored here as cement:sand
PAVING_MIX_PRESETS: dict[str, str] = {
    "4:1": "1:4",  # standard patio laying
    "3:1": "1:3",  # heavy traffic or large slabs
    "5:1": "1:5",  # bedding for blocks
    "6:1": "1:6",  # brushing mix for block joints
}


def wall_thickness(wall_type: WallType) -> float:
    """Overall wall thickness in mm for a wall type."""
    profile = BLOCK_PROFILES[wall_type]
    if wall_type == WallType.SOLID_DOUBLE:
        return profile.width * 2 + CAVITY_MM
    if wall_type == WallType.BRICK_BLOCK:
        return profile.width + BRICK_SKIN_MM + CAVITY_MM
    return profile.width
