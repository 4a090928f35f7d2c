"""Plan shape value objects.

Shapes are a tagged union of frozen dataclasses. Every shape carries its
``kind`` discriminator and reports the required dimensions it is missing,
so callers can show "enter dimensions" instead of computing a nonsensical
area. All lengths are in millimetres.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class ShapeKind(str, Enum):
    """Plan shape families supported by the calculators."""

    RECTANGLE = "rectangle"
    L_SHAPE = "l-shape"
    T_SHAPE = "t-shape"
    U_SHAPE = "u-shape"
    CIRCLE = "circle"
    SEMICIRCLE = "semicircle"
    QUARTER_CIRCLE = "quarter-circle"

    @property
    def is_circular(self) -> bool:
        """True for the radius-driven shapes."""
        return self in (
            ShapeKind.CIRCLE,
            ShapeKind.SEMICIRCLE,
            ShapeKind.QUARTER_CIRCLE,
        )


class Side(str, Enum):
    """Horizontal side a cutout or extension is measured from."""

    LEFT = "left"
    RIGHT = "right"


class CompassSide(str, Enum):
    """Perimeter edge orientation in plan.

    North and south edges run along the plan width, east and west along the
    plan length. ``NOTCH`` and ``EXTENSION`` mark the inner edges created by
    a cutout or an added lobe.
    """

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NOTCH = "notch"
    EXTENSION = "extension"


@dataclass(frozen=True)
class RectangleShape:
    """Plain rectangular plan."""

    width: float
    length: float

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    def missing_dimensions(self) -> list[str]:
        missing: list[str] = []
        if self.width <= 0:
            missing.append("width")
        if self.length <= 0:
            missing.append("length")
        return missing


@dataclass(frozen=True)
class NotchedShape:
    """Rectangle with a rectangular notch cut from its north edge.

    Attributes:
        width: Bounding width in mm.
        length: Bounding length in mm.
        cutout_width: Notch width in mm (0 means no notch).
        cutout_length: Notch depth in mm.
        cutout_side: Side the offset is measured from.
        cutout_offset: Distance from that side to the notch in mm.
    """

    width: float
    length: float
    cutout_width: float = 0.0
    cutout_length: float = 0.0
    cutout_side: Side = Side.RIGHT
    cutout_offset: float = 0.0

    kind: ClassVar[ShapeKind] = ShapeKind.L_SHAPE

    def missing_dimensions(self) -> list[str]:
        missing: list[str] = []
        if self.width <= 0:
            missing.append("width")
        if self.length <= 0:
            missing.append("length")
        return missing

    @property
    def cutout_area(self) -> float:
        """Notch area in mm², clamped to the bounding rectangle."""
        cw = min(max(self.cutout_width, 0.0), max(self.width, 0.0))
        cl = min(max(self.cutout_length, 0.0), max(self.length, 0.0))
        return cw * cl


@dataclass(frozen=True)
class LShape(NotchedShape):
    """L-shaped plan: a corner (or offset) notch removed from a rectangle."""

    kind: ClassVar[ShapeKind] = ShapeKind.L_SHAPE


@dataclass(frozen=True)
class UShape(NotchedShape):
    """U-shaped plan.

    Area uses the same single rectangular subtraction as the L-shape; the
    difference between the two is in how the notch is drawn.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.U_SHAPE


@dataclass(frozen=True)
class TShape:
    """Rectangle with an added lobe on its south edge.

    Attributes:
        width: Main body width in mm.
        length: Main body length in mm.
        extension_width: Lobe width in mm.
        extension_length: Lobe depth in mm, added to the run length.
        extension_side: Side the offset is measured from.
        extension_offset: Distance from that side to the lobe in mm.
    """

    width: float
    length: float
    extension_width: float = 0.0
    extension_length: float = 0.0
    extension_side: Side = Side.LEFT
    extension_offset: float = 0.0

    kind: ClassVar[ShapeKind] = ShapeKind.T_SHAPE

    def missing_dimensions(self) -> list[str]:
        missing: list[str] = []
        if self.width <= 0:
            missing.append("width")
        if self.length <= 0:
            missing.append("length")
        return missing

    @property
    def extension_area(self) -> float:
        """Lobe area in mm². The lobe is never wider than the body."""
        ew = min(max(self.extension_width, 0.0), max(self.width, 0.0))
        el = max(self.extension_length, 0.0)
        return ew * el


@dataclass(frozen=True)
class CircleShape:
    """Full circle described by its radius."""

    radius: float

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    def missing_dimensions(self) -> list[str]:
        return ["radius"] if self.radius <= 0 else []


@dataclass(frozen=True)
class SemicircleShape(CircleShape):
    """Half circle; the straight edge lies on the south side."""

    kind: ClassVar[ShapeKind] = ShapeKind.SEMICIRCLE


@dataclass(frozen=True)
class QuarterCircleShape(CircleShape):
    """Quarter circle; the two straight edges lie south and west."""

    kind: ClassVar[ShapeKind] = ShapeKind.QUARTER_CIRCLE


@dataclass(frozen=True)
class ElevationShape:
    """Vertical face of a straight wall.

    Attributes:
        length: Wall length along the ground in mm.
        height: Wall height above the foundation in mm.
    """

    length: float
    height: float

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    def missing_dimensions(self) -> list[str]:
        missing: list[str] = []
        if self.length <= 0:
            missing.append("length")
        if self.height <= 0:
            missing.append("height")
        return missing


class FootingType(str, Enum):
    """Concrete footing form."""

    PAD = "pad"
    STRIP = "strip"
    POSTHOLE = "posthole"


@dataclass(frozen=True)
class FootingShape:
    """One or more identical concrete footings.

    Pad and strip footings are dug ``width × length``; post holes are round
    and only read the diameter. All lengths are in millimetres.

    Attributes:
        footing_type: Pad, strip or post hole.
        width: Footing width (pad and strip).
        length: Footing length (pad and strip).
        depth: Depth of concrete.
        diameter: Hole diameter (post hole).
        quantity: Number of identical footings, at least 1.
    """

    footing_type: FootingType = FootingType.PAD
    width: float = 0.0
    length: float = 0.0
    depth: float = 0.0
    diameter: float = 0.0
    quantity: int = 1

    @property
    def kind(self) -> ShapeKind:
        if self.is_round:
            return ShapeKind.CIRCLE
        return ShapeKind.RECTANGLE

    @property
    def is_round(self) -> bool:
        return self.footing_type == FootingType.POSTHOLE

    def missing_dimensions(self) -> list[str]:
        required = ("diameter", "depth") if self.is_round else ("width", "length", "depth")
        return [name for name in required if getattr(self, name) <= 0]

    @property
    def footprint_mm2(self) -> float:
        """Plan area of a single footing in mm²."""
        if self.is_round:
            return math.pi * (self.diameter / 2) ** 2
        return self.width * self.length


ShapeSpec = Union[
    RectangleShape,
    LShape,
    UShape,
    TShape,
    CircleShape,
    SemicircleShape,
    QuarterCircleShape,
]


@dataclass(frozen=True)
class PerimeterEdge:
    """One straight run of the plan outline.

    Attributes:
        side: Which way the edge faces, or whether it belongs to a notch or
            extension.
        length: Edge length in mm.
    """

    side: CompassSide
    length: float


@dataclass(frozen=True)
class ShapeGeometry:
    """Resolved plan geometry.

    Attributes:
        kind: Shape family the geometry was resolved from.
        area_mm2: Plan area in mm².
        principal_span: Span across the plan in mm (the width axis).
        principal_run: Run along the plan in mm, including any extension.
        bounding_width: Width of the bounding box in mm.
        bounding_length: Length of the bounding box in mm.
        edges: Straight perimeter edges, ordered north, east, south, west,
            then inner edges. Curved outlines contribute no edges.
        arc_length: Length of any curved perimeter in mm.
    """

    kind: ShapeKind
    area_mm2: float
    principal_span: float
    principal_run: float
    bounding_width: float
    bounding_length: float
    edges: tuple[PerimeterEdge, ...] = ()
    arc_length: float = 0.0

    @property
    def area_m2(self) -> float:
        """Plan area in m²."""
        return self.area_mm2 / 1e6

    @property
    def perimeter(self) -> float:
        """Total outline length in mm."""
        return sum(edge.length for edge in self.edges) + self.arc_length

    def edges_facing(self, side: CompassSide) -> tuple[PerimeterEdge, ...]:
        """Return the edges on one side of the outline."""
        return tuple(edge for edge in self.edges if edge.side == side)


@dataclass(frozen=True)
class FootingGeometry(ShapeGeometry):
    """Resolved geometry of a set of identical footings.

    ``area_mm2`` covers every footing, while the span, run and outline
    describe a single one.

    Attributes:
        footing_type: Pad, strip or post hole.
        depth: Depth of concrete in mm.
        quantity: Number of footings.
    """

    footing_type: FootingType = FootingType.PAD
    depth: float = 0.0
    quantity: int = 1

    @property
    def volume_m3(self) -> float:
        """Concrete volume of all footings in m³, before waste."""
        return self.area_mm2 * self.depth / 1e9

    @property
    def volume_per_footing_m3(self) -> float:
        return self.volume_m3 / max(self.quantity, 1)
