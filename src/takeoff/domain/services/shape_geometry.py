"""Plan shape geometry resolution.

This module turns a ShapeSpec into plan area, the principal span and run
used for member layout, and the straight perimeter edges that border boards
and fascia follow.

Coordinate convention: x runs across the plan width (west to east), y runs
along the plan length (south to north). L and U notches are cut from the
north edge; a T extension hangs off the south edge.
"""

from __future__ import annotations

import logging
import math

from takeoff.domain.value_objects import (
    CompassSide,
    NotchedShape,
    PerimeterEdge,
    ShapeGeometry,
    ShapeKind,
    ShapeSpec,
    Side,
    TShape,
)

from .constants import DIAGONAL_BOARD_ALLOWANCE

__all__ = [
    "DIAGONAL_BOARD_ALLOWANCE",
    "diagonal_run",
    "resolve_shape",
]

logger = logging.getLogger(__name__)

_EDGE_TOLERANCE = 1e-9


def resolve_shape(spec: ShapeSpec) -> ShapeGeometry | None:
    """Resolve plan area, span, run and perimeter for a shape.

    Args:
        spec: Any member of the ShapeSpec union.

    Returns:
        The resolved geometry, or None when a required dimension is missing
        or the shape has no area left (a cutout covering the whole plan).

    Example:
        >>> geometry = resolve_shape(RectangleShape(width=4800, length=3600))
        >>> geometry.area_m2
        17.28
    """
    missing = spec.missing_dimensions()
    if missing:
        logger.debug(f"Insufficient input for {spec.kind.value}: {', '.join(missing)}")
        return None

    kind = spec.kind
    if kind == ShapeKind.RECTANGLE:
        geometry = _rectangle(spec.width, spec.length)  # type: ignore[union-attr]
    elif kind in (ShapeKind.L_SHAPE, ShapeKind.U_SHAPE):
        geometry = _notched(spec)  # type: ignore[arg-type]
    elif kind == ShapeKind.T_SHAPE:
        geometry = _extended(spec)  # type: ignore[arg-type]
    else:
        geometry = _circular(kind, spec.radius)  # type: ignore[union-attr]

    if geometry.area_mm2 <= 0:
        logger.debug(f"{kind.value} has no remaining area after cutout")
        return None
    return geometry


def diagonal_run(span: float, run: float) -> float:
    """Board length when laying corner to corner across a span × run plan."""
    return math.hypot(span, run)


def _edges(*pairs: tuple[CompassSide, float]) -> tuple[PerimeterEdge, ...]:
    """Build perimeter edges, dropping zero-length runs."""
    return tuple(
        PerimeterEdge(side=side, length=length)
        for side, length in pairs
        if length > _EDGE_TOLERANCE
    )


def _rectangle(width: float, length: float) -> ShapeGeometry:
    return ShapeGeometry(
        kind=ShapeKind.RECTANGLE,
        area_mm2=width * length,
        principal_span=width,
        principal_run=length,
        bounding_width=width,
        bounding_length=length,
        edges=_edges(
            (CompassSide.NORTH, width),
            (CompassSide.EAST, length),
            (CompassSide.SOUTH, width),
            (CompassSide.WEST, length),
        ),
    )


def _placement(
    total: float, part: float, side: Side, offset: float
) -> float:
    """Left edge of a part measured from ``side`` by ``offset``, kept on the plan."""
    offset = max(offset, 0.0)
    x0 = offset if side == Side.LEFT else total - part - offset
    return min(max(x0, 0.0), total - part)


def _notched(spec: NotchedShape) -> ShapeGeometry:
    """L and U shapes: bounding rectangle minus one notch.

    The side and offset move the notch along the north edge. They never
    change the area, only which edges the outline is made of.
    """
    W, L = spec.width, spec.length
    cw = min(max(spec.cutout_width, 0.0), W)
    cl = min(max(spec.cutout_length, 0.0), L)
    area = W * L - spec.cutout_area

    if cw <= 0 or cl <= 0:
        rect = _rectangle(W, L)
        return ShapeGeometry(
            kind=spec.kind,
            area_mm2=rect.area_mm2,
            principal_span=W,
            principal_run=L,
            bounding_width=W,
            bounding_length=L,
            edges=rect.edges,
        )

    x0 = _placement(W, cw, spec.cutout_side, spec.cutout_offset)
    x1 = x0 + cw
    touches_west = x0 <= _EDGE_TOLERANCE
    touches_east = x1 >= W - _EDGE_TOLERANCE
    through = cl >= L - _EDGE_TOLERANCE

    edges = _edges(
        (CompassSide.NORTH, x0),
        (CompassSide.NORTH, W - x1),
        (CompassSide.EAST, L - cl if touches_east else L),
        (CompassSide.SOUTH, W - cw if through else W),
        (CompassSide.WEST, L - cl if touches_west else L),
        (CompassSide.NOTCH, 0.0 if touches_west else cl),
        (CompassSide.NOTCH, 0.0 if through else cw),
        (CompassSide.NOTCH, 0.0 if touches_east else cl),
    )
    return ShapeGeometry(
        kind=spec.kind,
        area_mm2=area,
        principal_span=W,
        principal_run=L,
        bounding_width=W,
        bounding_length=L,
        edges=edges,
    )


def _extended(spec: TShape) -> ShapeGeometry:
    """T shape: body plus a lobe; the run grows by the lobe depth.

    The extended run assumes the lobe lines up with the board direction.
    """
    W, L = spec.width, spec.length
    ew = min(max(spec.extension_width, 0.0), W)
    el = max(spec.extension_length, 0.0)

    if ew <= 0 or el <= 0:
        rect = _rectangle(W, L)
        return ShapeGeometry(
            kind=ShapeKind.T_SHAPE,
            area_mm2=rect.area_mm2,
            principal_span=W,
            principal_run=L,
            bounding_width=W,
            bounding_length=L,
            edges=rect.edges,
        )

    x0 = _placement(W, ew, spec.extension_side, spec.extension_offset)
    x1 = x0 + ew
    touches_west = x0 <= _EDGE_TOLERANCE
    touches_east = x1 >= W - _EDGE_TOLERANCE

    edges = _edges(
        (CompassSide.NORTH, W),
        (CompassSide.EAST, L + el if touches_east else L),
        (CompassSide.SOUTH, x0),
        (CompassSide.SOUTH, ew),
        (CompassSide.SOUTH, W - x1),
        (CompassSide.WEST, L + el if touches_west else L),
        (CompassSide.EXTENSION, 0.0 if touches_west else el),
        (CompassSide.EXTENSION, 0.0 if touches_east else el),
    )
    return ShapeGeometry(
        kind=ShapeKind.T_SHAPE,
        area_mm2=W * L + spec.extension_area,
        principal_span=W,
        principal_run=L + el,
        bounding_width=W,
        bounding_length=L + el,
        edges=edges,
    )


def _circular(kind: ShapeKind, radius: float) -> ShapeGeometry:
    r = radius
    full = math.pi * r * r
    if kind == ShapeKind.CIRCLE:
        return ShapeGeometry(
            kind=kind,
            area_mm2=full,
            principal_span=2 * r,
            principal_run=2 * r,
            bounding_width=2 * r,
            bounding_length=2 * r,
            arc_length=2 * math.pi * r,
        )
    if kind == ShapeKind.SEMICIRCLE:
        return ShapeGeometry(
            kind=kind,
            area_mm2=full / 2,
            principal_span=2 * r,
            principal_run=r,
            bounding_width=2 * r,
            bounding_length=r,
            edges=_edges((CompassSide.SOUTH, 2 * r)),
            arc_length=math.pi * r,
        )
    return ShapeGeometry(
        kind=kind,
        area_mm2=full / 4,
        principal_span=r,
        principal_run=r,
        bounding_width=r,
        bounding_length=r,
        edges=_edges((CompassSide.SOUTH, r), (CompassSide.WEST, r)),
        arc_length=math.pi * r / 2,
    )
