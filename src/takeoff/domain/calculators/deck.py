"""Deck calculator descriptor.

Boards run along the plan (horizontal), across it (vertical) or corner to
corner (diagonal). Joists sit perpendicular to the boards in equal bays,
beams carry the joists at the post spacing, and Pro builds add staggered
noggins and an optional picture-frame border.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Any

from ..services import (
    BomAggregator,
    ceil_guarded,
    diagonal_run,
    layout_positions,
    resolve_shape,
    resolve_tier_defaults,
    stagger_layout,
)
from ..services.constants import (
    DIAGONAL_BOARD_ALLOWANCE,
    JOIST_HANGERS_PER_JOIST,
    POST_CONCRETE_BAG_YIELD_M3,
    POST_FOOTING_DEPTH_M,
    POST_FOOTING_RADIUS_M,
    SCREWS_PER_BOX,
    SCREWS_PER_JOIST_CROSSING,
)
from ..value_objects import (
    BoardDirection,
    BomRow,
    BomSection,
    CompassSide,
    DeckAssembly,
    LayoutResult,
    MixResult,
    PerimeterEdge,
    ShapeGeometry,
    ShapeSpec,
    StaggerLayout,
    TierResolution,
    TierSpec,
)
from .context import CalculationContext
from .registry import calculator_registry
from .results import Layout

logger = logging.getLogger(__name__)

_INNER_SIDES = (CompassSide.NOTCH, CompassSide.EXTENSION)


@dataclass(frozen=True)
class DeckAxes:
    """How the boards and joists sit on the plan.

    Attributes:
        board_across: Distance the boards are spread across, in mm.
        board_length: Length of each board, in mm.
        joist_run: Distance the joists are spread along, in mm.
        joist_length: Length of each joist, in mm.
    """

    board_across: float
    board_length: float
    joist_run: float
    joist_length: float


def deck_axes(geometry: ShapeGeometry, direction: BoardDirection) -> DeckAxes:
    """Work out board and joist axes for a board direction."""
    span, run = geometry.principal_span, geometry.principal_run
    if direction == BoardDirection.VERTICAL:
        return DeckAxes(board_across=run, board_length=span, joist_run=span, joist_length=run)
    if direction == BoardDirection.DIAGONAL:
        diagonal = diagonal_run(span, run)
        return DeckAxes(
            board_across=diagonal, board_length=diagonal, joist_run=run, joist_length=span
        )
    return DeckAxes(board_across=span, board_length=run, joist_run=run, joist_length=span)


def raw_board_count(across: float, pitch: float, direction: BoardDirection) -> int:
    """Boards before waste; diagonal layouts carry the trim allowance."""
    if pitch <= 0 or across <= 0:
        return 0
    if direction == BoardDirection.DIAGONAL:
        return ceil_guarded(across / pitch * DIAGONAL_BOARD_ALLOWANCE)
    return ceil_guarded(across / pitch)


def _group_edges(edges: Collection[PerimeterEdge]) -> list[tuple[int, int, list[str]]]:
    """Group edges by rounded length as ``(length, qty, sides)``.

    Groups keep the order their first edge appears in.
    """
    groups: dict[int, tuple[int, list[str]]] = {}
    for edge in edges:
        length = int(round(edge.length))
        qty, sides = groups.get(length, (0, []))
        if edge.side.value not in sides:
            sides = sides + [edge.side.value]
        groups[length] = (qty + 1, sides)
    return [(length, qty, sides) for length, (qty, sides) in groups.items()]


def _mm(value: float) -> str:
    return f"{value:.0f}mm" if value < 1000 else f"{value / 1000:.2f}m"


@calculator_registry.register("deck")
class DeckDescriptor:
    """Boards, joists, beams, posts, noggins, fascia and fixings."""

    def resolve_geometry(self, shape: ShapeSpec) -> ShapeGeometry | None:
        if shape.kind.is_circular:
            logger.debug(f"Deck does not support {shape.kind.value} plans")
            return None
        return resolve_shape(shape)

    def resolve_tier(
        self,
        assembly: DeckAssembly,
        geometry: ShapeGeometry,
        tier: TierSpec,
        supplied: Collection[str],
    ) -> TierResolution:
        axes = deck_axes(geometry, assembly.board_direction)
        return resolve_tier_defaults(
            "deck",
            tier,
            assembly.post_height,
            supplied=supplied,
            context={"joist_run": axes.joist_length},
        )

    def layouts(self, context: CalculationContext[DeckAssembly]) -> dict[str, Layout]:
        deck = context.assembly
        axes = deck_axes(context.geometry, deck.board_direction)
        has_border = deck.border_board and not context.is_diy

        joists = layout_positions(
            axes.joist_run,
            deck.joist_spacing,
            inset_from_ends=deck.board_pitch if has_border else 0.0,
        )
        beams = layout_positions(axes.joist_length, deck.post_spacing)
        layouts: dict[str, Layout] = {"joists": joists, "beams": beams}

        if not context.is_diy:
            layouts["posts"] = layout_positions(axes.joist_run, deck.post_spacing)
            if deck.noggin_spacing > 0:
                layouts["noggins"] = stagger_layout(
                    joists, beams.actual_spacing, deck.noggin_spacing
                )
        return layouts

    def mixes(self, context: CalculationContext[DeckAssembly]) -> dict[str, MixResult]:
        return {}

    def post_count(
        self, context: CalculationContext[DeckAssembly], layouts: Mapping[str, Layout]
    ) -> int:
        """Posts under all beams.

        DIY decks post every other joist plus one along each beam; Pro decks
        post each beam at the post spacing.
        """
        joists = layouts["joists"]
        beams = layouts["beams"]
        assert isinstance(joists, LayoutResult) and isinstance(beams, LayoutResult)
        if context.is_diy:
            return beams.count * (math.ceil(joists.count / 2) + 1)
        posts = layouts["posts"]
        assert isinstance(posts, LayoutResult)
        return posts.count * beams.count

    def noggin_count(self, layouts: Mapping[str, Layout]) -> int:
        """Noggins across one beam bay, repeated for every beam bay."""
        noggins = layouts.get("noggins")
        if not isinstance(noggins, StaggerLayout):
            return 0
        beams = layouts["beams"]
        assert isinstance(beams, LayoutResult)
        return noggins.count * max(beams.count - 1, 1)

    def border_edges(self, context: CalculationContext[DeckAssembly]) -> list[PerimeterEdge]:
        """Perimeter edges that get a border board row."""
        deck = context.assembly
        excluded: set[str] = set()
        if deck.exclude_border_at_building and not context.is_diy:
            excluded = {side.lower() for side in deck.building_sides}
        return [
            edge
            for edge in context.geometry.edges
            if edge.side in _INNER_SIDES or edge.side.value not in excluded
        ]

    def sections(
        self,
        context: CalculationContext[DeckAssembly],
        layouts: Mapping[str, Layout],
        mixes: Mapping[str, MixResult],
    ) -> list[BomSection | None]:
        deck = context.assembly
        agg: BomAggregator = context.aggregator
        axes = deck_axes(context.geometry, deck.board_direction)
        joists = layouts["joists"]
        beams = layouts["beams"]
        assert isinstance(joists, LayoutResult) and isinstance(beams, LayoutResult)
        has_border = deck.border_board and not context.is_diy

        board_size = f"{deck.board_width:g}×{deck.board_thickness:g}mm"
        joist_size = f"{deck.joist_depth:g}×{deck.joist_thickness:g}mm"

        boards = agg.count(
            raw_board_count(axes.board_across, deck.board_pitch, deck.board_direction)
        )
        lineal_m = round(boards * axes.board_length / 1000, 2)
        board_rows: list[BomRow | None] = [
            BomRow(
                item=f"Decking board {board_size}",
                quantity=boards,
                unit="no.",
                note=f"{lineal_m}m total lineal",
                length_mm=round(axes.board_length),
                category="decking-board",
            )
        ]
        if has_border:
            for length, qty, sides in _group_edges(self.border_edges(context)):
                board_rows.append(
                    BomRow(
                        item=f"Border board {board_size}",
                        quantity=qty,
                        unit="no.",
                        note=f"Border: {', '.join(sides)}",
                        length_mm=length,
                        category="decking-board",
                    )
                )

        noggins = self.noggin_count(layouts)
        noggin_length = max(joists.widest_bay - deck.joist_thickness, 0.0)
        joist_note = "incl. border joists" if has_border else f"@ {joists.actual_spacing:.0f}mm c/c"
        joist_rows = [
            BomRow(
                item=f"Joist {joist_size}",
                quantity=joists.count,
                unit="no.",
                note=joist_note,
                length_mm=round(axes.joist_length),
            ),
            BomRow(
                item=f"Rim joist {joist_size}",
                quantity=2,
                unit="no.",
                note="perimeter",
                length_mm=round(axes.joist_run),
            ),
            BomRow(
                item=f"Noggin {joist_size}",
                quantity=noggins,
                unit="no.",
                note=f"@ {_mm(deck.noggin_spacing)} c/c staggered",
                length_mm=round(noggin_length),
            )
            if noggins
            else None,
        ]

        posts = self.post_count(context, layouts)
        framing_rows = [
            BomRow(
                item=f"Beam {deck.beam_depth:g}×{deck.beam_thickness:g}mm",
                quantity=beams.count,
                unit="no.",
                note=f"@ {beams.actual_spacing:.0f}mm c/c",
                length_mm=round(axes.joist_run),
            ),
            BomRow(
                item=f"Post {deck.post_width:g}×{deck.post_width:g}mm",
                quantity=posts,
                unit="no.",
                note="above ground height",
                length_mm=round(deck.post_height),
            ),
        ]

        fascia_rows = [
            BomRow(
                item=f"Fascia {joist_size}",
                quantity=qty,
                unit="no.",
                note=", ".join(sides),
                length_mm=length,
            )
            for length, qty, sides in _group_edges(context.geometry.edges)
        ]

        screws_per_board = (
            ceil_guarded(axes.board_length / deck.joist_spacing) * SCREWS_PER_JOIST_CROSSING
            if deck.joist_spacing > 0
            else 0
        )
        screws = boards * screws_per_board
        footing_m3 = math.pi * POST_FOOTING_RADIUS_M**2 * POST_FOOTING_DEPTH_M * posts
        hardware_rows = [
            BomRow(
                item="Joist hangers (single)",
                quantity=joists.count * JOIST_HANGERS_PER_JOIST,
                unit="no.",
            ),
            BomRow(item="Post bases / spikes", quantity=posts, unit="no."),
            BomRow(item="Rim joist brackets", quantity=(joists.count + 1) * 2, unit="no."),
            BomRow(
                item=f"Decking screws (≈{screws})",
                quantity=agg.count(screws / SCREWS_PER_BOX, waste=False),
                unit=f"boxes ×{SCREWS_PER_BOX}",
            ),
            BomRow(
                item="Concrete (post footings)",
                quantity=agg.count(footing_m3 / POST_CONCRETE_BAG_YIELD_M3, waste=False),
                unit="bags ×20kg",
            ),
        ]

        return [
            agg.section("DECKING BOARDS", "boards", board_rows),
            agg.section("JOISTS & RIM JOISTS", "joists", joist_rows),
            agg.section("BEAMS & POSTS", "beams", framing_rows),
            agg.section("FASCIA & TRIM", "fascia", fascia_rows),
            agg.section("FIXINGS & HARDWARE", "hardware", hardware_rows),
        ]

    def totals(
        self, context: CalculationContext[DeckAssembly], sections: list[BomSection]
    ) -> tuple[BomRow, ...]:
        # Only border builds have more than one board row to total
        return BomAggregator.grand_totals(
            sections, {"decking-board": "Total decking boards"}
        )

    def summary(
        self,
        context: CalculationContext[DeckAssembly],
        layouts: Mapping[str, Layout],
        sections: list[BomSection],
    ) -> dict[str, Any]:
        deck = context.assembly
        axes = deck_axes(context.geometry, deck.board_direction)
        joists = layouts["joists"]
        beams = layouts["beams"]
        assert isinstance(joists, LayoutResult) and isinstance(beams, LayoutResult)
        boards = context.aggregator.count(
            raw_board_count(axes.board_across, deck.board_pitch, deck.board_direction)
        )
        return {
            "area_m2": round(context.geometry.area_m2, 2),
            "boards": boards,
            "board_length_mm": round(axes.board_length),
            "board_pitch_mm": deck.board_pitch,
            "lineal_m": round(boards * axes.board_length / 1000, 2),
            "joists": joists.count,
            "joist_spacing_mm": round(joists.actual_spacing, 1),
            "beams": beams.count,
            "beam_spacing_mm": round(beams.actual_spacing, 1),
            "posts": self.post_count(context, layouts),
            "noggins": self.noggin_count(layouts),
        }
