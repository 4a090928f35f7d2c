"""Unit tests for plan shape geometry resolution.

These tests verify:
- Areas for every shape family, including cutouts and extensions
- Principal span and run, with a T extension lengthening the run
- Perimeter edges follow the notch and extension placement
- Missing dimensions yield None instead of a geometry
"""

import math

import pytest

from takeoff.domain.services import diagonal_run, resolve_shape
from takeoff.domain.value_objects import (
    CircleShape,
    CompassSide,
    LShape,
    QuarterCircleShape,
    RectangleShape,
    SemicircleShape,
    ShapeKind,
    Side,
    TShape,
    UShape,
)


class TestRectangle:
    """Tests for plain rectangular plans."""

    def test_area_span_and_run(self) -> None:
        geometry = resolve_shape(RectangleShape(width=4800, length=3600))

        assert geometry is not None
        assert geometry.kind == ShapeKind.RECTANGLE
        assert geometry.area_m2 == pytest.approx(17.28)
        assert geometry.principal_span == 4800
        assert geometry.principal_run == 3600

    def test_edges_run_north_east_south_west(self) -> None:
        geometry = resolve_shape(RectangleShape(width=4800, length=3600))

        assert geometry is not None
        assert [(e.side, e.length) for e in geometry.edges] == [
            (CompassSide.NORTH, 4800),
            (CompassSide.EAST, 3600),
            (CompassSide.SOUTH, 4800),
            (CompassSide.WEST, 3600),
        ]
        assert geometry.perimeter == pytest.approx(16800)

    @pytest.mark.parametrize(
        "width,length",
        [(0, 3600), (4800, 0), (-100, 3600), (0, 0)],
    )
    def test_missing_dimension_returns_none(self, width: float, length: float) -> None:
        assert resolve_shape(RectangleShape(width=width, length=length)) is None

    def test_missing_dimensions_names_the_blank_fields(self) -> None:
        assert RectangleShape(width=0, length=0).missing_dimensions() == ["width", "length"]
        assert RectangleShape(width=4800, length=0).missing_dimensions() == ["length"]


class TestNotchedShapes:
    """Tests for L and U shapes."""

    def test_l_shape_area_subtracts_cutout(self) -> None:
        geometry = resolve_shape(
            LShape(width=5000, length=4000, cutout_width=2000, cutout_length=1500)
        )

        assert geometry is not None
        assert geometry.kind == ShapeKind.L_SHAPE
        assert geometry.area_m2 == pytest.approx(17.0)
        assert geometry.principal_span == 5000
        assert geometry.principal_run == 4000

    def test_u_shape_uses_the_same_single_subtraction(self) -> None:
        l_shape = resolve_shape(
            LShape(width=5000, length=4000, cutout_width=2000, cutout_length=1500)
        )
        u_shape = resolve_shape(
            UShape(
                width=5000,
                length=4000,
                cutout_width=2000,
                cutout_length=1500,
                cutout_side=Side.LEFT,
                cutout_offset=1500,
            )
        )

        assert l_shape is not None and u_shape is not None
        assert u_shape.kind == ShapeKind.U_SHAPE
        assert u_shape.area_mm2 == l_shape.area_mm2

    def test_corner_notch_edges(self) -> None:
        geometry = resolve_shape(
            LShape(
                width=5000,
                length=4000,
                cutout_width=2000,
                cutout_length=1500,
                cutout_side=Side.RIGHT,
            )
        )

        assert geometry is not None
        assert [e.length for e in geometry.edges_facing(CompassSide.NORTH)] == [3000]
        assert [e.length for e in geometry.edges_facing(CompassSide.EAST)] == [2500]
        assert [e.length for e in geometry.edges_facing(CompassSide.NOTCH)] == [1500, 2000]
        # A corner notch keeps the bounding perimeter
        assert geometry.perimeter == pytest.approx(18000)

    def test_centred_notch_adds_two_inner_returns(self) -> None:
        geometry = resolve_shape(
            UShape(
                width=5000,
                length=4000,
                cutout_width=2000,
                cutout_length=1500,
                cutout_side=Side.LEFT,
                cutout_offset=1500,
            )
        )

        assert geometry is not None
        assert [e.length for e in geometry.edges_facing(CompassSide.NORTH)] == [1500, 1500]
        assert [e.length for e in geometry.edges_facing(CompassSide.NOTCH)] == [
            1500,
            2000,
            1500,
        ]
        assert geometry.perimeter == pytest.approx(21000)

    def test_side_and_offset_do_not_change_area(self) -> None:
        areas = {
            resolve_shape(
                LShape(
                    width=5000,
                    length=4000,
                    cutout_width=2000,
                    cutout_length=1500,
                    cutout_side=side,
                    cutout_offset=offset,
                )
            ).area_mm2  # type: ignore[union-attr]
            for side in (Side.LEFT, Side.RIGHT)
            for offset in (0, 500, 2500, 9000)
        }
        assert areas == {17_000_000}

    def test_zero_cutout_is_a_rectangle(self) -> None:
        geometry = resolve_shape(LShape(width=5000, length=4000))

        assert geometry is not None
        assert geometry.area_m2 == pytest.approx(20.0)
        assert len(geometry.edges) == 4

    def test_cutout_covering_plan_returns_none(self) -> None:
        shape = LShape(width=4000, length=3000, cutout_width=4000, cutout_length=3000)
        assert resolve_shape(shape) is None


class TestTShape:
    """Tests for T shapes with an extension lobe."""

    def test_area_adds_extension_and_run_grows(self) -> None:
        geometry = resolve_shape(
            TShape(
                width=4000,
                length=3000,
                extension_width=2000,
                extension_length=1000,
                extension_side=Side.LEFT,
                extension_offset=1000,
            )
        )

        assert geometry is not None
        assert geometry.area_m2 == pytest.approx(14.0)
        assert geometry.principal_span == 4000
        assert geometry.principal_run == 4000
        assert [e.length for e in geometry.edges_facing(CompassSide.SOUTH)] == [
            1000,
            2000,
            1000,
        ]
        assert [e.length for e in geometry.edges_facing(CompassSide.EXTENSION)] == [
            1000,
            1000,
        ]
        assert geometry.perimeter == pytest.approx(16000)

    def test_run_unchanged_without_a_lobe(self) -> None:
        geometry = resolve_shape(
            TShape(width=4000, length=3000, extension_width=2000, extension_length=0)
        )

        assert geometry is not None
        assert geometry.principal_run == 3000
        assert geometry.area_m2 == pytest.approx(12.0)

    def test_extension_wider_than_body_is_clamped(self) -> None:
        geometry = resolve_shape(
            TShape(width=4000, length=3000, extension_width=6000, extension_length=1000)
        )

        assert geometry is not None
        assert geometry.area_mm2 == 4000 * 3000 + 4000 * 1000


class TestCircularShapes:
    """Tests for circle, semicircle and quarter circle."""

    def test_circle_area_rounds_to_12_57(self) -> None:
        geometry = resolve_shape(CircleShape(radius=2000))

        assert geometry is not None
        assert round(geometry.area_m2, 2) == 12.57
        assert geometry.edges == ()
        assert geometry.perimeter == pytest.approx(2 * math.pi * 2000)

    def test_semicircle(self) -> None:
        geometry = resolve_shape(SemicircleShape(radius=1000))

        assert geometry is not None
        assert geometry.area_mm2 == pytest.approx(math.pi * 1e6 / 2)
        assert geometry.principal_span == 2000
        assert geometry.principal_run == 1000
        assert [e.side for e in geometry.edges] == [CompassSide.SOUTH]

    def test_quarter_circle(self) -> None:
        geometry = resolve_shape(QuarterCircleShape(radius=2000))

        assert geometry is not None
        assert geometry.area_mm2 == pytest.approx(math.pi * 4e6 / 4)
        assert [e.side for e in geometry.edges] == [CompassSide.SOUTH, CompassSide.WEST]

    def test_zero_radius_returns_none(self) -> None:
        assert resolve_shape(CircleShape(radius=0)) is None
        assert CircleShape(radius=0).missing_dimensions() == ["radius"]


def test_diagonal_run_is_the_hypotenuse() -> None:
    assert diagonal_run(4800, 3600) == pytest.approx(6000)
