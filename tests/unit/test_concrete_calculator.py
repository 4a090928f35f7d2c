"""Unit tests for the concrete footing calculator.

These tests verify:
- Cement, ballast and water for pad, strip and post-hole footings
- Separate sand and gravel from the aggregate split
- Pro reinforcement and formwork, skipped for post holes and DIY users
- Strength class lookup and DIY defaults
"""

import math

import pytest

from takeoff.domain.calculators import concrete_mix, run_takeoff
from takeoff.domain.services import BAG_UNIT, BULK_BAG_UNIT, STRUCTURAL_FIELDS
from takeoff.domain.value_objects import (
    AggregateType,
    BudgetTier,
    ConcreteAssembly,
    FootingShape,
    FootingType,
    ShapeKind,
    TierSpec,
)

PADS = FootingShape(FootingType.PAD, width=600, length=600, depth=250, quantity=4)
STRIP = FootingShape(FootingType.STRIP, width=600, length=10000, depth=300)
POST_HOLES = FootingShape(FootingType.POSTHOLE, diameter=300, depth=600, quantity=4)
# 1m × 1.5m pad, deep enough for two courses of wide shuttering
PAD = FootingShape(FootingType.PAD, width=1000, length=1500, depth=300)

REINFORCED = ConcreteAssembly(
    include_rebar=True, rebar_size=10, rebar_spacing=200, include_formwork=True
)


def _takeoff(shape, assembly=ConcreteAssembly(), **kwargs):
    """Run as if the user entered every assembly field."""
    return run_takeoff(
        "concrete", shape, assembly, supplied=STRUCTURAL_FIELDS["concrete"], **kwargs
    )


def _rows(result, title):
    section = result.section(title)
    assert section is not None, f"missing section {title}"
    return {row.item: row.quantity for row in section.rows}


@pytest.fixture
def pads():
    """Four 600 × 600 × 250mm pads in C20 with all-in ballast, Pro tier."""
    return _takeoff(PADS, ConcreteAssembly())


class TestPadFootings:
    """Tests for the default pad footing."""

    def test_sections(self, pads) -> None:
        assert pads.section_titles == ["CONCRETE (C20)"]
        assert pads.layouts == {}

    def test_concrete(self, pads) -> None:
        assert _rows(pads, "CONCRETE (C20)") == {
            "Cement (6:1 mix)": 5,
            "All-in ballast": 28,
            "Water": 52,
        }

    def test_ballast_tonnage_note(self, pads) -> None:
        ballast = pads.section("CONCRETE (C20)").rows[1]

        assert ballast.unit == BAG_UNIT
        assert ballast.note == "0.68t"

    def test_summary(self, pads) -> None:
        assert pads.area_m2 == 1.44
        assert pads.summary["footing_type"] == "pad"
        assert pads.summary["quantity"] == 4
        assert pads.summary["volume_per_footing_m3"] == pytest.approx(0.09)
        assert pads.summary["volume_net_m3"] == pytest.approx(0.36)
        assert pads.summary["volume_with_waste_m3"] == pytest.approx(0.396)
        assert pads.summary["cement_kg"] == 103
        assert pads.summary["strength"] == "C20"

    def test_no_grand_totals(self, pads) -> None:
        assert pads.totals == ()

    def test_more_waste_never_lowers_quantities(self) -> None:
        low = _takeoff(PADS, ConcreteAssembly(), waste_pct=5)
        high = _takeoff(PADS, ConcreteAssembly(), waste_pct=15)

        for before, after in zip(low.sections[0].rows, high.sections[0].rows):
            assert after.quantity >= before.quantity


class TestSeparateAggregate:
    """Tests for sand and gravel bought separately."""

    def test_strip_footing(self) -> None:
        assembly = ConcreteAssembly(mix="c25", aggregate_type=AggregateType.SEPARATE)

        result = _takeoff(STRIP, assembly)

        assert _rows(result, "CONCRETE (C25)") == {
            "Cement (5:1 mix)": 26,
            "Sharp sand": 41,
            "Gravel (20mm)": 93,
            "Water": 317,
        }
        assert result.mixes["aggregate"].volume_of("gravel") == pytest.approx(1.14)
        assert result.mixes["aggregate"].volume_of("sand") == pytest.approx(0.57)

    def test_large_sand_volume_comes_in_bulk_bags(self) -> None:
        long_strip = FootingShape(FootingType.STRIP, width=600, length=20000, depth=300)
        assembly = ConcreteAssembly(aggregate_type=AggregateType.SEPARATE)

        result = _takeoff(long_strip, assembly)

        sand = result.section("CONCRETE (C20)").rows[1]
        assert (sand.item, sand.quantity, sand.unit) == ("Sharp sand", 2, BULK_BAG_UNIT)


class TestPostHoles:
    """Tests for round post-hole footings."""

    def test_concrete(self) -> None:
        result = _takeoff(POST_HOLES, ConcreteAssembly())

        assert _rows(result, "CONCRETE (C20)") == {
            "Cement (6:1 mix)": 2,
            "All-in ballast": 13,
            "Water": 25,
        }
        assert result.area_m2 == 0.28
        assert result.geometry.kind == ShapeKind.CIRCLE
        assert result.geometry.perimeter == pytest.approx(math.pi * 300)

    def test_rebar_and_formwork_are_ignored(self) -> None:
        result = _takeoff(POST_HOLES, REINFORCED)

        assert result.section_titles == ["CONCRETE (C20)"]
        assert result.layouts == {}


class TestReinforcement:
    """Tests for Pro rebar and formwork on pad and strip footings."""

    def test_bar_layouts(self) -> None:
        result = _takeoff(PAD, REINFORCED)

        # Bars across the 1m width are spaced along the 1.5m length
        assert result.layouts["width_bars"].count == 8
        assert result.layouts["width_bars"].positions[-1] == 1400
        assert result.layouts["length_bars"].count == 6

    def test_rebar_rows(self) -> None:
        result = _takeoff(PAD, REINFORCED)

        assert _rows(result, "REINFORCEMENT") == {"Rebar Ø10mm": 15.6, "Tie wire": 0.24}
        rebar = result.section("REINFORCEMENT").rows[0]
        assert rebar.note == "9.63kg, 14 bars @ 200mm"

    def test_formwork_rows(self) -> None:
        result = _takeoff(PAD, REINFORCED)

        assert _rows(result, "FORMWORK") == {
            "Shuttering board 225mm": 10.0,
            "Timber stakes": 9,
        }
        assert result.section("FORMWORK").rows[0].note == "2 high, 1.50m² face"

    def test_quantity_multiplies_steel_and_shuttering(self) -> None:
        pads = FootingShape(FootingType.PAD, width=1000, length=1000, depth=300, quantity=2)
        assembly = ConcreteAssembly(include_rebar=True, include_formwork=True)

        result = _takeoff(pads, assembly)

        assert _rows(result, "REINFORCEMENT") == {"Rebar Ø12mm": 25.2, "Tie wire": 0.49}
        assert _rows(result, "FORMWORK") == {
            "Shuttering board 225mm": 16.0,
            "Timber stakes": 14,
        }

    def test_shallow_footing_uses_narrow_boards(self) -> None:
        shallow = FootingShape(FootingType.PAD, width=1000, length=1500, depth=150)

        result = _takeoff(shallow, REINFORCED)

        assert _rows(result, "FORMWORK")["Shuttering board 150mm"] == 5.0

    def test_section_order(self) -> None:
        result = _takeoff(PAD, REINFORCED)

        assert result.section_titles == ["CONCRETE (C20)", "REINFORCEMENT", "FORMWORK"]


class TestDiyConcrete:
    """Tests for the DIY tier."""

    def test_full_budget_uses_c25_without_extras(self) -> None:
        result = _takeoff(PAD, REINFORCED, tier=TierSpec.diy())

        assert result.section_titles == ["CONCRETE (C25)"]
        assert result.summary["strength"] == "C25"
        assert _rows(result, "CONCRETE (C25)")["Cement (5:1 mix)"] == 7
        assert result.resolution.is_locked("include_rebar")
        assert result.resolution.is_locked("mix")

    def test_budget_tier_uses_c20(self) -> None:
        result = run_takeoff(
            "concrete", PAD, ConcreteAssembly(mix="c35"), tier=TierSpec.diy(BudgetTier.BUDGET)
        )

        assert result.summary["strength"] == "C20"


class TestProDefaults:
    """Tests for Pro fields left blank."""

    def test_unsupplied_fields_fall_back_to_defaults(self) -> None:
        assembly = ConcreteAssembly(mix="c35", include_rebar=True, rebar_spacing=0)

        result = run_takeoff("concrete", PAD, assembly, supplied={"mix"})

        assert result.summary["strength"] == "C35"
        assert result.layouts["width_bars"].nominal_spacing == 150
        assert result.resolution.locked_fields == frozenset()


class TestInsufficientInput:
    """Footings missing a required dimension."""

    def test_post_hole_needs_diameter(self) -> None:
        shape = FootingShape(FootingType.POSTHOLE, width=600, length=600, depth=600)

        assert shape.missing_dimensions() == ["diameter"]
        assert _takeoff(shape, ConcreteAssembly()) is None

    def test_pad_needs_plan_and_depth(self) -> None:
        shape = FootingShape(FootingType.PAD, diameter=300)

        assert shape.missing_dimensions() == ["width", "length", "depth"]
        assert _takeoff(shape, ConcreteAssembly()) is None


class TestConcreteMix:
    """Tests for strength class lookup."""

    @pytest.mark.parametrize(
        "name, strength",
        [("c30", "C30"), ("C15", "C15"), ("4:1", "C30"), ("3.5:1", "C35"), ("", "C20")],
    )
    def test_lookup(self, name: str, strength: str) -> None:
        assert concrete_mix(name).strength == strength

    def test_unknown_mix_falls_back_to_general_purpose(self) -> None:
        mix = concrete_mix("rapid-set")

        assert (mix.strength, mix.cement_kg_per_m3, mix.label) == ("C20", 260, "6:1")
