"""Unit tests for the paving calculator."""

import pytest

from takeoff.domain.calculators import bedding_ratio, run_takeoff
from takeoff.domain.services import BAG_UNIT, BULK_BAG_UNIT
from takeoff.domain.value_objects import (
    BudgetTier,
    CircleShape,
    PavingAssembly,
    PavingType,
    RectangleShape,
    SubBaseType,
    TierSpec,
    TShape,
)

PATIO = RectangleShape(width=4000, length=2500)


def _quantities(result, title):
    section = result.section(title)
    assert section is not None, f"missing section {title}"
    return {row.item: (row.quantity, row.unit) for row in section.rows}


@pytest.fixture
def patio():
    return run_takeoff("paving", PATIO, PavingAssembly())


class TestBeddingRatio:
    """Tests for bedding mix presets."""

    def test_trade_presets_are_sand_first(self) -> None:
        ratio = bedding_ratio("4:1")

        assert ratio.label == "1:4"
        assert ratio.names == ("cement", "sand")

    def test_other_ratios_are_cement_first(self) -> None:
        assert bedding_ratio("1:5").label == "1:5"


class TestPatio:
    """Tests for a 4m × 2.5m patio of 600mm slabs."""

    def test_sections(self, patio) -> None:
        assert patio.section_titles == ["PAVING", "MORTAR BED", "SUB-BASE", "SUNDRIES"]

    def test_units_include_joints_and_waste(self, patio) -> None:
        assert _quantities(patio, "PAVING") == {
            "Paving slab 600×600×35mm": (30, "no.")
        }

    def test_mortar_bed(self, patio) -> None:
        assert _quantities(patio, "MORTAR BED") == {
            "Cement (1:4 mix)": (6, BAG_UNIT),
            "Sharp sand": (26, BAG_UNIT),
        }

    def test_sub_base(self, patio) -> None:
        assert _quantities(patio, "SUB-BASE") == {"MOT Type 1": (2.31, "t")}

    def test_sundries(self, patio) -> None:
        assert _quantities(patio, "SUNDRIES") == {
            "Jointing sand": (1, BAG_UNIT),
            "Weed membrane": (11, "m²"),
        }

    def test_jointing_sand_follows_ordered_units(self, patio) -> None:
        no_waste = run_takeoff("paving", PATIO, PavingAssembly(), waste_pct=0)

        # 30 units × 1200mm × 10mm × 35mm = 0.0126m³; 27 units without waste
        assert patio.section("SUNDRIES").rows[0].note == "21kg for joints"
        assert no_waste.section("SUNDRIES").rows[0].note == "19kg for joints"

    def test_no_grand_totals(self, patio) -> None:
        assert patio.totals == ()

    def test_summary(self, patio) -> None:
        assert patio.summary["area_m2"] == 10.0
        assert patio.summary["units"] == 30
        assert patio.summary["mix_ratio"] == "1:4"
        assert patio.summary["bed_volume_m3"] == 0.3

    def test_bedding_mix(self, patio) -> None:
        bedding = patio.mixes["bedding"]

        assert bedding.volume_of("cement") == pytest.approx(0.09)
        assert bedding.volume_of("sand") == pytest.approx(0.36)


class TestVariants:
    """Tests for other materials, shapes and tiers."""

    def test_circle_area(self) -> None:
        result = run_takeoff("paving", CircleShape(radius=2000), PavingAssembly())

        assert result.area_m2 == 12.57

    def test_block_pavers(self) -> None:
        result = run_takeoff(
            "paving",
            PATIO,
            PavingAssembly(
                paving_type=PavingType.BLOCKS,
                slab_width=200,
                slab_length=100,
                slab_thickness=50,
                joint_width=0,
            ),
        )

        # 500 blocks per 10m², 550 with waste
        assert _quantities(result, "PAVING") == {"Block paver 200×100×50mm": (550, "no.")}

    def test_large_bed_switches_to_bulk_bags(self) -> None:
        result = run_takeoff(
            "paving",
            RectangleShape(width=10000, length=6000),
            PavingAssembly(bed_depth=50),
            supplied={"bed_depth"},
        )

        _, unit = _quantities(result, "MORTAR BED")["Sharp sand"]
        assert unit == BULK_BAG_UNIT

    def test_sub_base_material(self) -> None:
        result = run_takeoff(
            "paving", PATIO, PavingAssembly(subbase_type=SubBaseType.SCALPINGS)
        )

        assert _quantities(result, "SUB-BASE") == {"Scalpings": (1.98, "t")}

    def test_zero_slab_size_gives_no_paving_section(self) -> None:
        result = run_takeoff("paving", PATIO, PavingAssembly(slab_width=0))

        assert result.section("PAVING") is None
        assert result.section("MORTAR BED") is not None

    def test_diy_budget_table(self) -> None:
        result = run_takeoff(
            "paving", PATIO, PavingAssembly(), tier=TierSpec.diy(BudgetTier.BUDGET)
        )

        assert result.summary["mix_ratio"] == "1:6"
        assert result.summary["bed_volume_m3"] == 0.3
        assert result.resolution.is_locked("subbase_depth")

    def test_missing_dimension(self) -> None:
        shape = RectangleShape(width=4000, length=0)
        assert run_takeoff("paving", shape, PavingAssembly()) is None


class TestTShapePaving:
    """Tests for a patio with a path lobe."""

    def test_area_and_units_include_the_lobe(self) -> None:
        plan = TShape(width=4000, length=2500, extension_width=2000, extension_length=1000)

        result = run_takeoff("paving", plan, PavingAssembly())

        assert result.area_m2 == 12.0
        assert result.summary["units"] == 36
        assert _quantities(result, "PAVING") == {"Paving slab 600×600×35mm": (36, "no.")}
        assert result.summary["bed_volume_m3"] == 0.36
