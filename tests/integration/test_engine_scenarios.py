"""End-to-end scenarios through the calculator entry points."""

import json
from pathlib import Path

import pytest

from takeoff.application import (
    available_calculators,
    calculate,
    calculate_concrete,
    calculate_deck,
    calculate_paving,
    calculate_wall,
    missing_dimensions,
)
from takeoff.application.config import DeckConfig, WallConfig

pytestmark = pytest.mark.integration


class TestFormStates:
    """Raw form states as a browser would post them."""

    def test_numbers_as_text(self) -> None:
        result = calculate_deck({"width": "4800", "length": "3600", "waste": "10"})

        assert result is not None
        assert result.summary["boards"] == 35

    def test_diy_l_shape_file(self, fixtures_dir: Path) -> None:
        data = json.loads((fixtures_dir / "deck_diy_l_shape.json").read_text(encoding="utf-8"))

        result = calculate(data["calculator"], data["config"])

        assert result is not None
        assert result.area_m2 == 17.0
        assert result.tier.is_diy
        assert result.resolution.is_locked("joist_spacing")
        assert result.resolution.derived_fields["post_width"] == 100

    def test_building_sides_as_letters(self) -> None:
        result = calculate_deck(
            {
                "width": 4800,
                "length": 3600,
                "borderBoard": True,
                "excludeBorderAtBuilding": True,
                "buildingSides": "N, E",
            }
        )

        borders = result.section("DECKING BOARDS").rows[1:]
        assert [row.note for row in borders] == ["Border: south", "Border: west"]

    def test_concrete_pads(self) -> None:
        result = calculate_concrete(
            {"footingType": "pad", "width": "600", "length": "600", "depth": 250, "quantity": 4}
        )

        assert result is not None
        assert result.summary["cement_bags"] == 5
        assert result.section_titles == ["CONCRETE (C20)"]

    def test_validated_model_is_accepted(self) -> None:
        config = WallConfig(wall_length=3000, wall_height=600)

        result = calculate_wall(config)

        assert result is not None
        assert result.calculator == "wall"

    def test_other_calculators_model_is_revalidated(self) -> None:
        result = calculate_paving(DeckConfig(width=4000, length=2500))

        assert result is not None
        assert result.area_m2 == 10.0


class TestInsufficientInput:
    """Inputs that produce no takeoff."""

    def test_malformed_tier_yields_none(self) -> None:
        assert calculate_deck({"width": 4800, "length": 3600, "tier": [1, 2]}) is None

    def test_blank_dimensions(self) -> None:
        form = {"shape": "rectangle", "width": "", "length": None}

        assert calculate_paving(form) is None
        assert missing_dimensions("paving", form) == ["width", "length"]

    def test_wall_without_height(self) -> None:
        assert calculate_wall({"wallLength": 3000}) is None
        assert missing_dimensions("wall", {"wallLength": 3000}) == ["height"]

    def test_post_hole_without_diameter(self) -> None:
        form = {"footingType": "posthole", "width": 600, "depth": 600}

        assert calculate_concrete(form) is None
        assert missing_dimensions("concrete", form) == ["diameter"]

    def test_circular_deck_has_nothing_missing(self) -> None:
        form = {"shape": "circle", "radius": 2000}

        assert calculate_deck(form) is None
        assert missing_dimensions("deck", form) == []


class TestCalculatorLookup:
    """Tests for calculator names."""

    def test_available(self) -> None:
        assert available_calculators() == ["concrete", "deck", "paving", "wall"]

    @pytest.mark.parametrize("call", [calculate, missing_dimensions])
    def test_unknown_calculator(self, call) -> None:
        with pytest.raises(KeyError, match="fence"):
            call("fence", {})
