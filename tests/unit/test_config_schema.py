"""Unit tests for the calculator configuration schemas.

These tests verify:
- Form-style coercion of numbers, flags and enumerated values
- camelCase, snake_case and legacy short keys
- Tier fields given as a block, a bare string or at the top level
- Structural errors still fail validation
"""

import pytest
from pydantic import ValidationError

from takeoff.application.config import (
    ConcreteConfig,
    DeckConfig,
    PavingConfig,
    TakeoffFile,
    TierConfig,
    WallConfig,
    parse_number,
)
from takeoff.application.config.schemas import parse_flag, parse_shape
from takeoff.domain.value_objects import (
    AggregateType,
    BoardDirection,
    BudgetTier,
    FootingType,
    ShapeKind,
    Side,
    SkillTier,
    SubBaseType,
    WallType,
)


class TestParseNumber:
    """Tests for lenient number parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (4800, 4800.0),
            (12.5, 12.5),
            ("3600", 3600.0),
            ("  1200mm", 1200.0),
            ("1.5e3", 1500.0),
            ("-20", -20.0),
            (".5", 0.5),
            ("", 0.0),
            ("abc", 0.0),
            (None, 0.0),
            (float("nan"), 0.0),
            ("inf", 0.0),
        ],
    )
    def test_values(self, value, expected: float) -> None:
        assert parse_number(value) == expected


class TestChoices:
    """Tests for flag and enumerated value coercion."""

    @pytest.mark.parametrize("value", [True, "true", "Yes", "1", "on", 1])
    def test_truthy_flags(self, value) -> None:
        assert parse_flag(value) is True

    @pytest.mark.parametrize("value", [False, "false", "", None, "nope", 0])
    def test_falsy_flags(self, value) -> None:
        assert parse_flag(value) is False

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("L", ShapeKind.L_SHAPE),
            ("L Shape", ShapeKind.L_SHAPE),
            ("quarter_circle", ShapeKind.QUARTER_CIRCLE),
            ("semi", ShapeKind.SEMICIRCLE),
            ("hexagon", ShapeKind.RECTANGLE),
        ],
    )
    def test_shape_spellings(self, value: str, expected: ShapeKind) -> None:
        assert parse_shape(value) == expected


class TestDeckConfig:
    """Tests for DeckConfig."""

    def test_defaults(self) -> None:
        config = DeckConfig()

        assert config.shape == ShapeKind.RECTANGLE
        assert config.width == 0
        assert config.board_width == 150
        assert config.joist_spacing == 400
        assert config.waste == 10
        assert config.tier.skill_tier == SkillTier.PRO
        assert config.tier.budget_tier == BudgetTier.FULL

    def test_form_state_keys(self) -> None:
        config = DeckConfig.model_validate(
            {
                "shape": "l-shape",
                "width": "5000",
                "length": "4000",
                "cutW": "2000",
                "cutL": 1500,
                "cutPos": "LEFT",
                "boardThick": "32",
                "boardDir": "Diagonal",
                "postHeight": "650",
                "borderBoard": "true",
            }
        )

        assert config.shape == ShapeKind.L_SHAPE
        assert (config.width, config.length) == (5000, 4000)
        assert (config.cutout_width, config.cutout_length) == (2000, 1500)
        assert config.cutout_side == Side.LEFT
        assert config.board_thickness == 32
        assert config.board_direction == BoardDirection.DIAGONAL
        assert config.post_height == 650
        assert config.border_board is True

    def test_snake_case_keys(self) -> None:
        config = DeckConfig(joist_spacing=450, board_direction="vertical")

        assert config.joist_spacing == 450
        assert config.board_direction == BoardDirection.VERTICAL

    def test_unknown_enum_falls_back_to_default(self) -> None:
        config = DeckConfig.model_validate({"boardDir": "sideways", "cutPos": "middle"})

        assert config.board_direction == BoardDirection.HORIZONTAL
        assert config.cutout_side == Side.RIGHT

    def test_blank_and_garbage_numbers(self) -> None:
        config = DeckConfig.model_validate({"width": "", "length": "abc", "joistSpacing": None})

        assert (config.width, config.length, config.joist_spacing) == (0, 0, 0)

    def test_unknown_keys_are_ignored(self) -> None:
        config = DeckConfig.model_validate({"width": 4800, "colour": "teak"})

        assert config.width == 4800

    def test_extras_block_is_lifted(self) -> None:
        config = DeckConfig.model_validate(
            {
                "extras": {
                    "borderBoard": True,
                    "excludeBorderAtBuilding": True,
                    "buildingSides": ["N", "east", "n", "up"],
                }
            }
        )

        assert config.border_board is True
        assert config.exclude_border_at_building is True
        assert config.building_sides == ("north", "east")

    def test_building_sides_as_text(self) -> None:
        config = DeckConfig.model_validate({"buildingSides": "south, West"})

        assert config.building_sides == ("south", "west")

    def test_building_sides_must_be_a_list(self) -> None:
        with pytest.raises(ValidationError):
            DeckConfig.model_validate({"buildingSides": 5})


class TestTierFields:
    """Tests for the tier block and its legacy spellings."""

    def test_tier_block(self) -> None:
        config = DeckConfig.model_validate(
            {"tier": {"skillTier": "DIY", "budgetTier": "budget"}}
        )

        assert config.tier.skill_tier == SkillTier.DIY
        assert config.tier.budget_tier == BudgetTier.BUDGET

    def test_bare_string_is_the_skill_tier(self) -> None:
        config = DeckConfig.model_validate({"tier": "diy"})

        assert config.tier.skill_tier == SkillTier.DIY
        assert config.tier.budget_tier == BudgetTier.FULL

    def test_top_level_form_keys(self) -> None:
        config = PavingConfig.model_validate({"userMode": "diy", "specTier": "budget"})

        assert config.tier.to_spec().is_diy
        assert config.tier.budget_tier == BudgetTier.BUDGET

    def test_unknown_tier_values_fall_back(self) -> None:
        tier = TierConfig.model_validate({"userMode": "expert", "specTier": "deluxe"})

        assert tier.skill_tier == SkillTier.PRO
        assert tier.budget_tier == BudgetTier.FULL

    def test_tier_must_be_a_mapping_or_text(self) -> None:
        with pytest.raises(ValidationError):
            DeckConfig.model_validate({"tier": [1, 2]})


class TestPavingAndWallConfig:
    """Tests for PavingConfig and WallConfig."""

    def test_paving_keys(self) -> None:
        config = PavingConfig.model_validate(
            {
                "slabThick": "22",
                "jointW": 5,
                "mixRatio": " 3:1 ",
                "subbaseType": "Scalpings",
                "wastePct": "7.5",
            }
        )

        assert config.slab_thickness == 22
        assert config.joint_width == 5
        assert config.mix_ratio == "3:1"
        assert config.subbase_type == SubBaseType.SCALPINGS
        assert config.waste == 7.5

    def test_wall_keys(self) -> None:
        config = WallConfig.model_validate(
            {
                "wallType": "Brick Block",
                "length": "3000",
                "height": 600,
                "addCoping": "no",
            }
        )

        assert config.wall_type == WallType.BRICK_BLOCK
        assert (config.wall_length, config.wall_height) == (3000, 600)
        assert config.add_coping is False

    def test_wall_defaults(self) -> None:
        config = WallConfig()

        assert config.wall_type == WallType.SOLID_FLAT
        assert config.mortar_ratio == "1:4"
        assert config.add_coping is True


class TestConcreteConfig:
    """Tests for ConcreteConfig."""

    def test_form_keys(self) -> None:
        config = ConcreteConfig.model_validate(
            {
                "footingType": "Posthole",
                "diameter": "300mm",
                "depth": 600,
                "mixRatio": " C25 ",
                "aggregateType": "separate",
                "includeRebar": "true",
                "quantity": "",
            }
        )

        assert config.footing_type == FootingType.POSTHOLE
        assert (config.diameter, config.depth) == (300, 600)
        assert config.mix == "C25"
        assert config.aggregate_type == AggregateType.SEPARATE
        assert config.include_rebar is True
        assert config.quantity == 0

    def test_unknown_footing_type_is_a_pad(self) -> None:
        config = ConcreteConfig.model_validate({"footingType": "raft"})

        assert config.footing_type == FootingType.PAD

    def test_defaults(self) -> None:
        config = ConcreteConfig()

        assert config.mix == "c20"
        assert config.aggregate_type == AggregateType.ALL_IN
        assert config.quantity == 1
        assert config.include_formwork is False

    def test_takeoff_file(self) -> None:
        takeoff = TakeoffFile.model_validate(
            {"calculator": "concrete", "config": {"width": 600}}
        )

        assert isinstance(takeoff.calculator_config(), ConcreteConfig)


class TestTakeoffFile:
    """Tests for the root takeoff file model."""

    def test_valid_file(self) -> None:
        takeoff = TakeoffFile.model_validate(
            {"calculator": " Deck ", "config": {"width": 4800}}
        )

        assert takeoff.schema_version == "1.0"
        assert takeoff.calculator == "deck"
        assert isinstance(takeoff.calculator_config(), DeckConfig)

    def test_unknown_calculator(self) -> None:
        with pytest.raises(ValidationError):
            TakeoffFile.model_validate({"calculator": "fence"})

    def test_unsupported_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version '9.9'"):
            TakeoffFile.model_validate({"schema_version": "9.9", "calculator": "deck"})

    def test_extra_root_keys_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TakeoffFile.model_validate({"calculator": "deck", "rooms": []})
