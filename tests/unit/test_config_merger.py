"""Unit tests for merging CLI options into a takeoff file."""

from takeoff.application.config import TakeoffFile, merge_config_with_cli
from takeoff.domain.value_objects import BudgetTier, SkillTier


def _takeoff(config: dict) -> TakeoffFile:
    return TakeoffFile(calculator="deck", config=config)


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides_returns_equal_file(self) -> None:
        takeoff = _takeoff({"width": 4800, "waste": 5})

        merged = merge_config_with_cli(takeoff)

        assert merged == takeoff
        assert merged is not takeoff

    def test_waste_override_replaces_every_spelling(self) -> None:
        takeoff = _takeoff({"width": 4800, "wastePct": 5})

        merged = merge_config_with_cli(takeoff, waste=15)

        assert merged.config["waste"] == 15
        assert "wastePct" not in merged.config
        assert merged.calculator_config().waste == 15

    def test_input_is_not_modified(self) -> None:
        takeoff = _takeoff({"waste": 5})

        merge_config_with_cli(takeoff, waste=15)

        assert takeoff.config == {"waste": 5}

    def test_skill_override_keeps_file_budget(self) -> None:
        takeoff = _takeoff({"userMode": "pro", "specTier": "budget"})

        merged = merge_config_with_cli(takeoff, skill_tier=SkillTier.DIY)

        assert merged.config["tier"] == {"skill_tier": "diy", "budget_tier": "budget"}
        assert "userMode" not in merged.config
        assert "specTier" not in merged.config

    def test_budget_override_on_tier_block(self) -> None:
        takeoff = _takeoff({"tier": {"skill_tier": "diy", "budget_tier": "full"}})

        merged = merge_config_with_cli(takeoff, budget_tier="budget")

        tier = merged.calculator_config().tier
        assert tier.skill_tier == SkillTier.DIY
        assert tier.budget_tier == BudgetTier.BUDGET

    def test_override_on_bare_tier_string(self) -> None:
        takeoff = _takeoff({"tier": "diy"})

        merged = merge_config_with_cli(takeoff, budget_tier=BudgetTier.BUDGET)

        assert merged.config["tier"] == {"skill_tier": "diy", "budget_tier": "budget"}

    def test_override_without_tier_in_file(self) -> None:
        merged = merge_config_with_cli(_takeoff({}), skill_tier="diy")

        assert merged.config["tier"] == {"skill_tier": "diy", "budget_tier": "full"}
