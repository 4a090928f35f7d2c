"""Merge CLI options into a takeoff file.

Precedence is CLI options > file values > defaults. Only options that are
not None override the file.
"""

from __future__ import annotations

from typing import Any

from takeoff.application.config.schemas import TakeoffFile, TierConfig
from takeoff.domain.value_objects import BudgetTier, SkillTier

# Keys a form state may carry the tier under, besides ``tier``
_TIER_KEYS = ("userMode", "specTier", "skill_tier", "budget_tier")


def merge_config_with_cli(
    takeoff: TakeoffFile,
    *,
    waste: float | None = None,
    skill_tier: SkillTier | str | None = None,
    budget_tier: BudgetTier | str | None = None,
) -> TakeoffFile:
    """Apply CLI overrides to a takeoff file.

    Args:
        takeoff: File loaded with load_config.
        waste: Override for the waste percentage.
        skill_tier: Override for the skill tier (``diy``/``pro``).
        budget_tier: Override for the budget tier (``budget``/``full``).

    Returns:
        A new TakeoffFile; the input is not modified.

    Example:
        >>> merged = merge_config_with_cli(takeoff, waste=15)
        >>> merged.config["waste"]
        15
    """
    config: dict[str, Any] = dict(takeoff.config)

    if waste is not None:
        for key in ("waste_pct", "wastePct"):
            config.pop(key, None)
        config["waste"] = waste

    if skill_tier is not None or budget_tier is not None:
        tier = _current_tier(config)
        if skill_tier is not None:
            tier["skill_tier"] = SkillTier(skill_tier).value
        if budget_tier is not None:
            tier["budget_tier"] = BudgetTier(budget_tier).value
        for key in _TIER_KEYS:
            config.pop(key, None)
        config["tier"] = tier

    return TakeoffFile(
        schema_version=takeoff.schema_version,
        calculator=takeoff.calculator,
        config=config,
    )


def _current_tier(config: dict[str, Any]) -> dict[str, str]:
    """Tier as written in the file, wherever the form state put it."""
    raw = config.get("tier")
    if raw is None:
        raw = {key: config[key] for key in _TIER_KEYS if key in config}
    elif isinstance(raw, str):
        raw = {"skill_tier": raw}
    tier = TierConfig.model_validate(raw)
    return {
        "skill_tier": tier.skill_tier.value,
        "budget_tier": tier.budget_tier.value,
    }
