"""Pydantic request schemas for the REST API.

Calculator bodies are free-form form states and are validated by the
configuration models, so only the tier lookup has a request schema here.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from takeoff.domain.value_objects import BudgetTier, SkillTier, WallType


class TierRequest(BaseModel):
    """Request body for a tier lookup."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    skill_tier: SkillTier = Field(default=SkillTier.DIY, description="diy or pro")
    budget_tier: BudgetTier = Field(default=BudgetTier.FULL, description="budget or full")
    height: float = Field(
        default=0.0, ge=0, description="Post height (deck) or wall height (wall) in mm"
    )
    wall_type: WallType = Field(default=WallType.SOLID_FLAT, description="Wall construction")
    joist_run: float = Field(
        default=0.0, ge=0, description="Joist length in mm, for deck beam spacing"
    )
