"""Tier lookup endpoints."""

from fastapi import APIRouter

from takeoff.domain.services import resolve_tier_defaults
from takeoff.domain.value_objects import TierSpec
from takeoff.web.dependencies import CalculatorDep
from takeoff.web.schemas import TierRequest, TierResolutionSchema

router = APIRouter(prefix="/tiers", tags=["tiers"])


@router.post("/{calculator}", response_model=TierResolutionSchema)
async def resolve_tier(
    calculator: CalculatorDep,
    request: TierRequest | None = None,
) -> TierResolutionSchema:
    """Show which fields a tier derives and locks for a calculator."""
    request = request or TierRequest()
    resolution = resolve_tier_defaults(
        calculator,
        TierSpec(skill_tier=request.skill_tier, budget_tier=request.budget_tier),
        request.height,
        context={"joist_run": request.joist_run, "wall_type": request.wall_type},
    )
    return TierResolutionSchema(calculator=calculator, **resolution.to_dict())
