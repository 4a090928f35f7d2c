"""Calculation endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body

from takeoff.application import available_calculators, calculate, missing_dimensions
from takeoff.domain.calculators import BomResult
from takeoff.web.dependencies import CalculatorDep
from takeoff.web.exceptions import InsufficientInputError
from takeoff.web.schemas import CalculatorListSchema, ErrorResponseSchema

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculate"])


def run_calculation(calculator: str, config: dict[str, Any]) -> BomResult:
    """Run a calculator, raising InsufficientInputError when it yields nothing."""
    result = calculate(calculator, config)
    if result is None:
        missing = missing_dimensions(calculator, config)
        logger.debug(f"{calculator}: insufficient input, missing {missing}")
        raise InsufficientInputError(calculator, missing)
    return result


@router.get("/calculators", response_model=CalculatorListSchema)
async def list_calculators() -> CalculatorListSchema:
    """List the available calculators."""
    return CalculatorListSchema(calculators=available_calculators())


@router.post(
    "/calculate/{calculator}",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Unknown calculator"},
        422: {"model": ErrorResponseSchema, "description": "Insufficient input"},
    },
)
async def calculate_bom(
    calculator: CalculatorDep,
    config: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    """Calculate a bill of materials.

    The body is the calculator's form state: a flat object with a ``shape``
    discriminator, dimensions in millimetres and an optional ``tier``.
    Blank or non-numeric values are treated as 0.

    Returns:
        The full takeoff result (sections, totals, summary, geometry,
        layouts, mixes and tier resolution).
    """
    return run_calculation(calculator, config).to_dict()
