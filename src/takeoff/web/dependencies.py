"""FastAPI dependencies shared by the routers."""

from typing import Annotated

from fastapi import Depends, Path

from takeoff.application import available_calculators
from takeoff.web.exceptions import UnknownCalculatorError


def get_calculator(
    calculator: Annotated[str, Path(description="deck, paving, wall or concrete")],
) -> str:
    """Resolve the calculator named in the path, or raise a 404."""
    name = calculator.strip().lower()
    available = available_calculators()
    if name not in available:
        raise UnknownCalculatorError(calculator, available)
    return name


# Type alias for cleaner endpoint signatures
CalculatorDep = Annotated[str, Depends(get_calculator)]
