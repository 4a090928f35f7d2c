"""Calculator entry points.

Each entry point takes a flat form-state mapping (or an already validated
configuration model), converts it to domain objects and runs the shared
takeoff pipeline. Insufficient or malformed input yields None rather than
an exception, so callers can keep showing "enter dimensions".
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from takeoff.application.config.adapter import (
    config_to_concrete_assembly,
    config_to_deck_assembly,
    config_to_elevation,
    config_to_footing,
    config_to_paving_assembly,
    config_to_shape,
    config_to_tier,
    config_to_wall_assembly,
    supplied_fields,
)
from takeoff.application.config.schemas import (
    CalculatorConfig,
    ConcreteConfig,
    DeckConfig,
    PavingConfig,
    WallConfig,
)
from takeoff.domain.calculators import (
    BomResult,
    ConcreteBom,
    DeckBom,
    PavingBom,
    WallBom,
    calculator_registry,
    run_takeoff,
)

logger = logging.getLogger(__name__)

ConfigInput = Mapping[str, Any] | CalculatorConfig


@dataclass(frozen=True)
class _EntryPoint:
    """How one calculator's configuration becomes pipeline input."""

    config_model: type[CalculatorConfig]
    shape: Callable[[Any], Any]
    assembly: Callable[[Any], Any]


_ENTRY_POINTS: dict[str, _EntryPoint] = {
    "deck": _EntryPoint(DeckConfig, config_to_shape, config_to_deck_assembly),
    "paving": _EntryPoint(PavingConfig, config_to_shape, config_to_paving_assembly),
    "wall": _EntryPoint(WallConfig, config_to_elevation, config_to_wall_assembly),
    "concrete": _EntryPoint(
        ConcreteConfig, config_to_footing, config_to_concrete_assembly
    ),
}


def _coerce(model: type[CalculatorConfig], config: ConfigInput) -> CalculatorConfig | None:
    if isinstance(config, model):
        return config
    if isinstance(config, CalculatorConfig):
        config = config.model_dump(exclude_unset=True)
    try:
        return model.model_validate(dict(config))
    except ValidationError as e:
        logger.debug(f"{model.__name__}: rejected input ({e.error_count()} errors)")
        return None


def calculate(kind: str, config: ConfigInput) -> BomResult | None:
    """Run the named calculator over a configuration.

    Args:
        kind: ``deck``, ``paving``, ``wall`` or ``concrete``.
        config: Form-state mapping or a validated configuration model.

    Returns:
        The BOM, or None when the input is insufficient.

    Raises:
        KeyError: If no calculator is registered under ``kind``.
    """
    if kind not in _ENTRY_POINTS or kind not in calculator_registry:
        raise KeyError(f"Unknown calculator: {kind}")
    entry = _ENTRY_POINTS[kind]

    validated = _coerce(entry.config_model, config)
    if validated is None:
        return None

    result = run_takeoff(
        kind,
        entry.shape(validated),
        entry.assembly(validated),
        tier=config_to_tier(validated),
        waste_pct=validated.waste,
        supplied=supplied_fields(validated, kind),
    )
    if result is None:
        logger.debug(f"{kind}: insufficient input, no BOM produced")
    return result


def calculate_deck(config: ConfigInput) -> DeckBom | None:
    """Decking takeoff: boards, joists, beams, posts, fascia and fixings.

    Example:
        >>> bom = calculate_deck({"width": 4800, "length": 3600})
        >>> bom.section("DECKING BOARDS").rows[0].quantity
        35
    """
    return calculate("deck", config)


def calculate_paving(config: ConfigInput) -> PavingBom | None:
    """Paving takeoff: units, mortar bed, sub-base and sundries."""
    return calculate("paving", config)


def calculate_wall(config: ConfigInput) -> WallBom | None:
    """Retaining wall takeoff: blocks, mortar, foundation, drainage and hardware."""
    return calculate("wall", config)


def calculate_concrete(config: ConfigInput) -> ConcreteBom | None:
    """Concrete footing takeoff: cement, aggregate, water, rebar and formwork.

    Example:
        >>> bom = calculate_concrete({"width": 450, "length": 450, "depth": 300})
        >>> bom.summary["cement_bags"]
        1
    """
    return calculate("concrete", config)


def available_calculators() -> list[str]:
    return sorted(_ENTRY_POINTS)


def missing_dimensions(kind: str, config: ConfigInput) -> list[str]:
    """Required dimensions a configuration leaves blank or at zero.

    An empty list with a None result from :func:`calculate` means the shape
    itself is not supported by the calculator (a circular deck).

    Raises:
        KeyError: If no calculator is registered under ``kind``.
    """
    if kind not in _ENTRY_POINTS:
        raise KeyError(f"Unknown calculator: {kind}")
    entry = _ENTRY_POINTS[kind]
    validated = _coerce(entry.config_model, config)
    if validated is None:
        return []
    return entry.shape(validated).missing_dimensions()
