"""Configuration schema and loading for takeoff calculators.

This package provides JSON takeoff file loading and validation. Calculator
configuration is accepted in form-state shape (camelCase or snake_case keys,
numbers as text, blank fields) and converted to domain objects by the
adapter.

Public API:
    - TakeoffFile: Root takeoff file model
    - DeckConfig / PavingConfig / WallConfig / ConcreteConfig: Calculator
      configuration models
    - TierConfig: Skill and budget tier model
    - load_config: Load a takeoff file from JSON
    - load_config_from_dict: Load a takeoff file from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply command-line overrides
    - config_to_*: Convert configuration to domain objects

Example:
    >>> from pathlib import Path
    >>> from takeoff.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     takeoff = load_config(Path("deck.json"))
    ...     print(takeoff.calculator)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

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
from takeoff.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from takeoff.application.config.merger import merge_config_with_cli
from takeoff.application.config.schemas import (
    CONFIG_MODELS,
    SUPPORTED_VERSIONS,
    CalculatorConfig,
    ConcreteConfig,
    DeckConfig,
    PavingConfig,
    ShapeConfig,
    TakeoffFile,
    TierConfig,
    WallConfig,
    parse_number,
)

__all__ = [
    # Schema models
    "CONFIG_MODELS",
    "SUPPORTED_VERSIONS",
    "CalculatorConfig",
    "ConcreteConfig",
    "DeckConfig",
    "PavingConfig",
    "ShapeConfig",
    "TakeoffFile",
    "TierConfig",
    "WallConfig",
    "parse_number",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    # Adapters
    "config_to_concrete_assembly",
    "config_to_deck_assembly",
    "config_to_elevation",
    "config_to_footing",
    "config_to_paving_assembly",
    "config_to_shape",
    "config_to_tier",
    "config_to_wall_assembly",
    "supplied_fields",
]
