"""Configuration schema models for takeoff calculators.

The schemas are organized into the following modules:
- base.py: form-input coercion, tier and plan shape models
- calculator_schema.py: deck, paving, wall and concrete configurations
- root.py: takeoff file model
"""

from takeoff.application.config.schemas.base import (
    SHAPE_ALIASES as SHAPE_ALIASES,
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    FormModel as FormModel,
    Lenient as Lenient,
    ShapeConfig as ShapeConfig,
    TierConfig as TierConfig,
    normalise_choice as normalise_choice,
    parse_choice as parse_choice,
    parse_flag as parse_flag,
    parse_number as parse_number,
    parse_shape as parse_shape,
)
from takeoff.application.config.schemas.calculator_schema import (
    CONFIG_MODELS as CONFIG_MODELS,
    CalculatorConfig as CalculatorConfig,
    ConcreteConfig as ConcreteConfig,
    DeckConfig as DeckConfig,
    PavingConfig as PavingConfig,
    WallConfig as WallConfig,
)
from takeoff.application.config.schemas.root import TakeoffFile as TakeoffFile
