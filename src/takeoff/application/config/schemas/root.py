"""Root configuration schema for takeoff files.

A takeoff file names the calculator and carries its configuration:

    {
        "schema_version": "1.0",
        "calculator": "deck",
        "config": {"width": 4800, "length": 3600, "boardDir": "horizontal"}
    }
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from takeoff.application.config.schemas.base import SUPPORTED_VERSIONS
from takeoff.application.config.schemas.calculator_schema import (
    CONFIG_MODELS,
    CalculatorConfig,
)


class TakeoffFile(BaseModel):
    """Root configuration model for a takeoff file.

    Attributes:
        schema_version: Version of the configuration schema.
        calculator: Which calculator the configuration is for.
        config: Calculator configuration in form-state shape.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    calculator: Literal["deck", "paving", "wall", "concrete"]
    config: dict[str, Any] = Field(default_factory=dict)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @field_validator("calculator", mode="before")
    @classmethod
    def normalise_calculator(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    def calculator_config(self) -> CalculatorConfig:
        """Validate ``config`` against the calculator's schema."""
        return CONFIG_MODELS[self.calculator].model_validate(self.config)
