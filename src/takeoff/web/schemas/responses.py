"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class TierResolutionSchema(BaseModel):
    """Response for a tier lookup."""

    calculator: str = Field(..., description="Calculator name")
    derived_fields: dict[str, Any] = Field(
        default_factory=dict, description="Field values the tier supplies"
    )
    locked_fields: list[str] = Field(
        default_factory=list, description="Fields the user may not edit"
    )
    hints: dict[str, str] = Field(
        default_factory=dict, description="Rule shown next to each locked field"
    )


class CalculatorListSchema(BaseModel):
    """Available calculators."""

    calculators: list[str] = Field(..., description="Calculator names")


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str] = Field(..., description="Format names")


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str = Field(..., description="Error code or message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional information")
