"""Pydantic schemas for the REST API."""

from takeoff.web.schemas.requests import TierRequest
from takeoff.web.schemas.responses import (
    CalculatorListSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    TierResolutionSchema,
)

__all__ = [
    "CalculatorListSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "TierRequest",
    "TierResolutionSchema",
]
