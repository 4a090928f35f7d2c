"""Export format endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Query
from fastapi.responses import Response

from takeoff.infrastructure.exporters import ExporterRegistry
from takeoff.web.dependencies import CalculatorDep
from takeoff.web.exceptions import UnsupportedFormatError
from takeoff.web.routers.calculate import run_calculation
from takeoff.web.schemas import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

_MEDIA_TYPES = {
    "text": "text/plain",
    "json": "application/json",
    "csv": "text/csv",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{calculator}",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Unsupported format"},
        404: {"model": ErrorResponseSchema, "description": "Unknown calculator"},
        422: {"model": ErrorResponseSchema, "description": "Insufficient input"},
    },
)
async def export_bom(
    calculator: CalculatorDep,
    config: Annotated[dict[str, Any], Body()],
    format_name: str = Query(default="csv", alias="format"),
) -> Response:
    """Calculate a bill of materials and return it as a downloadable file."""
    name = format_name.strip().lower()
    if not ExporterRegistry.is_registered(name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    result = run_calculation(calculator, config)
    exporter = ExporterRegistry.get(name)()
    filename = f"{calculator}_takeoff.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(result),
        media_type=_MEDIA_TYPES.get(name, "text/plain"),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
