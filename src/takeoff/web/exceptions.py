"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class InsufficientInputError(Exception):
    """Raised when a calculator produced no result for the input."""

    def __init__(self, calculator: str, missing: list[str]) -> None:
        self.calculator = calculator
        self.missing = missing
        super().__init__(f"Insufficient input for {calculator}: {missing}")


class UnknownCalculatorError(Exception):
    """Raised when the path names a calculator that is not registered."""

    def __init__(self, calculator: str, available: list[str]) -> None:
        self.calculator = calculator
        self.available = available
        super().__init__(f"Unknown calculator: {calculator}")


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(InsufficientInputError)
    async def insufficient_input_handler(
        request: Request, exc: InsufficientInputError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "insufficient_input",
                "error_type": "insufficient_input",
                "details": {"calculator": exc.calculator, "missing": exc.missing},
            },
        )

    @app.exception_handler(UnknownCalculatorError)
    async def unknown_calculator_handler(
        request: Request, exc: UnknownCalculatorError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"available": exc.available},
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
