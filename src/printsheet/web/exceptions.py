"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from printsheet.application.config import ConfigError
from printsheet.domain import PrintSheetError, UnknownSheetPresetError


class CalculationError(Exception):
    """Raised when a yield or price calculation reports errors."""

    def __init__(self, errors: list[str], error_type: str | None = None) -> None:
        self.errors = errors
        self.error_type = error_type or "calculation"
        super().__init__(f"Calculation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CalculationError)
    async def calculation_error_handler(
        request: Request, exc: CalculationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.errors[0] if exc.errors else "Calculation failed",
                "error_type": exc.error_type,
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(UnknownSheetPresetError)
    async def unknown_preset_handler(
        request: Request, exc: UnknownSheetPresetError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": {"code": exc.code, "available": exc.available},
            },
        )

    @app.exception_handler(PrintSheetError)
    async def print_sheet_error_handler(
        request: Request, exc: PrintSheetError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": None,
            },
        )
