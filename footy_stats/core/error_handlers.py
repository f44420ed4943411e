"""Global exception handlers for FastAPI application."""

from typing import TYPE_CHECKING, cast

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from footy_stats.core.exceptions import (
    AppError,
    ConflictError,
    ErrorDetails,
    FetchFailure,
    NotFoundError,
    ValidationError,
)

if TYPE_CHECKING:
    type ErrorPayload = dict[str, dict[str, str | ErrorDetails]]

# Handlers resolve by MRO, so subclasses without an entry (InvalidParameterError,
# InvalidInputError) use their parent's status.
STATUS_BY_ERROR: tuple[tuple[type[AppError], int, str], ...] = (
    (NotFoundError, 404, "DEBUG"),
    (ValidationError, 422, "WARNING"),
    (ConflictError, 409, "WARNING"),
    (FetchFailure, 502, "ERROR"),
    (AppError, 400, "WARNING"),
)


def _error_payload(
    code: str,
    message: str,
    details: ErrorDetails | None = None,
) -> "ErrorPayload":
    """Build consistent error response payload."""
    return {"error": {"code": code, "message": message, "details": details or {}}}


def _app_error_handler(status_code: int, level: str):
    def handler(_: Request, exc: Exception) -> JSONResponse:
        error = cast("AppError", exc)
        logger.log(level, f"{type(error).__name__}: {error.message}")
        return JSONResponse(
            status_code=status_code,
            content=_error_payload(error.code, error.message, error.details),
        )

    return handler


def register_exception_handlers(app: FastAPI) -> None:
    """Register all global exception handlers on the FastAPI app.

    AppError subclasses are registered in a loop from STATUS_BY_ERROR. The nested
    decorator handlers below are used by FastAPI at runtime, but static analysis
    tools cannot detect this usage pattern.
    """
    for error_class, status_code, level in STATUS_BY_ERROR:
        app.add_exception_handler(error_class, _app_error_handler(status_code, level))

    @app.exception_handler(RequestValidationError)
    def request_validation_handler(  # pyright: ignore[reportUnusedFunction]
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug(f"Request validation failed: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content=_error_payload(
                "request_validation_error",
                "Request validation failed",
                cast("ErrorDetails", {"errors": jsonable_encoder(exc.errors())}),
            ),
        )

    @app.exception_handler(SQLAlchemyError)
    def sqlalchemy_handler(  # pyright: ignore[reportUnusedFunction]
        _: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.exception(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content=_error_payload("database_error", "Database error"),
        )

    @app.exception_handler(Exception)
    def unhandled_handler(  # pyright: ignore[reportUnusedFunction]
        _: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content=_error_payload("internal_error", "Internal server error"),
        )
