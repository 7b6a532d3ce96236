"""
Application exceptions and the global exception handlers for the FastAPI application.
Serializes exceptions into structured logs and a consistent JSON error envelope.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Any, List, Optional


logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""
    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested record does not exist."""
    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        super().__init__(message, status.HTTP_404_NOT_FOUND, {"id": identifier} if identifier is not None else None)


class RecordInvalid(AppException):
    """
    Raised when a record fails its save-time validation rules.

    The full list of human-readable messages is kept on ``errors`` and returned
    to the client under ``details.errors``.
    """
    def __init__(self, record: str, errors: List[str]):
        self.record = record
        self.errors = list(errors)
        super().__init__(
            "; ".join(self.errors),
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            {"record": record, "errors": self.errors},
        )


class InvalidInvoiceAmount(AppException):
    """Raised when an invoice total is negative or cannot be derived."""
    def __init__(self, message: str):
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY)


class EquityAllocationLocked(AppException):
    """Raised when attempting to change a locked equity allocation."""
    def __init__(self, year: int, equity_percentage: Optional[int]):
        super().__init__(
            f"Equity allocation for {year} is locked at {equity_percentage}%",
            status.HTTP_409_CONFLICT,
            {"year": year, "equity_percentage": equity_percentage},
        )


class EquityAllocationChanged(AppException):
    """Raised when an allocation changed between reading it and locking it. Safe to retry."""
    def __init__(self, year: int):
        super().__init__(
            f"Equity allocation for {year} changed while it was being locked",
            status.HTTP_409_CONFLICT,
            {"year": year},
        )


class EquityLockConfirmationRequired(AppException):
    """Raised when an invoice would lock an equity allocation that the contractor has not confirmed."""
    def __init__(self, confirmation: dict):
        super().__init__(confirmation["title"], status.HTTP_409_CONFLICT, confirmation)


class MissingRateError(AppException):
    """Raised when a company role has no rate associated. Roles always carry one once created."""
    def __init__(self, company_role_id: Any = None):
        super().__init__(
            "Company role has no rate",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"company_role_id": company_role_id},
        )


class DataIntegrityError(AppException):
    """Raised when persisted data violates a domain invariant."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "details": exc.details,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "message": exc.message,
                "details": exc.details,
                "path": request.url.path,
            }
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        f"HTTP exception: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "message": exc.detail,
                "status_code": exc.status_code,
                "path": request.url.path,
            }
        },
    )


def _serialize_validation_errors(errors: list) -> list:
    """Convert validation errors to JSON-serializable format."""
    serialized = []
    for error in errors:
        serialized_error = {}
        for key, value in error.items():
            if key == "ctx" and isinstance(value, dict):
                serialized_error[key] = {
                    ctx_key: str(ctx_value) if isinstance(ctx_value, Exception) else ctx_value
                    for ctx_key, ctx_value in value.items()
                }
            elif isinstance(value, Exception):
                serialized_error[key] = str(value)
            else:
                serialized_error[key] = value
        serialized.append(serialized_error)
    return serialized


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    serialized_errors = _serialize_validation_errors(exc.errors())

    logger.warning(
        f"Validation error: {serialized_errors}",
        extra={
            "path": request.url.path,
            "errors": serialized_errors,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "message": "Validation error",
                "details": serialized_errors,
                "path": request.url.path,
            }
        },
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "message": "Internal server error",
                "path": request.url.path,
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
