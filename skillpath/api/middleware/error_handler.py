"""Global exception handlers for the API."""

import logging
import traceback
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillpath.shared.config import get_settings
from skillpath.shared.exceptions import (
    ConfigurationError,
    ExternalServiceError,
    InvalidStateError,
    ResourceNotFoundError,
    SkillPathException,
    ValidationError as DomainValidationError,
)

logger = logging.getLogger(__name__)


def create_error_response(
    request_id: str,
    error_code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create standardized error response.

    Args:
        request_id: Unique request identifier
        error_code: Error code string
        message: Human-readable error message
        details: Optional additional details

    Returns:
        Structured error response dict
    """
    return {
        "success": False,
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
        },
        "request_id": request_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def status_for_exception(exc: SkillPathException) -> tuple[int, str]:
    """Map a domain exception to an HTTP status code and error code."""
    if isinstance(exc, ResourceNotFoundError):
        return status.HTTP_404_NOT_FOUND, "NOT_FOUND"
    if isinstance(exc, InvalidStateError):
        return status.HTTP_409_CONFLICT, "CONFLICT"
    if isinstance(exc, DomainValidationError):
        return status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"
    if isinstance(exc, ExternalServiceError):
        return status.HTTP_503_SERVICE_UNAVAILABLE, "SERVICE_UNAVAILABLE"
    if isinstance(exc, ConfigurationError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "CONFIGURATION_ERROR"
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "DOMAIN_ERROR"


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup global exception handlers for the application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        request_id = getattr(request.state, "request_id", str(uuid4()))

        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            errors.append({
                "field": loc,
                "message": error["msg"],
                "type": error["type"],
            })

        logger.warning(
            f"Validation Error: {len(errors)} errors",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "errors": errors,
            },
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=create_error_response(
                request_id=request_id,
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                details={"errors": errors},
            ),
        )

    @app.exception_handler(SkillPathException)
    async def domain_exception_handler(
        request: Request, exc: SkillPathException
    ) -> JSONResponse:
        """Handle domain exceptions with proper HTTP status mapping.

        Maps SkillPathException subclasses to HTTP status codes:
        - ResourceNotFoundError -> 404 Not Found
        - InvalidStateError -> 409 Conflict
        - ValidationError -> 400 Bad Request
        - ExternalServiceError -> 503 Service Unavailable
        - ConfigurationError -> 500 Internal Server Error
        """
        request_id = getattr(request.state, "request_id", str(uuid4()))
        status_code, error_code = status_for_exception(exc)

        logger.warning(
            f"Domain Exception: {exc.__class__.__name__} - {exc.message}",
            extra={
                "request_id": request_id,
                "error_type": exc.__class__.__name__,
                "status_code": status_code,
                "path": request.url.path,
            },
        )

        return JSONResponse(
            status_code=status_code,
            content=create_error_response(
                request_id=request_id,
                error_code=error_code,
                message=exc.message,
                details=exc.details,
            ),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected errors."""
        request_id = getattr(request.state, "request_id", str(uuid4()))
        is_development = get_settings().is_development

        if is_development:
            logger.error(
                f"Unhandled Exception: {type(exc).__name__}: {str(exc)}",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "traceback": traceback.format_exc(),
                },
            )
        else:
            logger.error(
                f"Unhandled Exception: {type(exc).__name__}",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                },
            )

        # Don't expose internal errors outside development
        message = str(exc) if is_development else "Internal server error"

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=create_error_response(
                request_id=request_id,
                error_code="INTERNAL_ERROR",
                message=message,
            ),
        )
